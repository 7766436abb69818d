"""Offline inference adapter.

Use this module for local development and tests, and as a reference when
implementing new providers: implement BaseInferenceAdapter and register the
provider in InferenceAdapterFactory.
"""

from typing import ClassVar

from app.inference.base import BaseInferenceAdapter
from app.inference.models import Classification


class ExampleInferenceAdapter(BaseInferenceAdapter):
    """Returns fixed answers without any network calls."""

    DEFAULT_CLASSIFICATIONS: ClassVar[tuple[Classification, ...]] = (
        Classification(label="letter", confidence=0.62),
        Classification(label="form", confidence=0.21),
        Classification(label="memo", confidence=0.09),
    )
    DEFAULT_TEXT: ClassVar[str] = "a close up of a printed document with text"
    DEFAULT_ASSESSMENT: ClassVar[str] = (
        "No obvious textual fraud indicators; offline example assessment."
    )

    def classify(self, image: bytes) -> list[Classification]:
        _ = image
        return list(self.DEFAULT_CLASSIFICATIONS)

    def extract_text(self, image: bytes) -> str:
        _ = image
        return self.DEFAULT_TEXT

    def assess_text_fraud(self, text: str, declared_type: str) -> str:
        _ = text, declared_type
        return self.DEFAULT_ASSESSMENT
