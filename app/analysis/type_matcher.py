from typing import ClassVar, Sequence

from app.analysis.catalog import UNKNOWN_DOCUMENT_TYPE, DocumentCatalog
from app.analysis.models import Finding, FindingFactory, FindingType
from app.inference.models import Classification


class DocumentTypeMatcher:
    """Cross-checks the declared document type against the classifier's top label."""

    MIN_CONFIDENCE: ClassVar[float] = 0.5

    def __init__(self, catalog: DocumentCatalog, findings: FindingFactory | None = None) -> None:
        self._catalog = catalog
        self._findings = findings or FindingFactory()

    def check(
        self,
        classifications: Sequence[Classification],
        declared_type: str,
    ) -> Finding | None:
        if declared_type == UNKNOWN_DOCUMENT_TYPE or not classifications:
            return None
        keywords = self._catalog.keywords_for(declared_type)
        if not keywords:
            return None

        top = max(classifications, key=lambda c: c.confidence)
        label = top.label.lower()
        if any(keyword in label for keyword in keywords):
            return None
        if top.confidence <= self.MIN_CONFIDENCE:
            return None

        return self._findings.make(
            FindingType.DOCUMENT_TYPE_MISMATCH,
            f'Document classified as "{top.label}" ({top.confidence * 100:.1f}% '
            f'confidence) but expected type is "{declared_type}".',
        )
