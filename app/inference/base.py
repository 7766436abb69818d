from abc import ABC, abstractmethod

from app.inference.models import Classification


class BaseInferenceAdapter(ABC):
    """Contract for the AI inference collaborator.

    The three capabilities fail independently; a failure in one must not
    prevent callers from using the others.
    """

    @abstractmethod
    def classify(self, image: bytes) -> list[Classification]:
        """Predict the document type of a normalized image.

        Returns:
            Classifications ordered by descending confidence.

        Raises:
            CollaboratorCallError: on any provider failure.
        """

    @abstractmethod
    def extract_text(self, image: bytes) -> str:
        """Best-effort text extraction; empty string if the model found none.

        Raises:
            CollaboratorCallError: on any provider failure.
        """

    @abstractmethod
    def assess_text_fraud(self, text: str, declared_type: str) -> str:
        """Free-text fraud risk narrative for extracted text.

        Raises:
            CollaboratorCallError: on any provider failure.
        """
