import httpx
from huggingface_hub import InferenceClient, InferenceTimeoutError
from huggingface_hub.errors import HfHubHTTPError

from app.inference.exceptions import CollaboratorCallError
from app.inference.models import Classification


class HuggingFaceClientAdapter:
    """Image tasks on the Hugging Face Inference API."""

    def __init__(self, *, api_token: str, timeout_seconds: int) -> None:
        self._client = InferenceClient(token=api_token, timeout=timeout_seconds)

    def image_classification(self, image: bytes, *, model: str) -> list[Classification]:
        try:
            elements = self._client.image_classification(image, model=model)
        except (InferenceTimeoutError, httpx.TimeoutException) as exc:
            raise CollaboratorCallError(f"Classification timed out: {exc}") from exc
        except (HfHubHTTPError, httpx.HTTPError, OSError, ValueError) as exc:
            raise CollaboratorCallError(f"Classification API error: {exc}") from exc

        classifications = [
            Classification(label=str(e.label), confidence=float(e.score)) for e in elements
        ]
        classifications.sort(key=lambda c: c.confidence, reverse=True)
        return classifications

    def image_to_text(self, image: bytes, *, model: str) -> str:
        try:
            output = self._client.image_to_text(image, model=model)
        except (InferenceTimeoutError, httpx.TimeoutException) as exc:
            raise CollaboratorCallError(f"Text extraction timed out: {exc}") from exc
        except (HfHubHTTPError, httpx.HTTPError, OSError, ValueError) as exc:
            raise CollaboratorCallError(f"Text extraction API error: {exc}") from exc

        if isinstance(output, list):
            output = output[0] if output else None
        if output is None:
            return ""
        return (getattr(output, "generated_text", None) or "").strip()
