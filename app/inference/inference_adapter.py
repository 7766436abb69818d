"""Hosted inference: Hugging Face image models plus an OpenAI-compatible LLM."""

from pathlib import Path

from app.inference.base import BaseInferenceAdapter
from app.inference.huggingface_client_adapter import HuggingFaceClientAdapter
from app.inference.models import Classification
from app.inference.openai_client_adapter import OpenAIClientAdapter
from app.inference.prompt_loader import load_prompt_template
from app.logging.logger import Log


class HostedInferenceAdapter(BaseInferenceAdapter):
    """Routes each capability to its hosted model."""

    def __init__(
        self,
        *,
        image_client: HuggingFaceClientAdapter,
        chat_client: OpenAIClientAdapter,
        classification_model: str,
        captioning_model: str,
        text_model: str,
        temperature: float = 0.3,
        max_tokens: int = 300,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._image_client = image_client
        self._chat_client = chat_client
        self._classification_model = classification_model
        self._captioning_model = captioning_model
        self._text_model = text_model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._prompt_template = load_prompt_template(prompt_template_path)

    def classify(self, image: bytes) -> list[Classification]:
        return self._image_client.image_classification(
            image, model=self._classification_model
        )

    def extract_text(self, image: bytes) -> str:
        return self._image_client.image_to_text(image, model=self._captioning_model)

    def assess_text_fraud(self, text: str, declared_type: str) -> str:
        prompt = self._prompt_template.format(
            document_type=declared_type,
            extracted_text=text,
        )
        Log.debug(f"Text fraud prompt:\n{prompt}")
        narrative = self._chat_client.create_chat_completion(
            model=self._text_model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            user_prompt=prompt,
        )
        Log.debug(f"AI raw response:\n{narrative}")
        return narrative
