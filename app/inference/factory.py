from typing import ClassVar

from app.config.settings import Settings
from app.inference.base import BaseInferenceAdapter
from app.inference.example_client_adapter import ExampleInferenceAdapter
from app.inference.exceptions import CollaboratorUnavailableError
from app.inference.huggingface_client_adapter import HuggingFaceClientAdapter
from app.inference.inference_adapter import HostedInferenceAdapter
from app.inference.openai_client_adapter import OpenAIClientAdapter


class InferenceAdapterFactory:
    """Creates the configured inference adapter."""

    TEXT_FRAUD_BASE_URLS: ClassVar[dict[str, str]] = {
        "huggingface": "https://router.huggingface.co/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseInferenceAdapter:
        """Create an inference adapter from application settings.

        Raises:
            CollaboratorUnavailableError: if the provider credential is not set.
            ValueError: on an unknown provider or incomplete text-fraud settings.
        """
        provider = settings.inference_provider.lower()
        if provider == "example":
            return ExampleInferenceAdapter()
        if provider != "huggingface":
            raise ValueError(
                f"Unknown inference provider '{provider}'. Choose from: ['example', 'huggingface']"
            )

        token = settings.huggingface_api_token.strip()
        if not token:
            raise CollaboratorUnavailableError(
                "HUGGINGFACE_API_TOKEN is not set; AI analysis is disabled"
            )

        text_provider = settings.text_fraud_provider.lower()
        image_client = HuggingFaceClientAdapter(
            api_token=token,
            timeout_seconds=settings.huggingface_timeout_seconds,
        )
        chat_client = OpenAIClientAdapter(
            api_key=cls._resolve_text_api_key(text_provider, settings),
            timeout_seconds=settings.text_fraud_timeout_seconds,
            base_url=cls._resolve_text_base_url(text_provider, settings),
        )
        return HostedInferenceAdapter(
            image_client=image_client,
            chat_client=chat_client,
            classification_model=settings.huggingface_classification_model,
            captioning_model=settings.huggingface_captioning_model,
            text_model=settings.text_fraud_model_name,
            temperature=settings.text_fraud_temperature,
            max_tokens=settings.text_fraud_max_tokens,
        )

    @classmethod
    def _resolve_text_base_url(cls, provider: str, settings: Settings) -> str | None:
        custom = settings.text_fraud_base_url.strip()
        if provider == "openai":
            return custom or None
        if provider == "openai_compatible":
            if not custom:
                raise ValueError(
                    "text_fraud_base_url is required for text_fraud_provider=openai_compatible"
                )
            return custom
        default_base_url = cls.TEXT_FRAUD_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom or default_base_url
        supported = ["openai", "openai_compatible", *sorted(cls.TEXT_FRAUD_BASE_URLS)]
        raise ValueError(
            f"Unknown text fraud provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_text_api_key(cls, provider: str, settings: Settings) -> str:
        if provider == "huggingface":
            return settings.text_fraud_api_key or settings.huggingface_api_token
        # ollama accepts any key but the OpenAI SDK requires a non-empty one
        return settings.text_fraud_api_key or "unused"
