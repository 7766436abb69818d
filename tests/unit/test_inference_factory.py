"""Tests for InferenceAdapterFactory."""

from unittest.mock import patch

import pytest

from app.config.settings import Settings
from app.inference.example_client_adapter import ExampleInferenceAdapter
from app.inference.exceptions import CollaboratorUnavailableError
from app.inference.factory import InferenceAdapterFactory
from app.inference.inference_adapter import HostedInferenceAdapter


class TestInferenceAdapterFactory:
    def test_creates_example_adapter(self) -> None:
        adapter = InferenceAdapterFactory.create(Settings(inference_provider="example"))
        assert isinstance(adapter, ExampleInferenceAdapter)

    def test_missing_token_raises_unavailable(self) -> None:
        settings = Settings(inference_provider="huggingface", huggingface_api_token="")
        with pytest.raises(CollaboratorUnavailableError, match="HUGGINGFACE_API_TOKEN"):
            InferenceAdapterFactory.create(settings)

    def test_blank_token_raises_unavailable(self) -> None:
        settings = Settings(huggingface_api_token="   ")
        with pytest.raises(CollaboratorUnavailableError):
            InferenceAdapterFactory.create(settings)

    def test_creates_hosted_adapter(self) -> None:
        settings = Settings(huggingface_api_token="hf_x", huggingface_timeout_seconds=15)
        with (
            patch("app.inference.factory.HuggingFaceClientAdapter") as mock_hf,
            patch("app.inference.factory.OpenAIClientAdapter") as mock_openai,
        ):
            adapter = InferenceAdapterFactory.create(settings)
        assert isinstance(adapter, HostedInferenceAdapter)
        mock_hf.assert_called_once_with(api_token="hf_x", timeout_seconds=15)
        mock_openai.assert_called_once_with(
            api_key="hf_x",
            timeout_seconds=30,
            base_url="https://router.huggingface.co/v1",
        )

    def test_uses_provider_default_base_url_for_groq(self) -> None:
        settings = Settings(
            huggingface_api_token="hf_x",
            text_fraud_provider="groq",
            text_fraud_api_key="gk",
        )
        with (
            patch("app.inference.factory.HuggingFaceClientAdapter"),
            patch("app.inference.factory.OpenAIClientAdapter") as mock_openai,
        ):
            InferenceAdapterFactory.create(settings)
        mock_openai.assert_called_once_with(
            api_key="gk",
            timeout_seconds=30,
            base_url="https://api.groq.com/openai/v1",
        )

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(
            huggingface_api_token="hf_x",
            text_fraud_provider="openai_compatible",
        )
        with (
            patch("app.inference.factory.HuggingFaceClientAdapter"),
            pytest.raises(ValueError, match="text_fraud_base_url"),
        ):
            InferenceAdapterFactory.create(settings)

    def test_unknown_text_provider_raises(self) -> None:
        settings = Settings(huggingface_api_token="hf_x", text_fraud_provider="nope")
        with (
            patch("app.inference.factory.HuggingFaceClientAdapter"),
            pytest.raises(ValueError, match="Unknown text fraud provider"),
        ):
            InferenceAdapterFactory.create(settings)

    def test_unknown_inference_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown inference provider"):
            InferenceAdapterFactory.create(Settings(inference_provider="unknown"))
