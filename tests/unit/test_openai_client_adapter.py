from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from app.inference.exceptions import CollaboratorCallError
from app.inference.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _complete(mock_client: MagicMock) -> str:
    with patch(
        "app.inference.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)
        return adapter.create_chat_completion(
            model="m",
            temperature=0.3,
            max_tokens=300,
            user_prompt="user",
        )


class TestOpenAIClientAdapter:
    def test_returns_stripped_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(
            "  Low risk.\n"
        )
        assert _complete(mock_client) == "Low risk."

    def test_sends_single_user_message(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        _complete(mock_client)
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["messages"] == [{"role": "user", "content": "user"}]
        assert kwargs["max_tokens"] == 300
        assert kwargs["temperature"] == 0.3

    def test_client_has_timeout_and_no_retries(self) -> None:
        with patch("app.inference.openai_client_adapter.openai.OpenAI") as mock_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=12, base_url="https://x/v1")
        mock_cls.assert_called_once_with(
            api_key="k",
            timeout=12,
            base_url="https://x/v1",
            max_retries=0,
        )

    def test_raises_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(CollaboratorCallError, match="empty response"):
            _complete(mock_client)

    def test_raises_for_no_choices(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = MagicMock(choices=[])
        with pytest.raises(CollaboratorCallError, match="no choices"):
            _complete(mock_client)

    def test_raises_call_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(CollaboratorCallError, match="network error"):
            _complete(mock_client)

    def test_raises_call_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(CollaboratorCallError, match="network error"):
            _complete(mock_client)

    def test_raises_call_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="model is loading",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(CollaboratorCallError, match="API error"):
            _complete(mock_client)
