"""
Gemini クライアントのテスト
"""
from types import SimpleNamespace

import pytest
from google.generativeai.types import content_types

from src.config import AppConfig
from src.exceptions import InvalidResponseError, ServiceUnavailableError
from src.gemini_client import SEARCH_TOOL, GeminiClient, response_text


class TestGeminiClient:
    """GeminiClientのテスト"""

    def test_without_key_is_unavailable(self, mock_genai):
        client = GeminiClient(api_key=None)

        assert client.is_available() is False
        mock_genai.configure.assert_not_called()
        with pytest.raises(ServiceUnavailableError):
            client.generate("prompt")
        mock_genai.GenerativeModel.assert_not_called()

    def test_from_config(self, mock_genai):
        client = GeminiClient.from_config(AppConfig(gemini_api_key="abc", model_name="gemini-x"))

        assert client.is_available()
        assert client.model_name == "gemini-x"
        mock_genai.configure.assert_called_once_with(api_key="abc")

    def test_generate_passes_arguments(self, mock_genai):
        """モデル生成と generate_content に引数がそのまま渡る"""
        client = GeminiClient(api_key="abc", model_name="gemini-2.5-flash")

        response = client.generate(
            "Tesla?",
            system_instruction="Answer in English.",
            tools=SEARCH_TOOL,
        )

        mock_genai.GenerativeModel.assert_called_once_with(
            "gemini-2.5-flash", system_instruction="Answer in English."
        )
        model = mock_genai.GenerativeModel.return_value
        model.generate_content.assert_called_once_with(
            "Tesla?", tools=SEARCH_TOOL, generation_config=None
        )
        assert response.text == "Mocked response."

    def test_api_error_is_wrapped(self, mock_genai):
        mock_genai.GenerativeModel.return_value.generate_content.side_effect = RuntimeError("429")
        client = GeminiClient(api_key="abc")

        with pytest.raises(ServiceUnavailableError) as exc_info:
            client.generate("prompt")
        assert exc_info.value.kind == "unavailable"


class TestSearchTool:
    """SEARCH_TOOL（Web検索グラウンディング）のテスト"""

    def test_request_proto_uses_google_search(self):
        """SDK の変換を通しても google_search が残り、旧ツールは送らない"""
        tools = content_types.to_function_library(SEARCH_TOOL).to_proto()

        assert len(tools) == 1
        assert tools[0]._pb.HasField("google_search")
        assert not tools[0]._pb.HasField("google_search_retrieval")
        assert len(tools[0].function_declarations) == 0

    def test_survives_list_form(self):
        tools = content_types.to_function_library([SEARCH_TOOL]).to_proto()
        assert tools[0]._pb.HasField("google_search")


class _NoText:
    @property
    def text(self):
        raise ValueError("blocked")


class TestResponseText:
    """response_text関数のテスト"""

    def test_returns_text(self):
        assert response_text(SimpleNamespace(text="merhaba")) == "merhaba"

    @pytest.mark.parametrize("response", [None, SimpleNamespace(text=""), SimpleNamespace(text="  \n")])
    def test_empty_is_invalid(self, response):
        with pytest.raises(InvalidResponseError):
            response_text(response)

    def test_blocked_response_is_invalid(self):
        with pytest.raises(InvalidResponseError) as exc_info:
            response_text(_NoText())
        assert exc_info.value.kind == "invalid_response"
