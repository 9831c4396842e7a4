"""
Gemini API ゲートウェイ
APIキーとモデル名を明示的に受け取り、generate_content 呼び出しを一本化します。
失敗はすべて src.exceptions の例外に変換して送出します（フォールバックは呼び出し側の責務）。
"""
from typing import Any, Optional

import google.generativeai as genai

from src.config import AppConfig
from src.constants import GEMINI_MODEL_NAME
from src.exceptions import InvalidResponseError, ServiceUnavailableError
from src.log_config import get_logger

logger = get_logger(__name__)


class GoogleSearchTool(genai.types.Tool):
    """
    Gemini 2.x 向けの Web 検索グラウンディングツール（``google_search``）

    SDK の Tool は旧来の ``google_search_retrieval`` しか組み立てず、
    protos.Tool を渡すと ``google_search`` が落ちるため、proto を直接持たせる。
    """

    def __init__(self):
        super().__init__()
        self._proto = genai.protos.Tool(google_search=genai.protos.Tool.GoogleSearch())


SEARCH_TOOL = GoogleSearchTool()


class GeminiClient:
    """
    Gemini への薄いラッパー

    使い方:
        client = GeminiClient(api_key="...", model_name="gemini-2.5-flash")
        response = client.generate("prompt", tools=SEARCH_TOOL)
    """

    def __init__(self, api_key: Optional[str], model_name: str = GEMINI_MODEL_NAME):
        self.api_key = api_key
        self.model_name = model_name
        if api_key:
            # configure はプロセス全体に効く（単一ユーザー運用が前提）
            genai.configure(api_key=api_key)
            logger.info(f"Gemini client initialized (model: {model_name})")
        else:
            logger.warning("Gemini client created without API key")

    @classmethod
    def from_config(cls, config: AppConfig) -> "GeminiClient":
        return cls(api_key=config.gemini_api_key, model_name=config.model_name)

    def is_available(self) -> bool:
        return bool(self.api_key)

    def generate(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        tools: Any = None,
        generation_config: Optional[dict] = None,
    ):
        """
        コンテンツを生成します（同期呼び出し）。

        Args:
            prompt: ユーザープロンプト
            system_instruction: システム指示（回答言語・口調など）
            tools: ツール指定（Web検索など）
            generation_config: 生成設定（response_mime_type, response_schema など）

        Returns:
            generate_content のレスポンス

        Raises:
            ServiceUnavailableError: 未設定・通信失敗・API エラー
        """
        if not self.is_available():
            raise ServiceUnavailableError("Gemini API key is not configured")

        model = genai.GenerativeModel(self.model_name, system_instruction=system_instruction)
        try:
            return model.generate_content(
                prompt,
                tools=tools,
                generation_config=generation_config,
            )
        except Exception as e:
            raise ServiceUnavailableError(f"Gemini request failed: {e}") from e


def response_text(response) -> str:
    """
    レスポンスから本文テキストを取り出します。

    ブロックされた応答では SDK の ``.text`` が ValueError を送出するため、
    空応答と合わせて InvalidResponseError に変換します。
    """
    if response is None:
        raise InvalidResponseError("Empty response")
    try:
        text = response.text
    except ValueError as e:
        raise InvalidResponseError(f"Response has no text part: {e}") from e
    if not text or not str(text).strip():
        raise InvalidResponseError("Empty response text")
    return str(text)
