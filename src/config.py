"""
設定モジュール
APIキーやモデル名などの実行時設定を一箇所で読み込み、
各コンポーネントへ明示的に渡すための AppConfig を提供します。
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from src.constants import (
    ANALYSIS_WINDOW,
    DEFAULT_LOCALE,
    DEFAULT_SERIES_LENGTH,
    GEMINI_MODEL_NAME,
    LOCALE_EN,
    LOCALE_JA,
    LOCALE_TR,
    START_PRICE_MAX,
    START_PRICE_MIN,
)
from src.log_config import get_logger

logger = get_logger(__name__)

SUPPORTED_LOCALES = (LOCALE_TR, LOCALE_EN, LOCALE_JA)


@dataclass(frozen=True)
class AppConfig:
    """アプリケーション設定"""

    gemini_api_key: Optional[str] = None
    model_name: str = GEMINI_MODEL_NAME
    locale: str = DEFAULT_LOCALE
    series_length: int = DEFAULT_SERIES_LENGTH
    start_price_min: float = START_PRICE_MIN
    start_price_max: float = START_PRICE_MAX
    analysis_window: int = ANALYSIS_WINDOW
    log_level: str = "INFO"

    @property
    def gemini_configured(self) -> bool:
        return bool(self.gemini_api_key)


def _read_secret(name: str) -> Optional[str]:
    """Streamlit secrets から値を取得（secrets.toml が無い場合は None）"""
    try:
        import streamlit as st

        value = st.secrets.get(name)
    except Exception:
        return None
    return str(value) if value else None


def _lookup(name: str) -> Optional[str]:
    # 1. Streamlit Cloud secrets
    value = _read_secret(name)
    # 2. 環境変数 (.env 含む)
    if not value:
        value = os.getenv(name)
    return value or None


def load_config(api_key: Optional[str] = None) -> AppConfig:
    """
    設定を読み込みます。

    優先順位: 引数 > Streamlit secrets > 環境変数（.env を含む）

    Args:
        api_key: Gemini APIキー（サイドバー入力など、明示的に渡された場合）

    Returns:
        AppConfig インスタンス
    """
    load_dotenv()

    key = api_key or _lookup("GEMINI_API_KEY")
    model_name = _lookup("GEMINI_MODEL_NAME") or GEMINI_MODEL_NAME

    locale = (_lookup("APP_LOCALE") or DEFAULT_LOCALE).lower()
    if locale not in SUPPORTED_LOCALES:
        logger.warning(f"Unsupported locale '{locale}', falling back to {DEFAULT_LOCALE}")
        locale = DEFAULT_LOCALE

    log_level = (_lookup("LOG_LEVEL") or "INFO").upper()

    if not key:
        logger.info("GEMINI_API_KEY is not set; AI features will return fallback content")

    return AppConfig(
        gemini_api_key=key,
        model_name=model_name,
        locale=locale,
        log_level=log_level,
    )
