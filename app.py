"""
BorsaAI - メインアプリケーション
Streamlitを使用した銘柄分析ダッシュボード
"""
import os
import sys

import streamlit as st

# パス設定
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.asset_context import default_asset_context
from src.config import load_config
from src.constants import DEFAULT_LOCALE
from src.i18n import t
from src.log_config import get_logger, set_log_level
from src.services.dashboard_service import create_dashboard_service
from src.ui.dashboard_page import render_dashboard_page
from src.ui.sidebar import render_sidebar
from src.ui.styles import get_custom_css

logger = get_logger(__name__)

st.set_page_config(
    page_title="BorsaAI",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)


def init_session_state():
    """設定・ダッシュボード・テーマをセッションに用意する"""
    if "config" not in st.session_state:
        config = load_config()
        set_log_level(config.log_level)
        st.session_state.config = config

    if "dashboard" not in st.session_state:
        st.session_state.dashboard = create_dashboard_service(st.session_state.config)
        # 初回表示で既定の銘柄を取得
        initial = default_asset_context()
        st.session_state.pending_asset = initial
        st.session_state.search_term = initial.query

    st.session_state.setdefault("theme", "dark")


def render_error_screen(e, locale=DEFAULT_LOCALE):
    """起動エラー時のフォールバック画面を表示"""
    st.error(t("startup_error", locale))
    st.code(str(e), language="python")
    st.info(t("startup_hint", locale))


def main():
    try:
        init_session_state()
        st.markdown(get_custom_css(st.session_state.theme), unsafe_allow_html=True)

        render_sidebar()
        render_dashboard_page()

    except Exception as e:
        logger.exception(f"Unhandled error while rendering: {e}")
        config = st.session_state.get("config")
        render_error_screen(e, config.locale if config else DEFAULT_LOCALE)


if __name__ == "__main__":
    main()
