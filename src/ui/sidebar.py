"""
Sidebar UI module
Theme toggle, Gemini API key setting and the instrument reference list.
"""
import streamlit as st

from src.config import load_config
from src.i18n import t
from src.market_config import get_instruments_by_sector
from src.services.dashboard_service import create_dashboard_service
from src.ui.dashboard_page import select_query


def _apply_api_key() -> None:
    """入力されたAPIキーで設定とサービスを作り直す"""
    key = st.session_state.get("api_key_input", "").strip()
    if not key:
        return
    current = st.session_state.dashboard.state.asset
    config = load_config(api_key=key)
    st.session_state.config = config
    st.session_state.dashboard = create_dashboard_service(config)
    # 現在の銘柄を新しいキーで取り直す
    if current is not None:
        st.session_state.pending_asset = current


def _toggle_theme() -> None:
    st.session_state.theme = "dark" if st.session_state.dark_mode else "light"


def render_sidebar() -> None:
    """Renders the application sidebar."""
    config = st.session_state.config
    locale = config.locale

    with st.sidebar:
        st.markdown(f"## 📈 {t('app_title', locale)}")

        st.toggle(
            t("theme_toggle", locale),
            value=st.session_state.get("theme", "dark") == "dark",
            key="dark_mode",
            on_change=_toggle_theme,
        )

        if not config.gemini_configured:
            st.text_input(
                t("api_key_input", locale),
                type="password",
                key="api_key_input",
                on_change=_apply_api_key,
            )

        st.divider()

        # === 銘柄リファレンス（クリックで検索） ===
        st.markdown(f"### {t('instruments_heading', locale)}")
        for sector, instruments in get_instruments_by_sector().items():
            with st.expander(sector):
                for instrument in instruments:
                    st.button(
                        f"{instrument['symbol']} · {instrument['name']}",
                        key=f"instrument_{instrument['symbol']}",
                        on_click=select_query,
                        args=(instrument["name"],),
                        use_container_width=True,
                    )
