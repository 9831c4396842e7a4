"""
Dashboard page module
Search form, quick suggestions, chart, AI analysis card and news feed.
"""
import asyncio
import html

import streamlit as st

from src.asset_context import SUGGESTIONS, resolve_asset_context
from src.i18n import t
from src.log_config import get_logger
from src.ui.components import render_analysis_card, render_chart, render_news_feed

logger = get_logger(__name__)


def select_query(raw_query: str) -> None:
    """
    Queue a fetch for ``raw_query`` (search submit, suggestion or sidebar click).
    Blank input leaves the current asset untouched.
    """
    asset = resolve_asset_context(raw_query)
    if asset is None:
        return
    st.session_state.search_term = asset.query
    st.session_state.pending_asset = asset


def _submit_search() -> None:
    select_query(st.session_state.get("search_term", ""))


def _render_search(locale: str) -> None:
    st.markdown(f'<div class="main-header">{t("headline", locale)}</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="main-tagline">{t("tagline", locale)}</div>', unsafe_allow_html=True)

    _, center, _ = st.columns([1, 3, 1])
    with center:
        with st.form("search_form", clear_on_submit=False, border=False):
            col_input, col_button = st.columns([4, 1])
            with col_input:
                st.text_input(
                    "search",
                    key="search_term",
                    placeholder=t("search_placeholder", locale),
                    label_visibility="collapsed",
                )
            with col_button:
                st.form_submit_button(
                    t("search_button", locale),
                    on_click=_submit_search,
                    use_container_width=True,
                )

        cols = st.columns(len(SUGGESTIONS))
        for col, item in zip(cols, SUGGESTIONS):
            with col:
                st.button(item, key=f"suggest_{item}", on_click=select_query, args=(item,))


def _run_pending_fetch(locale: str) -> None:
    pending = st.session_state.pop("pending_asset", None)
    if pending is None:
        return

    service = st.session_state.dashboard
    logger.debug(f"Running fetch for '{pending.query}'")
    with st.spinner(t("loading", locale)):
        asyncio.run(service.refresh(pending))


def render_dashboard_page() -> None:
    """Renders the dashboard."""
    config = st.session_state.config
    locale = config.locale
    theme = st.session_state.get("theme", "dark")

    _render_search(locale)
    _run_pending_fetch(locale)

    state = st.session_state.dashboard.state

    if not config.gemini_configured:
        st.warning(t("api_key_missing", locale))

    if state.error:
        st.markdown(f'<div class="error-banner">{state.error}</div>', unsafe_allow_html=True)

    if state.asset is not None:
        st.markdown(
            f'<div class="asset-header"><span class="asset-name">{html.escape(state.asset.display_name)}</span>'
            f'<span class="live-badge">{t("live_badge", locale)}</span></div>',
            unsafe_allow_html=True,
        )

    col_main, col_side = st.columns([2, 1])
    with col_main:
        render_chart(state.series, state.analysis, locale=locale, theme=theme)
        render_news_feed(state.sentiment, state.loading, locale=locale)

    with col_side:
        render_analysis_card(state.analysis, state.loading, locale=locale)
        st.markdown(
            f'<div class="disclaimer-box"><div class="disclaimer-title">{t("disclaimer_title", locale)}</div>'
            f'{t("disclaimer_body", locale)}</div>',
            unsafe_allow_html=True,
        )
