import html
from typing import Optional

import streamlit as st

from src.i18n import t
from src.models import MarketSentiment


def sentiment_class(score: int) -> str:
    """スコアを強気/弱気/中立のCSSクラスに対応付け"""
    if score >= 60:
        return "text-positive"
    if score <= 40:
        return "text-negative"
    return "text-neutral"


def render_news_feed(sentiment: Optional[MarketSentiment], loading: bool, locale: str) -> None:
    """市場センチメントの要約と出典リンクを表示します。"""
    st.markdown(f"#### 📰 {t('news_heading', locale)}")

    if loading or sentiment is None:
        with st.container(border=True):
            st.caption(t("loading", locale))
        return

    with st.container(border=True):
        score = sentiment.sentiment_score
        st.markdown(
            f'<div class="metric-row"><span class="metric-label">{t("sentiment_label", locale)}</span>'
            f'<span class="metric-value {sentiment_class(score)}">{score} / 100</span></div>',
            unsafe_allow_html=True,
        )
        st.progress(score / 100)

        st.markdown(sentiment.summary)
        if sentiment.is_fallback:
            st.caption(t("fallback_hint", locale))

        if sentiment.sources:
            st.markdown(f"**{t('sources_heading', locale)}**")
            links = "".join(
                f'<a class="source-link" href="{html.escape(s.uri, quote=True)}" target="_blank">'
                f"🔗 {html.escape(s.title)}</a>"
                for s in sentiment.sources
            )
            st.markdown(links, unsafe_allow_html=True)
