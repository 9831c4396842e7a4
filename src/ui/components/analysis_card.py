"""
AI分析カードUIコンポーネント
トレンド・リスク・サマリー・サポート/レジスタンス・シグナル一覧を表示します。
"""
import html
from typing import Optional

import streamlit as st

from src.i18n import t
from src.models import AnalysisResult, RiskLevel, Trend

_TREND_ICONS = {Trend.UP: "🟢", Trend.DOWN: "🔴", Trend.FLAT: "🟡"}
_RISK_ICONS = {RiskLevel.LOW: "🟢", RiskLevel.MEDIUM: "🟡", RiskLevel.HIGH: "🔴"}


def format_levels(levels: list[float]) -> str:
    """価格水準を表示用の文字列にします（通貨記号なし）"""
    if not levels:
        return "-"
    return " / ".join(f"{level:,.2f}" for level in sorted(levels))


def render_analysis_card(analysis: Optional[AnalysisResult], loading: bool, locale: str) -> None:
    """AI分析カードをレンダリング"""
    st.markdown(f"#### 🤖 {t('analysis_heading', locale)}")

    if loading or analysis is None:
        with st.container(border=True):
            st.caption(t("loading", locale))
        return

    with st.container(border=True):
        col1, col2 = st.columns(2)
        with col1:
            st.markdown(
                f"**{t('trend_label', locale)}**: {_TREND_ICONS[analysis.trend]} "
                f"{t(f'trend_{analysis.trend.value}', locale)}"
            )
        with col2:
            st.markdown(
                f"**{t('risk_label', locale)}**: {_RISK_ICONS[analysis.risk_level]} "
                f"{t(f'risk_{analysis.risk_level.value}', locale)}"
            )

        st.markdown(analysis.summary)
        if analysis.is_fallback:
            st.caption(t("fallback_hint", locale))

        st.markdown(
            f"""
            <div class="metric-row">
                <span class="metric-label">{t('support', locale)}</span>
                <span class="metric-value text-positive">{format_levels(analysis.support_levels)}</span>
            </div>
            <div class="metric-row">
                <span class="metric-label">{t('resistance', locale)}</span>
                <span class="metric-value text-negative">{format_levels(analysis.resistance_levels)}</span>
            </div>
            """,
            unsafe_allow_html=True,
        )

    st.markdown(f"**{t('signals_heading', locale)}**")
    if not analysis.signals:
        st.caption(t("no_signals", locale))
        return

    for signal in sorted(analysis.signals, key=lambda s: s.index):
        label = t(f"signal_{signal.type.value}", locale)
        st.markdown(
            f'<div class="signal-row signal-{signal.type.value}">'
            f"<b>{label}</b> · {signal.price:,.2f} · #{signal.index + 1}<br>"
            f"{html.escape(signal.description)}</div>",
            unsafe_allow_html=True,
        )
