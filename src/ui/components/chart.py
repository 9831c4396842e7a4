from typing import Optional

import plotly.graph_objects as go
import streamlit as st
from plotly.subplots import make_subplots

from src.i18n import t
from src.market_sim import series_to_dataframe
from src.models import AnalysisResult, PriceBar, SignalType

POSITIVE_COLOR = "#10b981"
NEGATIVE_COLOR = "#f43f5e"

# 描画するシグナル種別と色・マーカー
_SIGNAL_STYLES = {
    SignalType.BUY: {"color": POSITIVE_COLOR, "symbol": "triangle-up"},
    SignalType.SELL: {"color": NEGATIVE_COLOR, "symbol": "triangle-down"},
}


def build_price_figure(
    series: list[PriceBar],
    analysis: Optional[AnalysisResult] = None,
    locale: str = "tr",
    theme: str = "dark",
) -> go.Figure:
    """
    ローソク足＋出来高のチャートを組み立てます。
    分析結果があれば売買シグナルとサポート/レジスタンスを重ねます。
    """
    df = series_to_dataframe(series)

    # サブプロット作成 (上が価格、下が出来高)
    fig = make_subplots(
        rows=2,
        cols=1,
        shared_xaxes=True,
        vertical_spacing=0.05,
        row_heights=[0.75, 0.25],
    )

    if df.empty:
        return fig

    # 1. ローソク足 (Row 1)
    fig.add_trace(
        go.Candlestick(
            x=df.index,
            open=df["Open"],
            high=df["High"],
            low=df["Low"],
            close=df["Close"],
            name=t("price_series", locale),
            increasing_line_color=POSITIVE_COLOR,
            decreasing_line_color=NEGATIVE_COLOR,
            showlegend=False,
        ),
        row=1,
        col=1,
    )

    if analysis is not None:
        # 2. 売買シグナル (Row 1): マーカーはその足の終値に置く
        for signal_type, style in _SIGNAL_STYLES.items():
            points = [s for s in analysis.signals if s.type == signal_type and 0 <= s.index < len(df)]
            if not points:
                continue
            fig.add_trace(
                go.Scatter(
                    x=[df.index[s.index] for s in points],
                    y=[df["Close"].iloc[s.index] for s in points],
                    mode="markers",
                    name=t(f"signal_{signal_type.value}", locale),
                    marker=dict(color=style["color"], symbol=style["symbol"], size=12),
                    text=[s.description for s in points],
                    hovertemplate="%{text}<extra></extra>",
                ),
                row=1,
                col=1,
            )

        # 3. サポート/レジスタンス
        for level in analysis.support_levels:
            fig.add_hline(
                y=level,
                line_dash="dash",
                line_color=POSITIVE_COLOR,
                opacity=0.5,
                annotation_text=t("support", locale),
                annotation_position="top left",
                row=1,
                col=1,
            )
        for level in analysis.resistance_levels:
            fig.add_hline(
                y=level,
                line_dash="dash",
                line_color=NEGATIVE_COLOR,
                opacity=0.5,
                annotation_text=t("resistance", locale),
                annotation_position="top left",
                row=1,
                col=1,
            )

    # 4. 出来高 (Row 2) ローソク足に合わせて (Close >= Open) で色分け
    colors = [POSITIVE_COLOR if c >= o else NEGATIVE_COLOR for c, o in zip(df["Close"], df["Open"])]
    fig.add_trace(
        go.Bar(
            x=df.index,
            y=df["Volume"],
            name=t("volume_axis", locale),
            marker_color=colors,
            showlegend=False,
        ),
        row=2,
        col=1,
    )

    fig.update_layout(
        autosize=True,
        yaxis_title=t("price_axis", locale),
        yaxis2_title=t("volume_axis", locale),
        template="plotly_dark" if theme == "dark" else "plotly_white",
        xaxis_rangeslider_visible=False,
        height=500,
        margin=dict(l=0, r=0, t=30, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    return fig


def render_chart(
    series: list[PriceBar],
    analysis: Optional[AnalysisResult],
    locale: str,
    theme: str,
) -> None:
    """シグナル付き価格チャートを描画します。"""
    st.markdown(f"#### 📈 {t('technical_signals', locale)}")
    if not series:
        st.info(t("loading", locale))
        return
    fig = build_price_figure(series, analysis, locale=locale, theme=theme)
    st.plotly_chart(fig, use_container_width=True)
