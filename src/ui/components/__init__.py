from .analysis_card import render_analysis_card
from .chart import build_price_figure, render_chart
from .news_feed import render_news_feed

__all__ = [
    "build_price_figure",
    "render_analysis_card",
    "render_chart",
    "render_news_feed",
]
