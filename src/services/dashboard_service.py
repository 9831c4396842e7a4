"""
Dashboard Service Module
Owns the current view (series, analysis, sentiment, loading, error) and runs
one fetch cycle per asset context: a fresh synthetic series, then the
sentiment and technical analysis requests in parallel.
"""
import asyncio
import random
from dataclasses import dataclass, field
from typing import Optional

from src.asset_context import resolve_asset_context
from src.config import AppConfig
from src.i18n import t
from src.log_config import get_logger
from src.market_sim import generate_price_series, random_start_price
from src.models import (
    AnalysisResult,
    AssetContext,
    FetchStatus,
    MarketSentiment,
    PriceBar,
)
from src.services.sentiment_service import SentimentService
from src.services.technical_analysis_service import TechnicalAnalysisService

logger = get_logger(__name__)


@dataclass
class DashboardState:
    """ダッシュボードの表示状態（フェッチ1回ごとに丸ごと置き換える）"""

    asset: Optional[AssetContext] = None
    series: list[PriceBar] = field(default_factory=list)
    analysis: Optional[AnalysisResult] = None
    sentiment: Optional[MarketSentiment] = None
    loading: bool = False
    error: Optional[str] = None
    status: FetchStatus = FetchStatus.IDLE
    generation: int = 0


class DashboardService:
    """
    Fetch orchestrator.

    Every call to ``refresh`` starts a new cycle tagged with an increasing
    generation number. When a cycle finishes after a newer one has started,
    its results are discarded so a slow answer for an old query never
    overwrites the current one.
    """

    def __init__(
        self,
        sentiment_service: SentimentService,
        analysis_service: TechnicalAnalysisService,
        config: Optional[AppConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self._sentiment = sentiment_service
        self._analysis = analysis_service
        self._config = config or AppConfig()
        self._rng = rng or random.Random()
        self._generation = 0
        self._state = DashboardState()

    @property
    def state(self) -> DashboardState:
        return self._state

    def begin(self, asset: AssetContext) -> int:
        """
        Start a cycle: clear analysis/sentiment/error, set loading and put a
        freshly generated series on screen right away.

        Returns:
            generation number of the new cycle
        """
        self._generation += 1
        start_price = random_start_price(
            self._config.start_price_min, self._config.start_price_max, self._rng
        )
        series = generate_price_series(self._config.series_length, start_price, rng=self._rng)

        self._state = DashboardState(
            asset=asset,
            series=series,
            loading=True,
            status=FetchStatus.LOADING,
            generation=self._generation,
        )
        logger.info(
            f"Fetch #{self._generation} started for '{asset.query}' "
            f"({len(series)} bars from {start_price:.2f})"
        )
        return self._generation

    async def refresh(self, asset: AssetContext) -> DashboardState:
        """Run one full fetch cycle for ``asset`` and return the resulting state."""
        generation = self.begin(asset)
        series = self._state.series

        sentiment: Optional[MarketSentiment] = None
        analysis: Optional[AnalysisResult] = None
        error: Optional[str] = None
        try:
            sentiment, analysis = await asyncio.gather(
                self._sentiment.fetch_sentiment(asset.query),
                self._analysis.analyze(asset.query, series),
            )
        except Exception as e:
            logger.error(f"Fetch #{generation} for '{asset.query}' failed: {e}")
            sentiment, analysis = None, None
            error = t("network_error", self._config.locale)
        finally:
            self._finish(generation, asset, series, analysis, sentiment, error)

        return self._state

    async def submit(self, raw_query: Optional[str]) -> Optional[DashboardState]:
        """
        Resolve a typed query and fetch it. Blank input is ignored: no
        fetch, no state change, returns None.
        """
        asset = resolve_asset_context(raw_query)
        if asset is None:
            return None
        return await self.refresh(asset)

    def _finish(
        self,
        generation: int,
        asset: AssetContext,
        series: list[PriceBar],
        analysis: Optional[AnalysisResult],
        sentiment: Optional[MarketSentiment],
        error: Optional[str],
    ) -> None:
        if generation != self._generation:
            logger.warning(
                f"Discarding stale fetch #{generation} for '{asset.query}' "
                f"(current is #{self._generation})"
            )
            return

        degraded = (
            error is not None
            or analysis is None
            or sentiment is None
            or analysis.is_fallback
            or sentiment.is_fallback
        )
        self._state = DashboardState(
            asset=asset,
            series=series,
            analysis=analysis,
            sentiment=sentiment,
            loading=False,
            error=error,
            status=FetchStatus.PARTIAL_ERROR if degraded else FetchStatus.SUCCESS,
            generation=generation,
        )
        logger.info(f"Fetch #{generation} for '{asset.query}' finished: {self._state.status.value}")


def create_dashboard_service(config: AppConfig) -> DashboardService:
    """設定から Gemini クライアントと両サービスを組み立てます。"""
    from src.gemini_client import GeminiClient

    gemini = GeminiClient.from_config(config)
    return DashboardService(
        SentimentService(gemini, locale=config.locale),
        TechnicalAnalysisService(gemini, locale=config.locale, window=config.analysis_window),
        config=config,
    )
