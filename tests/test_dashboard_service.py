"""
フェッチオーケストレーター（DashboardService）のテスト
"""
import asyncio
import random

from src.config import AppConfig
from src.i18n import t
from src.models import (
    AnalysisResult,
    AssetContext,
    FetchStatus,
    MarketSentiment,
    RiskLevel,
    Trend,
)
from src.services.dashboard_service import DashboardService, create_dashboard_service
from src.services.sentiment_service import SentimentService
from src.services.technical_analysis_service import TechnicalAnalysisService


def _sentiment(summary="ok", failure=None):
    return MarketSentiment(summary=summary, sources=[], sentiment_score=55, failure=failure)


def _analysis(summary="ok", failure=None):
    return AnalysisResult(
        summary=summary,
        support_levels=[100.0],
        resistance_levels=[140.0],
        signals=[],
        trend=Trend.UP,
        risk_level=RiskLevel.LOW,
        failure=failure,
    )


class FakeSentiment:
    """呼び出しを記録し、呼ばれた時点の表示状態も保存する"""

    def __init__(self, result=None, gates=None):
        self.result = result or _sentiment()
        self.gates = gates or {}
        self.calls = []
        self.observed = []
        self.dashboard = None

    async def fetch_sentiment(self, query):
        self.calls.append(query)
        if self.dashboard is not None:
            self.observed.append(self.dashboard.state)
        if query in self.gates:
            await self.gates[query].wait()
        return _sentiment(summary=f"sentiment:{query}") if self.result == "echo" else self.result


class FakeAnalysis:
    def __init__(self, result=None, error=None, gates=None):
        self.result = result or _analysis()
        self.error = error
        self.gates = gates or {}
        self.calls = []

    async def analyze(self, query, series):
        self.calls.append((query, series))
        if query in self.gates:
            await self.gates[query].wait()
        if self.error is not None:
            raise self.error
        return _analysis(summary=f"analysis:{query}") if self.result == "echo" else self.result


def _service(sentiment=None, analysis=None, config=None):
    sentiment = sentiment or FakeSentiment()
    analysis = analysis or FakeAnalysis()
    service = DashboardService(sentiment, analysis, config=config or AppConfig(), rng=random.Random(3))
    sentiment.dashboard = service
    return service, sentiment, analysis


class TestRefresh:
    """DashboardService.refreshのテスト"""

    def test_initial_state_is_idle(self):
        service, _, _ = _service()
        assert service.state.status == FetchStatus.IDLE
        assert service.state.loading is False
        assert service.state.series == []

    def test_full_cycle(self):
        """Tesla: 100本生成、両方を呼び出し、完了後 loading=False"""
        service, sentiment, analysis = _service()
        asset = AssetContext(query="Tesla", display_name="TESLA")

        state = asyncio.run(service.refresh(asset))

        assert len(state.series) == 100
        assert 100.0 <= state.series[0].open <= 150.0
        assert sentiment.calls == ["Tesla"]
        assert analysis.calls[0][0] == "Tesla"
        assert analysis.calls[0][1] is state.series
        assert state.loading is False
        assert state.error is None
        assert state.status == FetchStatus.SUCCESS
        assert state.asset == asset
        assert state.sentiment.summary == "ok"
        assert state.analysis.trend == Trend.UP

    def test_loading_while_requests_run(self):
        """問い合わせ中は loading=True、前回の結果は消えている"""
        service, sentiment, _ = _service()
        asyncio.run(service.refresh(AssetContext("BIST 100", "BIST 100")))

        asyncio.run(service.refresh(AssetContext("Tesla", "TESLA")))

        during = sentiment.observed[-1]
        assert during.loading is True
        assert during.status == FetchStatus.LOADING
        assert during.analysis is None
        assert during.sentiment is None
        assert during.error is None
        assert len(during.series) == 100
        assert during.asset.query == "Tesla"

    def test_series_regenerated_every_cycle(self):
        service, _, _ = _service()
        asset = AssetContext("Aselsan", "ASELSAN")
        first = asyncio.run(service.refresh(asset)).series
        second = asyncio.run(service.refresh(asset)).series
        assert [bar.close for bar in first] != [bar.close for bar in second]

    def test_series_length_from_config(self):
        service, _, _ = _service(config=AppConfig(series_length=30))
        state = asyncio.run(service.refresh(AssetContext("BTC", "BTC")))
        assert len(state.series) == 30

    def test_one_fallback_is_partial_error(self):
        """片方がフォールバックでももう片方の結果は保持する"""
        sentiment = FakeSentiment(result=_sentiment("unavailable", failure="unavailable"))
        service, _, _ = _service(sentiment=sentiment)

        state = asyncio.run(service.refresh(AssetContext("Tesla", "TESLA")))

        assert state.status == FetchStatus.PARTIAL_ERROR
        assert state.sentiment.is_fallback
        assert state.analysis.summary == "ok"
        assert state.error is None
        assert state.loading is False

    def test_orchestration_failure_sets_error(self):
        """想定外の例外時はエラーバナーを出し、両結果は空、loading は解除"""
        analysis = FakeAnalysis(error=RuntimeError("socket closed"))
        service, _, _ = _service(analysis=analysis, config=AppConfig(locale="tr"))

        state = asyncio.run(service.refresh(AssetContext("Tesla", "TESLA")))

        assert state.error == t("network_error", "tr")
        assert state.analysis is None
        assert state.sentiment is None
        assert state.loading is False
        assert state.status == FetchStatus.PARTIAL_ERROR
        assert len(state.series) == 100

    def test_stale_cycle_is_discarded(self):
        """古い問い合わせの遅い応答が新しい結果を上書きしない"""

        async def scenario():
            gate = asyncio.Event()
            sentiment = FakeSentiment(result="echo", gates={"Tesla": gate})
            analysis = FakeAnalysis(result="echo")
            service, _, _ = _service(sentiment=sentiment, analysis=analysis)

            slow = asyncio.create_task(service.refresh(AssetContext("Tesla", "TESLA")))
            await asyncio.sleep(0)
            await service.refresh(AssetContext("Bitcoin", "BITCOIN"))
            newest = service.state

            gate.set()
            await slow
            return service, newest

        service, newest = asyncio.run(scenario())

        assert service.state is newest
        assert service.state.asset.query == "Bitcoin"
        assert service.state.sentiment.summary == "sentiment:Bitcoin"
        assert service.state.analysis.summary == "analysis:Bitcoin"
        assert service.state.loading is False
        assert service.state.generation == 2


class TestSubmit:
    """DashboardService.submitのテスト"""

    def test_blank_query_is_noop(self):
        service, sentiment, analysis = _service()
        before = service.state

        assert asyncio.run(service.submit("   ")) is None

        assert service.state is before
        assert sentiment.calls == []
        assert analysis.calls == []

    def test_query_is_resolved(self):
        service, sentiment, _ = _service()
        state = asyncio.run(service.submit("  gram altın "))
        assert state.asset == AssetContext(query="gram altın", display_name="GRAM ALTIN")
        assert sentiment.calls == ["gram altın"]


class TestCreateDashboardService:
    def test_wires_services_from_config(self, mock_genai):
        service = create_dashboard_service(AppConfig(gemini_api_key="k", locale="en"))

        assert isinstance(service._sentiment, SentimentService)
        assert isinstance(service._analysis, TechnicalAnalysisService)
        mock_genai.configure.assert_called_once_with(api_key="k")
