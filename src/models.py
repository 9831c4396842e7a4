"""
Domain models for the dashboard.
Plain dataclasses; the AI-facing wire format lives in src.ai_schemas.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class SignalType(str, Enum):
    """売買シグナル種別"""

    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"
    NEUTRAL = "NEUTRAL"


class Trend(str, Enum):
    """トレンド"""

    UP = "UP"
    DOWN = "DOWN"
    FLAT = "FLAT"


class RiskLevel(str, Enum):
    """リスク水準"""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class FetchStatus(str, Enum):
    """Lifecycle of one dashboard fetch cycle."""

    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    PARTIAL_ERROR = "PARTIAL_ERROR"


@dataclass(frozen=True)
class AssetContext:
    """The asset currently shown: the user's query and its display form."""

    query: str
    display_name: str


@dataclass(frozen=True)
class PriceBar:
    """One daily OHLCV bar. ``time`` is an ISO date (YYYY-MM-DD)."""

    time: str
    open: float
    high: float
    low: float
    close: float
    volume: int

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class TradeSignal:
    index: int  # position in the full series
    price: float
    type: SignalType
    description: str


@dataclass
class AnalysisResult:
    """テクニカル分析結果"""

    summary: str
    support_levels: List[float] = field(default_factory=list)
    resistance_levels: List[float] = field(default_factory=list)
    signals: List[TradeSignal] = field(default_factory=list)
    trend: Trend = Trend.FLAT
    risk_level: RiskLevel = RiskLevel.MEDIUM
    # None on success, otherwise the AIServiceError.kind that produced this fallback
    failure: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.failure is not None


@dataclass(frozen=True)
class GroundingSource:
    title: str
    uri: str


@dataclass
class MarketSentiment:
    """市場センチメント（要約・出典・スコア）"""

    summary: str
    sources: List[GroundingSource] = field(default_factory=list)
    sentiment_score: int = 50  # 0 (bearish) - 100 (bullish)
    failure: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.failure is not None
