"""
Decoders for untrusted model output.

The response_schema sent with a request is only a hint to the model; every
field is checked again here before it becomes a domain value.
"""
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.constants import NEUTRAL_SENTIMENT_SCORE
from src.exceptions import InvalidResponseError
from src.models import AnalysisResult, RiskLevel, SignalType, TradeSignal, Trend


class SignalPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int = Field(ge=0)
    price: float
    type: SignalType
    description: str


class AnalysisPayload(BaseModel):
    """Wire shape of the technical analysis answer (camelCase keys)."""

    model_config = ConfigDict(extra="ignore")

    summary: str
    support_levels: List[float] = Field(alias="supportLevels")
    resistance_levels: List[float] = Field(alias="resistanceLevels")
    trend: Trend
    risk_level: RiskLevel = Field(alias="riskLevel")
    signals: List[SignalPayload]


def parse_analysis_payload(text: Optional[str]) -> AnalysisPayload:
    """
    Parse and validate the JSON body of a technical analysis response.

    Raises:
        InvalidResponseError: empty body, malformed JSON or schema mismatch
    """
    if not text or not text.strip():
        raise InvalidResponseError("Empty analysis response")
    try:
        return AnalysisPayload.model_validate_json(text)
    except ValidationError as e:
        raise InvalidResponseError(f"Analysis response does not match schema: {e}") from e


def to_analysis_result(payload: AnalysisPayload, offset: int, window_size: int) -> AnalysisResult:
    """
    Convert a validated payload to an AnalysisResult.

    Signal indices are relative to the analysis window; they are shifted by
    ``offset`` so they address the full series. Signals pointing past the
    window (possible when the series is shorter than the prompt promised)
    are dropped.
    """
    signals = [
        TradeSignal(
            index=s.index + offset,
            price=s.price,
            type=s.type,
            description=s.description,
        )
        for s in payload.signals
        if s.index < window_size
    ]
    return AnalysisResult(
        summary=payload.summary,
        support_levels=list(payload.support_levels),
        resistance_levels=list(payload.resistance_levels),
        signals=signals,
        trend=payload.trend,
        risk_level=payload.risk_level,
    )


_SCORE_LINE = re.compile(r"^\s*\**\s*SCORE\s*\**\s*[:：]\s*\**\s*(-?\d{1,3})\b.*$", re.IGNORECASE | re.MULTILINE)


def split_sentiment_score(text: str) -> tuple[str, int]:
    """
    Pull a trailing ``SCORE: NN`` line out of a sentiment answer.

    Returns:
        (summary without the score line, score clamped to 0-100).
        The neutral midpoint is used when no score line is present.
    """
    matches = list(_SCORE_LINE.finditer(text))
    if not matches:
        return text.strip(), NEUTRAL_SENTIMENT_SCORE

    last = matches[-1]
    score = max(0, min(100, int(last.group(1))))
    summary = (text[: last.start()] + text[last.end():]).strip()
    return summary, score
