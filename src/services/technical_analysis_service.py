"""
Technical Analysis Service Module
Sends the most recent slice of the synthetic series to Gemini with a strict
JSON schema, validates the answer and maps signal positions back onto the
full series.
"""
import asyncio
import json

from src.ai_schemas import parse_analysis_payload, to_analysis_result
from src.constants import ANALYSIS_WINDOW, DEFAULT_LOCALE
from src.gemini_client import GeminiClient, response_text
from src.i18n import t
from src.log_config import get_logger
from src.models import AnalysisResult, PriceBar, RiskLevel, Trend
from src.prompts.analysis_prompts import (
    TECHNICAL_ANALYSIS_PROMPT_TEMPLATE,
    TECHNICAL_ANALYSIS_RESPONSE_SCHEMA,
)

logger = get_logger(__name__)


def analysis_window(series: list[PriceBar], size: int = ANALYSIS_WINDOW) -> tuple[list[PriceBar], int]:
    """
    Return the last ``size`` bars and the offset of the first one in ``series``.

    The offset is never negative: a series shorter than ``size`` is sent
    whole with offset 0.
    """
    offset = max(0, len(series) - size)
    return series[offset:], offset


class TechnicalAnalysisService:
    """Technical analysis client. ``analyze`` never raises."""

    def __init__(
        self,
        gemini: GeminiClient,
        locale: str = DEFAULT_LOCALE,
        window: int = ANALYSIS_WINDOW,
    ):
        self._gemini = gemini
        self._locale = locale
        self._window = window

    def fallback(self, failure: str = "error") -> AnalysisResult:
        return AnalysisResult(
            summary=t("analysis_error", self._locale),
            support_levels=[],
            resistance_levels=[],
            signals=[],
            trend=Trend.FLAT,
            risk_level=RiskLevel.MEDIUM,
            failure=failure,
        )

    async def analyze(self, query: str, series: list[PriceBar]) -> AnalysisResult:
        try:
            return await asyncio.to_thread(self._analyze, query, series)
        except Exception as e:
            logger.error(f"Technical analysis error for '{query}': {e}")
            return self.fallback(getattr(e, "kind", "error"))

    def build_prompt(self, query: str, window: list[PriceBar]) -> str:
        data = json.dumps([bar.to_dict() for bar in window], ensure_ascii=False)
        return TECHNICAL_ANALYSIS_PROMPT_TEMPLATE.format(
            query=query,
            window=len(window),
            last_index=len(window) - 1,
            data=data,
            language=t("language_name", self._locale),
        )

    def _analyze(self, query: str, series: list[PriceBar]) -> AnalysisResult:
        window, offset = analysis_window(series, self._window)
        if not window:
            raise ValueError("Cannot analyze an empty series")

        response = self._gemini.generate(
            self.build_prompt(query, window),
            generation_config={
                "response_mime_type": "application/json",
                "response_schema": TECHNICAL_ANALYSIS_RESPONSE_SCHEMA,
            },
        )
        payload = parse_analysis_payload(response_text(response))
        result = to_analysis_result(payload, offset=offset, window_size=len(window))

        dropped = len(payload.signals) - len(result.signals)
        if dropped:
            logger.warning(f"Dropped {dropped} signal(s) outside the {len(window)}-bar window for '{query}'")

        logger.info(
            f"Technical analysis for '{query}': trend={result.trend.value}, "
            f"risk={result.risk_level.value}, signals={len(result.signals)}"
        )
        return result
