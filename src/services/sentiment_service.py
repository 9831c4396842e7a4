"""
Market Sentiment Service Module
Asks Gemini (with web search grounding) for the current market picture of an
asset and returns a summary together with the cited sources.
"""
import asyncio

from src.ai_schemas import split_sentiment_score
from src.constants import DEFAULT_LOCALE, NEUTRAL_SENTIMENT_SCORE
from src.exceptions import InvalidResponseError
from src.gemini_client import SEARCH_TOOL, GeminiClient, response_text
from src.i18n import t
from src.log_config import get_logger
from src.models import GroundingSource, MarketSentiment
from src.prompts.analysis_prompts import (
    SENTIMENT_PROMPT_TEMPLATE,
    SENTIMENT_SYSTEM_INSTRUCTION,
)

logger = get_logger(__name__)


def extract_grounding_sources(response) -> list[GroundingSource]:
    """
    Collect (title, uri) citations from the first candidate's grounding metadata.
    Citations missing either field are skipped.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        title = getattr(web, "title", None)
        uri = getattr(web, "uri", None)
        if title and uri:
            sources.append(GroundingSource(title=str(title), uri=str(uri)))
    return sources


class SentimentService:
    """Sentiment retrieval client. ``fetch_sentiment`` never raises."""

    def __init__(self, gemini: GeminiClient, locale: str = DEFAULT_LOCALE):
        self._gemini = gemini
        self._locale = locale

    def fallback(self, failure: str = "error") -> MarketSentiment:
        return MarketSentiment(
            summary=t("sentiment_unavailable", self._locale),
            sources=[],
            sentiment_score=NEUTRAL_SENTIMENT_SCORE,
            failure=failure,
        )

    async def fetch_sentiment(self, query: str) -> MarketSentiment:
        try:
            return await asyncio.to_thread(self._fetch, query)
        except Exception as e:
            logger.error(f"Market sentiment error for '{query}': {e}")
            return self.fallback(getattr(e, "kind", "error"))

    def _fetch(self, query: str) -> MarketSentiment:
        prompt = SENTIMENT_PROMPT_TEMPLATE.format(query=query)
        system_instruction = SENTIMENT_SYSTEM_INSTRUCTION.format(
            language=t("language_name", self._locale)
        )

        response = self._gemini.generate(
            prompt,
            system_instruction=system_instruction,
            tools=SEARCH_TOOL,
        )

        try:
            text = response_text(response)
        except InvalidResponseError as e:
            # 本文が無くても出典は表示できるので失敗扱いにしない
            logger.warning(f"Sentiment answer for '{query}' has no text: {e}")
            text = t("empty_answer", self._locale)

        summary, score = split_sentiment_score(text)
        sources = extract_grounding_sources(response)
        logger.info(f"Sentiment for '{query}': score={score}, sources={len(sources)}")

        return MarketSentiment(summary=summary, sources=sources, sentiment_score=score)
