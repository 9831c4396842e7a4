"""
Asset context resolution.
Turns a raw search string into the AssetContext that keys every fetch.
"""
from typing import Optional

from src.constants import DEFAULT_QUERY
from src.models import AssetContext

# Quick-select shortcuts shown under the search box
SUGGESTIONS = [
    "Türk Hava Yolları",
    "Gram Altın",
    "Bitcoin",
    "Aselsan",
    "USD/TRY",
    "Tesla",
]


def resolve_asset_context(raw: Optional[str]) -> Optional[AssetContext]:
    """
    Resolve a user query into an AssetContext.

    Returns None for empty or whitespace-only input; callers keep the
    current context in that case.
    """
    if raw is None:
        return None
    query = raw.strip()
    if not query:
        return None
    return AssetContext(query=query, display_name=query.upper())


def default_asset_context() -> AssetContext:
    return resolve_asset_context(DEFAULT_QUERY)
