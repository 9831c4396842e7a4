"""
銘柄コンテキスト解決のテスト
"""
import pytest

from src.asset_context import SUGGESTIONS, default_asset_context, resolve_asset_context
from src.market_config import INSTRUMENTS, get_instruments_by_sector
from src.models import AssetContext


class TestResolveAssetContext:
    """resolve_asset_context関数のテスト"""

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
    def test_blank_input_is_ignored(self, raw):
        """空白のみの入力はNone（コンテキスト変更なし）"""
        assert resolve_asset_context(raw) is None

    def test_uppercases_display_name(self):
        assert resolve_asset_context("btc") == AssetContext(query="btc", display_name="BTC")

    def test_trims_whitespace(self):
        """前後の空白は取り除かれる"""
        ctx = resolve_asset_context("  Tesla  ")
        assert ctx.query == "Tesla"
        assert ctx.display_name == "TESLA"

    def test_keeps_inner_text(self):
        ctx = resolve_asset_context("USD/TRY")
        assert ctx.query == "USD/TRY"
        assert ctx.display_name == "USD/TRY"

    def test_returns_new_value_each_time(self):
        """同じ入力でも毎回新しいコンテキスト（値は等しい）"""
        a = resolve_asset_context("Aselsan")
        b = resolve_asset_context("Aselsan")
        assert a == b
        assert a is not b

    def test_suggestions_resolve(self):
        """候補はすべて同じリゾルバで解決できる"""
        for item in SUGGESTIONS:
            ctx = resolve_asset_context(item)
            assert ctx is not None
            assert ctx.query == item

    def test_default_context(self):
        ctx = default_asset_context()
        assert ctx.query == "BIST 100"
        assert ctx.display_name == "BIST 100"


class TestInstruments:
    def test_grouped_by_sector_keeps_all(self):
        grouped = get_instruments_by_sector()
        assert sum(len(v) for v in grouped.values()) == len(INSTRUMENTS)
        assert [i["symbol"] for i in grouped["Bankacılık"]] == ["GARAN", "AKBNK", "ISCTR", "YKBNK"]

    def test_symbols_unique(self):
        symbols = [i["symbol"] for i in INSTRUMENTS]
        assert len(symbols) == len(set(symbols))
