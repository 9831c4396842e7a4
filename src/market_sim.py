"""
擬似価格データ生成モジュール
チャート表示用に、上昇バイアス付きランダムウォークで日足OHLCVを生成します。
実データではなく可視化専用です（AIの解説はAI自身の知識・検索に基づく）。
"""
import random
from datetime import date, timedelta
from typing import Optional

import pandas as pd

from src.models import PriceBar

# (u - 0.48) * 0.05 -> 1日あたり約 -2.4% 〜 +2.6%、わずかに上昇寄り
_DRIFT_CENTER = 0.48
_STEP_SCALE = 0.05
_WICK_MAX = 0.02
_VOLUME_MIN = 50_000
_VOLUME_SPAN = 1_000_000


def generate_price_series(
    length: int,
    start_price: float,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> list[PriceBar]:
    """
    擬似的な日足OHLCVデータを生成します。

    Args:
        length: 生成する本数（1日1本、土日も含む）
        start_price: 最初の始値
        today: 基準日（省略時は本日）。最初の足は today - length 日
        rng: 乱数生成器（テストで再現性を持たせる場合に指定）

    Returns:
        古い順に並んだ PriceBar のリスト
    """
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")
    if start_price <= 0:
        raise ValueError(f"start_price must be positive, got {start_price}")

    rng = rng or random.Random()
    start_date = (today or date.today()) - timedelta(days=length)

    bars = []
    current_price = start_price
    for i in range(length):
        change = (rng.random() - _DRIFT_CENTER) * _STEP_SCALE
        open_ = current_price
        close = current_price * (1 + change)
        high = max(open_, close) * (1 + rng.random() * _WICK_MAX)
        low = min(open_, close) * (1 - rng.random() * _WICK_MAX)
        volume = int(rng.random() * _VOLUME_SPAN) + _VOLUME_MIN

        bars.append(
            PriceBar(
                time=(start_date + timedelta(days=i)).isoformat(),
                open=round(open_, 2),
                high=round(high, 2),
                low=round(low, 2),
                close=round(close, 2),
                volume=volume,
            )
        )
        # 丸め前の終値を次の始値に引き継ぐ
        current_price = close

    return bars


def random_start_price(low: float, high: float, rng: Optional[random.Random] = None) -> float:
    """[low, high) の一様乱数で開始価格を決めます。"""
    rng = rng or random.Random()
    return low + rng.random() * (high - low)


def series_to_dataframe(series: list[PriceBar]) -> pd.DataFrame:
    """チャート描画用に DatetimeIndex 付き DataFrame へ変換します。"""
    if not series:
        return pd.DataFrame(columns=["Open", "High", "Low", "Close", "Volume"])

    df = pd.DataFrame([bar.to_dict() for bar in series])
    df["time"] = pd.to_datetime(df["time"])
    df = df.set_index("time").rename(
        columns={
            "open": "Open",
            "high": "High",
            "low": "Low",
            "close": "Close",
            "volume": "Volume",
        }
    )
    return df
