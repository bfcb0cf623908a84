"""Precompute single-indicator values on a raw close series.

The confluence engine only reads indicator values already attached to
each candle. This fills them in for series that come with closes only:
RSI(14), MA20, MA50 and Bollinger Bands(20, 2).
"""

import math

from confluence.indicators import bollinger_bands, rsi, sma
from confluence.models import Candle

RSI_PERIOD = 14
MA_FAST_PERIOD = 20
MA_SLOW_PERIOD = 50
BB_PERIOD = 20
BB_STD_DEV = 2.0


def _value(v: float) -> float | None:
    return None if math.isnan(v) else v


def enrich_candles(candles: list[Candle]) -> list[Candle]:
    """
    Return new candles with RSI, moving averages and Bollinger Bands set.

    Values that need more history than available stay None.

    Args:
        candles: Candles in ascending time order

    Returns:
        New list of candles (inputs are not modified)
    """
    if not candles:
        return []

    closes = [c.close for c in candles]
    rsi_values = rsi(closes, RSI_PERIOD)
    ma20 = sma(closes, MA_FAST_PERIOD)
    ma50 = sma(closes, MA_SLOW_PERIOD)
    upper, middle, lower = bollinger_bands(closes, BB_PERIOD, BB_STD_DEV)

    return [
        candle.model_copy(
            update={
                "rsi": _value(rsi_values[i]),
                "ma20": _value(ma20[i]),
                "ma50": _value(ma50[i]),
                "bb_upper": _value(upper[i]),
                "bb_middle": _value(middle[i]),
                "bb_lower": _value(lower[i]),
            }
        )
        for i, candle in enumerate(candles)
    ]
