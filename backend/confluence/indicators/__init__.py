"""Technical indicators (pure math, no I/O)."""

from confluence.indicators.indicators import (
    sma,
    rsi,
    bollinger_bands,
    swing_extremes,
    retracement_levels,
    band_position,
)

__all__ = [
    "sma",
    "rsi",
    "bollinger_bands",
    "swing_extremes",
    "retracement_levels",
    "band_position",
]
