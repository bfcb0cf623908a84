"""Swing detection and Fibonacci retracement levels.

The swing high and swing low are the highest and lowest close inside the
trailing lookback window. Their order inside the window gives the trend:
a low followed by a high is an uptrend, a high followed by a low a
downtrend.
"""

import logging
from typing import Sequence

from confluence.errors import InsufficientDataError
from confluence.indicators import retracement_levels, swing_extremes
from confluence.models import FIB_RATIOS, Candle, FibonacciLevels, Trend

logger = logging.getLogger(__name__)


class SwingFibonacciAnalyzer:
    """Derives retracement levels from the trailing window of a series."""

    def __init__(self, lookback: int = 100):
        """
        Args:
            lookback: Default number of trailing candles to scan
        """
        _check_lookback(lookback)
        self.lookback = lookback

    def compute_levels(
        self,
        series: Sequence[Candle],
        lookback: int | None = None,
    ) -> FibonacciLevels:
        """
        Compute the seven retracement levels of the trailing window.

        Args:
            series: Candles in ascending time order
            lookback: Window size override (clamped to the series length)

        Returns:
            Fresh FibonacciLevels for the window

        Raises:
            InsufficientDataError: If the series is empty.
            ValueError: If lookback is not a positive integer.
        """
        if lookback is None:
            lookback = self.lookback
        _check_lookback(lookback)

        if len(series) == 0:
            raise InsufficientDataError("cannot compute Fibonacci levels of an empty series")

        window = series[-min(lookback, len(series)):]
        closes = [candle.close for candle in window]

        low, low_index, high, high_index = swing_extremes(closes)
        trend = _classify_trend(closes, low_index, high_index)
        levels = retracement_levels(low, high, FIB_RATIOS)

        logger.debug(
            "Swing window=%d low=%s@%d high=%s@%d trend=%s",
            len(window), low, low_index, high, high_index, trend.value,
        )

        return FibonacciLevels(
            trend=trend,
            levels=tuple(levels),
            swing_low_index=low_index,
            swing_high_index=high_index,
        )


def _classify_trend(closes: list[float], low_index: int, high_index: int) -> Trend:
    if len(set(closes)) < 2 or low_index == high_index:
        return Trend.UNKNOWN
    if low_index < high_index:
        return Trend.UPTREND
    return Trend.DOWNTREND


def _check_lookback(lookback: int) -> None:
    if isinstance(lookback, bool) or not isinstance(lookback, int) or lookback <= 0:
        raise ValueError(f"lookback must be a positive integer, got {lookback!r}")


def compute_levels(series: Sequence[Candle], lookback: int = 100) -> FibonacciLevels:
    """Compute retracement levels with a one-off analyzer."""
    return SwingFibonacciAnalyzer(lookback).compute_levels(series)
