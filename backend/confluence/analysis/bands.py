"""Bollinger Band position analysis."""

import math

from confluence.indicators import band_position
from confluence.models import Candle, IndicatorSignal

INSUFFICIENT_DATA = "insufficient data"


class BandPositionAnalyzer:
    """Classifies where price sits inside the Bollinger envelope.

    Only the band edges produce a vote: at or below the lower threshold is
    oversold (BUY), at or above the upper threshold is overbought (SELL).
    """

    def __init__(
        self,
        lower_threshold: float = 0.05,
        upper_threshold: float = 0.95,
    ):
        """
        Args:
            lower_threshold: Position at or below which the signal is BUY
            upper_threshold: Position at or above which the signal is SELL
        """
        if lower_threshold >= upper_threshold:
            raise ValueError("lower_threshold must be below upper_threshold")
        self.lower_threshold = lower_threshold
        self.upper_threshold = upper_threshold

    def position(self, candle: Candle | None, price: float) -> float | None:
        """
        Get the unclamped band position of price (0 = lower, 1 = upper).

        Returns:
            Position, or None if the bands are missing or have no width
        """
        if candle is None or not candle.has_bands:
            return None
        return band_position(price, candle.bb_lower, candle.bb_upper)

    def display_position(self, candle: Candle | None, price: float) -> float | None:
        """Get the band position clamped to [0, 1]."""
        position = self.position(candle, price)
        if position is None:
            return None
        return max(0.0, min(1.0, position))

    def analyze_bands(self, candle: Candle | None, price: float) -> IndicatorSignal:
        """
        Classify price against the bands of the latest candle.

        Args:
            candle: Latest candle of the series (may be None)
            price: Current price

        Returns:
            BUY, SELL or NEUTRAL signal with its reason
        """
        if candle is None or not candle.has_bands or not math.isfinite(price):
            return IndicatorSignal.neutral(INSUFFICIENT_DATA)

        position = band_position(price, candle.bb_lower, candle.bb_upper)
        if position is None:
            return IndicatorSignal.neutral("band width is zero or negative")

        if position <= self.lower_threshold:
            return IndicatorSignal.buy("price at/below lower band — oversold")
        if position >= self.upper_threshold:
            return IndicatorSignal.sell("price at/above upper band — overbought")
        return IndicatorSignal.neutral("price within normal band range")


def analyze_bands(candle: Candle | None, price: float) -> IndicatorSignal:
    """Classify price against the bands with the default thresholds."""
    return BandPositionAnalyzer().analyze_bands(candle, price)
