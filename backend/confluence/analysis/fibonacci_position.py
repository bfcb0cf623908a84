"""Price position relative to Fibonacci retracement levels."""

import math

from confluence.models import FibonacciLevels, IndicatorSignal


class FibonacciPositionAnalyzer:
    """Classifies the current price against retracement levels.

    Checks run in priority order:
    1. near the 61.8% level (golden ratio): BUY, bounce zone
    2. near the 100% level (swing high): SELL, resistance
    3. below the 0% level (swing low): BUY, contrarian below support
    4. above the 100% level: SELL, extended above resistance
    """

    def __init__(self, tolerance: float = 0.02):
        """
        Args:
            tolerance: Relative distance (as ratio of price) counted as "near"
        """
        if tolerance <= 0:
            raise ValueError("tolerance must be positive")
        self.tolerance = tolerance

    def is_near(self, price: float, level: float) -> bool:
        """Check if price is within tolerance of a level."""
        return abs(price - level) / price < self.tolerance

    def analyze_position(
        self,
        price: float,
        levels: FibonacciLevels | None,
    ) -> IndicatorSignal:
        """
        Classify price against the levels.

        Args:
            price: Current price
            levels: Retracement levels, or None when unavailable

        Returns:
            BUY, SELL or NEUTRAL signal with its reason
        """
        if levels is None:
            return IndicatorSignal.neutral("insufficient data")
        if not math.isfinite(price) or price <= 0:
            return IndicatorSignal.neutral("invalid price")
        if levels.is_flat:
            # Every level is the same price: proximity carries no information
            return IndicatorSignal.neutral("flat price window, no retracement range")

        golden = levels.golden_ratio
        swing_high = levels.swing_high

        if self.is_near(price, golden):
            return IndicatorSignal.buy(
                f"price near 61.8% golden ratio level ({golden:.2f}), bounce zone"
            )
        if self.is_near(price, swing_high):
            return IndicatorSignal.sell(
                f"price near swing high ({swing_high:.2f}), resistance"
            )
        if price < levels.swing_low:
            return IndicatorSignal.buy(
                f"price below swing low ({levels.swing_low:.2f}), contrarian buy zone"
            )
        if price > swing_high:
            return IndicatorSignal.sell(
                f"price above swing high ({swing_high:.2f}), extended above resistance"
            )
        return IndicatorSignal.neutral("price between retracement levels")


def analyze_position(price: float, levels: FibonacciLevels | None) -> IndicatorSignal:
    """Classify price against the levels with the default tolerance."""
    return FibonacciPositionAnalyzer().analyze_position(price, levels)
