"""Informational indicator readings shown next to the confluence result.

These signals describe RSI zones, the MA20/MA50 cross and the swing trend.
They are not part of the confluence score.
"""

from confluence.models import FibonacciLevels, IndicatorSignal, Trend

INSUFFICIENT_DATA = "insufficient data"

# RSI band treated as "no clear signal"
RSI_NEUTRAL_LOW = 45.0
RSI_NEUTRAL_HIGH = 55.0


def rsi_signal(
    rsi: float | None,
    oversold: float = 30.0,
    overbought: float = 70.0,
) -> IndicatorSignal:
    """Classify an RSI reading into a zone."""
    if rsi is None:
        return IndicatorSignal.neutral(INSUFFICIENT_DATA)
    if rsi < oversold:
        return IndicatorSignal.buy("oversold zone, potential buy signal")
    if rsi > overbought:
        return IndicatorSignal.sell("overbought zone, potential sell signal")
    if RSI_NEUTRAL_LOW <= rsi <= RSI_NEUTRAL_HIGH:
        return IndicatorSignal.neutral("neutral zone, no clear signal")
    if rsi < 50:
        return IndicatorSignal.neutral("slightly bearish")
    return IndicatorSignal.neutral("slightly bullish")


def moving_average_cross(ma20: float | None, ma50: float | None) -> IndicatorSignal:
    """
    Compare the fast and slow moving averages.

    MA20 above MA50 is a golden cross (BUY), below is a death cross (SELL).
    The reason carries the gap as a percentage of MA50.
    """
    if not ma20 or not ma50:
        return IndicatorSignal.neutral(INSUFFICIENT_DATA)

    gap_pct = (ma20 - ma50) / ma50 * 100
    if ma20 > ma50:
        return IndicatorSignal.buy(f"golden cross, MA20 above MA50 ({gap_pct:+.2f}%)")
    if ma20 < ma50:
        return IndicatorSignal.sell(f"death cross, MA20 below MA50 ({gap_pct:+.2f}%)")
    return IndicatorSignal.neutral("moving averages aligned")


def trend_signal(levels: FibonacciLevels | None) -> IndicatorSignal:
    """Map the swing trend to a directional signal."""
    if levels is None or levels.trend == Trend.UNKNOWN:
        return IndicatorSignal.neutral("trend undetermined")
    if levels.trend == Trend.UPTREND:
        return IndicatorSignal.buy("uptrend, swing high formed after swing low")
    return IndicatorSignal.sell("downtrend, swing low formed after swing high")
