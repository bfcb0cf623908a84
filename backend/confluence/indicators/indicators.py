"""Technical indicator math (pure NumPy, no I/O).

Rolling indicators return a list the same length as the input, with NaN
for the warm-up values that cannot be computed yet. Callers that build
candles convert NaN to ``None``.
"""

from typing import Sequence

import numpy as np


def _to_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray([float(v) for v in values], dtype=np.float64)


def sma(values: Sequence[float], period: int) -> list[float]:
    """
    Calculate Simple Moving Average.

    Args:
        values: Sequence of price values
        period: SMA period

    Returns:
        List of SMA values (NaN for the first period - 1 values)
    """
    arr = _to_array(values)
    result = np.full(len(arr), np.nan)
    if len(arr) < period:
        return result.tolist()

    for i in range(period - 1, len(arr)):
        result[i] = np.mean(arr[i - period + 1 : i + 1])

    return result.tolist()


def rsi(values: Sequence[float], period: int = 14) -> list[float]:
    """
    Calculate Relative Strength Index with Wilder's smoothing.

    The first value is available at index ``period`` (one price change
    per bar is needed).

    Args:
        values: Sequence of close prices
        period: RSI period

    Returns:
        List of RSI values in [0, 100]
    """
    arr = _to_array(values)
    n = len(arr)
    result = np.full(n, np.nan)
    if n < period + 1:
        return result.tolist()

    deltas = np.diff(arr)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    # Seed with a simple average over the first period
    avg_gain = np.mean(gains[:period])
    avg_loss = np.mean(losses[:period])
    result[period] = _rsi_value(avg_gain, avg_loss)

    for i in range(period + 1, n):
        avg_gain = (avg_gain * (period - 1) + gains[i - 1]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i - 1]) / period
        result[i] = _rsi_value(avg_gain, avg_loss)

    return result.tolist()


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        # No losses: fully overbought, or flat when there were no gains either
        return 100.0 if avg_gain > 0 else 50.0
    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def bollinger_bands(
    values: Sequence[float],
    period: int = 20,
    std_dev: float = 2.0,
) -> tuple[list[float], list[float], list[float]]:
    """
    Calculate Bollinger Bands.

    Args:
        values: Sequence of close prices
        period: SMA period for the middle band
        std_dev: Standard deviation multiplier

    Returns:
        Tuple of (upper, middle, lower) lists
    """
    arr = _to_array(values)
    n = len(arr)
    upper = np.full(n, np.nan)
    middle = np.full(n, np.nan)
    lower = np.full(n, np.nan)

    for i in range(period - 1, n):
        window = arr[i - period + 1 : i + 1]
        mean = np.mean(window)
        std = np.std(window, ddof=0)  # Population std dev, like charting tools

        middle[i] = mean
        upper[i] = mean + std * std_dev
        lower[i] = mean - std * std_dev

    return upper.tolist(), middle.tolist(), lower.tolist()


def swing_extremes(values: Sequence[float]) -> tuple[float, int, float, int]:
    """
    Find the lowest and highest value of a window and where they occur.

    Ties resolve to the first occurrence.

    Args:
        values: Non-empty sequence of prices

    Returns:
        Tuple of (low, low_index, high, high_index)

    Raises:
        ValueError: If values is empty.
    """
    arr = _to_array(values)
    if len(arr) == 0:
        raise ValueError("swing_extremes() requires at least one value")

    low_index = int(np.argmin(arr))
    high_index = int(np.argmax(arr))
    return float(arr[low_index]), low_index, float(arr[high_index]), high_index


def retracement_levels(
    low: float,
    high: float,
    ratios: Sequence[float],
) -> list[float]:
    """
    Interpolate retracement levels between a swing low and a swing high.

    level = low + ratio * (high - low)

    Levels come out in the order of ``ratios``, clipped to [low, high] so
    that float rounding never pushes a level past the swing extremes.
    Ratios 0 and 1 map exactly to ``low`` and ``high``.

    Args:
        low: Swing low price
        high: Swing high price (>= low)
        ratios: Ratios in [0, 1]

    Returns:
        List of level prices
    """
    ratio_arr = np.asarray(ratios, dtype=np.float64)
    levels = np.clip(low + ratio_arr * (high - low), low, high)
    levels = np.where(ratio_arr == 0.0, low, levels)
    levels = np.where(ratio_arr == 1.0, high, levels)
    return [float(v) for v in levels]


def band_position(price: float, lower: float, upper: float) -> float | None:
    """
    Locate price inside a band envelope.

    0.0 is the lower band, 1.0 the upper band. The result is not clamped:
    a price outside the bands yields a value below 0 or above 1.

    Returns:
        Relative position, or None when the band has no width
    """
    width = upper - lower
    if width <= 0:
        return None
    return (price - lower) / width
