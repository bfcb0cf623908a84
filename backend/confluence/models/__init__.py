"""Data models."""

from confluence.models.candle import Candle
from confluence.models.signal import (
    FIB_RATIOS,
    GOLDEN_RATIO_INDEX,
    SWING_HIGH_INDEX,
    SWING_LOW_INDEX,
    Action,
    ConfluenceInputs,
    ConfluenceResult,
    ConfluenceScores,
    FibonacciLevels,
    IndicatorSignal,
    SignalKind,
    Trend,
)
from confluence.models.config import DEFAULT_SCORING_CONFIG, ScoringConfig

__all__ = [
    "Candle",
    "FIB_RATIOS",
    "GOLDEN_RATIO_INDEX",
    "SWING_HIGH_INDEX",
    "SWING_LOW_INDEX",
    "Action",
    "ConfluenceInputs",
    "ConfluenceResult",
    "ConfluenceScores",
    "FibonacciLevels",
    "IndicatorSignal",
    "SignalKind",
    "Trend",
    "DEFAULT_SCORING_CONFIG",
    "ScoringConfig",
]
