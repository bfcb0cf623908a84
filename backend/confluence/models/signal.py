"""Signal, retracement and confluence data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Canonical retracement ratios, index 0..6
FIB_RATIOS: tuple[float, ...] = (0.0, 0.236, 0.382, 0.5, 0.618, 0.786, 1.0)

# Level indexes with a special meaning
SWING_LOW_INDEX = 0
GOLDEN_RATIO_INDEX = 4
SWING_HIGH_INDEX = 6


class Trend(str, Enum):
    """Direction of the swing inside the lookback window."""

    UPTREND = "UPTREND"  # Swing low came first, then the swing high
    DOWNTREND = "DOWNTREND"  # Swing high came first, then the swing low
    UNKNOWN = "UNKNOWN"


class SignalKind(str, Enum):
    """Per-indicator signal."""

    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"
    NEUTRAL = "NEUTRAL"


class Action(str, Enum):
    """Final action emitted by the confluence scorer."""

    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class IndicatorSignal(BaseModel):
    """Directional vote of a single indicator with its justification."""

    model_config = ConfigDict(frozen=True)

    kind: SignalKind
    reason: str

    @classmethod
    def buy(cls, reason: str) -> "IndicatorSignal":
        return cls(kind=SignalKind.BUY, reason=reason)

    @classmethod
    def sell(cls, reason: str) -> "IndicatorSignal":
        return cls(kind=SignalKind.SELL, reason=reason)

    @classmethod
    def neutral(cls, reason: str) -> "IndicatorSignal":
        return cls(kind=SignalKind.NEUTRAL, reason=reason)

    @property
    def is_neutral(self) -> bool:
        """Check if this signal casts no directional vote."""
        return self.kind not in (SignalKind.BUY, SignalKind.SELL)


class FibonacciLevels(BaseModel):
    """Retracement levels between the swing low and swing high of a window.

    ``levels`` always holds seven prices in ascending order, one per ratio
    in ``FIB_RATIOS``, whatever the trend: level 0 is the swing low and
    level 6 the swing high.
    """

    model_config = ConfigDict(frozen=True)

    trend: Trend
    levels: tuple[float, ...]
    swing_low_index: int | None = None  # Position inside the window
    swing_high_index: int | None = None

    @model_validator(mode="after")
    def _validate_levels(self):
        if len(self.levels) != len(FIB_RATIOS):
            raise ValueError(
                f"expected {len(FIB_RATIOS)} levels, got {len(self.levels)}"
            )
        for lower, upper in zip(self.levels, self.levels[1:]):
            if upper < lower:
                raise ValueError("levels must be in non-decreasing order")
        return self

    @property
    def swing_low(self) -> float:
        return self.levels[SWING_LOW_INDEX]

    @property
    def swing_high(self) -> float:
        return self.levels[SWING_HIGH_INDEX]

    @property
    def golden_ratio(self) -> float:
        """Get the 61.8% retracement level."""
        return self.levels[GOLDEN_RATIO_INDEX]

    @property
    def range_size(self) -> float:
        return self.swing_high - self.swing_low

    @property
    def is_flat(self) -> bool:
        """Check if the window had no price range (all levels equal)."""
        return self.range_size == 0

    def level_for(self, ratio: float) -> float:
        """Get the level for one of the canonical ratios."""
        return self.levels[FIB_RATIOS.index(ratio)]


class ConfluenceScores(BaseModel):
    """Accumulated weighted votes per side."""

    model_config = ConfigDict(frozen=True)

    buy: int = 0
    sell: int = 0


class ConfluenceInputs(BaseModel):
    """Signals fed into the confluence scorer. Every field may be absent."""

    model_config = ConfigDict(frozen=True)

    rsi: float | None = None
    band_signal: IndicatorSignal | None = None
    fibonacci_signal: IndicatorSignal | None = None
    change_24h: float | None = None  # Percentage


class ConfluenceResult(BaseModel):
    """Final trading signal with confidence and reason trail."""

    model_config = ConfigDict(frozen=True)

    action: Action
    confidence: int = Field(ge=0, le=100)
    scores: ConfluenceScores
    reasons: tuple[str, ...] = ()
