"""Candle (price sample) data models."""

import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class Candle(BaseModel):
    """One sample of a price series, annotated with precomputed indicators.

    Indicator fields are optional: a missing value is ``None``, never a
    sentinel number. Field names also accept their camelCase form
    (``bbUpper``, ``bbMiddle``, ...) so series exported by JavaScript
    front-ends can be loaded as-is.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    close: float
    timestamp: datetime | None = None

    # Precomputed single-indicator values
    rsi: float | None = None
    ma20: float | None = None
    ma50: float | None = None
    bb_upper: float | None = None
    bb_middle: float | None = None
    bb_lower: float | None = None

    @field_validator("close")
    @classmethod
    def _close_must_be_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("close must be a finite number")
        return value

    @field_validator("rsi", "ma20", "ma50", "bb_upper", "bb_middle", "bb_lower")
    @classmethod
    def _nan_is_absent(cls, value: float | None) -> float | None:
        # Indicator warm-up periods produce NaN; store them as absent
        if value is not None and math.isnan(value):
            return None
        return value

    @property
    def has_bands(self) -> bool:
        """Check if all three Bollinger Band components are present."""
        return (
            self.bb_upper is not None
            and self.bb_middle is not None
            and self.bb_lower is not None
        )

    @property
    def band_width(self) -> float | None:
        """Get the distance between upper and lower band, if known."""
        if self.bb_upper is None or self.bb_lower is None:
            return None
        return self.bb_upper - self.bb_lower
