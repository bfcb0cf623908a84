"""Scoring configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScoringConfig(BaseModel):
    """Weights and thresholds of the confluence policy.

    The defaults reproduce the policy the front-end signal panel was built
    around: RSI counts double, every other indicator counts once.
    """

    model_config = ConfigDict(frozen=True)

    # RSI zones
    rsi_oversold: float = 30.0
    rsi_overbought: float = 70.0

    # Vote weights
    rsi_weight: int = Field(default=2, ge=0)
    band_weight: int = Field(default=1, ge=0)
    fibonacci_weight: int = Field(default=1, ge=0)
    momentum_weight: int = Field(default=1, ge=0)

    # 24h change (percent) needed for a momentum vote, both directions
    momentum_threshold: float = Field(default=5.0, gt=0)

    # Band position (0 = lower band, 1 = upper band) at which the band signal fires
    band_lower_threshold: float = 0.05
    band_upper_threshold: float = 0.95

    # Relative distance for price to count as "near" a retracement level
    fibonacci_tolerance: float = Field(default=0.02, gt=0)

    # Trailing window used for swing detection
    lookback: int = Field(default=100, gt=0)

    @model_validator(mode="after")
    def _validate_zones(self):
        if self.rsi_oversold >= self.rsi_overbought:
            raise ValueError("rsi_oversold must be below rsi_overbought")
        if self.band_lower_threshold >= self.band_upper_threshold:
            raise ValueError("band_lower_threshold must be below band_upper_threshold")
        return self

    @property
    def max_score(self) -> int:
        """Highest score one side can reach when every indicator agrees."""
        return (
            self.rsi_weight
            + self.band_weight
            + self.fibonacci_weight
            + self.momentum_weight
        )


DEFAULT_SCORING_CONFIG = ScoringConfig()
