"""Application configuration.

Runtime settings come from environment variables (prefix ``CONFLUENCE_``)
or a ``.env`` file. The scoring policy can be overridden by a YAML file:

    rsi_weight: 2
    momentum_threshold: 4.0
    band_lower_threshold: 0.1
"""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from confluence.models.config import ScoringConfig

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CONFLUENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Series
    timeframe: str = "1h"
    lookback: int = 100
    data_dir: str = "data"

    # Optional YAML file with ScoringConfig overrides
    scoring_config_path: str | None = None

    log_level: str = "INFO"

    def scoring_config(self) -> ScoringConfig:
        """Build the scoring config, with this lookback as the swing window."""
        path = Path(self.scoring_config_path) if self.scoring_config_path else None
        return build_scoring_config(path, self.lookback)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_scoring_config(path: Path | None = None) -> ScoringConfig:
    """Load scoring weights and thresholds from a YAML file.

    Falls back to the default policy if no path is given or the file
    doesn't exist.
    """
    if path is None:
        return ScoringConfig()

    if not path.exists():
        logger.info("No scoring config found at %s, using defaults", path)
        return ScoringConfig()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = ScoringConfig(**raw)
    logger.info(
        "Loaded scoring config from %s: weights rsi=%d bb=%d fib=%d momentum=%d",
        path,
        config.rsi_weight,
        config.band_weight,
        config.fibonacci_weight,
        config.momentum_weight,
    )
    return config


def build_scoring_config(path: Path | None, lookback: int) -> ScoringConfig:
    """Load the scoring config and set the swing window.

    The given lookback always wins over one found in the YAML file.
    """
    config = load_scoring_config(path)
    return ScoringConfig(**{**config.model_dump(), "lookback": lookback})
