"""Full technical analysis of one series snapshot.

Runs the whole pipeline (swing levels, band and Fibonacci signals,
confluence scoring) for a series, a current price and a 24h change, and
bundles every intermediate value a presentation layer may want to show.
"""

from __future__ import annotations

import logging
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from confluence.analysis.bands import BandPositionAnalyzer
from confluence.analysis.fibonacci_position import FibonacciPositionAnalyzer
from confluence.analysis.oscillators import moving_average_cross, rsi_signal, trend_signal
from confluence.analysis.scorer import ConfluenceScorer
from confluence.analysis.swing_fibonacci import SwingFibonacciAnalyzer
from confluence.errors import InsufficientDataError
from confluence.models import (
    DEFAULT_SCORING_CONFIG,
    FIB_RATIOS,
    Candle,
    ConfluenceInputs,
    ConfluenceResult,
    FibonacciLevels,
    IndicatorSignal,
    ScoringConfig,
)

logger = logging.getLogger(__name__)

_LEVEL_LABELS = {
    1.0: "Swing High (100%)",
    0.786: "78.6%",
    0.618: "Golden Ratio (61.8%)",
    0.5: "50%",
    0.382: "38.2%",
    0.236: "23.6%",
    0.0: "Swing Low (0%)",
}


class KeyLevel(BaseModel):
    """A retracement level annotated with its proximity to price."""

    model_config = ConfigDict(frozen=True)

    label: str
    ratio: float
    price: float
    is_near: bool


class BandSnapshot(BaseModel):
    """Bollinger Band values of the latest candle and the derived signal."""

    model_config = ConfigDict(frozen=True)

    upper: float | None = None
    middle: float | None = None
    lower: float | None = None
    position: float | None = None  # Unclamped, 0 = lower band, 1 = upper band
    display_position: float | None = None  # Clamped to [0, 1]
    signal: IndicatorSignal


class TechnicalAnalysis(BaseModel):
    """Everything computed for one snapshot."""

    model_config = ConfigDict(frozen=True)

    confluence: ConfluenceResult
    rsi: float | None = None
    rsi_signal: IndicatorSignal
    fibonacci: FibonacciLevels
    trend_signal: IndicatorSignal
    fibonacci_signal: IndicatorSignal
    bands: BandSnapshot
    ma20: float | None = None
    ma50: float | None = None
    ma_cross: IndicatorSignal
    key_levels: tuple[KeyLevel, ...] = ()


def key_levels(
    levels: FibonacciLevels,
    price: float,
    tolerance: float = 0.02,
) -> tuple[KeyLevel, ...]:
    """List the levels from swing high down to swing low, flagging those near price."""
    result = []
    for ratio, level in sorted(zip(FIB_RATIOS, levels.levels), reverse=True):
        is_near = price > 0 and abs(level - price) / price < tolerance
        result.append(
            KeyLevel(label=_LEVEL_LABELS[ratio], ratio=ratio, price=level, is_near=is_near)
        )
    return tuple(result)


class TechnicalAnalyzer:
    """Runs every analyzer over a series snapshot with one scoring config."""

    def __init__(self, config: ScoringConfig = DEFAULT_SCORING_CONFIG):
        self.config = config
        self.swing_analyzer = SwingFibonacciAnalyzer(config.lookback)
        self.band_analyzer = BandPositionAnalyzer(
            lower_threshold=config.band_lower_threshold,
            upper_threshold=config.band_upper_threshold,
        )
        self.fibonacci_analyzer = FibonacciPositionAnalyzer(config.fibonacci_tolerance)
        self.scorer = ConfluenceScorer(config)

    def analyze(
        self,
        series: Sequence[Candle],
        price: float,
        change_24h: float | None = None,
        lookback: int | None = None,
    ) -> TechnicalAnalysis | None:
        """
        Analyze a series snapshot.

        Args:
            series: Candles in ascending time order
            price: Current price (may be newer than the last close)
            change_24h: 24h price change in percent
            lookback: Swing window override

        Returns:
            TechnicalAnalysis, or None when the series holds no data
        """
        try:
            fibonacci = self.swing_analyzer.compute_levels(series, lookback)
        except InsufficientDataError as e:
            logger.debug("Skipping analysis: %s", e)
            return None

        latest = series[-1]
        band_signal = self.band_analyzer.analyze_bands(latest, price)
        fibonacci_signal = self.fibonacci_analyzer.analyze_position(price, fibonacci)

        confluence = self.scorer.score(
            ConfluenceInputs(
                rsi=latest.rsi,
                band_signal=band_signal,
                fibonacci_signal=fibonacci_signal,
                change_24h=change_24h,
            )
        )

        bands = BandSnapshot(
            upper=latest.bb_upper,
            middle=latest.bb_middle,
            lower=latest.bb_lower,
            position=self.band_analyzer.position(latest, price),
            display_position=self.band_analyzer.display_position(latest, price),
            signal=band_signal,
        )

        return TechnicalAnalysis(
            confluence=confluence,
            rsi=latest.rsi,
            rsi_signal=rsi_signal(
                latest.rsi, self.config.rsi_oversold, self.config.rsi_overbought
            ),
            fibonacci=fibonacci,
            trend_signal=trend_signal(fibonacci),
            fibonacci_signal=fibonacci_signal,
            bands=bands,
            ma20=latest.ma20,
            ma50=latest.ma50,
            ma_cross=moving_average_cross(latest.ma20, latest.ma50),
            key_levels=key_levels(fibonacci, price, self.config.fibonacci_tolerance),
        )
