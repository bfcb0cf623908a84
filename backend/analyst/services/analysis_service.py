"""Analysis service: fetches a series snapshot and runs the engine on it.

All I/O happens in the series store before the engine is invoked; the
engine itself is synchronous and keeps no state between calls.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from confluence.analysis import TechnicalAnalysis, TechnicalAnalyzer
from confluence.models import DEFAULT_SCORING_CONFIG, ScoringConfig

from analyst.services.enricher import enrich_candles
from analyst.storage.series_store import SeriesStore

logger = logging.getLogger(__name__)


@dataclass
class AnalysisRequest:
    """Market snapshot to analyze.

    Attributes:
        symbol: Asset symbol (e.g., 'BTCUSDT').
        price: Current price, may be newer than the last candle close.
        change_24h: 24h price change in percent.
    """

    symbol: str
    price: float
    change_24h: float | None = None


class AnalysisService:
    """Runs technical analysis for symbols backed by a series store."""

    def __init__(
        self,
        store: SeriesStore,
        config: ScoringConfig = DEFAULT_SCORING_CONFIG,
        timeframe: str = "1h",
        enrich: bool = False,
    ):
        """
        Args:
            store: Source of candle series
            config: Scoring weights and thresholds
            timeframe: Series timeframe to analyze
            enrich: Compute RSI/MA/Bollinger values from closes before analysis
        """
        self.store = store
        self.timeframe = timeframe
        self.enrich = enrich
        self.analyzer = TechnicalAnalyzer(config)

    async def analyze(
        self,
        symbol: str,
        price: float,
        change_24h: float | None = None,
    ) -> TechnicalAnalysis | None:
        """
        Analyze the current state of one symbol.

        Returns:
            TechnicalAnalysis, or None when no series data is available
        """
        series = await self.store.fetch(symbol, self.timeframe)
        if self.enrich:
            series = enrich_candles(series)

        analysis = self.analyzer.analyze(series, price, change_24h)
        if analysis is None:
            logger.info("%s %s: no series data, analysis skipped", symbol, self.timeframe)
            return None

        logger.info(
            "%s %s: %s (confidence %d%%, buy=%d sell=%d)",
            symbol,
            self.timeframe,
            analysis.confluence.action.value,
            analysis.confluence.confidence,
            analysis.confluence.scores.buy,
            analysis.confluence.scores.sell,
        )
        return analysis

    async def analyze_many(
        self,
        requests: list[AnalysisRequest],
    ) -> dict[str, TechnicalAnalysis | None]:
        """Analyze several symbols concurrently, keyed by symbol."""
        results = await asyncio.gather(
            *(self.analyze(r.symbol, r.price, r.change_24h) for r in requests)
        )
        return {r.symbol: result for r, result in zip(requests, results)}
