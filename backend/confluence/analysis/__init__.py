"""Signal analyzers and confluence scoring.

Public API:
- SwingFibonacciAnalyzer / compute_levels: swing detection and retracement levels
- BandPositionAnalyzer / analyze_bands: Bollinger Band position signal
- FibonacciPositionAnalyzer / analyze_position: price vs. retracement levels
- ConfluenceScorer / score_confluence: weighted vote into BUY / SELL / HOLD
- TechnicalAnalyzer: the whole pipeline for one series snapshot
"""

from confluence.analysis.swing_fibonacci import SwingFibonacciAnalyzer, compute_levels
from confluence.analysis.bands import BandPositionAnalyzer, analyze_bands
from confluence.analysis.fibonacci_position import (
    FibonacciPositionAnalyzer,
    analyze_position,
)
from confluence.analysis.scorer import ConfluenceScorer, score_confluence
from confluence.analysis.oscillators import (
    moving_average_cross,
    rsi_signal,
    trend_signal,
)
from confluence.analysis.technical import (
    BandSnapshot,
    KeyLevel,
    TechnicalAnalysis,
    TechnicalAnalyzer,
    key_levels,
)

__all__ = [
    "SwingFibonacciAnalyzer",
    "compute_levels",
    "BandPositionAnalyzer",
    "analyze_bands",
    "FibonacciPositionAnalyzer",
    "analyze_position",
    "ConfluenceScorer",
    "score_confluence",
    "moving_average_cross",
    "rsi_signal",
    "trend_signal",
    "BandSnapshot",
    "KeyLevel",
    "TechnicalAnalysis",
    "TechnicalAnalyzer",
    "key_levels",
]
