"""Services."""

from analyst.services.analysis_service import AnalysisRequest, AnalysisService
from analyst.services.enricher import enrich_candles

__all__ = [
    "AnalysisRequest",
    "AnalysisService",
    "enrich_candles",
]
