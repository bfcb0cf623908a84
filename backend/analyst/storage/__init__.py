"""Candle series storage."""

from analyst.storage.series_store import (
    InMemorySeriesStore,
    JsonFileSeriesStore,
    SeriesStore,
    series_key,
)

__all__ = [
    "InMemorySeriesStore",
    "JsonFileSeriesStore",
    "SeriesStore",
    "series_key",
]
