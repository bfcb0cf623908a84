"""Candle series sources.

A SeriesStore hands out snapshots of an annotated candle series in
ascending time order. Snapshots are copies, so an analysis never sees
the series change underneath it while new candles are being added.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import orjson
from pydantic import TypeAdapter

from confluence.models import Candle

logger = logging.getLogger(__name__)

_CANDLE_LIST = TypeAdapter(list[Candle])


def series_key(symbol: str, timeframe: str) -> str:
    """Key of a series: 'SYMBOL_TIMEFRAME'."""
    return f"{symbol.upper()}_{timeframe}"


@runtime_checkable
class SeriesStore(Protocol):
    """Protocol for candle series access."""

    async def fetch(self, symbol: str, timeframe: str) -> list[Candle]:
        """Get the series in ascending time order (empty if unknown)."""
        ...


class InMemorySeriesStore:
    """Bounded in-memory series per symbol/timeframe.

    Mirrors a live candle buffer: appending a candle with the same
    timestamp as the last one replaces it, older timestamps are ignored.
    """

    def __init__(self, max_size: int = 500):
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._series: dict[str, list[Candle]] = {}
        self._lock = asyncio.Lock()

    async def put(self, symbol: str, timeframe: str, candles: list[Candle]) -> None:
        """Replace a whole series."""
        async with self._lock:
            self._series[series_key(symbol, timeframe)] = list(candles[-self.max_size:])

    async def append(self, symbol: str, timeframe: str, candle: Candle) -> None:
        """Add a candle to a series, maintaining max size."""
        async with self._lock:
            series = self._series.setdefault(series_key(symbol, timeframe), [])
            last = series[-1] if series else None

            if last is not None and candle.timestamp is not None and last.timestamp is not None:
                if candle.timestamp < last.timestamp:
                    return
                if candle.timestamp == last.timestamp:
                    # Update of the still-forming candle
                    series[-1] = candle
                    return

            series.append(candle)
            if len(series) > self.max_size:
                del series[: len(series) - self.max_size]

    async def fetch(self, symbol: str, timeframe: str) -> list[Candle]:
        async with self._lock:
            return list(self._series.get(series_key(symbol, timeframe), []))

    def __len__(self) -> int:
        return len(self._series)


class JsonFileSeriesStore:
    """Series stored as JSON arrays of candles, one file per series.

    File layout: ``<directory>/<SYMBOL>_<timeframe>.json``. Candle keys may
    be snake_case or camelCase.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, symbol: str, timeframe: str) -> Path:
        return self.directory / f"{series_key(symbol, timeframe)}.json"

    async def fetch(self, symbol: str, timeframe: str) -> list[Candle]:
        path = self.path_for(symbol, timeframe)
        return await asyncio.to_thread(self._read, path)

    def _read(self, path: Path) -> list[Candle]:
        if not path.exists():
            logger.warning("No series file at %s", path)
            return []

        candles = _CANDLE_LIST.validate_python(orjson.loads(path.read_bytes()))
        logger.debug("Loaded %d candles from %s", len(candles), path)
        return candles

    async def save(self, symbol: str, timeframe: str, candles: list[Candle]) -> Path:
        """Write a series file (used to export enriched series)."""
        path = self.path_for(symbol, timeframe)
        data = [c.model_dump(mode="json", exclude_none=True) for c in candles]
        await asyncio.to_thread(self._write, path, orjson.dumps(data))
        return path

    def _write(self, path: Path, payload: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
