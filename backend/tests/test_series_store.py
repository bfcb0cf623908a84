"""Tests for candle series stores."""

from datetime import datetime, timedelta, timezone

import orjson
import pytest
from pydantic import ValidationError

from analyst.storage import InMemorySeriesStore, JsonFileSeriesStore, SeriesStore, series_key
from confluence.models import Candle

T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


def candle_at(hour: int, close: float) -> Candle:
    return Candle(close=close, timestamp=T0 + timedelta(hours=hour))


class TestSeriesKey:

    def test_key_format(self):
        assert series_key("btcusdt", "1h") == "BTCUSDT_1h"


class TestInMemorySeriesStore:
    """Tests for InMemorySeriesStore."""

    def test_satisfies_protocol(self):
        assert isinstance(InMemorySeriesStore(), SeriesStore)

    @pytest.mark.asyncio
    async def test_fetch_unknown_is_empty(self):
        store = InMemorySeriesStore()

        assert await store.fetch("BTCUSDT", "1h") == []

    @pytest.mark.asyncio
    async def test_put_and_fetch(self):
        store = InMemorySeriesStore()
        candles = [candle_at(i, 100.0 + i) for i in range(3)]
        await store.put("BTCUSDT", "1h", candles)

        assert await store.fetch("BTCUSDT", "1h") == candles
        assert await store.fetch("BTCUSDT", "4h") == []

    @pytest.mark.asyncio
    async def test_fetch_returns_snapshot(self):
        store = InMemorySeriesStore()
        await store.put("BTCUSDT", "1h", [candle_at(0, 100.0)])

        snapshot = await store.fetch("BTCUSDT", "1h")
        await store.append("BTCUSDT", "1h", candle_at(1, 101.0))

        assert len(snapshot) == 1
        assert len(await store.fetch("BTCUSDT", "1h")) == 2

    @pytest.mark.asyncio
    async def test_append_same_timestamp_replaces(self):
        store = InMemorySeriesStore()
        await store.append("BTCUSDT", "1h", candle_at(0, 100.0))
        await store.append("BTCUSDT", "1h", candle_at(0, 102.0))

        series = await store.fetch("BTCUSDT", "1h")
        assert len(series) == 1
        assert series[0].close == 102.0

    @pytest.mark.asyncio
    async def test_append_older_timestamp_ignored(self):
        store = InMemorySeriesStore()
        await store.append("BTCUSDT", "1h", candle_at(5, 100.0))
        await store.append("BTCUSDT", "1h", candle_at(4, 90.0))

        series = await store.fetch("BTCUSDT", "1h")
        assert [c.close for c in series] == [100.0]

    @pytest.mark.asyncio
    async def test_max_size(self):
        store = InMemorySeriesStore(max_size=3)
        for i in range(5):
            await store.append("BTCUSDT", "1h", candle_at(i, float(i)))

        series = await store.fetch("BTCUSDT", "1h")
        assert [c.close for c in series] == [2.0, 3.0, 4.0]

    @pytest.mark.parametrize("max_size", [0, -1])
    def test_non_positive_max_size_rejected(self, max_size):
        with pytest.raises(ValueError):
            InMemorySeriesStore(max_size=max_size)

    @pytest.mark.asyncio
    async def test_put_keeps_latest_max_size(self):
        store = InMemorySeriesStore(max_size=1)
        await store.put("BTCUSDT", "1h", [candle_at(0, 1.0), candle_at(1, 2.0)])

        series = await store.fetch("BTCUSDT", "1h")
        assert [c.close for c in series] == [2.0]


class TestJsonFileSeriesStore:
    """Tests for JsonFileSeriesStore."""

    @pytest.mark.asyncio
    async def test_missing_file_is_empty(self, tmp_path):
        store = JsonFileSeriesStore(tmp_path)

        assert await store.fetch("BTCUSDT", "1h") == []

    @pytest.mark.asyncio
    async def test_reads_camel_case_keys(self, tmp_path):
        data = [
            {"close": 100.0},
            {"close": 101.0, "rsi": 42.0, "bbUpper": 110.0, "bbMiddle": 100.0, "bbLower": 90.0},
        ]
        (tmp_path / "BTCUSDT_1h.json").write_bytes(orjson.dumps(data))

        series = await JsonFileSeriesStore(tmp_path).fetch("BTCUSDT", "1h")

        assert len(series) == 2
        assert series[0].rsi is None
        assert series[1].bb_upper == 110.0
        assert series[1].has_bands

    @pytest.mark.asyncio
    async def test_save_round_trip(self, tmp_path):
        store = JsonFileSeriesStore(tmp_path / "series")
        candles = [candle_at(0, 100.0), Candle(close=101.0, ma20=100.5, timestamp=T0)]

        path = await store.save("ETHUSDT", "1h", candles)

        assert path.name == "ETHUSDT_1h.json"
        assert await store.fetch("ETHUSDT", "1h") == candles

    @pytest.mark.asyncio
    async def test_invalid_candle_raises(self, tmp_path):
        (tmp_path / "BTCUSDT_1h.json").write_bytes(orjson.dumps([{"rsi": 50.0}]))

        with pytest.raises(ValidationError):
            await JsonFileSeriesStore(tmp_path).fetch("BTCUSDT", "1h")
