"""Tests for data models."""

import pytest
from pydantic import ValidationError

from confluence.models import Candle, ConfluenceResult, ConfluenceScores, IndicatorSignal, SignalKind


class TestCandle:
    """Tests for Candle model."""

    def test_optional_fields_default_to_none(self):
        candle = Candle(close=100.0)

        assert candle.rsi is None
        assert candle.ma20 is None
        assert not candle.has_bands
        assert candle.band_width is None

    def test_nan_indicator_is_absent(self):
        candle = Candle(close=100.0, rsi=float("nan"), bb_upper=float("nan"))

        assert candle.rsi is None
        assert candle.bb_upper is None

    def test_non_finite_close_rejected(self):
        with pytest.raises(ValidationError):
            Candle(close=float("nan"))

    def test_camel_case_aliases(self):
        candle = Candle.model_validate(
            {"close": 100.0, "bbUpper": 110.0, "bbMiddle": 100.0, "bbLower": 90.0}
        )

        assert candle.has_bands
        assert candle.band_width == 20.0

    def test_is_immutable(self):
        candle = Candle(close=100.0)

        with pytest.raises(ValidationError):
            candle.close = 101.0


class TestIndicatorSignal:

    def test_constructors(self):
        assert IndicatorSignal.buy("x").kind == SignalKind.BUY
        assert IndicatorSignal.sell("x").kind == SignalKind.SELL
        assert IndicatorSignal.neutral("x").is_neutral
        assert not IndicatorSignal.buy("x").is_neutral


class TestConfluenceResult:

    @pytest.mark.parametrize("confidence", [-1, 101])
    def test_confidence_bounds(self, confidence):
        with pytest.raises(ValidationError):
            ConfluenceResult(action="HOLD", confidence=confidence, scores=ConfluenceScores())
