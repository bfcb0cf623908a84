"""Tests for confluence scoring."""

import itertools

import pytest

from confluence.analysis import ConfluenceScorer, score_confluence
from confluence.models import (
    Action,
    ConfluenceInputs,
    IndicatorSignal,
    ScoringConfig,
    SignalKind,
)

BUY = IndicatorSignal.buy("buy reason")
SELL = IndicatorSignal.sell("sell reason")
NEUTRAL = IndicatorSignal.neutral("neutral reason")


class TestScenarios:
    """Reference scenarios of the default policy."""

    def test_full_buy_confluence(self):
        result = score_confluence(rsi=25, band_signal=BUY, fibonacci_signal=BUY, change_24h=6)

        assert result.scores.buy == 5
        assert result.scores.sell == 0
        assert result.action == Action.BUY
        assert result.confidence == 100

    def test_no_signal_is_hold_zero(self):
        result = score_confluence(
            rsi=50, band_signal=NEUTRAL, fibonacci_signal=NEUTRAL, change_24h=0
        )

        assert (result.scores.buy, result.scores.sell) == (0, 0)
        assert result.action == Action.HOLD
        assert result.confidence == 0
        assert result.reasons == ()

    def test_sell_confluence(self):
        result = score_confluence(
            rsi=80, band_signal=SELL, fibonacci_signal=NEUTRAL, change_24h=-6
        )

        assert (result.scores.buy, result.scores.sell) == (0, 4)
        assert result.action == Action.SELL
        assert result.confidence == 80


class TestVoting:
    """Tests for individual votes and the reason trail."""

    def test_rsi_thresholds_are_strict(self):
        assert score_confluence(rsi=30).scores.buy == 0
        assert score_confluence(rsi=70).scores.sell == 0
        assert score_confluence(rsi=29.9).scores.buy == 2
        assert score_confluence(rsi=70.1).scores.sell == 2

    def test_momentum_thresholds_are_inclusive(self):
        assert score_confluence(change_24h=5).scores.buy == 1
        assert score_confluence(change_24h=-5).scores.sell == 1
        assert score_confluence(change_24h=4.99).scores.buy == 0
        assert score_confluence(change_24h=-4.99).scores.sell == 0

    def test_reasons_follow_evaluation_order(self):
        result = score_confluence(rsi=20, band_signal=SELL, fibonacci_signal=BUY, change_24h=-8)

        assert len(result.reasons) == 4
        assert result.reasons[0].startswith("RSI")
        assert result.reasons[1] == "Bollinger Bands: sell reason"
        assert result.reasons[2] == "Fibonacci: buy reason"
        assert "momentum" in result.reasons[3]

    def test_neutral_votes_add_no_reason(self):
        result = score_confluence(rsi=20, band_signal=NEUTRAL, fibonacci_signal=NEUTRAL)

        assert len(result.reasons) == 1

    def test_hold_signal_casts_no_vote(self):
        hold = IndicatorSignal(kind=SignalKind.HOLD, reason="hold")
        result = score_confluence(band_signal=hold, fibonacci_signal=hold)

        assert (result.scores.buy, result.scores.sell) == (0, 0)

    def test_tie_is_hold(self):
        result = score_confluence(rsi=20, band_signal=SELL, fibonacci_signal=SELL)

        assert (result.scores.buy, result.scores.sell) == (2, 2)
        assert result.action == Action.HOLD
        assert result.confidence == 40


class TestMissingInputs:
    """Missing inputs degrade to no vote, never to an error."""

    def test_all_missing(self):
        result = ConfluenceScorer().score(ConfluenceInputs())

        assert result.action == Action.HOLD
        assert result.confidence == 0

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_numbers_cast_no_vote(self, value):
        result = score_confluence(rsi=value, change_24h=value)

        assert (result.scores.buy, result.scores.sell) == (0, 0)

    def test_omitting_rsi_keeps_remaining_direction(self):
        signals = [BUY, SELL, NEUTRAL, None]
        for band, fib, change in itertools.product(signals, signals, [-6.0, 0.0, 6.0, None]):
            without = score_confluence(band_signal=band, fibonacci_signal=fib, change_24h=change)
            for rsi in (None, 20.0, 50.0, 80.0):
                with_rsi = score_confluence(
                    rsi=rsi, band_signal=band, fibonacci_signal=fib, change_24h=change
                )
                rsi_delta = with_rsi.scores.buy - with_rsi.scores.sell
                base_delta = without.scores.buy - without.scores.sell
                assert rsi_delta - base_delta in (-2, 0, 2)


class TestProperties:
    """Invariants over the whole input space."""

    def test_confidence_range_and_hold_iff_tie(self):
        signals = [BUY, SELL, NEUTRAL, None]
        for rsi, band, fib, change in itertools.product(
            [None, 10.0, 50.0, 90.0], signals, signals, [None, -7.0, 0.0, 7.0]
        ):
            result = score_confluence(
                rsi=rsi, band_signal=band, fibonacci_signal=fib, change_24h=change
            )

            assert 0 <= result.confidence <= 100
            assert (result.action == Action.HOLD) == (result.scores.buy == result.scores.sell)

    def test_deterministic(self):
        inputs = ConfluenceInputs(rsi=25, band_signal=BUY, fibonacci_signal=SELL, change_24h=-5)
        scorer = ConfluenceScorer()

        assert scorer.score(inputs) == scorer.score(inputs)


class TestCustomConfig:
    """Tests for non-default weights."""

    def test_weights_change_max_score(self):
        config = ScoringConfig(rsi_weight=1, band_weight=1, fibonacci_weight=1, momentum_weight=1)
        result = score_confluence(rsi=20, config=config)

        assert result.scores.buy == 1
        assert result.confidence == 25

    def test_confidence_rounds_half_up(self):
        # 1 of 8 = 12.5%
        config = ScoringConfig(rsi_weight=5, band_weight=1, fibonacci_weight=1, momentum_weight=1)
        result = score_confluence(band_signal=BUY, config=config)

        assert result.confidence == 13

    def test_zero_weights_give_zero_confidence(self):
        config = ScoringConfig(rsi_weight=0, band_weight=0, fibonacci_weight=0, momentum_weight=0)
        result = score_confluence(rsi=10, band_signal=BUY, config=config)

        assert result.action == Action.HOLD
        assert result.confidence == 0
