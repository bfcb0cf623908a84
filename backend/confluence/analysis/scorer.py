"""Weighted confluence scoring.

Each indicator casts at most one weighted vote for the buy or the sell
side. Votes are evaluated in a fixed order (RSI, Bollinger, Fibonacci,
momentum) and every non-neutral vote appends one reason to the trail.
The side with the higher score wins; an exact tie is HOLD.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from confluence.models import (
    DEFAULT_SCORING_CONFIG,
    Action,
    ConfluenceInputs,
    ConfluenceResult,
    ConfluenceScores,
    IndicatorSignal,
    ScoringConfig,
    SignalKind,
)

logger = logging.getLogger(__name__)


def _is_number(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


class ConfluenceScorer:
    """Aggregates indicator signals into a single trading action.

    Scoring never raises: any missing or unusable input casts no vote.
    """

    def __init__(self, config: ScoringConfig = DEFAULT_SCORING_CONFIG):
        self.config = config

    def score(self, inputs: ConfluenceInputs) -> ConfluenceResult:
        """
        Score the inputs and resolve the action.

        Args:
            inputs: RSI value, band and Fibonacci signals, 24h change

        Returns:
            ConfluenceResult with action, confidence, scores and reasons
        """
        cfg = self.config
        buy = 0
        sell = 0
        reasons: list[str] = []

        # RSI
        if _is_number(inputs.rsi):
            if inputs.rsi < cfg.rsi_oversold:
                buy += cfg.rsi_weight
                reasons.append(f"RSI {inputs.rsi:.1f} oversold (< {cfg.rsi_oversold:g})")
            elif inputs.rsi > cfg.rsi_overbought:
                sell += cfg.rsi_weight
                reasons.append(f"RSI {inputs.rsi:.1f} overbought (> {cfg.rsi_overbought:g})")

        # Bollinger Bands
        vote = _signal_vote(inputs.band_signal)
        if vote is SignalKind.BUY:
            buy += cfg.band_weight
            reasons.append(f"Bollinger Bands: {inputs.band_signal.reason}")
        elif vote is SignalKind.SELL:
            sell += cfg.band_weight
            reasons.append(f"Bollinger Bands: {inputs.band_signal.reason}")

        # Fibonacci
        vote = _signal_vote(inputs.fibonacci_signal)
        if vote is SignalKind.BUY:
            buy += cfg.fibonacci_weight
            reasons.append(f"Fibonacci: {inputs.fibonacci_signal.reason}")
        elif vote is SignalKind.SELL:
            sell += cfg.fibonacci_weight
            reasons.append(f"Fibonacci: {inputs.fibonacci_signal.reason}")

        # 24h momentum
        if _is_number(inputs.change_24h):
            if inputs.change_24h >= cfg.momentum_threshold:
                buy += cfg.momentum_weight
                reasons.append(f"Strong bullish momentum ({inputs.change_24h:+.2f}% in 24h)")
            elif inputs.change_24h <= -cfg.momentum_threshold:
                sell += cfg.momentum_weight
                reasons.append(f"Strong bearish momentum ({inputs.change_24h:+.2f}% in 24h)")

        if buy > sell:
            action = Action.BUY
        elif sell > buy:
            action = Action.SELL
        else:
            action = Action.HOLD

        confidence = self._confidence(max(buy, sell))
        logger.debug(
            "Confluence buy=%d sell=%d action=%s confidence=%d",
            buy, sell, action.value, confidence,
        )

        return ConfluenceResult(
            action=action,
            confidence=confidence,
            scores=ConfluenceScores(buy=buy, sell=sell),
            reasons=tuple(reasons),
        )

    def _confidence(self, winning_score: int) -> int:
        """Share of the maximum attainable score, as a rounded percentage."""
        max_score = self.config.max_score
        if max_score <= 0:
            return 0
        pct = Decimal(winning_score) * 100 / Decimal(max_score)
        confidence = int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        return max(0, min(100, confidence))


def _signal_vote(signal: IndicatorSignal | None) -> SignalKind | None:
    if signal is None or signal.is_neutral:
        return None
    return signal.kind


def score_confluence(
    rsi: float | None = None,
    band_signal: IndicatorSignal | None = None,
    fibonacci_signal: IndicatorSignal | None = None,
    change_24h: float | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> ConfluenceResult:
    """Score a set of signals with a one-off scorer."""
    inputs = ConfluenceInputs(
        rsi=rsi,
        band_signal=band_signal,
        fibonacci_signal=fibonacci_signal,
        change_24h=change_24h,
    )
    return ConfluenceScorer(config).score(inputs)
