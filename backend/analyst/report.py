"""Report formatting for analysis results.

Outputs results to console (formatted tables) and JSON files. This is the
only place that turns engine output into display text; the engine models
carry no formatting.
"""

from __future__ import annotations

import orjson

from confluence.analysis import TechnicalAnalysis
from confluence.models import SignalKind


def _fmt(value: float | None, fmt: str = ".2f") -> str:
    return "N/A" if value is None else format(value, fmt)


_TAGS = {
    SignalKind.BUY: "BUY",
    SignalKind.SELL: "SELL",
    SignalKind.HOLD: "HOLD",
    SignalKind.NEUTRAL: "-",
}


class ReportFormatter:
    """Format analysis results for display and export."""

    @staticmethod
    def print_console(
        analysis: TechnicalAnalysis | None,
        symbol: str,
        price: float,
        change_24h: float | None = None,
    ) -> None:
        """Print formatted report to console."""
        print("\n" + "=" * 70)
        change = "" if change_24h is None else f"  ({change_24h:+.2f}% 24h)"
        print(f"  TECHNICAL ANALYSIS: {symbol} @ {price:,.2f}{change}")
        print("=" * 70)

        if analysis is None:
            print("  Insufficient data: no series available for analysis.")
            print()
            return

        c = analysis.confluence
        print(f"  Signal:      {c.action.value}")
        print(f"  Confidence:  {c.confidence}%")
        print(f"  Scores:      buy {c.scores.buy} / sell {c.scores.sell}")
        if c.reasons:
            print("  Based on:")
            for reason in c.reasons:
                print(f"    - {reason}")

        # Indicators
        print("\n" + "-" * 70)
        print("  INDICATORS")
        print("-" * 70)
        band_pos = analysis.bands.display_position
        band_value = "N/A" if band_pos is None else f"{band_pos * 100:.1f}%"
        rows = [
            ("RSI (14)", _fmt(analysis.rsi, ".1f"), analysis.rsi_signal),
            ("Bollinger Bands", band_value, analysis.bands.signal),
            ("Fibonacci trend", analysis.fibonacci.trend.value, analysis.trend_signal),
            ("Fibonacci position", "", analysis.fibonacci_signal),
            ("SMA 20/50", f"{_fmt(analysis.ma20)} / {_fmt(analysis.ma50)}", analysis.ma_cross),
        ]
        for label, value, signal in rows:
            print(f"  {label:<20} {value:>20} {_TAGS[signal.kind]:>6}  {signal.reason}")

        # Levels
        print("\n" + "-" * 70)
        print("  FIBONACCI LEVELS")
        print("-" * 70)
        for level in analysis.key_levels:
            marker = " *" if level.is_near else ""
            print(f"  {level.label:<22} {level.price:>14,.2f}{marker}")

        if analysis.bands.upper is not None:
            print("\n" + "-" * 70)
            print("  BOLLINGER BANDS (20, 2)")
            print("-" * 70)
            print(f"  Upper:   {_fmt(analysis.bands.upper)}")
            print(f"  Middle:  {_fmt(analysis.bands.middle)}")
            print(f"  Lower:   {_fmt(analysis.bands.lower)}")
        print()

    @staticmethod
    def to_dict(
        analysis: TechnicalAnalysis | None,
        symbol: str,
        price: float,
        change_24h: float | None = None,
    ) -> dict:
        """Convert an analysis to a JSON-serializable dict.

        ``analysis`` is None when there was not enough data; consumers
        should show an insufficient-data state rather than a HOLD.
        """
        return {
            "symbol": symbol,
            "price": price,
            "change_24h": change_24h,
            "analysis": None if analysis is None else analysis.model_dump(mode="json"),
        }

    @staticmethod
    def save_json(
        analysis: TechnicalAnalysis | None,
        symbol: str,
        price: float,
        filepath: str,
        change_24h: float | None = None,
    ) -> None:
        """Save results to JSON file."""
        data = ReportFormatter.to_dict(analysis, symbol, price, change_24h)
        with open(filepath, "wb") as f:
            f.write(orjson.dumps(data, option=orjson.OPT_INDENT_2))
        print(f"\nResults saved to {filepath}")
