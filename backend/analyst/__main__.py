"""CLI entry point for one-off technical analysis.

Reads a candle series from ``<data-dir>/<SYMBOL>_<timeframe>.json`` and
prints the confluence signal for the given current price.

Usage:
    python -m analyst --symbol BTCUSDT --price 64250 --change-24h 3.2
    python -m analyst --symbol ETHUSDT --price 3120 --enrich --output eth.json
    python -m analyst --symbol SOLUSDT --price 142 --config scoring.yaml -v
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import orjson
from pydantic import ValidationError

from analyst.config import Settings, build_scoring_config, get_settings
from analyst.report import ReportFormatter
from analyst.services.analysis_service import AnalysisService
from analyst.storage.series_store import JsonFileSeriesStore


def parse_args(settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Confluence technical analysis (RSI, Bollinger Bands, Fibonacci, momentum)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m analyst --symbol BTCUSDT --price 64250 --change-24h 3.2
  python -m analyst --symbol ETHUSDT --price 3120 --enrich --output eth.json
        """,
    )
    parser.add_argument("--symbol", required=True, help="Asset symbol (e.g. BTCUSDT)")
    parser.add_argument("--price", type=float, required=True, help="Current price")
    parser.add_argument(
        "--change-24h",
        type=float,
        default=None,
        help="24h price change in percent",
    )
    parser.add_argument(
        "--timeframe",
        type=str,
        default=settings.timeframe,
        help=f"Series timeframe (default: {settings.timeframe})",
    )
    parser.add_argument(
        "--lookback",
        type=int,
        default=settings.lookback,
        help=f"Swing detection window in candles (default: {settings.lookback})",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=settings.data_dir,
        help=f"Directory with series JSON files (default: {settings.data_dir})",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=settings.scoring_config_path,
        help="YAML file with scoring weights/thresholds",
    )
    parser.add_argument(
        "--enrich",
        action="store_true",
        help="Compute RSI/MA/Bollinger values from closes before analysis",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file path for JSON results",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args()


async def run(args: argparse.Namespace) -> int:
    try:
        config = build_scoring_config(
            Path(args.config) if args.config else None, args.lookback
        )
    except ValidationError as e:
        print(f"Error: invalid scoring config: {e}")
        return 1

    service = AnalysisService(
        store=JsonFileSeriesStore(args.data_dir),
        config=config,
        timeframe=args.timeframe,
        enrich=args.enrich,
    )

    try:
        analysis = await service.analyze(args.symbol, args.price, args.change_24h)
    except (ValidationError, orjson.JSONDecodeError) as e:
        print(f"Error: invalid series data for {args.symbol}: {e}")
        return 1

    ReportFormatter.print_console(analysis, args.symbol, args.price, args.change_24h)
    if args.output:
        ReportFormatter.save_json(
            analysis, args.symbol, args.price, args.output, args.change_24h
        )
    return 0


def main() -> None:
    settings = get_settings()
    args = parse_args(settings)

    # Configure logging
    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
