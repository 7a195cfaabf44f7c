#!/usr/bin/env python3
"""
Command line access to the quantile engine.

Reads a batch from the command line or from a CSV column and prints
f-quantiles or boxplot statistics.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import pandas as pd

from .engine import quantile, resolve_method
from .methods import get_method_names
from .summary import boxplot_stats
from .utils.config import default_whis, load_config, validate_config
from .utils.exceptions import InvalidInput, QuantileEngineError
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

DEFAULT_FRACTIONS = [0.25, 0.5, 0.75]


def read_batch(csv_path: Path, column: str) -> list[float]:
    """Read one numeric CSV column, dropping missing values."""
    try:
        frame = pd.read_csv(csv_path)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise InvalidInput(f"Failed to read {csv_path}: {e}")
    if column not in frame.columns:
        raise InvalidInput(f"Column {column!r} not found in {csv_path}; available: {list(frame.columns)}")

    series = pd.to_numeric(frame[column], errors="coerce")
    dropped = int(series.isna().sum())
    if dropped:
        logger.warning(f"Dropped {dropped} missing or non-numeric values from column {column!r}")
    return series.dropna().tolist()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quantile-engine",
        description="Compute empirical f-quantiles of a batch of numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Methods: {', '.join(get_method_names())}

Examples:
  # Quartiles under Cleveland's (i - 0.5)/n convention
  quantile-engine --method cleveland 12 9 14 8 15 15 15 10 9 13

  # The 10th and 90th percentiles of a CSV column, as JSON
  quantile-engine --csv data.csv --column income -f 0.1 -f 0.9 --json

  # Boxplot statistics
  quantile-engine --boxplot --csv data.csv --column income
        """,
    )

    parser.add_argument("values", nargs="*", type=float, help="Batch values")
    parser.add_argument("--csv", type=Path, help="Read the batch from a CSV file")
    parser.add_argument("--column", type=str, help="CSV column holding the batch")
    parser.add_argument(
        "-f", "--fraction", type=float, action="append", dest="fractions",
        help="Fraction in [0, 1]; repeatable (default: 0.25 0.5 0.75)",
    )
    parser.add_argument("--method", type=str, default=None, help="Quantile method (default: from configuration)")
    parser.add_argument("--boxplot", action="store_true", help="Print boxplot statistics instead of quantiles")
    parser.add_argument("--whis", type=float, default=None, help="Boxplot fence multiplier (default: 1.5)")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument(
        "--log-level", type=str, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level",
    )
    return parser


def run(args: argparse.Namespace, config: dict[str, Any] | None = None) -> None:
    """Compute and print the requested summary."""
    config = config if config is not None else load_config()
    if args.csv is not None:
        if args.values:
            raise InvalidInput("Pass values either on the command line or with --csv, not both")
        if not args.column:
            raise InvalidInput("--column is required with --csv")
        batch = read_batch(args.csv, args.column)
    else:
        batch = args.values

    method = resolve_method(args.method or config["QUANTILE_ENGINE_METHOD"])

    if args.boxplot:
        stats = boxplot_stats(batch, method, whis=args.whis if args.whis is not None else default_whis(config))
        if args.json:
            print(json.dumps(stats))
        else:
            for key, value in stats.items():
                print(f"{key:<14} {value}")
        return

    fractions = args.fractions or DEFAULT_FRACTIONS
    values = quantile(batch, fractions, method)
    if args.json:
        print(json.dumps({
            "method": method.name,
            "n": len(batch),
            "quantiles": [{"f": f, "value": v} for f, v in zip(fractions, values)],
        }))
    else:
        print(f"{'f':<8} {method.name}")
        for f, v in zip(fractions, values):
            print(f"{f:<8g} {v:g}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(env_file=Path(".env"))
    except QuantileEngineError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    if args.log_level:
        config["LOG_LEVEL"] = args.log_level

    errors = validate_config(config)
    if errors:
        print("error: configuration validation failed:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    # Set up logging
    setup_logging(config["LOG_LEVEL"], config.get("LOG_FILE"))

    try:
        run(args, config)
    except InvalidInput as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except QuantileEngineError as e:
        logger.error(f"Quantile computation failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
