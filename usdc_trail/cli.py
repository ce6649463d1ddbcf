"""CLI for USDC Trail.

Without a command, runs fetch then read against the configured CSV file.

Usage:
  python -m usdc_trail [fetch|read] [--output PATH] [--network NAME]
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import Sequence

from usdc_trail.config.settings import Settings, get_settings
from usdc_trail.core.exceptions import ReadError, WriteError
from usdc_trail.pipeline import format_totals, run_fetch, run_read
from usdc_trail.trail_logging import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="usdc-trail",
        description="Export usdcTrail transfers to CSV and total the flows of one network.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=("all", "fetch", "read"),
        default="all",
        help="Phase to run (default: all = fetch then read)",
    )
    parser.add_argument("--output", help="Override the CSV file path")
    parser.add_argument("--network", help="Override the target network name")
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    changes = {}
    if args.output:
        changes["output_csv"] = args.output
    if args.network:
        changes["target_network"] = args.network
    return dataclasses.replace(settings, **changes) if changes else settings


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _apply_overrides(settings or get_settings(), args)

    if args.command in ("all", "fetch"):
        try:
            result = run_fetch(settings)
        except WriteError as e:
            logger.error("pipeline_write_failed", path=settings.output_csv, error=str(e))
            print(f"Error writing transactions: {e}", file=sys.stderr)
            return 1
        if result.error is not None:
            print(f"Error fetching transactions: {result.error}")
        print(f"Total transactions fetched: {len(result.records)}")

    if args.command in ("all", "read"):
        try:
            totals = run_read(settings)
        except ReadError as e:
            logger.error("pipeline_read_failed", path=settings.output_csv, error=str(e))
            print(f"Error reading transactions: {e}", file=sys.stderr)
            return 1
        for line in format_totals(totals, settings.display_scale):
            print(line)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
