"""
Fetch-then-read pipeline.

fetch: paginate the usdcTrail API and write every record (partial results
included) to the configured CSV file. read: load that file and compute the
flow totals for the target network. The two phases share only the file.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

from usdc_trail.analytics.flow_totals import FlowTotals, compute_flow_totals
from usdc_trail.config.settings import Settings
from usdc_trail.ingestion.client import TrailClient
from usdc_trail.ingestion.fetcher import FetchResult, PageSource, fetch_all_transactions
from usdc_trail.storage.csv_codec import read_transactions_csv, write_transactions_csv
from usdc_trail.trail_logging import get_logger

logger = get_logger(__name__)


def build_client(settings: Settings) -> TrailClient:
    return TrailClient(
        settings.base_url,
        settings.base_params(),
        timeout=settings.request_timeout_sec,
    )


def run_fetch(
    settings: Settings,
    client: PageSource | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> FetchResult:
    """
    Fetch all pages and write them to settings.output_csv.

    A FetchError only shortens the result; WriteError propagates.
    """
    if client is None:
        with build_client(settings) as own_client:
            result = fetch_all_transactions(
                own_client, settings.page_limit, settings.page_delay_sec, sleep=sleep
            )
    else:
        result = fetch_all_transactions(client, settings.page_limit, settings.page_delay_sec, sleep=sleep)

    write_transactions_csv(result.records, Path(settings.output_csv))
    return result


def run_read(settings: Settings) -> FlowTotals:
    """Read settings.output_csv and compute flow totals. ReadError propagates."""
    records = read_transactions_csv(Path(settings.output_csv))
    return compute_flow_totals(records, settings.target_network)


def format_totals(totals: FlowTotals, scale: int) -> list[str]:
    """Operator report lines: inbound first, then outbound."""
    to_display, from_display = totals.scaled(scale)
    label = totals.network.title()
    return [f"to {label}: {to_display}", f"from {label}: {from_display}"]
