"""
Pytest fixtures for USDC Trail tests. HTTP is faked; files live in tmp_path.
"""

from __future__ import annotations

import io
import sys

import pytest

from usdc_trail.config.settings import Settings
from usdc_trail.core.exceptions import FetchError
from usdc_trail.ingestion.models import TransactionRecord
from usdc_trail.trail_logging.logger import configure_structlog


def _make_item(i: int = 0, **overrides) -> dict:
    """One API resource as the usdcTrail endpoint returns it."""
    item = {
        "id": f"tx-{i}",
        "nonce": 1000 + i,
        "txnType": "MAINNET",
        "burnHash": f"0xburn{i}",
        "mintHash": f"mint{i}",
        "transferHash": f"0xtransfer{i}",
        "from": f"0xsender{i}",
        "destination": f"noble1dest{i}",
        "minter": f"noble1minter{i}",
        "fromNetwork": "ethereum",
        "destinationNetwork": "noble",
        "amount": "1000000",
        "denom": "uusdc",
        "status": "COMPLETE",
        "timestamp": "2024-03-04T10:00:00Z",
        "createdAt": "2024-03-04T10:00:05Z",
        "details": None,
        "destinationTimestamp": "2024-03-04T10:20:00Z",
    }
    item.update(overrides)
    return item


def _make_record(i: int = 0, **overrides) -> TransactionRecord:
    return TransactionRecord.from_api_item(_make_item(i, **overrides))


class FakePageSource:
    """
    Serves pages of the given sizes in order. An entry that is an exception
    is raised instead of returning a page.
    """

    def __init__(self, pages):
        self.pages = list(pages)
        self.calls: list[tuple[int, int]] = []

    def fetch_page(self, offset: int, limit: int):
        self.calls.append((offset, limit))
        page = self.pages[len(self.calls) - 1]
        if isinstance(page, Exception):
            raise page
        return [_make_record(offset + n) for n in range(page)]


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temp CSV, no inter-page delay."""
    return Settings(output_csv=str(tmp_path / "transactions.csv"), page_delay_sec=0.0)


@pytest.fixture
def fetch_error():
    return FetchError("request failed at offset 1000: boom", offset=1000)


@pytest.fixture
def make_item():
    """Factory for API resource dicts: make_item(i, **overrides)."""
    return _make_item


@pytest.fixture
def make_record():
    """Factory for TransactionRecord: make_record(i, **overrides)."""
    return _make_record


@pytest.fixture
def page_source():
    """Factory for FakePageSource: page_source([1000, 1000, 400])."""
    return FakePageSource


@pytest.fixture
def restore_logging():
    """Put structlog back on the process stderr after a test reconfigures it."""
    yield
    configure_structlog(sys.__stderr__, log_format="json", level="INFO")


@pytest.fixture
def log_stream(restore_logging):
    """JSON log lines written during the test, at DEBUG level."""
    stream = io.StringIO()
    configure_structlog(stream, log_format="json", level="DEBUG")
    return stream
