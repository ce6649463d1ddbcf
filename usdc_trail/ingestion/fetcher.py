"""
Pagination loop over the usdcTrail API.

offset starts at 0 and advances by limit. A page shorter than limit is the
last one; a page of exactly limit records always triggers one more request
(possibly empty). A FetchError stops the loop and the records gathered so far
are kept. The loop sleeps delay_sec between successful pages.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Protocol

from usdc_trail.config.settings import DEFAULT_PAGE_DELAY_SEC, DEFAULT_PAGE_LIMIT
from usdc_trail.core.exceptions import FetchError
from usdc_trail.ingestion.models import TransactionRecord
from usdc_trail.trail_logging import get_logger

logger = get_logger(__name__)


class PageSource(Protocol):
    def fetch_page(self, offset: int, limit: int) -> list[TransactionRecord]: ...


@dataclass
class FetchResult:
    """Records accumulated by one pagination run."""

    records: list[TransactionRecord] = field(default_factory=list)
    requests: int = 0
    error: FetchError | None = None

    @property
    def complete(self) -> bool:
        """True when pagination reached the final page without an error."""
        return self.error is None


def fetch_all_transactions(
    client: PageSource,
    limit: int = DEFAULT_PAGE_LIMIT,
    delay_sec: float = DEFAULT_PAGE_DELAY_SEC,
    sleep: Callable[[float], None] = time.sleep,
) -> FetchResult:
    """Fetch every page from client until a short page or the first FetchError."""
    if limit <= 0:
        raise ValueError(f"limit must be > 0, got {limit}")

    result = FetchResult()
    offset = 0
    while True:
        result.requests += 1
        try:
            page = client.fetch_page(offset, limit)
        except FetchError as e:
            logger.error(
                "fetch_page_failed",
                offset=offset,
                limit=limit,
                error=str(e),
                kept=len(result.records),
            )
            result.error = e
            break

        result.records.extend(page)
        logger.info("fetch_page_ok", offset=offset, count=len(page), total=len(result.records))

        if len(page) < limit:
            break

        offset += limit
        if delay_sec > 0:
            sleep(delay_sec)

    logger.info(
        "fetch_complete",
        records=len(result.records),
        requests=result.requests,
        complete=result.complete,
    )
    return result
