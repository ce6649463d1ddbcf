"""
Flow totals for one target network.

from_total: amounts of records leaving the network (from_network matches).
to_total: amounts of records entering it (destination_network matches and
from_network does not). A record that matches both is counted once, under
from_total. Unparseable amounts count as 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from usdc_trail.config.settings import DEFAULT_DISPLAY_SCALE, DEFAULT_TARGET_NETWORK
from usdc_trail.ingestion.models import TransactionRecord
from usdc_trail.trail_logging import get_logger

logger = get_logger(__name__)


def _truncating_div(value: int, scale: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(value) // scale
    return -q if value < 0 else q


@dataclass(frozen=True)
class FlowTotals:
    """Base-unit totals into (to_total) and out of (from_total) network."""

    network: str
    from_total: int = 0
    to_total: int = 0
    matched: int = 0

    def scaled(self, scale: int = DEFAULT_DISPLAY_SCALE) -> tuple[int, int]:
        """Return (to_total, from_total) in display units, truncated. No remainder."""
        if scale <= 0:
            raise ValueError(f"scale must be > 0, got {scale}")
        return _truncating_div(self.to_total, scale), _truncating_div(self.from_total, scale)


def compute_flow_totals(
    records: Iterable[TransactionRecord],
    network: str = DEFAULT_TARGET_NETWORK,
) -> FlowTotals:
    from_total = 0
    to_total = 0
    matched = 0
    seen = 0
    for record in records:
        seen += 1
        if record.from_network == network:
            from_total += record.amount_units()
            matched += 1
        elif record.destination_network == network:
            to_total += record.amount_units()
            matched += 1

    logger.info(
        "flow_totals_computed",
        network=network,
        records=seen,
        matched=matched,
        from_total=from_total,
        to_total=to_total,
    )
    return FlowTotals(network=network, from_total=from_total, to_total=to_total, matched=matched)
