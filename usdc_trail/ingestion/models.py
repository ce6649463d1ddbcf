"""
Data models for usdcTrail API output.

One TransactionRecord per cross-chain transfer event. Amount stays a string
of base units (no float precision loss); timestamps are opaque strings and are
never parsed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from usdc_trail.utils.number_utils import parse_int_or_zero

# JSON keys that must be present on every record (field presence is the only schema check)
REQUIRED_KEYS = (
    "id",
    "nonce",
    "txnType",
    "burnHash",
    "transferHash",
    "from",
    "destination",
    "fromNetwork",
    "destinationNetwork",
    "amount",
    "denom",
    "status",
    "timestamp",
    "createdAt",
    "destinationTimestamp",
)
# Nullable in the API; absent until the mint completes
OPTIONAL_KEYS = ("mintHash", "minter", "details")


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _as_nonce(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"nonce must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"nonce must be an integer, got {value!r}")
        return int(value)
    return int(value)


@dataclass(frozen=True)
class TransactionRecord:
    """
    Normalized usdcTrail transfer record.

    Mirrors the API resource fields (camelCase keys mapped to snake_case);
    mint_hash, minter and details are None when the API sends null.
    """

    id: str
    nonce: int
    txn_type: str
    burn_hash: str
    mint_hash: str | None
    transfer_hash: str
    from_address: str
    destination: str
    minter: str | None
    from_network: str
    destination_network: str
    amount: str  # base units, decimal string
    denom: str
    status: str
    timestamp: str
    created_at: str
    details: str | None
    destination_timestamp: str

    @classmethod
    def from_api_item(cls, item: dict[str, Any]) -> "TransactionRecord":
        """
        Build from a single entry of the envelope's resources list.

        Raises KeyError when a required key is missing and ValueError/TypeError
        when nonce is not an integer.
        """
        missing = [k for k in REQUIRED_KEYS if k not in item]
        if missing:
            raise KeyError(f"record missing fields: {', '.join(missing)}")
        return cls(
            id=_as_str(item["id"]),
            nonce=_as_nonce(item["nonce"]),
            txn_type=_as_str(item["txnType"]),
            burn_hash=_as_str(item["burnHash"]),
            mint_hash=_optional_str(item.get("mintHash")),
            transfer_hash=_as_str(item["transferHash"]),
            from_address=_as_str(item["from"]),
            destination=_as_str(item["destination"]),
            minter=_optional_str(item.get("minter")),
            from_network=_as_str(item["fromNetwork"]),
            destination_network=_as_str(item["destinationNetwork"]),
            amount=_as_str(item["amount"]),
            denom=_as_str(item["denom"]),
            status=_as_str(item["status"]),
            timestamp=_as_str(item["timestamp"]),
            created_at=_as_str(item["createdAt"]),
            details=_optional_str(item.get("details")),
            destination_timestamp=_as_str(item["destinationTimestamp"]),
        )

    def amount_units(self) -> int:
        """Amount in base units; 0 when the amount text is not an integer."""
        return parse_int_or_zero(self.amount)
