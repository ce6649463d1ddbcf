"""
CSV codec for TransactionRecord.

Write and read share one fixed column order. Known limitations of the format:
- An absent optional field (mint_hash, minter, details) is written as an empty
  field, and an empty field is read back as None. A record whose optional
  field was the empty string comes back with None.
- The first row is always skipped on read; it is not checked against CSV_COLUMNS.
- Blank lines are skipped on read.
- A non-numeric Nonce is read as 0 (same default-to-zero policy as amounts).
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from usdc_trail.core.exceptions import ReadError, WriteError
from usdc_trail.ingestion.models import TransactionRecord
from usdc_trail.trail_logging import get_logger
from usdc_trail.utils.number_utils import parse_int_or_zero

logger = get_logger(__name__)

CSV_COLUMNS = [
    "ID",
    "Nonce",
    "TxnType",
    "BurnHash",
    "MintHash",
    "TransferHash",
    "From",
    "Destination",
    "Minter",
    "FromNetwork",
    "DestinationNetwork",
    "Amount",
    "Denom",
    "Status",
    "Timestamp",
    "CreatedAt",
    "Details",
    "DestinationTimestamp",
]


def _empty_if_none(value: str | None) -> str:
    return "" if value is None else value


def _none_if_empty(value: str) -> str | None:
    return value if value else None


def record_to_row(record: TransactionRecord) -> list[str]:
    """Render a record as one CSV row in CSV_COLUMNS order."""
    return [
        record.id,
        str(record.nonce),
        record.txn_type,
        record.burn_hash,
        _empty_if_none(record.mint_hash),
        record.transfer_hash,
        record.from_address,
        record.destination,
        _empty_if_none(record.minter),
        record.from_network,
        record.destination_network,
        record.amount,
        record.denom,
        record.status,
        record.timestamp,
        record.created_at,
        _empty_if_none(record.details),
        record.destination_timestamp,
    ]


def row_to_record(row: list[str]) -> TransactionRecord:
    """Rebuild a record from one CSV row by column position. Row must have len(CSV_COLUMNS) fields."""
    return TransactionRecord(
        id=row[0],
        nonce=parse_int_or_zero(row[1]),
        txn_type=row[2],
        burn_hash=row[3],
        mint_hash=_none_if_empty(row[4]),
        transfer_hash=row[5],
        from_address=row[6],
        destination=row[7],
        minter=_none_if_empty(row[8]),
        from_network=row[9],
        destination_network=row[10],
        amount=row[11],
        denom=row[12],
        status=row[13],
        timestamp=row[14],
        created_at=row[15],
        details=_none_if_empty(row[16]),
        destination_timestamp=row[17],
    )


def write_transactions_csv(records: Iterable[TransactionRecord], path: str | Path) -> int:
    """
    Write header + one row per record, replacing any existing file.

    Returns the number of data rows written. Raises WriteError on I/O failure.
    """
    path = Path(path)
    count = 0
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(CSV_COLUMNS)
            for record in records:
                w.writerow(record_to_row(record))
                count += 1
    except (OSError, csv.Error) as e:
        raise WriteError(f"cannot write {path}: {e}") from e

    logger.info("csv_written", path=str(path), rows=count)
    return count


def read_transactions_csv(path: str | Path) -> list[TransactionRecord]:
    """
    Read records back from a file produced by write_transactions_csv.

    Raises ReadError when the file cannot be opened, the CSV cannot be
    parsed, or a row does not have exactly len(CSV_COLUMNS) fields.
    Row numbers in errors count the header as row 1.
    """
    path = Path(path)
    records: list[TransactionRecord] = []
    try:
        with open(path, newline="", encoding="utf-8") as f:
            for row_num, row in enumerate(csv.reader(f), start=1):
                # header is skipped unvalidated; blank lines carry no record
                if row_num == 1 or not row:
                    continue
                if len(row) != len(CSV_COLUMNS):
                    raise ReadError(
                        f"malformed row {row_num} in {path}: "
                        f"expected {len(CSV_COLUMNS)} columns, got {len(row)}",
                        row=row_num,
                    )
                records.append(row_to_record(row))
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        raise ReadError(f"cannot read {path}: {e}") from e

    logger.info("csv_read", path=str(path), rows=len(records))
    return records
