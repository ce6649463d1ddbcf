"""
Application-level exceptions.

- FetchError: one page request failed (network, HTTP status, body decode).
  Stops pagination; never retried.
- WriteError: the CSV file could not be written. Propagated to the caller.
- ReadError: the CSV file could not be opened or a row is malformed.

The underlying library error is always chained (raise ... from exc).
"""

from __future__ import annotations


class TrailError(Exception):
    """Base class for all usdc_trail errors."""


class FetchError(TrailError):
    """A paginated request to the usdcTrail API failed."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class WriteError(TrailError):
    """Transactions could not be written to CSV."""


class ReadError(TrailError):
    """Transactions could not be read back from CSV."""

    def __init__(self, message: str, *, row: int | None = None) -> None:
        super().__init__(message)
        self.row = row
