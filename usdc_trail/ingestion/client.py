"""
usdcTrail HTTP client — one paginated GET per call.

GET {base_url}?txnType=...&showPending=...&txnHash=...&offset=N&limit=M
Response envelope: {"resources": [...], "metadata": {"count": n}}.
Only resources is used; metadata.count is logged at debug level and never
drives pagination.
"""

from __future__ import annotations

from typing import Any

import requests

from usdc_trail.config.settings import DEFAULT_REQUEST_TIMEOUT_SEC
from usdc_trail.core.exceptions import FetchError
from usdc_trail.ingestion.models import TransactionRecord
from usdc_trail.trail_logging import get_logger

logger = get_logger(__name__)


class TrailClient:
    """
    Synchronous client for the usdcTrail transactions endpoint.

    Every failure (connection, HTTP status, body decode, missing fields) is
    raised as FetchError with the original exception chained. No retries.
    """

    def __init__(
        self,
        base_url: str,
        base_params: dict[str, str] | None = None,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SEC,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.base_params = dict(base_params or {})
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._session.headers.setdefault("Accept", "application/json")

    def __enter__(self) -> "TrailClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def fetch_page(self, offset: int, limit: int) -> list[TransactionRecord]:
        """Fetch one page of records starting at offset."""
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")

        params = {**self.base_params, "offset": offset, "limit": limit}
        try:
            resp = self._session.get(self.base_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"request failed at offset {offset}: {e}", offset=offset) from e
        try:
            body = resp.json()
        except ValueError as e:
            raise FetchError(f"invalid JSON body at offset {offset}: {e}", offset=offset) from e

        return self._decode_envelope(body, offset)

    def _decode_envelope(self, body: Any, offset: int) -> list[TransactionRecord]:
        if not isinstance(body, dict) or "resources" not in body:
            raise FetchError(f"response at offset {offset} has no resources field", offset=offset)
        resources = body.get("resources")
        if resources is None:
            resources = []
        if not isinstance(resources, list):
            raise FetchError(f"resources at offset {offset} is not a list", offset=offset)

        metadata = body.get("metadata") or {}
        logger.debug(
            "fetch_page_envelope",
            offset=offset,
            resources=len(resources),
            metadata_count=metadata.get("count") if isinstance(metadata, dict) else None,
        )

        records: list[TransactionRecord] = []
        for i, item in enumerate(resources):
            if not isinstance(item, dict):
                raise FetchError(f"resource {i} at offset {offset} is not an object", offset=offset)
            try:
                records.append(TransactionRecord.from_api_item(item))
            except (KeyError, TypeError, ValueError) as e:
                raise FetchError(f"resource {i} at offset {offset} is malformed: {e}", offset=offset) from e
        return records
