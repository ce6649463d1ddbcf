"""
Structured logging for the exporter.

Every log line is one event: an event_type plus key/value fields (offset,
rows, path, ...). Logs go to stderr; stdout is reserved for the operator
report (fetch count and flow totals), so the report stays pipeable.

LOG_LEVEL (default INFO) and LOG_FORMAT (json | console, default json) are
read when configure_structlog() runs. Tests pass their own stream.

No usdc_trail imports here; every other module imports this one.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

import structlog


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """ISO 8601 UTC timestamp on every event."""
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _event_type(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """JSON key for the first positional argument is event_type, not event."""
    if "event" in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def configure_structlog(
    stream: TextIO | None = None,
    *,
    log_format: str | None = None,
    level: str | None = None,
) -> None:
    """
    (Re)configure structlog. stream defaults to sys.stderr at call time.

    Loggers from get_logger() pick up a new configuration on their next call.
    """
    log_format = (log_format or os.getenv("LOG_FORMAT", "json")).strip().lower()
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).strip().upper()

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        _add_timestamp,
    ]
    out = stream if stream is not None else sys.stderr
    if log_format == "json":
        processors.append(_event_type)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=out.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=out),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Return a lazy structured logger tagged with the module name.

        logger = get_logger(__name__)
        logger.error("fetch_page_failed", offset=1000, kept=1000)
    -> {"offset": 1000, "kept": 1000, "logger": "...", "level": "error", "timestamp": "...", "event_type": "fetch_page_failed"}
    """
    return structlog.get_logger(name, logger=name)
