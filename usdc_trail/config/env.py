"""
Environment variable loading for USDC Trail.

- Loads .env from project root when available.
- Typed getters fall back to the given default when a variable is unset,
  blank, not parseable or below the given minimum (with a warning).
"""

from __future__ import annotations

import math
import os
from pathlib import Path

from usdc_trail.trail_logging import get_logger

logger = get_logger(__name__)

# Project root: config is usdc_trail/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"


def load_trail_env() -> None:
    """Load .env from project root, then from the working directory. Safe to call multiple times."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH)
    load_dotenv(Path.cwd() / ".env")


def env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip()


def env_int(name: str, default: int, minimum: int | None = None) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("config_invalid_int", variable=name, value=raw, default=default)
        return default
    if minimum is not None and value < minimum:
        logger.warning("config_invalid_int", variable=name, value=raw, minimum=minimum, default=default)
        return default
    return value


def env_float(name: str, default: float, minimum: float | None = None, *, exclusive: bool = False) -> float:
    """minimum is inclusive unless exclusive=True. nan and inf always fall back."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("config_invalid_float", variable=name, value=raw, default=default)
        return default
    too_small = minimum is not None and (value <= minimum if exclusive else value < minimum)
    if not math.isfinite(value) or too_small:
        logger.warning("config_invalid_float", variable=name, value=raw, minimum=minimum, default=default)
        return default
    return value
