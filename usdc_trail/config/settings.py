"""
Application settings.

Every constant the exporter depends on (endpoint, filter parameters, page
size, pacing, output file, target network, display scale) lives here with a
documented default, and is overridable through USDC_TRAIL_* environment
variables. The pipeline receives a Settings instance explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

from usdc_trail.config.env import env_float, env_int, env_str, load_trail_env

DEFAULT_BASE_URL = "https://usdc.range.org/api/usdcTrail/transactions"
DEFAULT_TXN_TYPE = "MAINNET"
DEFAULT_SHOW_PENDING = "false"
DEFAULT_PAGE_LIMIT = 1000
DEFAULT_PAGE_DELAY_SEC = 1.0
DEFAULT_REQUEST_TIMEOUT_SEC = 30.0
DEFAULT_OUTPUT_CSV = "3-4-2024.csv"
DEFAULT_TARGET_NETWORK = "noble"
# amounts are in base units (6 decimals for USDC)
DEFAULT_DISPLAY_SCALE = 1_000_000


@dataclass(frozen=True)
class Settings:
    """Configuration for one fetch-then-read run."""

    base_url: str = DEFAULT_BASE_URL
    txn_type: str = DEFAULT_TXN_TYPE
    show_pending: str = DEFAULT_SHOW_PENDING
    txn_hash: str = ""
    page_limit: int = DEFAULT_PAGE_LIMIT
    page_delay_sec: float = DEFAULT_PAGE_DELAY_SEC
    request_timeout_sec: float = DEFAULT_REQUEST_TIMEOUT_SEC
    output_csv: str = DEFAULT_OUTPUT_CSV
    target_network: str = DEFAULT_TARGET_NETWORK
    display_scale: int = DEFAULT_DISPLAY_SCALE

    def __post_init__(self) -> None:
        if self.page_limit <= 0:
            raise ValueError(f"page_limit must be > 0, got {self.page_limit}")
        if self.display_scale <= 0:
            raise ValueError(f"display_scale must be > 0, got {self.display_scale}")
        if self.page_delay_sec < 0:
            raise ValueError(f"page_delay_sec must be >= 0, got {self.page_delay_sec}")
        if self.request_timeout_sec <= 0:
            raise ValueError(f"request_timeout_sec must be > 0, got {self.request_timeout_sec}")

    def base_params(self) -> dict[str, str]:
        """Fixed filter query parameters sent with every page request."""
        return {
            "txnType": self.txn_type,
            "showPending": self.show_pending,
            "txnHash": self.txn_hash,
        }


def get_settings() -> Settings:
    """
    Return settings resolved from the environment (.env loaded first).

    Unset variables keep their defaults; unparseable or out-of-range numbers fall back to
    the default with a warning.
    """
    load_trail_env()
    return Settings(
        base_url=env_str("USDC_TRAIL_BASE_URL", DEFAULT_BASE_URL),
        txn_type=env_str("USDC_TRAIL_TXN_TYPE", DEFAULT_TXN_TYPE),
        show_pending=env_str("USDC_TRAIL_SHOW_PENDING", DEFAULT_SHOW_PENDING),
        txn_hash=env_str("USDC_TRAIL_TXN_HASH", ""),
        page_limit=env_int("USDC_TRAIL_PAGE_LIMIT", DEFAULT_PAGE_LIMIT, minimum=1),
        page_delay_sec=env_float("USDC_TRAIL_PAGE_DELAY_SEC", DEFAULT_PAGE_DELAY_SEC, minimum=0.0),
        request_timeout_sec=env_float("USDC_TRAIL_REQUEST_TIMEOUT_SEC", DEFAULT_REQUEST_TIMEOUT_SEC, minimum=0.0, exclusive=True),
        output_csv=env_str("USDC_TRAIL_OUTPUT_CSV", DEFAULT_OUTPUT_CSV) or DEFAULT_OUTPUT_CSV,
        target_network=env_str("USDC_TRAIL_TARGET_NETWORK", DEFAULT_TARGET_NETWORK) or DEFAULT_TARGET_NETWORK,
        display_scale=env_int("USDC_TRAIL_DISPLAY_SCALE", DEFAULT_DISPLAY_SCALE, minimum=1),
    )
