"""
Ingestion — usdcTrail API client, record model and pagination loop.
"""

from usdc_trail.ingestion.client import TrailClient
from usdc_trail.ingestion.fetcher import FetchResult, fetch_all_transactions
from usdc_trail.ingestion.models import TransactionRecord

__all__ = ["TrailClient", "FetchResult", "fetch_all_transactions", "TransactionRecord"]
