"""
USDC Trail — cross-chain USDC transfer exporter for the usdcTrail API.

Fetches every transfer record page by page, stores them in a CSV file and
reports how much value moved into and out of a target network (noble).
Two phases (fetch, read) share nothing but the CSV file on disk.
"""

__version__ = "0.1.0"
