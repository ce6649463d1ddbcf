"""
Core utilities — domain exceptions shared by ingestion, storage and the CLI.
"""

from usdc_trail.core.exceptions import FetchError, ReadError, TrailError, WriteError

__all__ = ["TrailError", "FetchError", "WriteError", "ReadError"]
