"""
Configuration management for USDC Trail.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for the endpoint, page size, output file
and target network.
"""

from usdc_trail.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
