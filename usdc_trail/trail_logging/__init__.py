"""
Structured logging for USDC Trail.

JSON logs with timestamp, level and event_type. Use get_logger() in every module.
"""

from usdc_trail.trail_logging.logger import get_logger

__all__ = ["get_logger"]
