"""Utility modules."""

from .logger import setup_logging, get_logger
from .validators import validate_insights_config, validate_query

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_insights_config",
    "validate_query",
]
