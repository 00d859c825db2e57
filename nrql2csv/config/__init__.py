"""Configuration module."""

from .settings import (
    Settings,
    get_settings,
    InsightsConfig,
    DaemonConfig,
    LoggingConfig,
    AVAILABLE_FORMATS,
)

__all__ = [
    "Settings",
    "get_settings",
    "InsightsConfig",
    "DaemonConfig",
    "LoggingConfig",
    "AVAILABLE_FORMATS",
]
