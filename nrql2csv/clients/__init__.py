"""API Clients module."""

from .insights_client import InsightsClient

__all__ = ["InsightsClient"]
