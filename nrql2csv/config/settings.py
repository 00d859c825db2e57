"""
Configuration management for nrql2csv.
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class InsightsConfig(BaseSettings):
    """New Relic Insights API Configuration."""

    account_id: str = Field(..., alias="NEW_RELIC_ACCOUNT_ID")
    query_key: str = Field(..., alias="NEW_RELIC_QUERY_KEY")
    region: str = Field(default="US", alias="NEW_RELIC_REGION")  # US or EU

    # Request timeout in seconds
    timeout: float = Field(default=60.0, alias="NRQL_TIMEOUT")

    @field_validator("region")
    @classmethod
    def normalize_region(cls, v: str) -> str:
        return v.upper()

    class Config:
        env_file = ".env"
        extra = "ignore"


class DaemonConfig(BaseSettings):
    """nrqld HTTP server configuration."""

    port: int = Field(default=8080, alias="PORT")
    host: str = Field(default="0.0.0.0", alias="NRQLD_HOST")

    class Config:
        env_file = ".env"
        extra = "ignore"


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        extra = "ignore"


class Settings:
    """Main settings class combining all configurations."""

    _instance: Optional["Settings"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize all configuration sections."""
        self.insights = InsightsConfig()
        self.daemon = DaemonConfig()
        self.logging = LoggingConfig()

    @classmethod
    def reset(cls):
        """Reset singleton for testing."""
        cls._instance = None


# Convenience function to get settings
def get_settings() -> Settings:
    """Get the settings singleton."""
    return Settings()


# Output formats understood by the CLI and the daemon
AVAILABLE_FORMATS = ["csv", "json"]
