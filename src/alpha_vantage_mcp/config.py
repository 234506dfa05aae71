"""
Configuration for the Alpha Vantage MCP Server.

Uses pydantic-settings for environment variable loading. The settings object
is frozen: it is read once at startup and handed to the API client.
"""

from typing import Any, Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"


class AlphaVantageConfig(BaseSettings):
    """Configuration for the Alpha Vantage connection."""

    model_config = SettingsConfigDict(
        env_prefix="ALPHA_VANTAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    api_key: str = Field(default="", description="Alpha Vantage API key")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Alpha Vantage query endpoint")
    debug: bool = Field(default=False, description="Enable debug logging")

    @property
    def is_configured(self) -> bool:
        """Check if an API key is present."""
        return bool(self.api_key.strip())

    def validate_config(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.is_configured:
            errors.append("ALPHA_VANTAGE_API_KEY environment variable is required")

        if not self.base_url:
            errors.append("ALPHA_VANTAGE_BASE_URL must not be empty")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (masking the API key)."""
        return {
            "base_url": self.base_url,
            "api_key": "***" if self.is_configured else "",
            "debug": self.debug,
        }

    @classmethod
    def from_env(cls) -> "AlphaVantageConfig":
        """Create configuration from environment variables"""
        from dotenv import load_dotenv
        load_dotenv()
        return cls()
