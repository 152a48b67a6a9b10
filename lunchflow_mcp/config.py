"""
Process configuration for the Lunch Flow MCP server.
"""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://lunchflow.app/api/v1"
API_KEY_ENV = "LUNCHFLOW_API_KEY"
API_URL_ENV = "LUNCHFLOW_API_URL"


class ConfigError(ValueError):
    """Raised when required configuration is missing or invalid."""


class ServerConfig(BaseModel):
    api_key: str = Field(
        min_length=1,
        repr=False,
        description="Your Lunch Flow API key from https://lunchflow.app/destinations",
    )
    api_url: str = Field(default=DEFAULT_API_URL, description="API endpoint URL")

    @field_validator("api_key")
    @classmethod
    def _strip_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("API key must not be blank")
        return value

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/") or DEFAULT_API_URL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (optional)

        Raises:
            ConfigError: If LUNCHFLOW_API_KEY is not set
        """
        env = os.environ if environ is None else environ

        api_key = (env.get(API_KEY_ENV) or "").strip()
        if not api_key:
            raise ConfigError(
                f"{API_KEY_ENV} environment variable is not set. "
                "Get your API key from https://lunchflow.app/destinations"
            )

        api_url = (env.get(API_URL_ENV) or "").strip() or DEFAULT_API_URL
        return cls(api_key=api_key, api_url=api_url)
