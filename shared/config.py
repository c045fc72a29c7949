"""
Shared configuration management for the leads client layer.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """Configuration for the client services and their caches."""

    model_config = SettingsConfigDict(
        env_prefix="LEADS_",
        env_file=".env",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Backend API
    api_url: str = Field(default="http://localhost:7890")
    http_timeout_seconds: float = Field(default=10.0, gt=0)

    # Cache
    cache_default_ttl_seconds: float = Field(default=300.0)
    cache_cleanup_interval_seconds: float = Field(default=0.0)
    cache_dedupe_inflight: bool = Field(default=False)


def get_config(**overrides) -> ClientConfig:
    """Get client configuration, with optional explicit overrides."""
    return ClientConfig(**overrides)
