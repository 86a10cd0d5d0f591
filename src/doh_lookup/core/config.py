"""Centralized configuration using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RESOLVER_URL = "https://1.1.1.1/dns-query"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # DoH resolver configuration
    resolver_url: str = DEFAULT_RESOLVER_URL
    resolver_timeout: Optional[float] = None  # seconds, unset = no timeout

    # Sentry configuration (optional)
    sentry_dsn: Optional[str] = None
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 1.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry is configured."""
        return bool(self.sentry_dsn)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
