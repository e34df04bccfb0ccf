"""Configuration settings for the testexport CLI."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``TESTEXPORT_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="TESTEXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Collector
    api_key: str = ""
    url: str | None = None
    request_timeout: float = 30.0

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
