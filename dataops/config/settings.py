"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = "INFO"

    # Demo driver
    sample_data: list[int] = Field(default_factory=lambda: [5, 3, 8, 4, 9, 1, 2])
    sample_key: int = 4

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_debug: bool = False
    api_max_length: int = Field(default=100_000, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
