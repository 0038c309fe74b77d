"""
Application settings.

Loaded from environment variables (prefix ``COFFEE_COMMITS_``) and an
optional ``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the fetch/build pipeline and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="COFFEE_COMMITS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "coffee-commits"
    app_env: str = "development"
    debug: bool = False

    # Local preview server (``coffee-commits serve``)
    api_port: int = 8000

    # Root of the DataStore (live/ and derived/ tiers live under it)
    data_dir: Path = Path("data")

    # API Ninjas key for the commodities endpoint; unauthenticated calls fall back to mock prices
    api_ninjas_key: str | None = None

    # How long fetched series stay fresh before the next refresh re-fetches
    cache_hours: int = Field(default=6, ge=0)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings instance."""
    return Settings()
