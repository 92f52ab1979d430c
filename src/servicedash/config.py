# Configuration: pydantic-settings backed, environment-driven.
# Created: 2026-10-18
#
# Settings.load() builds a fresh instance (env + .env); get_settings() is the
# cached accessor used by the server and CLI. Call get_settings.cache_clear()
# after changing the environment.

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_config_dir() -> Path:
    """Get/create the servicedash home directory (``~/.servicedash``).

    ``SERVICEDASH_HOME`` overrides the location.
    """
    override = os.environ.get("SERVICEDASH_HOME")
    d = Path(override).expanduser() if override else Path.home() / ".servicedash"
    d.mkdir(parents=True, exist_ok=True)
    return d


class Settings(BaseSettings):
    """Runtime settings for the API server and the headless client."""

    model_config = SettingsConfigDict(
        env_prefix="SERVICEDASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="127.0.0.1", description="Host the API server binds to")
    port: int = Field(default=3001, description="Port the API server binds to")
    data_dir: Path | None = Field(
        default=None, description="Directory holding the JSON documents"
    )
    static_dir: Path | None = Field(
        default=None, description="Built front-end assets served next to the API"
    )
    cors_allowed_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Client
    api_url: str = Field(
        default="http://localhost:3001/api", description="Base URL of the REST API"
    )
    request_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout (s)")
    cache_dir: Path | None = Field(
        default=None, description="Directory for the offline fallback cache"
    )

    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def _fill_dirs(self) -> Settings:
        if self.data_dir is None:
            self.data_dir = get_config_dir() / "data"
        if self.cache_dir is None:
            self.cache_dir = get_config_dir() / "cache"
        return self

    @classmethod
    def load(cls) -> Settings:
        """Load settings from the environment (uncached)."""
        return cls()


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""
    return Settings.load()
