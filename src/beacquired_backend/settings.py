"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseSettings):
    """Centralized settings for the BeAcquired backend service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BEACQUIRED_",
        extra="ignore",
    )

    api_host: str = "0.0.0.0"  # noqa: S104
    api_port: int = 8000
    log_level: str = "INFO"
    log_file: str | None = None
    default_rng_seed: int | None = None
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


settings = get_settings()

__all__ = ["BackendSettings", "get_settings", "settings"]
