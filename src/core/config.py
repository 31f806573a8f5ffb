"""Application configuration and .env loading."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    ledger_backend: Literal["sqlite", "memory"] = Field(
        default="sqlite", validation_alias="LEDGER_BACKEND"
    )
    ledger_path: str = Field(
        default="data/dnascan/ledger.sqlite", validation_alias="LEDGER_PATH"
    )
    ledger_timeout: float = Field(
        default=5.0, gt=0, validation_alias="LEDGER_TIMEOUT"
    )
    ledger_max_retries: int = Field(
        default=3, ge=0, validation_alias="LEDGER_MAX_RETRIES"
    )
    ledger_retry_backoff_ms: int = Field(
        default=20, ge=0, validation_alias="LEDGER_RETRY_BACKOFF_MS"
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = ["Settings", "get_settings"]
