# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for backend selection, the activation flag and
logging. Settings are built once at process start and treated as
read-only afterwards.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Cache ===
    cache_active: bool = True
    cache_backend: Literal["memory", "sqlite", "redis"] = "memory"
    cache_key_prefix: str = "tagcache:"
    cache_sqlite_path: Path = Path("~/.tagcache/cache.db")
    cache_redis_url: str = ""
    cache_redis_timeout: float = 5.0

    # === Invalidation ===
    invalidation_batch_size: int = 500

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("invalidation_batch_size")
    @classmethod
    def validate_batch_size(cls, v: int) -> int:
        """INVALIDATION_BATCH_SIZE must be positive."""
        if v < 1:
            raise ValueError("invalidation_batch_size must be >= 1")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.cache_backend == "redis" and not self.cache_redis_url:
            errors.append("CACHE_BACKEND=redis requires CACHE_REDIS_URL")

        if not self.cache_key_prefix:
            errors.append("CACHE_KEY_PREFIX must not be empty")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or embedding).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
