# src/fxconvert/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Only deployment concerns are configurable (cache location, HTTP timeout,
logging destinations); currency codes and provider URLs are constants.

Files that USE this module:
- fxconvert.app (cache file location, logging setup)
- fxconvert.adapters.providers.currency_api (HTTP timeout)

Files that this module USES:
- None
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Persistence ---
    cache_file: Path = Field(default=Path("./data/fx_cache.json"), alias="CACHE_FILE")

    # --- HTTP Settings ---
    # None leaves requests' own default (no timeout)
    http_timeout_seconds: Optional[int] = Field(default=None, alias="HTTP_TIMEOUT_SECONDS")

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="FXCONVERT_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("http_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: Optional[int]) -> Optional[int]:
        """Timeout, when set, must be between 1 and 300 seconds."""
        if v is not None and not 1 <= v <= 300:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be between 1 and 300")
        return v


# Global settings instance
settings = Settings()
