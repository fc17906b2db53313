"""Application configuration (settings and environment).

Single source of truth for field type configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

import logging
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Field type settings loaded from environment and .env.

    All settings are optional with defaults; log_level is checked in
    validate_log_level.
    """

    # App
    app_name: str = "fieldtypes"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Field types: when True, from_hash rejects malformed hashes instead of
    # building a value from whatever is under destinationContentId.
    field_type_strict_hash: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_log_level(self) -> "Settings":
        """Normalize log_level and reject names unknown to the logging module."""
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"log_level must be a standard logging level name, got: {self.log_level!r}"
            )
        self.log_level = level
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
