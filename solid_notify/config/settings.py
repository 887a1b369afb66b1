"""
Application settings - pydantic-settings configuration.

Settings come from SOLID_NOTIFY_* environment variables with validated
defaults. They only affect diagnostic logging, never demo output: an
unusable value falls back to its default instead of failing startup.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="SOLID_NOTIFY_",
        case_sensitive=False,
    )

    # Diagnostic logging (stderr)
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            return DEFAULT_LOG_LEVEL
        return level

    @field_validator("log_format")
    @classmethod
    def _usable_format(cls, value: str) -> str:
        try:
            logging.Formatter(value)
        except ValueError:
            return DEFAULT_LOG_FORMAT
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
