"""
Configuration management for pg-query-builder.

This module provides environment-based configuration using Pydantic BaseSettings.
Every setting can be overridden with a PGQB_ prefixed environment variable or
through a .env file located at the project root.

For example, PGQB_DEFAULT_MAX_LIMIT=50 lowers the page size ceiling used when
a Pagination does not carry its own max_limit.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("PGQB_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

DEFAULT_MAX_LIMIT = 100


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the PGQB_ prefix:
    - PGQB_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - PGQB_LOG_TO_FILE: Enable the rotating file handler
    - PGQB_LOG_FILE_DIR: Directory for log files
    - PGQB_DEFAULT_MAX_LIMIT: Page size ceiling when Pagination.max_limit is 0
    """

    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotated file"
    )
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    default_max_limit: int = Field(
        default=DEFAULT_MAX_LIMIT,
        gt=0,
        description="Maximum page size applied when a pagination sets no max_limit",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name and reject names logging does not know."""
        level_name = value.upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(
                f"Unknown log level '{value}'. "
                "Expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return level_name

    model_config = SettingsConfigDict(
        env_prefix="PGQB_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded once and reused across
    the application lifecycle.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
