"""
Centralized configuration for the UZ train search.

Uses Pydantic BaseSettings for validated, typed configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings can be overridden via environment variables prefixed with UZ_TRAINS_.
    """

    model_config = SettingsConfigDict(
        env_prefix="UZ_TRAINS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Data Paths
    # =========================================================================

    data_file: Path = Field(
        default=Path("data.json"),
        description="JSON file containing the train schedule dataset"
    )

    # =========================================================================
    # Logging
    # =========================================================================

    log_level: str = Field(
        default="WARNING",
        description="Application log level"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Write a full DEBUG log to this file when set"
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper


@lru_cache()
def get_config() -> AppConfig:
    """
    Get the application configuration (cached singleton).

    Returns:
        AppConfig instance
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the cached configuration (useful for testing)."""
    get_config.cache_clear()
