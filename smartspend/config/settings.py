"""
Configuration Management for SmartSpend

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All tunables of the rollover and aggregation engine live here.
The defaults reproduce the tracker's fixed behaviour (90-day history,
24-hour rollover window, tip threshold of 50), so an empty environment
gives the standard app.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from SMARTSPEND_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SMARTSPEND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )

    # Persistence
    data_dir: Path = Field(
        default=Path.home() / ".smartspend",
        description="Directory holding the JSON key-value store"
    )

    # Rollover
    history_limit: int = Field(
        default=90,
        ge=1,
        description="Maximum number of archived days kept in history"
    )
    rollover_hours: float = Field(
        default=24.0,
        gt=0,
        description="Hours after the first entry at which the current day expires"
    )

    # Stats and tips
    weekly_window_days: int = Field(
        default=7,
        ge=1,
        description="Number of calendar days in the weekly stats view"
    )
    tip_threshold: float = Field(
        default=50.0,
        ge=0,
        description="Daily total above which the slow-down tip is shown"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def rollover_window_ms(self) -> int:
        """Rollover window in milliseconds."""
        return int(self.rollover_hours * 60 * 60 * 1000)


@lru_cache()
def get_settings() -> TrackerSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return TrackerSettings()
