"""
Configuration Management for Sambat

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The calendar data itself is NOT configurable; only the knobs around it
(fallback year, reference hour, logging) are.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sambat.calendar.data import DEFAULT_FALLBACK_YEAR, MAX_YEAR, MIN_YEAR


_LEVEL_NAMES = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class CalendarSettings(BaseSettings):
    """Calendar engine configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SAMBAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    fallback_year: int = Field(
        default=DEFAULT_FALLBACK_YEAR,
        ge=MIN_YEAR,
        le=MAX_YEAR,
        description="Year whose month lengths answer lookups for unknown years"
    )
    reference_hour: int = Field(
        default=12,
        ge=0,
        le=23,
        description="UTC hour of day used for AD instants"
    )


class LoggingSettings(BaseSettings):
    """Structured logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SAMBAT_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    level: str = Field(
        default="WARNING",
        description="Minimum log level"
    )
    json_output: bool = Field(
        default=True,
        description="Render JSON lines instead of console output"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        level = v.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def calendar(self) -> CalendarSettings:
        return CalendarSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool | str]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name_error: message} for each failure.
    """
    results: dict[str, bool | str] = {}

    settings = get_settings()

    try:
        _ = settings.calendar
        results["calendar"] = True
    except Exception as e:
        results["calendar"] = False
        results["calendar_error"] = str(e)

    try:
        _ = settings.logging
        results["logging"] = True
    except Exception as e:
        results["logging"] = False
        results["logging_error"] = str(e)

    return results
