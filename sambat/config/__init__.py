"""Configuration package."""

from sambat.config.settings import (
    CalendarSettings,
    LoggingSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "CalendarSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
