"""Tests for configuration and logging setup."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from sambat.audit import configure_logging, get_logger
from sambat.calendar.converter import get_converter
from sambat.calendar.data import DEFAULT_FALLBACK_YEAR, MAX_YEAR, MIN_YEAR
from sambat.config import (
    CalendarSettings,
    LoggingSettings,
    get_settings,
    validate_all_settings,
)


@pytest.fixture(autouse=True)
def clear_caches():
    get_settings.cache_clear()
    get_converter.cache_clear()
    yield
    get_settings.cache_clear()
    get_converter.cache_clear()


class TestCalendarSettings:
    """Tests for CalendarSettings."""

    def test_defaults(self):
        """Test default fallback year and reference hour."""
        settings = CalendarSettings()
        assert settings.fallback_year == 2082
        assert settings.reference_hour == 12

    def test_fallback_year_comes_from_table_constants(self):
        """Test the fallback default and bounds follow the calendar data."""
        assert CalendarSettings().fallback_year == DEFAULT_FALLBACK_YEAR
        assert CalendarSettings(fallback_year=MIN_YEAR).fallback_year == MIN_YEAR
        assert CalendarSettings(fallback_year=MAX_YEAR).fallback_year == MAX_YEAR

    def test_env_override(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("SAMBAT_FALLBACK_YEAR", "2000")
        monkeypatch.setenv("SAMBAT_REFERENCE_HOUR", "6")
        settings = CalendarSettings()
        assert settings.fallback_year == 2000
        assert settings.reference_hour == 6

    def test_fallback_year_must_be_supported(self):
        """Test the fallback year must exist in the table."""
        with pytest.raises(ValidationError):
            CalendarSettings(fallback_year=1999)
        with pytest.raises(ValidationError):
            CalendarSettings(fallback_year=2101)

    def test_reference_hour_drives_converter(self, monkeypatch):
        """Test the shared converter picks up the configured hour."""
        monkeypatch.setenv("SAMBAT_REFERENCE_HOUR", "0")
        assert get_converter().bs_to_ad("2082-09-22").hour == 0


class TestLoggingSettings:
    """Tests for LoggingSettings."""

    def test_level_is_normalized(self):
        """Test level names are upper-cased."""
        assert LoggingSettings(level=" debug ").level == "DEBUG"

    def test_unknown_level(self):
        """Test unknown level names are rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="LOUD")

    def test_configure_logging_sets_level(self):
        """Test configure_logging applies the package log level."""
        configure_logging(level="ERROR", json_output=False)
        try:
            assert logging.getLogger("sambat").level == logging.ERROR
            assert get_logger("sambat.test") is not None
        finally:
            configure_logging(level="WARNING", json_output=True)

    def test_host_can_reconfigure_after_import(self):
        """Test a later structlog.configure() call replaces the import-time setup."""
        host_processors = [structlog.processors.KeyValueRenderer()]
        structlog.configure(processors=host_processors)
        try:
            assert structlog.get_config()["processors"] == host_processors
        finally:
            configure_logging(level="WARNING", json_output=True)
        assert structlog.get_config()["processors"] != host_processors


class TestValidateAllSettings:
    """Tests for validate_all_settings()."""

    def test_all_valid(self):
        """Test default configuration validates."""
        results = validate_all_settings()
        assert results["calendar"] is True
        assert results["logging"] is True

    def test_reports_errors(self, monkeypatch):
        """Test invalid values are reported, not raised."""
        monkeypatch.setenv("SAMBAT_FALLBACK_YEAR", "3000")
        results = validate_all_settings()
        assert results["calendar"] is False
        assert "calendar_error" in results
        assert results["logging"] is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
