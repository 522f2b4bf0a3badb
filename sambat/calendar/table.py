"""
Month-Length Table Queries

Answers "how many days are in BS month M of year Y" and derived questions.

There are two lookup flavours:
- days_in_month() degrades gracefully: a year missing from the table is
  answered with the fallback year's data, and a warning is logged.
- Everything else (month_lengths, days_in_year, get_days and the
  converter's walks) is strict and raises UnsupportedYearError.
"""

from datetime import MAXYEAR, MINYEAR
from functools import lru_cache

from sambat.audit import get_logger
from sambat.calendar.data import BS_MONTH_DATA, MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from sambat.calendar.errors import InvalidMonthError, UnsupportedYearError
from sambat.config import get_settings


logger = get_logger(__name__)


def is_supported_year(year: int) -> bool:
    return year in BS_MONTH_DATA


def _check_month(month: int) -> None:
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidMonthError(month)


@lru_cache(maxsize=None)
def month_lengths(year: int) -> tuple[int, ...]:
    """
    Strict lookup of the 12 month lengths for a BS year.

    Raises:
        UnsupportedYearError: If the year is not in the table
    """
    try:
        return BS_MONTH_DATA[year]
    except KeyError:
        raise UnsupportedYearError(
            year,
            f"BS year {year} is not supported (supported: {MIN_YEAR}-{MAX_YEAR})",
        ) from None


def strict_days_in_month(year: int, month: int) -> int:
    """Days in a BS month, raising for years outside the table."""
    _check_month(month)
    return month_lengths(year)[month - 1]


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in a 1-based BS month.

    Years missing from the table fall back to the configured fallback
    year's data. Years that cannot be a calendar year at all still fail.

    Raises:
        UnsupportedYearError: If year is outside 1-9999
        InvalidMonthError: If month is outside 1-12
    """
    if not MINYEAR <= year <= MAXYEAR:
        raise UnsupportedYearError(year)
    _check_month(month)

    if not is_supported_year(year):
        fallback_year = get_settings().calendar.fallback_year
        logger.warning(
            "days_in_month_fallback_year",
            year=year,
            month=month,
            fallback_year=fallback_year,
        )
        year = fallback_year

    return month_lengths(year)[month - 1]


def days_in_range(year: int, month: int) -> list[int]:
    """Valid day numbers [1..N] for a 1-based BS month."""
    return list(range(1, days_in_month(year, month) + 1))


def get_days(year: int, month_index: int) -> list[int]:
    """
    Valid day numbers for a 0-based month index (0 = Baisakh).

    Used to lay out calendar grids; unlike days_in_range() this never
    falls back to another year's data.
    """
    max_day = strict_days_in_month(year, month_index + 1)
    return list(range(1, max_day + 1))


def days_in_year(year: int) -> int:
    return sum(month_lengths(year))
