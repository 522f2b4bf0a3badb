"""Bikram Sambat calendar package."""

from sambat.calendar.converter import (
    CalendarConverter,
    ad_to_bs,
    bs_range_to_ad_bounds,
    bs_to_ad,
    days_between,
    first_day_of_month,
    get_converter,
    get_current_bs_date,
    parse_bs_date,
    shift_bs_date,
    validate_bs_date,
)
from sambat.calendar.errors import (
    CalendarError,
    InvalidDateRangeError,
    InvalidDayError,
    InvalidMonthError,
    MalformedDateStringError,
    UnsupportedYearError,
)
from sambat.calendar.grid import GridDay, MonthGrid, build_month_grid, shift_view_month
from sambat.calendar.table import (
    days_in_month,
    days_in_range,
    days_in_year,
    get_days,
    is_supported_year,
    month_lengths,
)

__all__ = [
    # Conversion
    "CalendarConverter",
    "ad_to_bs",
    "bs_range_to_ad_bounds",
    "bs_to_ad",
    "days_between",
    "first_day_of_month",
    "get_converter",
    "get_current_bs_date",
    "parse_bs_date",
    "shift_bs_date",
    "validate_bs_date",
    # Errors
    "CalendarError",
    "InvalidDateRangeError",
    "InvalidDayError",
    "InvalidMonthError",
    "MalformedDateStringError",
    "UnsupportedYearError",
    # Grid
    "GridDay",
    "MonthGrid",
    "build_month_grid",
    "shift_view_month",
    # Table
    "days_in_month",
    "days_in_range",
    "days_in_year",
    "get_days",
    "is_supported_year",
    "month_lengths",
]
