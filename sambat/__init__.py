"""
Sambat - Bikram Sambat Calendar Engine

Pure date arithmetic between the Nepali Bikram Sambat (BS) calendar and
the Gregorian (AD) calendar, for BS years 2000-2100.

DESIGN PRINCIPLES:
1. Month lengths are looked up, never computed
2. One anchor pair; everything else is counted from it
3. Fail early, fail visibly: no silent "today" fallbacks
4. No I/O and no mutable state
"""

from sambat.calendar import (
    CalendarConverter,
    CalendarError,
    GridDay,
    InvalidDateRangeError,
    InvalidDayError,
    InvalidMonthError,
    MalformedDateStringError,
    MonthGrid,
    UnsupportedYearError,
    ad_to_bs,
    bs_range_to_ad_bounds,
    bs_to_ad,
    build_month_grid,
    days_between,
    days_in_month,
    days_in_range,
    days_in_year,
    first_day_of_month,
    get_converter,
    get_current_bs_date,
    get_days,
    parse_bs_date,
    shift_bs_date,
    shift_view_month,
)
from sambat.formatting import (
    format_bs_date,
    format_currency,
    from_nepali_numerals,
    month_name,
    to_nepali_numerals,
    weekday_name,
)
from sambat.models import AnchorCorrespondence, BsDate

__version__ = "1.0.0"
__author__ = "Sambat Team"

__all__ = [
    "AnchorCorrespondence",
    "BsDate",
    "CalendarConverter",
    "CalendarError",
    "GridDay",
    "InvalidDateRangeError",
    "InvalidDayError",
    "InvalidMonthError",
    "MalformedDateStringError",
    "MonthGrid",
    "UnsupportedYearError",
    "ad_to_bs",
    "bs_range_to_ad_bounds",
    "bs_to_ad",
    "build_month_grid",
    "days_between",
    "days_in_month",
    "days_in_range",
    "days_in_year",
    "first_day_of_month",
    "format_bs_date",
    "format_currency",
    "from_nepali_numerals",
    "get_converter",
    "get_current_bs_date",
    "get_days",
    "month_name",
    "parse_bs_date",
    "shift_bs_date",
    "shift_view_month",
    "to_nepali_numerals",
    "weekday_name",
]
