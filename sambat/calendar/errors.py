"""
Calendar Errors

DESIGN DECISION: Bad input fails loudly with a typed error.
Nothing here falls back to "today" or silently stops a walk halfway.
The one documented exception is days_in_month(), which answers for
unknown years from the fallback year's data.
"""

from typing import Optional


class CalendarError(ValueError):
    """Base exception for calendar conversion errors."""
    pass


class UnsupportedYearError(CalendarError):
    """BS year is outside the supported table range."""

    def __init__(self, year: int, message: Optional[str] = None):
        self.year = year
        super().__init__(message or f"BS year {year} is not supported")


class MalformedDateStringError(CalendarError):
    """Input string is not a YYYY-MM-DD (or YYYY/MM/DD) BS date."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Cannot parse BS date {value!r}: expected YYYY-MM-DD or YYYY/MM/DD"
        )


class InvalidMonthError(CalendarError):
    """Month number is outside 1-12."""

    def __init__(self, month: int):
        self.month = month
        super().__init__(f"Month must be between 1 and 12, got {month}")


class InvalidDayError(CalendarError):
    """Day does not exist in the given BS month."""

    def __init__(self, year: int, month: int, day: int, max_day: int):
        self.year = year
        self.month = month
        self.day = day
        self.max_day = max_day
        super().__init__(
            f"Day {day} is invalid for BS {year}-{month:02d} "
            f"(month has {max_day} days)"
        )


class InvalidDateRangeError(CalendarError):
    """Range start falls after range end."""
    pass
