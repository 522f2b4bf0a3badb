"""Human-readable BS dates."""

from sambat.calendar.converter import BsInput, parse_bs_date
from sambat.calendar.data import (
    BS_MONTHS,
    BS_MONTHS_NEPALI,
    BS_WEEKDAYS_NEPALI,
    MONTHS_PER_YEAR,
)
from sambat.calendar.errors import InvalidMonthError
from sambat.formatting.numerals import to_nepali_numerals


def month_name(month: int, nepali: bool = False) -> str:
    """Name of a 1-based BS month, e.g. 9 -> "Poush" / "पुस"."""
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidMonthError(month)
    names = BS_MONTHS_NEPALI if nepali else BS_MONTHS
    return names[month - 1]


def format_bs_date(value: BsInput, nepali: bool = False) -> str:
    """
    Long form of a BS date.

    "2082-09-22" -> "22 Poush 2082", or "२२ पुस २०८२" with nepali=True.
    """
    bs = parse_bs_date(value)
    text = f"{bs.day} {month_name(bs.month, nepali)} {bs.year}"
    return to_nepali_numerals(text) if nepali else text


def weekday_name(weekday: int) -> str:
    """Nepali abbreviation for a Sunday-first weekday, e.g. 0 -> "आइत"."""
    if not 0 <= weekday < len(BS_WEEKDAYS_NEPALI):
        raise ValueError(f"Weekday must be between 0 and 6, got {weekday}")
    return BS_WEEKDAYS_NEPALI[weekday]
