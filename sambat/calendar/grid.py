"""
Month Grid

Lays out one BS month as a Sunday-first calendar page: how many blank
cells precede day 1, and for every day its AD date and weekday.
Date pickers render straight from this.
"""

from datetime import date, timedelta
from typing import Optional

from pydantic import BaseModel, Field

from sambat.calendar.converter import CalendarConverter, get_converter, validate_bs_date
from sambat.calendar.data import (
    BS_MONTHS,
    BS_MONTHS_NEPALI,
    BS_WEEKDAYS_NEPALI,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
)
from sambat.calendar.table import get_days

SATURDAY = 6


class GridDay(BaseModel):
    """One day cell in a month grid."""

    day: int = Field(..., ge=1, le=32)
    bs_date: str = Field(
        ...,
        description="BS date as YYYY-MM-DD"
    )
    ad_date: date
    weekday: int = Field(
        ...,
        ge=0,
        le=6,
        description="Day of week, 0 = Sunday"
    )
    is_saturday: bool
    is_today: bool = False


class MonthGrid(BaseModel):
    """A BS month laid out for display."""

    year: int
    month: int = Field(..., ge=1, le=12)
    month_name: str
    month_name_nepali: str
    leading_blanks: int = Field(
        ...,
        ge=0,
        le=6,
        description="Empty cells before day 1 in a Sunday-first week"
    )
    weekday_headers: list[str] = Field(
        default_factory=lambda: list(BS_WEEKDAYS_NEPALI),
        description="Column headings, Sunday first"
    )
    days: list[GridDay] = Field(default_factory=list)

    @property
    def day_count(self) -> int:
        return len(self.days)


def _sunday_first_weekday(value: date) -> int:
    return (value.weekday() + 1) % 7


def build_month_grid(
    year: int,
    month: int,
    today: Optional[str] = None,
    converter: Optional[CalendarConverter] = None,
) -> MonthGrid:
    """
    Build the grid for a BS month.

    Args:
        year: BS year (2000-2100)
        month: BS month, 1-based
        today: BS date to flag as today; defaults to the converter's today
        converter: Converter to use; defaults to the shared one
    """
    converter = converter or get_converter()
    first = validate_bs_date(year, month, 1)
    if today is None:
        today = converter.current_bs_date()

    first_ad = converter.bs_to_ad_date(first)
    leading_blanks = _sunday_first_weekday(first_ad)

    days = []
    for day in get_days(year, month - 1):
        bs_date = f"{year:04d}-{month:02d}-{day:02d}"
        weekday = (leading_blanks + day - 1) % 7
        days.append(GridDay(
            day=day,
            bs_date=bs_date,
            ad_date=first_ad + timedelta(days=day - 1),
            weekday=weekday,
            is_saturday=weekday == SATURDAY,
            is_today=bs_date == today,
        ))

    return MonthGrid(
        year=year,
        month=month,
        month_name=BS_MONTHS[month - 1],
        month_name_nepali=BS_MONTHS_NEPALI[month - 1],
        leading_blanks=leading_blanks,
        days=days,
    )


def shift_view_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """
    Move a (year, month) view by delta months.

    A move that would leave the supported range leaves the view unchanged.
    """
    index = year * MONTHS_PER_YEAR + (month - 1) + delta
    next_year, next_month = divmod(index, MONTHS_PER_YEAR)
    if not MIN_YEAR <= next_year <= MAX_YEAR:
        return year, month
    return next_year, next_month + 1
