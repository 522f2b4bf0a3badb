"""
BS <-> AD Conversion Engine

DESIGN DECISION: Every conversion is counted from ONE anchor pair.
AD -> BS: take the day difference to the anchor's AD date, then walk the
BS calendar from the anchor's BS date by whole months until the
difference is used up.
BS -> AD: count the days between the anchor's BS date and the target
by whole months, then add that many days to the anchor's AD instant.

Both walks are exact (whole days against the month-length table) and
bounded by the number of months in the supported range.

IMPORTANT: Walks never stop silently at the table edge. Leaving
2000-2100 raises UnsupportedYearError.
"""

import re
from datetime import date, datetime, time, timedelta, timezone
from functools import lru_cache
from typing import Callable, Union

from sambat.audit import get_logger
from sambat.calendar.data import DEVANAGARI_TO_ASCII, MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from sambat.calendar.errors import (
    InvalidDateRangeError,
    InvalidDayError,
    InvalidMonthError,
    MalformedDateStringError,
    UnsupportedYearError,
)
from sambat.calendar.table import is_supported_year, strict_days_in_month
from sambat.config import get_settings
from sambat.models.date import DEFAULT_ANCHOR, AnchorCorrespondence, BsDate


logger = get_logger(__name__)

BsInput = Union[BsDate, str]
AdInput = Union[date, datetime]

# YYYY-MM-DD or YYYY/MM/DD, one separator throughout
_BS_DATE_PATTERN = re.compile(r"^(\d{4})([-/])(\d{1,2})\2(\d{1,2})$", re.ASCII)


def _next_month(year: int, month: int) -> tuple[int, int]:
    if month == MONTHS_PER_YEAR:
        return year + 1, 1
    return year, month + 1


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, MONTHS_PER_YEAR
    return year, month - 1


def _to_calendar_day(value: AdInput) -> date:
    """Drop time-of-day; the value's own wall-clock date is the AD day."""
    # datetime is a date subclass, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def validate_bs_date(year: int, month: int, day: int) -> BsDate:
    """
    Build a BsDate after checking it exists in the supported calendar.

    Raises:
        UnsupportedYearError: Year outside the table
        InvalidMonthError: Month outside 1-12
        InvalidDayError: Day outside 1..days in that month
    """
    if not is_supported_year(year):
        raise UnsupportedYearError(
            year,
            f"BS year {year} is not supported (supported: {MIN_YEAR}-{MAX_YEAR})",
        )
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidMonthError(month)

    max_day = strict_days_in_month(year, month)
    if not 1 <= day <= max_day:
        raise InvalidDayError(year, month, day, max_day)

    return BsDate(year=year, month=month, day=day)


def parse_bs_date(value: BsInput) -> BsDate:
    """
    Parse and validate a BS date.

    Accepts a BsDate or a string like "2082-09-22" / "2082/09/22".
    Devanagari digits are accepted too.
    """
    if isinstance(value, BsDate):
        return validate_bs_date(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise MalformedDateStringError(value)

    match = _BS_DATE_PATTERN.match(value.strip().translate(DEVANAGARI_TO_ASCII))
    if match is None:
        raise MalformedDateStringError(value)

    return validate_bs_date(
        int(match.group(1)),
        int(match.group(3)),
        int(match.group(4)),
    )


def days_between(start: BsInput, end: BsInput) -> int:
    """
    Signed number of days from start to end.

    Skips whole months using the month-length table.
    """
    start = parse_bs_date(start)
    end = parse_bs_date(end)

    if end.sort_key < start.sort_key:
        return -days_between(end, start)

    year, month = start.year, start.month
    total = -start.day
    while (year, month) != (end.year, end.month):
        total += strict_days_in_month(year, month)
        year, month = _next_month(year, month)

    return total + end.day


class CalendarConverter:
    """
    Converts between Bikram Sambat and Gregorian dates.

    Stateless apart from its immutable anchor, so one instance can be
    shared freely across threads.
    """

    def __init__(
        self,
        anchor: AnchorCorrespondence = DEFAULT_ANCHOR,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize converter.

        Args:
            anchor: Known BS <-> AD pair all conversions count from.
                    Its BS side must exist in the table.
            clock: Source of "now" for current_bs_date().
        """
        self._anchor = anchor
        self._anchor_bs = validate_bs_date(
            anchor.bs_year, anchor.bs_month, anchor.bs_day
        )
        self._clock = clock

    @property
    def anchor(self) -> AnchorCorrespondence:
        return self._anchor

    def ad_to_bs_date(self, value: AdInput) -> BsDate:
        """
        Convert a Gregorian date to a BsDate.

        Raises:
            UnsupportedYearError: If the result falls outside 2000-2100 BS
        """
        ad_day = _to_calendar_day(value)
        remaining = (ad_day - self._anchor.ad_date).days
        year, month, day = self._anchor_bs.as_tuple()

        try:
            if remaining > 0:
                while remaining > 0:
                    days_left = strict_days_in_month(year, month) - day
                    if remaining > days_left:
                        remaining -= days_left + 1
                        year, month = _next_month(year, month)
                        day = 1
                    else:
                        day += remaining
                        remaining = 0
            elif remaining < 0:
                remaining = -remaining
                while remaining > 0:
                    # day - 1 days have passed since the 1st
                    if remaining >= day:
                        remaining -= day
                        year, month = _previous_month(year, month)
                        day = strict_days_in_month(year, month)
                    else:
                        day -= remaining
                        remaining = 0

            if not is_supported_year(year):
                raise UnsupportedYearError(year)
        except UnsupportedYearError as e:
            logger.warning(
                "conversion_out_of_range",
                direction="ad_to_bs",
                ad_date=ad_day.isoformat(),
            )
            raise UnsupportedYearError(
                e.year,
                f"AD date {ad_day.isoformat()} falls outside the supported "
                f"BS range {MIN_YEAR}-{MAX_YEAR}",
            ) from e

        result = BsDate(year=year, month=month, day=day)
        logger.debug(
            "ad_to_bs_converted",
            ad_date=ad_day.isoformat(),
            bs_date=result.isoformat(),
        )
        return result

    def ad_to_bs(self, value: AdInput) -> str:
        """Convert a Gregorian date to a "YYYY-MM-DD" BS string."""
        return self.ad_to_bs_date(value).isoformat()

    def bs_to_ad(self, value: BsInput) -> datetime:
        """
        Convert a BS date to an aware UTC datetime at the reference hour.

        Raises:
            MalformedDateStringError: If the string is not three numeric parts
            UnsupportedYearError: If the year is outside 2000-2100
            InvalidMonthError: If the month is outside 1-12
            InvalidDayError: If the day does not exist in that month
        """
        try:
            target = parse_bs_date(value)
        except UnsupportedYearError as e:
            logger.warning(
                "conversion_out_of_range",
                direction="bs_to_ad",
                bs_year=e.year,
            )
            raise

        offset = days_between(self._anchor_bs, target)
        result = self._anchor.ad_instant + timedelta(days=offset)
        logger.debug(
            "bs_to_ad_converted",
            bs_date=target.isoformat(),
            ad_date=result.date().isoformat(),
        )
        return result

    def bs_to_ad_date(self, value: BsInput) -> date:
        return self.bs_to_ad(value).date()

    def shift_bs_date(self, value: BsInput, days: int) -> str:
        """Move a BS date by a number of days (negative moves back)."""
        return self.ad_to_bs(self.bs_to_ad(value) + timedelta(days=days))

    def bs_range_to_ad_bounds(
        self,
        start: BsInput,
        end: BsInput,
    ) -> tuple[datetime, datetime]:
        """
        Turn an inclusive BS date range into UTC AD bounds.

        Returns:
            (start of the first day, last microsecond of the last day)

        Raises:
            InvalidDateRangeError: If start falls after end
        """
        start_bs = parse_bs_date(start)
        end_bs = parse_bs_date(end)
        if start_bs.sort_key > end_bs.sort_key:
            raise InvalidDateRangeError(
                f"Range start {start_bs} is after range end {end_bs}"
            )

        return (
            datetime.combine(self.bs_to_ad_date(start_bs), time.min, tzinfo=timezone.utc),
            datetime.combine(self.bs_to_ad_date(end_bs), time.max, tzinfo=timezone.utc),
        )

    def current_bs_date(self) -> str:
        """Today's date in BS."""
        return self.ad_to_bs(self._clock())


def first_day_of_month(value: BsInput) -> str:
    """First day of the BS month containing value, as "YYYY-MM-01"."""
    bs = parse_bs_date(value)
    return BsDate(year=bs.year, month=bs.month, day=1).isoformat()


@lru_cache()
def get_converter() -> CalendarConverter:
    """
    Get the shared converter (cached).

    Built from the default anchor with the configured reference hour.
    Call get_converter.cache_clear() after changing settings.
    """
    reference_hour = get_settings().calendar.reference_hour
    anchor = DEFAULT_ANCHOR.model_copy(update={"reference_hour": reference_hour})
    return CalendarConverter(anchor=anchor)


def ad_to_bs(value: AdInput) -> str:
    return get_converter().ad_to_bs(value)


def bs_to_ad(value: BsInput) -> datetime:
    return get_converter().bs_to_ad(value)


def shift_bs_date(value: BsInput, days: int) -> str:
    return get_converter().shift_bs_date(value, days)


def bs_range_to_ad_bounds(start: BsInput, end: BsInput) -> tuple[datetime, datetime]:
    return get_converter().bs_range_to_ad_bounds(start, end)


def get_current_bs_date() -> str:
    return get_converter().current_bs_date()
