"""
Core Date Models for Sambat

These models define the values that cross the calendar boundary:
a BS date triple and the anchor that ties BS to the Gregorian calendar.

DESIGN DECISION: Models only enforce structure (month 1-12, day 1-32).
Whether a day actually exists in a given BS month depends on the
month-length table, so that check lives in the calendar layer and
raises typed errors instead of pydantic ValidationErrors.
"""

from datetime import date, datetime, time, timezone

from pydantic import BaseModel, ConfigDict, Field


class BsDate(BaseModel):
    """
    A Bikram Sambat calendar date.

    Immutable. Serializes canonically as YYYY-MM-DD.
    """
    model_config = ConfigDict(frozen=True)

    year: int = Field(
        ...,
        ge=1,
        le=9999,
        description="BS year"
    )
    month: int = Field(
        ...,
        ge=1,
        le=12,
        description="BS month (1 = Baisakh)"
    )
    day: int = Field(
        ...,
        ge=1,
        le=32,
        description="Day of the BS month"
    )

    @property
    def sort_key(self) -> int:
        """Composite key for ordering: year*10000 + month*100 + day."""
        return self.year * 10000 + self.month * 100 + self.day

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


class AnchorCorrespondence(BaseModel):
    """
    The single known BS <-> AD pair every conversion is counted from.

    The AD side is pinned to a fixed UTC hour so day differences
    never pick up timezone or DST offsets.
    """
    model_config = ConfigDict(frozen=True)

    bs_year: int = Field(..., ge=1, le=9999)
    bs_month: int = Field(..., ge=1, le=12)
    bs_day: int = Field(..., ge=1, le=32)
    ad_date: date = Field(
        ...,
        description="Gregorian date matching the BS triple"
    )
    reference_hour: int = Field(
        default=12,
        ge=0,
        le=23,
        description="UTC hour used for every AD instant"
    )

    @property
    def bs_date(self) -> BsDate:
        return BsDate(year=self.bs_year, month=self.bs_month, day=self.bs_day)

    @property
    def ad_instant(self) -> datetime:
        """Anchor AD date as an aware UTC datetime at the reference hour."""
        return datetime.combine(
            self.ad_date,
            time(hour=self.reference_hour),
            tzinfo=timezone.utc,
        )


# 2082 Poush 22 BS = January 6, 2026 AD
DEFAULT_ANCHOR = AnchorCorrespondence(
    bs_year=2082,
    bs_month=9,
    bs_day=22,
    ad_date=date(2026, 1, 6),
)
