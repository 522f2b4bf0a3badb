"""Display formatting package."""

from sambat.formatting.dates import format_bs_date, month_name, weekday_name
from sambat.formatting.numerals import (
    format_currency,
    from_nepali_numerals,
    to_nepali_numerals,
)

__all__ = [
    "format_bs_date",
    "format_currency",
    "from_nepali_numerals",
    "month_name",
    "to_nepali_numerals",
    "weekday_name",
]
