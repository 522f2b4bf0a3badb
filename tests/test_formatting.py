"""Tests for numeral, currency and date display formatting."""

from decimal import Decimal

import pytest

from sambat.calendar.errors import InvalidDayError, InvalidMonthError
from sambat.formatting import (
    format_bs_date,
    format_currency,
    from_nepali_numerals,
    month_name,
    to_nepali_numerals,
    weekday_name,
)


class TestNumerals:
    """Tests for Devanagari digit conversion."""

    def test_integer(self):
        """Test toNepaliNumerals(123)."""
        assert to_nepali_numerals(123) == "१२३"

    def test_string_keeps_other_characters(self):
        """Test separators and letters pass through."""
        assert to_nepali_numerals("2082-09-22") == "२०८२-०९-२२"
        assert to_nepali_numerals("Rs. 50") == "Rs. ५०"

    def test_float(self):
        """Test decimal point is kept."""
        assert to_nepali_numerals(12.5) == "१२.५"

    def test_from_nepali_numerals(self):
        """Test the inverse mapping."""
        assert from_nepali_numerals("२०८२-०९-२२") == "2082-09-22"
        assert from_nepali_numerals(to_nepali_numerals("0123456789")) == "0123456789"


class TestFormatCurrency:
    """Tests for Lakh/Crore currency formatting."""

    @pytest.mark.parametrize("amount, expected", [
        (0, "०.००"),
        (5, "५.००"),
        (100, "१००.००"),
        (1000, "१,०००.००"),
        (100000, "१,००,०००.००"),
        (1234567.891, "१२,३४,५६७.८९"),
        (12345678, "१,२३,४५,६७८.००"),
        (Decimal("999.999"), "१,०००.००"),
    ])
    def test_grouping(self, amount, expected):
        """Test South Asian digit grouping with 2 decimals."""
        assert format_currency(amount) == expected

    def test_amounts_beyond_default_decimal_precision(self):
        """Test amounts wider than 28 digits still format."""
        assert format_currency(10 ** 27) == "१," + "००," * 12 + "०००.००"
        assert format_currency(1e30) == "१०," + "००," * 13 + "०००.००"
        assert format_currency(-(10 ** 27)) == "-१," + "००," * 12 + "०००.००"

    def test_negative(self):
        """Test negative amounts keep their sign."""
        assert format_currency(-1500.5) == "-१,५००.५०"

    def test_rounds_half_up(self):
        """Test halves round away from zero."""
        assert format_currency(0.005) == "०.०१"
        assert format_currency("2.675") == "२.६८"

    def test_numeric_strings(self):
        """Test string amounts, including Devanagari digits."""
        assert format_currency("2500") == "२,५००.००"
        assert format_currency("१२३४") == "१,२३४.००"

    @pytest.mark.parametrize("amount", ["abc", "", float("nan"), float("inf"), True])
    def test_non_numbers_render_zero(self, amount):
        """Test non-numeric input renders as zero."""
        assert format_currency(amount) == "०.००"


class TestDateDisplay:
    """Tests for month names and long-form dates."""

    def test_month_names(self):
        """Test English and Nepali month names."""
        assert month_name(1) == "Baisakh"
        assert month_name(9) == "Poush"
        assert month_name(12, nepali=True) == "चैत"

    def test_month_name_invalid(self):
        """Test month outside 1-12."""
        with pytest.raises(InvalidMonthError):
            month_name(13)

    def test_format_bs_date(self):
        """Test long-form English date."""
        assert format_bs_date("2082-09-22") == "22 Poush 2082"

    def test_format_bs_date_nepali(self):
        """Test long-form Nepali date."""
        assert format_bs_date("2082/09/22", nepali=True) == "२२ पुस २०८२"

    def test_format_bs_date_validates(self):
        """Test nonexistent dates are rejected."""
        with pytest.raises(InvalidDayError):
            format_bs_date("2082-09-31")

    def test_weekday_names(self):
        """Test Sunday-first Nepali weekday abbreviations."""
        assert weekday_name(0) == "आइत"
        assert weekday_name(2) == "मंगल"
        assert weekday_name(6) == "शनि"

    @pytest.mark.parametrize("weekday", [-1, 7])
    def test_weekday_name_invalid(self, weekday):
        """Test weekday index outside 0-6."""
        with pytest.raises(ValueError):
            weekday_name(weekday)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
