"""
Devanagari Numerals and Currency

Table-driven digit substitution plus South Asian (Lakh/Crore) grouping:
1,23,45,678.90 rather than 12,345,678.90.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from sambat.calendar.data import ASCII_TO_DEVANAGARI, DEVANAGARI_TO_ASCII


Number = Union[int, float, Decimal, str]

_CENTS = Decimal("0.01")


def to_nepali_numerals(value: Number) -> str:
    """Replace ASCII digits with Devanagari ones; other characters pass through."""
    return str(value).translate(ASCII_TO_DEVANAGARI)


def from_nepali_numerals(value: str) -> str:
    """Replace Devanagari digits with ASCII ones."""
    return value.translate(DEVANAGARI_TO_ASCII)


def _group_lakh(digits: str) -> str:
    """Group an integer digit string as 12,34,567."""
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = [tail]
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    groups.insert(0, head)
    return ",".join(groups)


def _to_decimal(amount: Number) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise InvalidOperation(f"Not an amount: {amount!r}")
    # str() first so floats keep their shortest repr, not binary noise
    return Decimal(from_nepali_numerals(str(amount).strip()))


def format_currency(amount: Number) -> str:
    """
    Format an amount with Lakh/Crore grouping, 2 decimals, Devanagari digits.

    Halves round away from zero. Anything that is not a finite number
    renders as zero.
    """
    try:
        value = _to_decimal(amount)
    except InvalidOperation:
        return to_nepali_numerals("0.00")

    if not value.is_finite():
        return to_nepali_numerals("0.00")

    # Room for every integer digit, a rounding carry and the two decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
        integer_part, fraction = f"{abs(value):.2f}".split(".")

    return to_nepali_numerals(f"{sign}{_group_lakh(integer_part)}.{fraction}")
