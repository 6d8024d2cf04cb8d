"""
Display Formatter
=================
Turns a result value into the text shown on the calculator display.

Trailing fractional zeros are removed. Values whose integer part has more
digits than the display allows switch to ``<mantissa>e<exponent>`` with one
digit before the decimal point, e.g. 123456789 -> "1.23456789e8".
"""
import string
from decimal import Context, Decimal
from typing import Optional


def count_digits(text: str) -> int:
    """Number of digit characters in an entry (sign and '.' excluded)."""
    return sum(1 for ch in text if ch in string.digits)


def strip_trailing_zeros(value: Decimal) -> Decimal:
    """2.50 -> 2.5, 3.00 -> 3, -0 -> 0. Never rounds."""
    if value.is_zero():
        return Decimal(0)
    # Precision equal to the coefficient length, so normalize() is exact
    exact = Context(prec=len(value.as_tuple().digits))
    return value.normalize(exact)


def _plain(value: Decimal) -> str:
    return format(value, "f")


def format_for_display(value: Optional[Decimal], max_digits: int) -> str:
    if value is None:
        return "0"

    normalized = strip_trailing_zeros(value)

    # Integer-part digits, sign excluded; a value below 1 has the single digit "0"
    integer_digits = max(normalized.adjusted() + 1, 1)
    if integer_digits <= max_digits:
        return _plain(normalized)

    # ---- Scientific form: m x 10^e ----
    exponent = integer_digits - 1
    exact = Context(prec=len(normalized.as_tuple().digits))
    mantissa = strip_trailing_zeros(normalized.scaleb(-exponent, exact))
    return f"{_plain(mantissa)}e{exponent}"
