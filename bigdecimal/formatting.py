"""Canonical text rendering.

The canonical form always has exactly one decimal point and never an
exponent, grouping separator or leading '+'. Integral values keep a trailing
point ("5.") so the text still reads as a decimal.
"""

from __future__ import annotations

from bigdecimal.math.integer import int_to_digits


def format_magnitude(magnitude: int) -> str:
    """Render a signed integer of any length, e.g. for repr()."""
    sign = "-" if magnitude < 0 else ""
    return sign + int_to_digits(abs(magnitude))


def format_decimal(magnitude: int, scale: int) -> str:
    """Render magnitude * 10**-scale as canonical text.

    Examples:
        format_decimal(5, 0) == "5."
        format_decimal(123456, 2) == "1234.56"
        format_decimal(123, 5) == "0.00123"
        format_decimal(-123, 5) == "-0.00123"
    """
    sign = "-" if magnitude < 0 else ""
    digits = int_to_digits(abs(magnitude))

    if scale == 0:
        return f"{sign}{digits}."
    if len(digits) > scale:
        return f"{sign}{digits[:-scale]}.{digits[-scale:]}"
    return f"{sign}0.{digits.rjust(scale, '0')}"
