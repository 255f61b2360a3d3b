"""Integer primitives for the decimal type.

This package provides the arbitrary-precision integer helpers the decimal
arithmetic is built on:
- pow10: cached powers of ten
- div_trunc / mod_trunc: truncating division and remainder
- digits_to_int / int_to_digits: digit strings beyond the int/str limit
"""

from bigdecimal.math.integer import (
    digits_to_int,
    div_trunc,
    int_to_digits,
    mod_trunc,
    pow10,
    shift_right,
)

__all__ = [
    "pow10",
    "div_trunc",
    "mod_trunc",
    "shift_right",
    "digits_to_int",
    "int_to_digits",
]
