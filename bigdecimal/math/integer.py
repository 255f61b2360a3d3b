"""Integer kernels for decimal fixed-point math.

Everything in this module works on plain Python ints. Two details matter
for a decimal type built on top of them:

- Division truncates toward zero and remainders keep the sign of the
  dividend. Python's // and % floor toward negative infinity instead.
- Python limits int <-> str conversion to a few thousand digits by default
  (sys.set_int_max_str_digits). A scale of 65535 needs far more than that,
  so long digit strings are converted in chunks.
"""

from __future__ import annotations

from functools import lru_cache

from bigdecimal.constants import DIVISION_GUARD_DIGITS, MAX_SCALE

__all__ = [
    "DIGIT_CHUNK",
    "POW10_CACHE_LIMIT",
    "pow10",
    "div_trunc",
    "mod_trunc",
    "shift_right",
    "digits_to_int",
    "int_to_digits",
]

# Below the smallest limit sys.set_int_max_str_digits accepts (640)
DIGIT_CHUNK = 512

_CHUNK_LIMIT = 10**DIGIT_CHUNK

# Largest exponent pow10 keeps in its cache
POW10_CACHE_LIMIT = MAX_SCALE + DIVISION_GUARD_DIGITS


def pow10(exponent: int) -> int:
    """Return 10**exponent.

    Powers up to the largest scale plus the division guard digits are
    cached; larger ones (only reachable through huge parsed exponents) are
    computed on every call.

    Raises:
        ValueError: If exponent is negative
    """
    if exponent < 0:
        raise ValueError(f"pow10 requires a non-negative exponent, got {exponent}")
    if exponent <= POW10_CACHE_LIMIT:
        return _cached_pow10(exponent)
    return 10**exponent


@lru_cache(maxsize=512)
def _cached_pow10(exponent: int) -> int:
    return 10**exponent


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Examples:
        -7 // 3 == -3 (floors toward -inf)
        div_trunc(-7, 3) == -2

    Raises:
        ZeroDivisionError: If b is zero
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")

    # Same sign: floor and truncate agree
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def mod_trunc(a: int, b: int) -> int:
    """Remainder matching div_trunc: a == div_trunc(a, b) * b + mod_trunc(a, b).

    The result is zero or has the sign of a.

    Raises:
        ZeroDivisionError: If b is zero
    """
    return a - div_trunc(a, b) * b


def shift_right(value: int, digits: int) -> int:
    """Drop the lowest `digits` decimal digits of value, truncating toward zero.

    Returns 0 without computing 10**digits when every digit would be dropped,
    so absurd shifts (e.g. from an exponent near -2**31) stay cheap.
    """
    if digits <= 0:
        return value
    # 10**d > 2**(3d), so 3d >= bit_length means |value| < 10**digits
    if 3 * digits >= value.bit_length():
        return 0
    return div_trunc(value, pow10(digits))


def digits_to_int(digits: str) -> int:
    """Parse an optionally signed string of ASCII digits of any length.

    Raises:
        ValueError: If the string is empty or contains a non-digit
    """
    negative = digits.startswith("-")
    body = digits[1:] if digits[:1] in ("-", "+") else digits
    if not body or not body.isascii() or not body.isdigit():
        raise ValueError(f"Not a digit string: {digits[:40]!r}")
    value = _parse_unsigned(body)
    return -value if negative else value


def _parse_unsigned(body: str) -> int:
    if len(body) <= DIGIT_CHUNK:
        return int(body)
    split = len(body) // 2
    low_len = len(body) - split
    return _parse_unsigned(body[:split]) * pow10(low_len) + _parse_unsigned(body[split:])


def int_to_digits(value: int) -> str:
    """Render a non-negative int as decimal digits, for any size of int.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError("int_to_digits requires a non-negative value")
    if value < _CHUNK_LIMIT:
        return str(value)
    # roughly half the digit count (log10(2) ~= 0.30103)
    low_len = value.bit_length() * 30103 // 200000
    high, low = divmod(value, pow10(low_len))
    return int_to_digits(high) + int_to_digits(low).rjust(low_len, "0")
