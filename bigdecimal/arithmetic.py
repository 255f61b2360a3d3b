"""Arithmetic kernels for scaled decimal numbers.

Each function takes two scaled numbers (anything exposing `magnitude` and
`scale`) and returns the result as a (magnitude, scale) pair. BigDecimal's
operators wrap these; keeping them on plain integers lets the kernels be
tested without the value type.

Integer division follows truncation toward zero everywhere, and remainders
take the sign of the dividend.
"""

from __future__ import annotations

from bigdecimal.constants import DIVISION_GUARD_DIGITS, DIVISION_MAX_SCALE, MAX_SCALE
from bigdecimal.errors import DivisionByZero, NumericOverflow
from bigdecimal.math.integer import div_trunc, mod_trunc, pow10
from bigdecimal.scaling import ScaledNumber, align, clamp_scale

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "divide_to_scale",
    "modulo",
]


def add(left: ScaledNumber, right: ScaledNumber) -> tuple[int, int]:
    """Sum at the common scale."""
    left_magnitude, right_magnitude, scale = align(left, right)
    return left_magnitude + right_magnitude, scale


def subtract(left: ScaledNumber, right: ScaledNumber) -> tuple[int, int]:
    """Difference at the common scale."""
    left_magnitude, right_magnitude, scale = align(left, right)
    return left_magnitude - right_magnitude, scale


def multiply(left: ScaledNumber, right: ScaledNumber) -> tuple[int, int]:
    """Product of two numbers.

    The scales add up. If the sum exceeds 65535 the lowest digits are
    truncated and the scale is clamped to 65535.
    """
    magnitude = left.magnitude * right.magnitude
    return clamp_scale(magnitude, left.scale + right.scale, MAX_SCALE)


def divide(left: ScaledNumber, right: ScaledNumber) -> tuple[int, int]:
    """Quotient with a fixed band of guard digits.

    The dividend is multiplied by 10**(5 + left.scale) and the divisor by
    10**right.scale before the integer division. The working scale is the
    larger operand scale clamped to 50, and the result carries that scale
    plus 5 guard digits. This is not an exact rational quotient; use
    divide_to_scale for a quotient at a chosen scale.

    Raises:
        DivisionByZero: If right is zero
    """
    if right.magnitude == 0:
        raise DivisionByZero("Division by zero")

    numerator = left.magnitude * pow10(DIVISION_GUARD_DIGITS + left.scale)
    denominator = right.magnitude * pow10(right.scale)
    magnitude = div_trunc(numerator, denominator)

    magnitude, scale = clamp_scale(magnitude, max(left.scale, right.scale), DIVISION_MAX_SCALE)
    return magnitude, scale + DIVISION_GUARD_DIGITS


def divide_to_scale(left: ScaledNumber, right: ScaledNumber, scale: int) -> tuple[int, int]:
    """Exact quotient truncated toward zero at the requested scale.

    left / right == (L * 10**-ls) / (R * 10**-rs), so the magnitude at
    `scale` is L * 10**(scale + rs - ls) / R.

    Raises:
        DivisionByZero: If right is zero
        NumericOverflow: If scale is outside [0, 65535]
    """
    if not 0 <= scale <= MAX_SCALE:
        raise NumericOverflow(f"Scale must be in [0, {MAX_SCALE}], got {scale}")
    if right.magnitude == 0:
        raise DivisionByZero("Division by zero")

    shift = scale + right.scale - left.scale
    numerator = left.magnitude
    denominator = right.magnitude
    if shift >= 0:
        numerator *= pow10(shift)
    else:
        denominator *= pow10(-shift)
    return div_trunc(numerator, denominator), scale


def modulo(left: ScaledNumber, right: ScaledNumber) -> tuple[int, int]:
    """Remainder at the common scale.

    A zero dividend yields zero at scale 0 without looking at the divisor.

    Raises:
        DivisionByZero: If left is non-zero and right is zero
    """
    if left.magnitude == 0:
        return 0, 0
    if right.magnitude == 0:
        raise DivisionByZero("Modulo by zero")

    left_magnitude, right_magnitude, scale = align(left, right)
    return mod_trunc(left_magnitude, right_magnitude), scale
