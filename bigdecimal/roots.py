"""Iterative square root approximation.

Algorithm:
    1. Seed: num = (x*x + x) / (2*x)
    2. Refine: num = (num*num + x) / (2*num)
    3. Stop as soon as a refinement equals the previous value, or after
       20 refinements, returning the last value either way

All steps use BigDecimal's own operators, including its guard-digit
division, so the result carries that division's scale rules. Every
iteration emits a debug trace of the current approximation.
"""

from __future__ import annotations

import contextlib

import structlog

from bigdecimal.constants import SQRT_MAX_ITERATIONS
from bigdecimal.value import BigDecimal

logger = structlog.get_logger()


def sqrt(value: BigDecimal | int) -> BigDecimal:
    """Approximate the square root of value.

    Args:
        value: Number to take the root of (ints are converted)

    Returns:
        The last approximation computed

    Raises:
        DivisionByZero: If value is zero (the seed divides by 2*value)
        TypeError: If value cannot be converted to BigDecimal
    """
    x = BigDecimal.from_native(value)
    approximation = (x * x + x) / (2 * x)

    for iteration in range(SQRT_MAX_ITERATIONS):
        _trace(iteration, approximation)
        refined = _refine(approximation, x)
        if refined == approximation:
            return approximation
        approximation = refined

    return approximation


def _refine(approximation: BigDecimal, x: BigDecimal) -> BigDecimal:
    return (approximation * approximation + x) / (2 * approximation)


def _trace(iteration: int, approximation: BigDecimal) -> None:
    # Diagnostic only; a broken sink must not change the result
    with contextlib.suppress(Exception):
        logger.debug("sqrt_iteration", iteration=iteration, approximation=str(approximation))
