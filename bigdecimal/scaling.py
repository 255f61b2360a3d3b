"""Scale alignment helpers.

Functions for moving a magnitude between scales. Scales only ever grow
during alignment; the one way down is clamp_scale, which truncates digits
when an operation would exceed its scale limit.
"""

from __future__ import annotations

from typing import Protocol

import structlog

from bigdecimal.constants import MAX_SCALE
from bigdecimal.errors import InvalidOperation
from bigdecimal.math.integer import pow10, shift_right

logger = structlog.get_logger()


class ScaledNumber(Protocol):
    """Anything carrying an integer magnitude and a decimal scale."""

    @property
    def magnitude(self) -> int: ...

    @property
    def scale(self) -> int: ...


def upscale(magnitude: int, scale: int, new_scale: int) -> int:
    """Rescale magnitude from `scale` to the larger `new_scale`.

    Args:
        magnitude: Integer magnitude at `scale`
        scale: Current number of fractional digits
        new_scale: Target number of fractional digits

    Returns:
        The magnitude expressed at new_scale

    Raises:
        InvalidOperation: If new_scale < scale
    """
    if new_scale < scale:
        raise InvalidOperation(f"Cannot upscale from scale {scale} to smaller scale {new_scale}")
    return magnitude * pow10(new_scale - scale)


def common_scale(left: ScaledNumber, right: ScaledNumber) -> int:
    """Return the scale both operands align to."""
    return max(left.scale, right.scale)


def align(left: ScaledNumber, right: ScaledNumber) -> tuple[int, int, int]:
    """Bring two numbers to their common scale.

    Returns:
        Tuple of (left magnitude, right magnitude, common scale)
    """
    scale = common_scale(left, right)
    return (
        upscale(left.magnitude, left.scale, scale),
        upscale(right.magnitude, right.scale, scale),
        scale,
    )


def clamp_scale(magnitude: int, scale: int, limit: int = MAX_SCALE) -> tuple[int, int]:
    """Truncate magnitude so its scale does not exceed limit.

    Digits beyond the limit are dropped toward zero. This is the defined
    precision loss of the decimal type, not an error.

    Returns:
        Tuple of (magnitude, scale) with scale <= limit
    """
    if scale <= limit:
        return magnitude, scale
    dropped = scale - limit
    logger.debug("precision_truncated", scale=scale, limit=limit, dropped_digits=dropped)
    return shift_right(magnitude, dropped), limit
