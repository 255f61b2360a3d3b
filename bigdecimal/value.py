"""Arbitrary-precision decimal fixed-point value type.

A BigDecimal is an integer magnitude paired with a scale:

    value = magnitude * 10**-scale

The magnitude can be arbitrarily large; the scale is bounded to 65535, so
the smallest representable step is 1E-65535. Operations that would need a
larger scale drop the digits beyond it instead of raising.

Usage pattern:
    from bigdecimal import BigDecimal, parse

    price = parse("1234.5678")
    total = price * 3 + BigDecimal(5, 1)   # int operands convert implicitly
    str(total)                             # "3704.2034"
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from bigdecimal import arithmetic
from bigdecimal.constants import MAX_SCALE
from bigdecimal.errors import BigDecimalError, FormatError, NumericOverflow
from bigdecimal.formatting import format_decimal, format_magnitude
from bigdecimal.math.integer import div_trunc, int_to_digits, pow10
from bigdecimal.parsing import parse_components
from bigdecimal.scaling import upscale

__all__ = ["BigDecimal", "parse", "align"]


@dataclass(frozen=True, eq=False, repr=False)
class BigDecimal:
    """Immutable decimal number stored as an integer magnitude and a scale.

    Equality and ordering are numeric: BigDecimal(5, 0) == BigDecimal(50, 1).
    Arithmetic also accepts int, Decimal and float operands, which are
    converted with from_native() first. Comparisons accept int and Decimal
    only, which keeps equal values hashing alike; against a float, == is
    False and ordering raises TypeError. Use compare() for floats.

    Attributes:
        magnitude: Signed integer digits of the value
        scale: Number of those digits after the decimal point, 0..65535
    """

    magnitude: int
    scale: int = 0

    def __post_init__(self) -> None:
        """Validate field types and the scale range."""
        if not isinstance(self.magnitude, int) or isinstance(self.magnitude, bool):
            raise TypeError(f"BigDecimal magnitude requires int, got {type(self.magnitude).__name__}")
        if not isinstance(self.scale, int) or isinstance(self.scale, bool):
            raise TypeError(f"BigDecimal scale requires int, got {type(self.scale).__name__}")
        if not 0 <= self.scale <= MAX_SCALE:
            raise NumericOverflow(f"Scale must be in [0, {MAX_SCALE}], got {self.scale}")

    # --- Construction ---

    @classmethod
    def zero(cls) -> BigDecimal:
        """Create a BigDecimal with value 0."""
        return cls(0)

    @classmethod
    def parse(cls, text: str) -> BigDecimal:
        """Parse a BigDecimal from text such as "-12.5e3".

        Raises:
            NullInput: If text is None
            FormatError: If text is not a number
            NumericOverflow: If the exponent or the fractional digits overflow
        """
        magnitude, scale = parse_components(text)
        return cls(magnitude, scale)

    @classmethod
    def from_int(cls, value: Any) -> BigDecimal:
        """Create from any integer, including fixed-width integer types.

        Raises:
            TypeError: If value is not an integer
        """
        if isinstance(value, bool):
            raise TypeError("BigDecimal.from_int requires int, got bool")
        try:
            magnitude = operator.index(value)
        except TypeError:
            raise TypeError(f"BigDecimal.from_int requires int, got {type(value).__name__}") from None
        return cls(magnitude)

    @classmethod
    def from_float(cls, value: float) -> BigDecimal:
        """Create from the shortest text that round-trips to value.

        BigDecimal.from_float(0.1) is exactly 0.1, not the binary expansion
        of the float.

        Raises:
            FormatError: If value is infinite or NaN
        """
        if not isinstance(value, float):
            raise TypeError(f"BigDecimal.from_float requires float, got {type(value).__name__}")
        return cls.parse(repr(float(value)))

    @classmethod
    def from_decimal(cls, value: Decimal) -> BigDecimal:
        """Create from a decimal.Decimal with exactly its digits.

        Raises:
            FormatError: If value is infinite or NaN
        """
        if not isinstance(value, Decimal):
            raise TypeError(f"BigDecimal.from_decimal requires Decimal, got {type(value).__name__}")
        if not value.is_finite():
            raise FormatError(f"Cannot convert non-finite Decimal {value}")
        return cls.parse(str(value))

    @classmethod
    def from_native(cls, value: object) -> BigDecimal:
        """Convert a BigDecimal, int, float, Decimal or str.

        Raises:
            TypeError: For any other type
        """
        if isinstance(value, BigDecimal):
            return value
        if isinstance(value, bool):
            raise TypeError("Cannot convert bool to BigDecimal")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, float):
            return cls.from_float(value)
        if isinstance(value, Decimal):
            return cls.from_decimal(value)
        if isinstance(value, str):
            return cls.parse(value)
        if hasattr(type(value), "__index__"):
            return cls.from_int(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to BigDecimal")

    # --- Scale alignment ---

    def upscale(self, new_scale: int) -> BigDecimal:
        """Return the same value expressed with new_scale fractional digits.

        Raises:
            InvalidOperation: If new_scale is smaller than the current scale
            NumericOverflow: If new_scale exceeds 65535
        """
        if new_scale > MAX_SCALE:
            raise NumericOverflow(f"Scale must be in [0, {MAX_SCALE}], got {new_scale}")
        return BigDecimal(upscale(self.magnitude, self.scale, new_scale), new_scale)

    # --- Conversion ---

    def to_float(self) -> float:
        """Narrow to the nearest float.

        Raises:
            NumericOverflow: If the value is too large for a float
        """
        if self.magnitude == 0:
            return 0.0
        try:
            # int / int is correctly rounded for any size of operands
            return self.magnitude / pow10(self.scale)
        except OverflowError as exc:
            raise NumericOverflow(f"BigDecimal too large for float: {exc}") from exc

    def to_decimal(self) -> Decimal:
        """Convert to an exact decimal.Decimal."""
        sign = 1 if self.magnitude < 0 else 0
        digits = tuple(int(d) for d in int_to_digits(abs(self.magnitude)))
        return Decimal((sign, digits, -self.scale))

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        """Convert to int, truncating toward zero."""
        return div_trunc(self.magnitude, pow10(self.scale))

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self.magnitude != 0

    def __str__(self) -> str:
        return format_decimal(self.magnitude, self.scale)

    def __repr__(self) -> str:
        return f"BigDecimal(magnitude={format_magnitude(self.magnitude)}, scale={self.scale})"

    def __hash__(self) -> int:
        # Consistent with numeric equality across scales, int and Decimal
        return hash(self.to_decimal())

    # --- Arithmetic operations ---

    def __add__(self, other: object) -> BigDecimal:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.add(self, rhs))

    def __radd__(self, other: object) -> BigDecimal:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.add(lhs, self))

    def __sub__(self, other: object) -> BigDecimal:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.subtract(self, rhs))

    def __rsub__(self, other: object) -> BigDecimal:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.subtract(lhs, self))

    def __mul__(self, other: object) -> BigDecimal:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.multiply(self, rhs))

    def __rmul__(self, other: object) -> BigDecimal:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.multiply(lhs, self))

    def __truediv__(self, other: object) -> BigDecimal:
        """Divide with 5 guard digits (see arithmetic.divide).

        Raises:
            DivisionByZero: If other is zero
        """
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.divide(self, rhs))

    def __rtruediv__(self, other: object) -> BigDecimal:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.divide(lhs, self))

    def __mod__(self, other: object) -> BigDecimal:
        """Remainder with the sign of self.

        Raises:
            DivisionByZero: If self is non-zero and other is zero
        """
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.modulo(self, rhs))

    def __rmod__(self, other: object) -> BigDecimal:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return BigDecimal(*arithmetic.modulo(lhs, self))

    def __neg__(self) -> BigDecimal:
        return BigDecimal(-self.magnitude, self.scale)

    def __pos__(self) -> BigDecimal:
        return self

    def __abs__(self) -> BigDecimal:
        return BigDecimal(abs(self.magnitude), self.scale)

    def divide(self, other: object, scale: int) -> BigDecimal:
        """Exact quotient truncated toward zero at the given scale.

        Unlike `/`, the result does not depend on the operand scales:
        BigDecimal.parse("1.0").divide(3, 4) == BigDecimal(3333, 4).

        Raises:
            DivisionByZero: If other is zero
            NumericOverflow: If scale is outside [0, 65535]
        """
        return BigDecimal(*arithmetic.divide_to_scale(self, BigDecimal.from_native(other), scale))

    # --- Comparison operations ---

    def compare(self, other: object) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other.

        Raises:
            TypeError: If other cannot be converted
        """
        magnitude, _ = arithmetic.subtract(self, BigDecimal.from_native(other))
        return (magnitude > 0) - (magnitude < 0)

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other, allow_float=False)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) == 0

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other, allow_float=False)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other, allow_float=False)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other, allow_float=False)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other, allow_float=False)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0

    # --- Pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        """Validate from str/int/float/Decimal, serialize as canonical text."""
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, core_schema: Any, handler: Any) -> dict[str, Any]:
        return {"type": "string", "pattern": r"^[+-]?[0-9]*(\.[0-9]*)?([eE][+-]?[0-9]+)?$"}


def _coerce(value: object, allow_float: bool = True) -> BigDecimal | None:
    """Convert an operand for the operators, or None if its type is unsupported.

    Comparisons pass allow_float=False: a float equal to a BigDecimal would
    not share its hash.
    """
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and (not allow_float or not math.isfinite(value)):
        return None
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    if isinstance(value, (int, float, Decimal)):
        return BigDecimal.from_native(value)
    return None


def _validate(value: object) -> BigDecimal:
    try:
        return BigDecimal.from_native(value)
    except (BigDecimalError, TypeError) as exc:
        raise ValueError(str(exc)) from exc


def parse(text: str) -> BigDecimal:
    """Parse a BigDecimal from text. See BigDecimal.parse."""
    return BigDecimal.parse(text)


def align(left: BigDecimal, right: BigDecimal) -> tuple[BigDecimal, BigDecimal, int]:
    """Upscale both values to the larger of their scales.

    Returns:
        Tuple of (left, right, common scale)
    """
    scale = max(left.scale, right.scale)
    return left.upscale(scale), right.upscale(scale), scale
