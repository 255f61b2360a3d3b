"""Error classes for the decimal type.

Every error also derives from the closest built-in exception, so callers can
catch either the library hierarchy or the usual Python one.
"""


class BigDecimalError(ArithmeticError):
    """Base class for BigDecimal errors."""

    pass


class NullInput(BigDecimalError, ValueError):
    """A parse source was None."""

    pass


class FormatError(BigDecimalError, ValueError):
    """Text has an illegal character, no mantissa digit, or a dangling exponent marker."""

    pass


class NumericOverflow(BigDecimalError, OverflowError):
    """Exponent outside the signed 32-bit range, or a scale beyond 65535."""

    pass


class InvalidOperation(BigDecimalError):
    """Rescale to a smaller scale."""

    pass


class DivisionByZero(BigDecimalError, ZeroDivisionError):
    """Division or modulo by zero."""

    pass
