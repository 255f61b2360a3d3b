"""Arbitrary-precision decimal fixed-point numbers."""

from bigdecimal.errors import (
    BigDecimalError,
    DivisionByZero,
    FormatError,
    InvalidOperation,
    NullInput,
    NumericOverflow,
)
from bigdecimal.roots import sqrt
from bigdecimal.value import BigDecimal, align, parse

__version__ = "0.1.0"
__all__ = [
    "BigDecimal",
    "parse",
    "align",
    "sqrt",
    "BigDecimalError",
    "NullInput",
    "FormatError",
    "NumericOverflow",
    "InvalidOperation",
    "DivisionByZero",
    "__version__",
]
