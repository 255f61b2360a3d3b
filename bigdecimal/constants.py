"""Numeric limits for the decimal type.

Centralizes the bounds every component agrees on.
"""

# Largest number of digits after the decimal point (unsigned 16-bit)
MAX_SCALE = 65_535

# Parsed exponents must fit a signed 32-bit integer
EXPONENT_MIN = -(2**31)
EXPONENT_MAX = 2**31 - 1

# Division keeps this many extra digits on top of its working scale
DIVISION_GUARD_DIGITS = 5

# Working scale of a division is clamped to this before the guard digits
DIVISION_MAX_SCALE = 50

# Refinement steps for the square root approximation
SQRT_MAX_ITERATIONS = 20
