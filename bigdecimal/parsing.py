"""Text parser for decimal numbers.

Number format (pseudo-regex, no whitespace, ASCII digits only):

    [+-]? [0-9]* (\\. [0-9]*)? ([eE] [+-]? [0-9]+)?

Every part is optional, but the mantissa needs at least one digit and an
exponent marker needs at least one digit after it.

Parsing makes two passes:

1. split_number() walks an explicit state machine over the characters and
   produces the mantissa digits, the exponent digits (if any) and the number
   of digits after the decimal point. For "1234.5678E-17" that is "12345678",
   "-17" and 4.
2. fold_exponent() turns those into the final (magnitude, scale), e.g.
   12345678 with scale 4 - (-17) = 21.

The exponent is limited to the signed 32-bit range and the fractional digits
to 65535; either overflow raises NumericOverflow. When folding a negative
exponent would push the scale beyond 65535, low digits are dropped instead
(1E-70000 parses to 0).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bigdecimal.constants import EXPONENT_MAX, EXPONENT_MIN, MAX_SCALE
from bigdecimal.errors import FormatError, NullInput, NumericOverflow
from bigdecimal.math.integer import digits_to_int, pow10
from bigdecimal.scaling import clamp_scale

__all__ = [
    "ParseState",
    "ParseAction",
    "CharClass",
    "NumberParts",
    "classify",
    "transition",
    "split_number",
    "fold_exponent",
    "parse_components",
]


class ParseState(Enum):
    """Position of the parser within a number."""

    # First character
    START = "start"
    # Integer part, or right after the sign
    INTEGER = "integer"
    # After the decimal point
    DECIMAL = "decimal"
    # Right after the 'e'/'E'
    EXPONENT_MARKER = "exponent_marker"
    # After the exponent sign, or inside the exponent digits
    EXPONENT = "exponent"


class ParseAction(Enum):
    """What to do with the character that caused a transition."""

    APPEND_MANTISSA = "append_mantissa"
    APPEND_FRACTION = "append_fraction"
    START_EXPONENT = "start_exponent"
    APPEND_EXPONENT = "append_exponent"
    SKIP = "skip"


class CharClass(Enum):
    DIGIT = "digit"
    SIGN = "sign"
    POINT = "point"
    EXPONENT_MARKER = "exponent_marker"
    OTHER = "other"


_TRANSITIONS: dict[tuple[ParseState, CharClass], tuple[ParseState, ParseAction]] = {
    (ParseState.START, CharClass.DIGIT): (ParseState.INTEGER, ParseAction.APPEND_MANTISSA),
    (ParseState.START, CharClass.SIGN): (ParseState.INTEGER, ParseAction.APPEND_MANTISSA),
    (ParseState.START, CharClass.POINT): (ParseState.DECIMAL, ParseAction.SKIP),
    (ParseState.INTEGER, CharClass.DIGIT): (ParseState.INTEGER, ParseAction.APPEND_MANTISSA),
    (ParseState.INTEGER, CharClass.POINT): (ParseState.DECIMAL, ParseAction.SKIP),
    (ParseState.INTEGER, CharClass.EXPONENT_MARKER): (ParseState.EXPONENT_MARKER, ParseAction.START_EXPONENT),
    (ParseState.DECIMAL, CharClass.DIGIT): (ParseState.DECIMAL, ParseAction.APPEND_FRACTION),
    (ParseState.DECIMAL, CharClass.EXPONENT_MARKER): (ParseState.EXPONENT_MARKER, ParseAction.START_EXPONENT),
    (ParseState.EXPONENT_MARKER, CharClass.DIGIT): (ParseState.EXPONENT, ParseAction.APPEND_EXPONENT),
    (ParseState.EXPONENT_MARKER, CharClass.SIGN): (ParseState.EXPONENT, ParseAction.APPEND_EXPONENT),
    (ParseState.EXPONENT, CharClass.DIGIT): (ParseState.EXPONENT, ParseAction.APPEND_EXPONENT),
}


def classify(char: str) -> CharClass:
    """Map a character to the class the state machine switches on."""
    if "0" <= char <= "9":
        return CharClass.DIGIT
    if char in "+-":
        return CharClass.SIGN
    if char == ".":
        return CharClass.POINT
    if char in "eE":
        return CharClass.EXPONENT_MARKER
    return CharClass.OTHER


def transition(state: ParseState, char: str) -> tuple[ParseState, ParseAction] | None:
    """Compute the next state for one character.

    Returns:
        (next state, action), or None if char is illegal in this state
    """
    return _TRANSITIONS.get((state, classify(char)))


@dataclass(frozen=True)
class NumberParts:
    """Result of the first parsing pass.

    Attributes:
        mantissa: Optional sign followed by all mantissa digits, point removed
        exponent: Optional sign followed by exponent digits, or None if the
            text had no exponent marker
        scale: Number of digits after the decimal point, before the exponent
            is applied
    """

    mantissa: str
    exponent: str | None
    scale: int


def split_number(text: str) -> NumberParts:
    """First pass: validate text and split it into its parts.

    Raises:
        FormatError: On an illegal character, a missing mantissa digit or a
            missing exponent digit
        NumericOverflow: If there are more than 65535 digits after the point
    """
    mantissa: list[str] = []
    exponent: list[str] = []
    has_exponent = False
    scale = 0
    state = ParseState.START

    for char in text:
        step = transition(state, char)
        if step is None:
            raise FormatError(f"Invalid character {char!r} in: {text[:80]!r}")
        state, action = step

        if action is ParseAction.APPEND_MANTISSA:
            mantissa.append(char)
        elif action is ParseAction.APPEND_FRACTION:
            if scale == MAX_SCALE:
                raise NumericOverflow(f"More than {MAX_SCALE} digits after the decimal point")
            scale += 1
            mantissa.append(char)
        elif action is ParseAction.START_EXPONENT:
            has_exponent = True
        elif action is ParseAction.APPEND_EXPONENT:
            exponent.append(char)

    if not mantissa or not mantissa[-1].isdigit():
        # only a sign, or nothing at all
        raise FormatError(f"Text did not contain a value: {text[:80]!r}")

    if has_exponent and (not exponent or not exponent[-1].isdigit()):
        raise FormatError(f"Text contained an exponent marker but no exponent value: {text[:80]!r}")

    return NumberParts(
        mantissa="".join(mantissa),
        exponent="".join(exponent) if has_exponent else None,
        scale=scale,
    )


def _parse_exponent(exponent: str) -> int:
    # Bound the digit count first so int() never sees an absurd string
    if len(exponent.lstrip("+-").lstrip("0")) > 10:
        raise NumericOverflow(f"Exponent out of 32-bit range: {exponent[:40]}")
    value = digits_to_int(exponent)
    if not EXPONENT_MIN <= value <= EXPONENT_MAX:
        raise NumericOverflow(f"Exponent out of 32-bit range: {exponent}")
    return value


def fold_exponent(magnitude: int, scale: int, exponent: int) -> tuple[int, int]:
    """Second pass: apply an exponent to a (magnitude, scale) pair.

    The scale counts digits after the point while the exponent counts
    powers of ten, so a positive exponent lowers the scale and a negative
    one raises it.

    Returns:
        Tuple of (magnitude, scale) with 0 <= scale <= 65535
    """
    if exponent > 0:
        if exponent <= scale:
            # e.g. 1.2e1: scale 1, exponent 1 -> 12 with scale 0
            return magnitude, scale - exponent
        # scale would go negative; move the rest into the magnitude
        if magnitude == 0:
            return 0, 0
        return magnitude * pow10(exponent - scale), 0

    if exponent < 0:
        # e.g. 1.2e-1: scale 1, exponent -1 -> 12 with scale 2
        return clamp_scale(magnitude, scale - exponent, MAX_SCALE)

    return magnitude, scale


def parse_components(text: str) -> tuple[int, int]:
    """Parse text into a (magnitude, scale) pair.

    Raises:
        NullInput: If text is None
        TypeError: If text is not a str
        FormatError: If text is not a number
        NumericOverflow: If the exponent or the fractional digits overflow
    """
    if text is None:
        raise NullInput("Cannot parse None")
    if not isinstance(text, str):
        raise TypeError(f"parse requires str, got {type(text).__name__}")

    parts = split_number(text)
    magnitude = digits_to_int(parts.mantissa)

    if parts.exponent is None:
        return magnitude, parts.scale

    exponent = _parse_exponent(parts.exponent)
    return fold_exponent(magnitude, parts.scale, exponent)
