"""
Numerical Safeguards - Textual Integer Coercion

Quantities in both models arrive from form-style inputs: sometimes as
integers, sometimes as text. This module is the single place where such
values are coerced into numbers.

Rules:
- Integers pass through unchanged
- Finite floats truncate toward zero
- Text: leading whitespace is skipped, an optional sign is read, then the
  longest run of leading ASCII digits 0-9 is taken ("12abc" -> 12)
- Anything without leading digits (including "") becomes NaN

CRITICAL INVARIANTS:
1. Coercion never raises
2. NaN is the only non-integer result
3. NaN propagates through arithmetic; callers check it before min/max
"""

import math
import re
from typing import Final, Union

Number = Union[int, float]

# =============================================================================
# CONSTANTS
# =============================================================================

# Value used for "not a number" results of coercion
NAN: Final[float] = math.nan

# Leading-integer pattern applied after stripping leading whitespace
_LEADING_INT_RE: Final = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# NaN CHECKS
# =============================================================================


def is_nan(value: object) -> bool:
    """
    Check whether a value is a float NaN.

    Args:
        value: Any value

    Returns:
        True only for float NaN; False for ints, finite floats and non-numbers

    Examples:
        >>> is_nan(float("nan"))
        True
        >>> is_nan(0)
        False
    """
    return isinstance(value, float) and math.isnan(value)


# =============================================================================
# COERCION
# =============================================================================


def parse_int(value: Union[int, float, str, None]) -> Number:
    """
    Coerce a value into an integer, or NaN when no integer can be read.

    Args:
        value: int, float or text

    Returns:
        int, or NaN

    Examples:
        >>> parse_int("30")
        30
        >>> parse_int("  -1")
        -1
        >>> parse_int("12abc")
        12
        >>> parse_int("")
        nan
    """
    # bool is an int subclass but never a quantity
    if isinstance(value, bool):
        return NAN

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            return NAN
        return int(value)

    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value.lstrip())
        if match is None:
            return NAN
        return int(match.group(0))

    return NAN


def parse_production(value: Union[int, float, str, None]) -> int:
    """
    Coerce a production quantity. Unparseable input becomes 0.

    Args:
        value: int, float or text

    Returns:
        int (never NaN)
    """
    amount = parse_int(value)
    if is_nan(amount):
        return 0
    return int(amount)
