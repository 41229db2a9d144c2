"""Permissive numeric coercion.

Date fields pulled out of a string are coerced without raising: text
that is not a number becomes NaN and flows through to the output.

This module is not part of the public API.
"""

from __future__ import annotations

import math
import re

NAN: float = float("nan")

# Plain ASCII decimal: optional sign, digits, optional fraction and exponent
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def to_number(value: object) -> int | float:
    """Coerce a value to a number, returning NaN instead of raising.

    Only plain ASCII decimal text is a number, so "20_20" and non-ASCII
    digits are NaN. Surrounding whitespace is ignored and blank text is
    zero. Integral floats collapse to int so that ``"05"``, ``5`` and
    ``5.0`` compare equal downstream.

    Args:
        value: An int, float, or string.

    Returns:
        The numeric value, or NaN when the value is not a number.

    Examples:
        >>> to_number("05")
        5
        >>> to_number("  ")
        0
        >>> to_number("Dec")
        nan
    """
    if isinstance(value, bool) or value is None:
        return NAN
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    if not isinstance(value, str):
        return NAN

    text = value.strip()
    if not text:
        return 0
    if not _NUMBER_PATTERN.fullmatch(text):
        return NAN
    if text.lstrip("+-").isdigit():
        return int(text)
    number = float(text)
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def is_nan(value: object) -> bool:
    """Return True if value is a float NaN."""
    return isinstance(value, float) and math.isnan(value)


__all__ = ["NAN", "to_number", "is_nan"]
