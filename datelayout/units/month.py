"""Month table lookups.

Bidirectional mapping between the 1-based month number, the English
abbreviation and the full English name.

Lookups are exact and case-sensitive. Anything that is not a canonical
name is treated as a numeric literal, and nothing raises unless the
caller asks for strict checking.
"""

from __future__ import annotations

from datelayout._internal.coerce import to_number
from datelayout._internal.constants import (
    MONTH_ABBREVIATIONS,
    MONTH_FULL_NAMES,
    MONTHS_PER_YEAR,
)
from datelayout.errors import InvalidMonth
from datelayout.units.token import MonthToken

_KEYS: dict[str, MonthToken] = {token.value: token for token in MonthToken}


def number_for(month: int | str, *, strict: bool = False) -> int | float:
    """Resolve a month name, abbreviation or number to its 1-based number.

    Args:
        month: "January", "Jan", "01", 1, etc.
        strict: If True, raise instead of passing bad values through.

    Returns:
        The month number. Values that are not names are coerced as
        numbers without a range check, so "13" gives 13 and "Foo" gives
        NaN.

    Raises:
        InvalidMonth: If strict and the month is unknown or outside 1-12.

    Examples:
        >>> number_for("December")
        12
        >>> number_for("Jan")
        1
        >>> number_for("07")
        7
    """
    if month in MONTH_FULL_NAMES:
        return MONTH_FULL_NAMES.index(month) + 1
    if month in MONTH_ABBREVIATIONS:
        return MONTH_ABBREVIATIONS.index(month) + 1

    number = to_number(month)
    if strict and not _in_range(number):
        raise InvalidMonth(f"cannot resolve month {month!r}")
    return number


def abbrev_for(number: int | float) -> str | None:
    """Return the abbreviation for a 1-based month number, or None."""
    if not _in_range(number):
        return None
    return MONTH_ABBREVIATIONS[int(number) - 1]


def full_for(number: int | float) -> str | None:
    """Return the full name for a 1-based month number, or None."""
    if not _in_range(number):
        return None
    return MONTH_FULL_NAMES[int(number) - 1]


def convert_month(
    month: int | str,
    key: str | MonthToken | None = "MM",
    *,
    strict: bool = False,
) -> int | float | str | None:
    """Convert a month between number, abbreviation and full name.

    Args:
        month: The month as a 1-based number, abbreviation or full name.
        key: "MM" for the 1-based number, "MMM" for the abbreviation,
            "MMMM" for the full name. An empty key means "MM"; any other
            unrecognised key selects the full name.
        strict: If True, raise InvalidMonth for unresolvable months.

    Returns:
        The month in the requested representation. Numeric output may be
        NaN and textual output None when the month cannot be resolved.

    Raises:
        InvalidMonth: If strict and the month cannot be resolved.

    Examples:
        >>> convert_month("March")
        3
        >>> convert_month(12, "MMM")
        'Dec'
        >>> convert_month("Feb", "MMMM")
        'February'
    """
    if not key:
        key = MonthToken.NUMERIC
    token = key if isinstance(key, MonthToken) else _KEYS.get(key, MonthToken.FULL)

    number = number_for(month, strict=strict)
    if token is MonthToken.NUMERIC:
        return number
    if token is MonthToken.ABBREV:
        return abbrev_for(number)
    return full_for(number)


def _in_range(number: int | float) -> bool:
    # NaN and infinities are not integral
    if isinstance(number, float) and not number.is_integer():
        return False
    return 1 <= number <= MONTHS_PER_YEAR


__all__ = [
    "number_for",
    "abbrev_for",
    "full_for",
    "convert_month",
]
