"""Internal constants for datelayout.

Month name tables and template token symbols. This module is not part
of the public API.
"""

from __future__ import annotations

# English month names, index 0 is January
MONTH_FULL_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

MONTHS_PER_YEAR: int = 12

# Template symbols
YEAR_SYMBOL: str = "YYYY"
DAY_SYMBOL: str = "DD"
MONTH_NUMERIC_SYMBOL: str = "MM"
MONTH_ABBREV_SYMBOL: str = "MMM"
MONTH_FULL_SYMBOL: str = "MMMM"

# Rendered width of fixed-width tokens, used when no separator sits
# between two tokens (e.g. "YYYYMMDD")
TOKEN_WIDTHS: dict[str, int] = {
    YEAR_SYMBOL: 4,
    MONTH_NUMERIC_SYMBOL: 2,
    MONTH_ABBREV_SYMBOL: 3,
    DAY_SYMBOL: 2,
}


__all__ = [
    "MONTH_FULL_NAMES",
    "MONTH_ABBREVIATIONS",
    "MONTHS_PER_YEAR",
    "YEAR_SYMBOL",
    "DAY_SYMBOL",
    "MONTH_NUMERIC_SYMBOL",
    "MONTH_ABBREV_SYMBOL",
    "MONTH_FULL_SYMBOL",
    "TOKEN_WIDTHS",
]
