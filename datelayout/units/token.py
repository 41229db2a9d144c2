"""Template token enumerations.

This module provides the Token enum for the three semantic date fields
and the MonthToken enum for the month representations a template can
request.
"""

from __future__ import annotations

from enum import Enum

from datelayout._internal.constants import (
    DAY_SYMBOL,
    MONTH_ABBREV_SYMBOL,
    MONTH_FULL_SYMBOL,
    MONTH_NUMERIC_SYMBOL,
    TOKEN_WIDTHS,
    YEAR_SYMBOL,
)


class Token(Enum):
    """Semantic date field as written in a template.

    The month value is the numeric symbol; use MonthToken for the
    symbol a particular template actually uses.

    Examples:
        >>> Token.YEAR.value
        'YYYY'
    """

    YEAR = YEAR_SYMBOL
    MONTH = MONTH_NUMERIC_SYMBOL
    DAY = DAY_SYMBOL


class MonthToken(Enum):
    """Month representation requested by a template.

    Input and output templates resolve their month token independently,
    so "DD/MM/YYYY" can be converted to "MMMM DD, YYYY".

    Values:
        NUMERIC: 1-based month number, zero-padded ("01")
        ABBREV: Three-letter English abbreviation ("Jan")
        FULL: Full English month name ("January")
    """

    NUMERIC = MONTH_NUMERIC_SYMBOL
    ABBREV = MONTH_ABBREV_SYMBOL
    FULL = MONTH_FULL_SYMBOL

    @property
    def is_textual(self) -> bool:
        """Return True if this token renders as a month name."""
        return self is not MonthToken.NUMERIC

    @property
    def width(self) -> int | None:
        """Rendered width in characters, or None if it varies."""
        return TOKEN_WIDTHS.get(self.value)

    @classmethod
    def detect(cls, template: str) -> MonthToken:
        """Detect the month token used in a template.

        The longest symbol is tried first so that "MMM" is not found
        inside "MMMM". Templates without any month symbol default to
        NUMERIC.

        Examples:
            >>> MonthToken.detect("MMMM DD, YYYY")
            <MonthToken.FULL: 'MMMM'>
            >>> MonthToken.detect("DD/MM/YYYY")
            <MonthToken.NUMERIC: 'MM'>
        """
        if MONTH_FULL_SYMBOL in template:
            return cls.FULL
        if MONTH_ABBREV_SYMBOL in template:
            return cls.ABBREV
        return cls.NUMERIC


__all__ = ["Token", "MonthToken"]
