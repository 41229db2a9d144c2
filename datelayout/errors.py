"""Datelayout exception hierarchy.

All datelayout-specific exceptions inherit from DateLayoutError.

Conversions are permissive by default and never raise these errors;
they are only raised when a caller opts into strict mode.
"""

from __future__ import annotations


class DateLayoutError(Exception):
    """Base exception for all datelayout errors."""

    pass


class FormatMismatch(DateLayoutError):
    """A template or date string does not have the expected shape.

    Examples:
        - Template without a YYYY, DD or month token
        - Date string missing a separator the template requires
        - Year or day text that is not a whole number
        - Components that cannot form a native date
    """

    pass


class InvalidMonth(DateLayoutError):
    """A month value cannot be resolved.

    Examples:
        - Month name that is not an English name or abbreviation
        - Month number outside 1-12
    """

    pass


__all__ = [
    "DateLayoutError",
    "FormatMismatch",
    "InvalidMonth",
]
