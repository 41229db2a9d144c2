"""Conversion options and the native date marker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class NativeDate(Enum):
    """Marker for a native date value in place of a template.

    Passing NATIVE_DATE as a source or destination layout means the
    value is (or should become) a ``datetime`` rather than a string.
    Being an enum member, it cannot collide with any template text,
    including the literal string "Date".
    """

    NATIVE_DATE = "native-date"

    def __repr__(self) -> str:
        return "NATIVE_DATE"


NATIVE_DATE = NativeDate.NATIVE_DATE

# A layout is either a template string or the native date marker
Layout = Union[str, NativeDate]


@dataclass(frozen=True)
class ConvertOptions:
    """Configuration for convert().

    Attributes:
        correct_to_zulu: Apply Zulu correction to native date values on
            the way in and out.
        strict: Raise FormatMismatch/InvalidMonth instead of letting
            malformed values through as NaN.
        legacy: Reproduce historic quirks: prefix/suffix literals are not
            stripped from input, and an output template starting with
            "MM" is not recognised as having a month symbol.

    Examples:
        >>> opts = ConvertOptions(strict=True)
        >>> opts.correct_to_zulu
        True
    """

    correct_to_zulu: bool = True
    strict: bool = False
    legacy: bool = False


__all__ = ["NativeDate", "NATIVE_DATE", "Layout", "ConvertOptions"]
