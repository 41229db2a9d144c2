"""Datelayout: convert calendar dates between textual layouts.

Datelayout reads a date written in one template, such as "DD/MM/YYYY",
and rewrites it in another, such as "MMMM DD, YYYY". Either side may
instead be a native ``datetime``, optionally corrected to Zulu (UTC) so
that it does not drift a day when displayed in another timezone.

Templates:
    YYYY: 4-digit year
    MM: Month number, zero-padded (01-12)
    MMM: English month abbreviation (Jan-Dec)
    MMMM: English month name (January-December)
    DD: Day of month, zero-padded (01-31)
    Anything else is literal text (separators, prefix, suffix).

Functions:
    convert: Convert a date between layouts.
    convert_month: Convert a month between number, abbreviation and name.
    correct_date_to_zulu: Force a date value to its UTC reading.
    interpret: Parse a template into a FormatDescriptor.
    extract: Extract DateComponents from a string.
    format_components: Render DateComponents into a template.

Exceptions:
    DateLayoutError: Base exception
    FormatMismatch: Template or date string has the wrong shape
    InvalidMonth: Month cannot be resolved

Example:
    >>> from datelayout import NATIVE_DATE, convert
    >>> convert("25/12/2020", "DD/MM/YYYY", "MMMM DD, YYYY")
    'December 25, 2020'
    >>> convert("2020-01-05", "YYYY-MM-DD", NATIVE_DATE, False)
    datetime.datetime(2020, 1, 5, 0, 0)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core API
from datelayout.core.converter import convert
from datelayout.core.options import NATIVE_DATE, ConvertOptions, NativeDate
from datelayout.units.month import convert_month
from datelayout.units.timezone import correct_date_to_zulu

# Engine
from datelayout.format.extractor import DateComponents, extract
from datelayout.format.formatter import format_components
from datelayout.format.interpreter import FormatDescriptor, interpret
from datelayout.units.token import MonthToken, Token

# Exceptions
from datelayout.errors import DateLayoutError, FormatMismatch, InvalidMonth

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core API
    "convert",
    "convert_month",
    "correct_date_to_zulu",
    "ConvertOptions",
    "NATIVE_DATE",
    "NativeDate",
    # Engine
    "DateComponents",
    "FormatDescriptor",
    "MonthToken",
    "Token",
    "extract",
    "format_components",
    "interpret",
    # Exceptions
    "DateLayoutError",
    "FormatMismatch",
    "InvalidMonth",
]
