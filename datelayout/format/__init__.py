"""Template interpretation, extraction and formatting.

This module provides the engine behind convert():
    - interpret: Infer token order and literals from a template
    - extract: Pull year/month/day out of a string matching a template
    - format_components: Render year/month/day into a template

Functions:
    interpret: Parse a template into a FormatDescriptor.
    extract: Extract DateComponents from a date string.
    components_from_date: Read DateComponents from a native date value.
    format_components: Format DateComponents into a template string.
    to_date: Build a native datetime from DateComponents.

Examples:
    >>> from datelayout.format import extract, format_components, interpret

    >>> parts = extract("25/12/2020", interpret("DD/MM/YYYY"))
    >>> format_components(parts, "MMMM DD, YYYY")
    'December 25, 2020'
"""

from __future__ import annotations

from datelayout.format.extractor import DateComponents, components_from_date, extract
from datelayout.format.formatter import format_components, to_date
from datelayout.format.interpreter import FormatDescriptor, interpret

__all__: list[str] = [
    # Interpretation
    "FormatDescriptor",
    "interpret",
    # Extraction
    "DateComponents",
    "extract",
    "components_from_date",
    # Formatting
    "format_components",
    "to_date",
]
