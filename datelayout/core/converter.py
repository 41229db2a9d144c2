"""Date layout conversion entry point."""

from __future__ import annotations

import datetime as _datetime
import logging

from datelayout.core.options import ConvertOptions, Layout, NativeDate
from datelayout.format.extractor import components_from_date, extract
from datelayout.format.formatter import format_components, to_date
from datelayout.format.interpreter import interpret

logger = logging.getLogger(__name__)


def _check_layout(name: str, layout: object) -> None:
    if not isinstance(layout, (str, NativeDate)):
        raise TypeError(
            f"{name} must be a template string or NATIVE_DATE, got {type(layout).__name__}"
        )


def convert(
    date: str | _datetime.date,
    original_format: Layout,
    new_format: Layout,
    correct_to_zulu: bool = True,
    *,
    options: ConvertOptions | None = None,
) -> str | _datetime.date:
    """Convert a date from one layout to another.

    Args:
        date: The date, as a string in original_format or, when
            original_format is NATIVE_DATE, a date or datetime.
        original_format: The template the date is written in, e.g.
            "DD/MM/YYYY", or NATIVE_DATE.
        new_format: The template to produce, or NATIVE_DATE for a
            datetime.
        correct_to_zulu: Correct native date values to Zulu time on the
            way in and out. Ignored when options is given.
        options: Full conversion options.

    Returns:
        The formatted string, or a datetime if new_format is NATIVE_DATE.

    Raises:
        TypeError: If a format is neither a string nor NATIVE_DATE, or a
            native source is not a date.
        FormatMismatch: If strict and the date does not fit its template,
            or if a native date cannot be built from the components.
        InvalidMonth: If strict and the month cannot be resolved.

    Examples:
        >>> convert("25/12/2020", "DD/MM/YYYY", "MMMM DD, YYYY")
        'December 25, 2020'

        >>> convert("2020-01-05", "YYYY-MM-DD", "DD/MM/YYYY")
        '05/01/2020'

        >>> import datetime
        >>> convert(datetime.datetime(2020, 1, 5), NATIVE_DATE, "YYYY-MM-DD", False)
        '2020-01-05'
    """
    if options is None:
        options = ConvertOptions(correct_to_zulu=correct_to_zulu)
    _check_layout("original_format", original_format)
    _check_layout("new_format", new_format)

    if isinstance(original_format, NativeDate):
        components = components_from_date(date, options.correct_to_zulu)
    else:
        descriptor = interpret(original_format, strict=options.strict)
        components = extract(
            date,
            descriptor,
            strict=options.strict,
            legacy=options.legacy,
        )
    logger.debug("converting %r: %s", date, components)

    if isinstance(new_format, NativeDate):
        return to_date(components, options.correct_to_zulu)
    return format_components(components, new_format, legacy=options.legacy)


__all__ = ["convert"]
