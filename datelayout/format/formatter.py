"""Component formatting.

Renders DateComponents into a template string, or builds a native
datetime from them.

Formatting is literal substitution: every YYYY becomes the year, every
DD the zero-padded day, and every occurrence of the month symbol the
month in the representation that symbol requests. Numeric renderings
are zero-padded; month names are not.
"""

from __future__ import annotations

import datetime as _datetime
import logging

from datelayout._internal.coerce import is_nan
from datelayout._internal.constants import DAY_SYMBOL, MONTH_NUMERIC_SYMBOL, YEAR_SYMBOL
from datelayout.errors import FormatMismatch
from datelayout.format.extractor import DateComponents
from datelayout.units.month import convert_month
from datelayout.units.timezone import correct_date_to_zulu
from datelayout.units.token import MonthToken

logger = logging.getLogger(__name__)


def _render(value: int | float | str | None) -> str:
    if value is None:
        return ""
    if is_nan(value):
        return "NaN"
    return str(value)


def _pad(value: int | float) -> str:
    if isinstance(value, int) and 0 <= value < 10:
        return f"{value:02d}"
    return _render(value)


def _output_month_token(text: str, legacy: bool) -> MonthToken | None:
    """Detect the month symbol to substitute in an output template.

    In legacy mode a numeric symbol at index 0 is indistinguishable from
    a missing one and None is returned.
    """
    token = MonthToken.detect(text)
    if legacy and token is MonthToken.NUMERIC and text.find(MONTH_NUMERIC_SYMBOL) == 0:
        return None
    return token


def format_components(
    components: DateComponents,
    template: str,
    *,
    legacy: bool = False,
) -> str:
    """Render date components into a template.

    Args:
        components: The year, month and day to render.
        template: The output layout, e.g. "MMMM DD, YYYY".
        legacy: If True, reproduce the historic handling of a template
            that starts with "MM": the month symbol is not recognised and
            the padded month is inserted between every character instead.

    Returns:
        The formatted string.

    Examples:
        >>> format_components(DateComponents(2020, 12, 25), "MMMM DD, YYYY")
        'December 25, 2020'

        >>> format_components(DateComponents(2020, 1, 5), "DD/MM/YYYY")
        '05/01/2020'

        >>> format_components(DateComponents(2020, 1, 5), "DD-MMM-YYYY")
        '05-Jan-2020'
    """
    text = template.replace(YEAR_SYMBOL, _render(components.year))
    text = text.replace(DAY_SYMBOL, _pad(components.day))

    token = _output_month_token(text, legacy)
    if token is None:
        logger.warning("legacy month handling garbled template %r", template)
        return _pad(convert_month(components.month)).join(text)

    month = convert_month(components.month, token)
    rendered = _render(month) if token.is_textual else _pad(month)
    return text.replace(token.value, rendered)


def to_date(
    components: DateComponents,
    correct_to_zulu: bool = True,
) -> _datetime.date:
    """Build a native datetime from date components.

    The value is built from the ISO layout YYYY-MM-DD at midnight.

    Args:
        components: The year, month and day.
        correct_to_zulu: If True, return the Zulu-corrected value.

    Returns:
        A naive datetime at local midnight when correct_to_zulu is False.
        When it is True the result depends on the host timezone: on a
        host whose local offset is zero the naive value is returned
        unchanged, elsewhere a UTC-aware datetime with the same wall
        clock. Compare ``.replace(tzinfo=None)`` across hosts, or pass
        correct_to_zulu=False for a host-independent naive value.

    Raises:
        FormatMismatch: If the components do not form a real date.

    Examples:
        >>> to_date(DateComponents(2020, 1, 5), correct_to_zulu=False)
        datetime.datetime(2020, 1, 5, 0, 0)
    """
    if not components.is_complete:
        raise FormatMismatch(f"cannot build a date from {components}")

    year, month, day = components.year, components.month, components.day
    try:
        value = _datetime.datetime.fromisoformat(f"{year:04d}-{month:02d}-{day:02d}")
    except (TypeError, ValueError) as e:
        raise FormatMismatch(f"cannot build a date from {components}: {e}") from e

    if correct_to_zulu:
        return correct_date_to_zulu(value)
    return value


__all__ = ["format_components", "to_date"]
