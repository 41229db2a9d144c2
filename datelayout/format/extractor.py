"""Date component extraction.

Pulls the year, month and day out of a date string using the structure
that interpret() inferred from its template, or reads them directly from
a native date value.

Extraction is permissive by default: the string is trusted to match the
template, and fields that do not parse come back as NaN rather than
raising. Pass strict=True to get FormatMismatch/InvalidMonth instead.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from dataclasses import dataclass

from datelayout._internal.coerce import is_nan, to_number
from datelayout._internal.constants import MONTH_FULL_NAMES, MONTH_FULL_SYMBOL, TOKEN_WIDTHS
from datelayout.errors import FormatMismatch
from datelayout.format.interpreter import FormatDescriptor
from datelayout.units.month import number_for
from datelayout.units.timezone import correct_date_to_zulu
from datelayout.units.token import Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateComponents:
    """Year, month and day of a date.

    Values are not calendar-validated. In permissive mode a field that
    could not be parsed holds NaN.

    Attributes:
        year: The year.
        month: The 1-based month.
        day: The day of the month.
    """

    year: int | float
    month: int | float
    day: int | float

    @property
    def is_complete(self) -> bool:
        """Return True if no field is NaN."""
        return not any(is_nan(v) for v in (self.year, self.month, self.day))


def extract(
    date_string: str,
    descriptor: FormatDescriptor,
    *,
    strict: bool = False,
    legacy: bool = False,
) -> DateComponents:
    """Extract date components from a string matching a descriptor.

    Args:
        date_string: The date text, e.g. "25/12/2020".
        descriptor: The interpreted template the text follows.
        strict: If True, raise when the text does not fit the template.
        legacy: If True, leave prefix and suffix literals in place
            instead of stripping them before splitting.

    Returns:
        The extracted DateComponents.

    Raises:
        FormatMismatch: If strict and a literal, separator or number is
            missing from the text.
        InvalidMonth: If strict and the month cannot be resolved.

    Examples:
        >>> from datelayout.format import interpret
        >>> extract("25/12/2020", interpret("DD/MM/YYYY"))
        DateComponents(year=2020, month=12, day=25)

        >>> extract("Jan 05 2021", interpret("MMM DD YYYY"))
        DateComponents(year=2021, month=1, day=5)
    """
    payload = date_string
    if not legacy:
        payload = _strip_literals(payload, descriptor, strict)

    pieces = _split(payload, descriptor, strict)
    year_text = pieces[descriptor.position(Token.YEAR)]
    month_text = pieces[descriptor.position(Token.MONTH)]
    day_text = pieces[descriptor.position(Token.DAY)]

    year = to_number(year_text)
    day = to_number(day_text)
    if strict:
        for name, text, value in (("year", year_text, year), ("day", day_text, day)):
            if not isinstance(value, int) or not text.strip():
                raise FormatMismatch(f"{name} {text!r} in {date_string!r} is not a whole number")

    components = DateComponents(
        year=year,
        month=number_for(month_text, strict=strict),
        day=day,
    )
    if not components.is_complete:
        logger.warning(
            "date %r does not fit template structure %s: %s",
            date_string,
            descriptor.order,
            components,
        )
    return components


def components_from_date(
    value: _datetime.date,
    correct_to_zulu: bool = True,
) -> DateComponents:
    """Read date components from a native date value.

    Args:
        value: A date or datetime.
        correct_to_zulu: If True, apply Zulu correction first so the
            fields read are the ones the value shows in its own zone.
            If False, aware datetimes are read in UTC; naive datetimes
            and plain dates are read as they are.

    Returns:
        The DateComponents of the value.

    Raises:
        TypeError: If value is not a date or datetime.

    Examples:
        >>> import datetime
        >>> components_from_date(datetime.date(2020, 1, 5))
        DateComponents(year=2020, month=1, day=5)
    """
    if not isinstance(value, _datetime.date):
        raise TypeError(
            f"expected a date or datetime, got {type(value).__name__}"
        )

    if correct_to_zulu:
        value = correct_date_to_zulu(value)
    elif isinstance(value, _datetime.datetime) and value.utcoffset() is not None:
        value = value.astimezone(_datetime.timezone.utc)

    return DateComponents(year=value.year, month=value.month, day=value.day)


def _strip_literals(payload: str, descriptor: FormatDescriptor, strict: bool) -> str:
    prefix, suffix = descriptor.prefix, descriptor.suffix
    if prefix:
        if payload.startswith(prefix):
            payload = payload[len(prefix) :]
        elif strict:
            raise FormatMismatch(f"{payload!r} does not start with {prefix!r}")
    if suffix:
        if payload.endswith(suffix):
            payload = payload[: -len(suffix)]
        elif strict:
            raise FormatMismatch(f"{payload!r} does not end with {suffix!r}")
    return payload


def _token_length(symbol: str, payload: str, cursor: int) -> int | None:
    """Length of a token at cursor when no separator follows it."""
    if symbol == MONTH_FULL_SYMBOL:
        for name in MONTH_FULL_NAMES:
            if payload.startswith(name, cursor):
                return len(name)
        return None
    return TOKEN_WIDTHS.get(symbol)


def _split(payload: str, descriptor: FormatDescriptor, strict: bool) -> list[str]:
    """Split the payload into the three positional token texts.

    Each token reads up to the next occurrence of the separator that
    follows it. Where the separator is empty the token's rendered width
    is used instead. The last token takes the remainder.
    """
    pieces: list[str] = []
    cursor = 0
    for symbol, separator in zip(descriptor.order, descriptor.separators):
        if separator:
            stop = payload.find(separator, cursor)
            if stop < 0:
                if strict:
                    raise FormatMismatch(
                        f"separator {separator!r} not found in {payload!r} after {symbol}"
                    )
                pieces.append(payload[cursor:])
                cursor = len(payload)
                continue
            pieces.append(payload[cursor:stop])
            cursor = stop + len(separator)
        else:
            length = _token_length(symbol, payload, cursor)
            if length is None:
                if strict:
                    raise FormatMismatch(
                        f"cannot find the end of {symbol} in {payload!r} without a separator"
                    )
                length = len(payload) - cursor
            pieces.append(payload[cursor : cursor + length])
            cursor += length

    pieces.append(payload[cursor:])
    return pieces


__all__ = ["DateComponents", "extract", "components_from_date"]
