"""Zulu (UTC) correction for native date values.

A date rendered in local time can land on a different calendar day when
read in UTC. Zulu correction shifts the instant by the local UTC offset
so that the UTC reading shows the same wall clock the local reading did.

Functions:
    local_offset: The UTC offset that applies to a native value.
    correct_date_to_zulu: Shift a native value so its UTC reading matches.

Examples:
    >>> from datetime import datetime, timedelta, timezone
    >>> from datelayout.units.timezone import correct_date_to_zulu

    >>> est = timezone(timedelta(hours=-5))
    >>> correct_date_to_zulu(datetime(2020, 1, 5, tzinfo=est))
    datetime.datetime(2020, 1, 5, 0, 0, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations

import datetime as _datetime
import logging

logger = logging.getLogger(__name__)

_ZERO = _datetime.timedelta(0)


def local_offset(value: _datetime.date) -> _datetime.timedelta:
    """Return the UTC offset that applies to a native date value.

    Aware datetimes report their own offset. Naive datetimes are taken
    to be in the runtime's local timezone, the same way
    ``datetime.astimezone()`` reads them. Plain dates have no time of
    day and therefore no offset.

    Args:
        value: A date or datetime.

    Returns:
        The offset east of UTC (negative west of UTC).
    """
    if not isinstance(value, _datetime.datetime):
        return _ZERO
    offset = value.utcoffset()
    if offset is None:
        offset = value.astimezone().utcoffset()
    return offset or _ZERO


def correct_date_to_zulu(value: _datetime.date) -> _datetime.date:
    """Compensate for the timezone offset and force the value to UTC.

    When the offset is non-zero, the instant is moved by the offset. The
    result is a UTC-aware datetime whose fields are the same year, month,
    day and time the value showed in its own zone. When the offset is
    zero the value is returned unchanged.

    Args:
        value: A date or datetime.

    Returns:
        The corrected value.

    Examples:
        >>> from datetime import datetime, timedelta, timezone
        >>> ist = timezone(timedelta(hours=5, minutes=30))
        >>> correct_date_to_zulu(datetime(2020, 1, 5, 1, 0, tzinfo=ist)).isoformat()
        '2020-01-05T01:00:00+00:00'
    """
    offset = local_offset(value)
    if offset == _ZERO:
        return value

    # Shifting the instant by the offset leaves the wall clock intact in UTC
    corrected = value.replace(tzinfo=_datetime.timezone.utc)
    logger.debug("corrected %s to Zulu (offset %s)", value.isoformat(), offset)
    return corrected


__all__ = ["local_offset", "correct_date_to_zulu"]
