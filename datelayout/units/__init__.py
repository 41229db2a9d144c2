"""Date units: template tokens, month tables and Zulu correction."""

from __future__ import annotations

from datelayout.units.month import abbrev_for, convert_month, full_for, number_for
from datelayout.units.timezone import correct_date_to_zulu, local_offset
from datelayout.units.token import MonthToken, Token

__all__: list[str] = [
    "MonthToken",
    "Token",
    "abbrev_for",
    "convert_month",
    "correct_date_to_zulu",
    "full_for",
    "local_offset",
    "number_for",
]
