"""Template interpretation.

A template describes a date layout with the tokens YYYY, DD and one of
MM, MMM or MMMM, surrounded by arbitrary literal text. interpret() turns
a template into a FormatDescriptor: the order of the three tokens, the
two separators between them, and any prefix or suffix literal.

Examples:
    >>> from datelayout.format import interpret
    >>> d = interpret("DD/MM/YYYY")
    >>> d.order
    ('DD', 'MM', 'YYYY')
    >>> d.separators
    ('/', '/')

    >>> interpret("on MMMM DD, YYYY.").prefix
    'on '
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple

from datelayout._internal.constants import DAY_SYMBOL, YEAR_SYMBOL
from datelayout._internal.decorators import memoize
from datelayout.errors import FormatMismatch
from datelayout.units.token import MonthToken, Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatDescriptor:
    """Structure of a date template.

    Attributes:
        order: The three token symbols in the order they appear,
            e.g. ("DD", "MMM", "YYYY").
        month_token: The month representation the template uses.
        separators: Literal text between order[0] and order[1], and
            between order[1] and order[2]. Either may be empty.
        prefix: Literal text before the first token, or None.
        suffix: Literal text after the last token, or None.
    """

    order: tuple[str, str, str]
    month_token: MonthToken
    separators: tuple[str, str]
    prefix: str | None = None
    suffix: str | None = None

    def symbol_for(self, token: Token) -> str:
        """Return the template symbol used for a semantic token."""
        if token is Token.MONTH:
            return self.month_token.value
        return token.value

    def position(self, token: Token) -> int:
        """Return the index of a semantic token within order.

        Examples:
            >>> interpret("MMM DD YYYY").position(Token.MONTH)
            0
        """
        return self.order.index(self.symbol_for(token))


class _Span(NamedTuple):
    """Location of a token symbol in a template; start is -1 if absent."""

    start: int
    end: int

    @property
    def found(self) -> bool:
        return self.start >= 0


def _locate(template: str, symbol: str) -> _Span:
    start = template.find(symbol)
    if start < 0:
        return _Span(-1, -1)
    return _Span(start, start + len(symbol))


def _order_tokens(
    year_at: int,
    month_at: int,
    day_at: int,
    month_symbol: str,
) -> tuple[str, str, str]:
    """Order the three symbols by their template indices.

    Year seeds the order and month goes after it only when it appears
    later. Day goes first if it precedes both, last if it follows both,
    and in the middle otherwise.
    """
    order = [YEAR_SYMBOL]
    if month_at > year_at:
        order.append(month_symbol)
    else:
        order.insert(0, month_symbol)

    if day_at < month_at and day_at < year_at:
        order.insert(0, DAY_SYMBOL)
    elif day_at > month_at and day_at > year_at:
        order.append(DAY_SYMBOL)
    else:
        order.insert(1, DAY_SYMBOL)
    return order[0], order[1], order[2]


def _between(template: str, left: _Span, right: _Span) -> str:
    if not (left.found and right.found) or left.end > right.start:
        return ""
    return template[left.end : right.start]


@memoize
def interpret(template: str, *, strict: bool = False) -> FormatDescriptor:
    """Interpret a template string into a FormatDescriptor.

    Args:
        template: A layout such as "DD/MM/YYYY" or "MMMM DD, YYYY".
        strict: If True, raise when a token is missing.

    Returns:
        The descriptor. Results are cached per template.

    Raises:
        FormatMismatch: If strict and the template lacks a year, month
            or day token.

    Examples:
        >>> interpret("YYYY-MM-DD").order
        ('YYYY', 'MM', 'DD')

        >>> interpret("YYYYMMDD").separators
        ('', '')
    """
    month_token = MonthToken.detect(template)
    spans = {
        YEAR_SYMBOL: _locate(template, YEAR_SYMBOL),
        month_token.value: _locate(template, month_token.value),
        DAY_SYMBOL: _locate(template, DAY_SYMBOL),
    }

    missing = [symbol for symbol, span in spans.items() if not span.found]
    if missing:
        if strict:
            raise FormatMismatch(
                f"template {template!r} is missing token(s): {', '.join(missing)}"
            )
        logger.warning("template %r is missing token(s): %s", template, ", ".join(missing))

    order = _order_tokens(
        spans[YEAR_SYMBOL].start,
        spans[month_token.value].start,
        spans[DAY_SYMBOL].start,
        month_token.value,
    )
    first, middle, last = (spans[symbol] for symbol in order)

    prefix = template[: first.start] if first.found else ""
    suffix = template[last.end :] if last.found else ""

    descriptor = FormatDescriptor(
        order=order,
        month_token=month_token,
        separators=(_between(template, first, middle), _between(template, middle, last)),
        prefix=prefix or None,
        suffix=suffix or None,
    )
    logger.debug("interpreted template %r as %s", template, descriptor)
    return descriptor


__all__ = ["FormatDescriptor", "interpret"]
