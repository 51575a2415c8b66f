"""Split raw cron expressions into their positional fields."""

from __future__ import annotations

__all__ = ["parse", "parse_cron"]

import logging

from cronexplain.common import FIVE_FIELD_COUNT, SIX_FIELD_COUNT
from cronexplain.cron_types import FiveField, ParsedCron, SixField
from cronexplain.errors import ParseError

logger = logging.getLogger(__name__)


def parse_cron(expression: str) -> ParsedCron:
    """Split *expression* into a five- or six-field record.

    Leading and trailing whitespace is ignored and fields are separated by runs of
    whitespace. Field contents are not inspected.

    :param expression: Raw cron expression, e.g. ``"*/15 9-17 * * 1-5"``.
    :returns: :class:`FiveField` for five tokens, :class:`SixField` for six.
    :raises ParseError: If the expression has any other number of tokens.
    """
    parts = expression.split()
    if len(parts) == FIVE_FIELD_COUNT:
        return FiveField(*parts)
    if len(parts) == SIX_FIELD_COUNT:
        return SixField(*parts)
    raise _wrong_field_count(expression, len(parts))


def parse(expression: str) -> ParsedCron | None:
    """Return the parsed record for *expression*, or ``None`` if it has the wrong shape."""
    try:
        return parse_cron(expression)
    except ParseError as exc:
        logger.debug("Rejected cron expression: %s", exc)
        return None


def _wrong_field_count(expression: str, count: int) -> ParseError:
    msg = (
        f"{expression!r} is not valid cron expression: expected "
        f"{FIVE_FIELD_COUNT} or {SIX_FIELD_COUNT} fields, got {count}."
    )
    return ParseError(msg)
