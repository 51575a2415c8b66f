"""Render parsed cron expressions as English sentences.

The renderer narrates whatever text it is given and never validates it, so
``"0 0 31 2 *"`` still reads "At 00:00 on day of month 31 in February".
"""

from __future__ import annotations

__all__ = ["describe", "describe_field"]

from typing import TYPE_CHECKING, Final

from typing_extensions import assert_never

from cronexplain.common import DAY_NAMES, MONTH_NAMES
from cronexplain.cron_types import ParsedCron, get_second
from cronexplain.errors import InvalidFieldError
from cronexplain.fields import (
    LIST_SEPARATOR,
    RANGE_SEPARATOR,
    STEP_PREFIX,
    WILDCARD,
    FieldKind,
    Range,
    Single,
    field_kind,
    leading_int,
    parse_field,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

# Hour/minute text containing any of these is spelled out instead of shown as HH:MM.
_COMPOUND_MARKERS: Final[tuple[str, ...]] = (LIST_SEPARATOR, RANGE_SEPARATOR, "/")


def describe_field(value: str, field_name: str) -> str:
    """Return an English fragment for one field, e.g. ``"every 15 minutes"``.

    :param value: Raw field text.
    :param field_name: Singular unit name used in the fragment (``"minute"``, ``"day"``...).
    """
    kind = field_kind(value)
    match kind:
        case FieldKind.Wildcard:
            return f"every {field_name}"
        case FieldKind.Step:
            step = value[len(STEP_PREFIX) :]
            return f"every {step} {_pluralize(field_name, step)}"
        case FieldKind.Range:
            start, end = value.split(RANGE_SEPARATOR)[:2]
            return f"{field_name}s {start} through {end}"
        case FieldKind.List:
            return f"{field_name}s {', '.join(value.split(LIST_SEPARATOR))}"
        case FieldKind.Single:
            return f"{field_name} {value}"
        case _:
            raise assert_never(kind)


def describe(parsed: ParsedCron) -> str:
    """Return a one-sentence English description of *parsed*.

    The sentence is built from a time fragment, a day fragment and a month
    fragment, skipping the empty ones. When both day-of-month and day-of-week
    are restricted they are narrated as jointly required ("on day 13 and
    Friday").
    """
    fragments = (_describe_time(parsed), _describe_days(parsed), _describe_months(parsed))
    sentence = " ".join(fragment for fragment in fragments if fragment)
    return sentence[:1].upper() + sentence[1:]


def _describe_time(parsed: ParsedCron) -> str:
    second = get_second(parsed)
    seconds_prefix = ""
    if second is not None and second != WILDCARD:
        seconds_prefix = f"at {describe_field(second, 'second')}"

    every_minute = parsed.minute == WILDCARD
    every_hour = parsed.hour == WILDCARD
    # Only the every-minute case keeps the seconds prefix.
    if every_minute and every_hour:
        return f"{seconds_prefix}, every minute" if seconds_prefix else "every minute"
    if every_hour:
        return f"at {describe_field(parsed.minute, 'minute')} past every hour"
    if every_minute:
        return f"every minute during {describe_field(parsed.hour, 'hour')}"
    return f"at {_clock_part(parsed.hour, 'hour')}:{_clock_part(parsed.minute, 'minute')}"


def _clock_part(value: str, field_name: str) -> str:
    if any(marker in value for marker in _COMPOUND_MARKERS):
        return describe_field(value, field_name)
    return value.rjust(2, "0")


def _describe_days(parsed: ParsedCron) -> str:
    day_of_month = parsed.day_of_month
    day_of_week = parsed.day_of_week
    if day_of_month != WILDCARD and day_of_week != WILDCARD:
        weekdays = _names(day_of_week, DAY_NAMES, first=0)
        return f"on {describe_field(day_of_month, 'day')} and {weekdays}"
    if day_of_month != WILDCARD:
        return f"on {describe_field(day_of_month, 'day of month')}"
    if day_of_week != WILDCARD:
        return f"on {_names(day_of_week, DAY_NAMES, first=0)}"
    return ""


def _describe_months(parsed: ParsedCron) -> str:
    if parsed.month == WILDCARD:
        return ""
    return f"in {_names(parsed.month, MONTH_NAMES, first=1)}"


def _names(value: str, names: Sequence[str], *, first: int) -> str:
    """Map each comma-separated token of *value* through *names*, starting at index *first*."""
    return ", ".join(_name_for(token, names, first) for token in value.split(LIST_SEPARATOR))


def _name_for(token: str, names: Sequence[str], first: int) -> str:
    try:
        spec = parse_field(token)
    except InvalidFieldError:
        return token

    match spec:
        case Single(value=number):
            return _lookup(number, names, first) or token
        case Range(start=start, end=end):
            start_name = _lookup(start, names, first)
            end_name = _lookup(end, names, first)
            if start_name and end_name:
                return f"{start_name} through {end_name}"
            return token
        case _:
            return token


def _lookup(number: int, names: Sequence[str], first: int) -> str | None:
    index = number - first
    if 0 <= index < len(names):
        return names[index]
    return None


def _pluralize(field_name: str, step: str) -> str:
    number = leading_int(step)
    plural = number is not None and number > 1
    return f"{field_name}s" if plural else field_name
