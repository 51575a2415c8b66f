"""Records produced by the expression splitter and the field validator."""

from __future__ import annotations

__all__ = ["FiveField", "ParsedCron", "SixField", "ValidationResult", "get_second", "iter_fields"]

from typing import TYPE_CHECKING, NamedTuple, TypeAlias

from typing_extensions import assert_never

from cronexplain.common import CronFieldEnum

if TYPE_CHECKING:
    from collections.abc import Iterator


class FiveField(NamedTuple):
    """Classic crontab shape: ``minute hour day-of-month month day-of-week``.

    Every attribute holds the raw, uninterpreted text of its field.
    """

    minute: str
    hour: str
    day_of_month: str
    month: str
    day_of_week: str


class SixField(NamedTuple):
    """Extended shape with a leading ``second`` field."""

    second: str
    minute: str
    hour: str
    day_of_month: str
    month: str
    day_of_week: str


ParsedCron: TypeAlias = FiveField | SixField


class ValidationResult(NamedTuple):
    """Outcome of validating one field; ``error`` is set only when ``valid`` is false."""

    valid: bool
    error: str | None = None


def get_second(parsed: ParsedCron) -> str | None:
    """Return the raw ``second`` field, or ``None`` for the five-field shape."""
    match parsed:
        case SixField(second=second):
            return second
        case FiveField():
            return None
        case _:
            raise assert_never(parsed)


def iter_fields(parsed: ParsedCron) -> Iterator[tuple[CronFieldEnum, str]]:
    """Yield ``(field, raw value)`` pairs in expression order."""
    for name, value in parsed._asdict().items():
        yield CronFieldEnum(name), value
