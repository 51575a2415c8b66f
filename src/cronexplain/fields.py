"""Grammar of a single cron field.

A field is one of five shapes, chosen by inspecting its text in a fixed order:

1. ``*`` - wildcard;
2. ``*/n`` - step, matching values divisible by ``n``;
3. ``a-b`` - inclusive range (any text containing ``-``);
4. ``a,b,c`` - list (any remaining text containing ``,``);
5. a single integer.

Because ``-`` is tested before ``,``, text such as ``1-5,7`` is treated as a
range, never as a list.

Numbers are read the lenient way: optional leading whitespace and sign, then
the leading ASCII digits, ignoring whatever follows. ``5abc`` reads as 5, the
range ``1-5,7`` as 1-5 and ``1-2-3`` as 1-2 (only the first two bounds count).
"""

from __future__ import annotations

__all__ = [
    "LIST_SEPARATOR",
    "RANGE_SEPARATOR",
    "STEP_PREFIX",
    "WILDCARD",
    "FieldKind",
    "FieldSpec",
    "Range",
    "Single",
    "Step",
    "ValueList",
    "Wildcard",
    "field_kind",
    "leading_int",
    "parse_field",
]

from dataclasses import dataclass
import re
from typing import Final, TypeAlias

from typing_extensions import assert_never

from cronexplain.common import StrEnum
from cronexplain.errors import InvalidFieldError

WILDCARD: Final[str] = "*"
STEP_PREFIX: Final[str] = "*/"
RANGE_SEPARATOR: Final[str] = "-"
LIST_SEPARATOR: Final[str] = ","

_LEADING_INT: Final[re.Pattern[str]] = re.compile(r"\s*[+-]?[0-9]+")


class FieldKind(StrEnum):
    """Enum of the shapes a field's text can take."""

    Wildcard = "wildcard"
    Step = "step"
    Range = "range"
    List = "list"
    Single = "single"


@dataclass(frozen=True, slots=True)
class Wildcard:
    """Matches every value."""

    def contains(self, value: int) -> bool:  # noqa: ARG002
        return True


@dataclass(frozen=True, slots=True)
class Step:
    """Matches values evenly divisible by ``step``.

    Divisibility is tested against the absolute value, not an offset from the
    field's minimum, so ``*/5`` on day-of-month matches 5, 10, ..., 30.
    """

    step: int

    def contains(self, value: int) -> bool:
        return self.step != 0 and value % self.step == 0


@dataclass(frozen=True, slots=True)
class Range:
    """Matches ``start <= value <= end``."""

    start: int
    end: int

    def contains(self, value: int) -> bool:
        return self.start <= value <= self.end


@dataclass(frozen=True, slots=True)
class ValueList:
    """Matches any of the listed values."""

    values: tuple[int, ...]

    def contains(self, value: int) -> bool:
        return value in self.values


@dataclass(frozen=True, slots=True)
class Single:
    """Matches exactly one value."""

    value: int

    def contains(self, value: int) -> bool:
        return value == self.value


FieldSpec: TypeAlias = Wildcard | Step | Range | ValueList | Single


def field_kind(value: str) -> FieldKind:
    """Classify raw field text without interpreting any numbers in it."""
    if value == WILDCARD:
        return FieldKind.Wildcard
    if value.startswith(STEP_PREFIX):
        return FieldKind.Step
    if RANGE_SEPARATOR in value:
        return FieldKind.Range
    if LIST_SEPARATOR in value:
        return FieldKind.List
    return FieldKind.Single


def parse_field(value: str) -> FieldSpec:
    """Interpret raw field text.

    No domain bounds are applied here; see :func:`cronexplain.validator.validate_field`.

    :param value: Raw text of one field, e.g. ``"*/15"`` or ``"1-5"``.
    :returns: The :data:`FieldSpec` variant described by *value*.
    :raises InvalidFieldError: If a numeric part does not start with an integer.
    """
    kind = field_kind(value)
    match kind:
        case FieldKind.Wildcard:
            return Wildcard()
        case FieldKind.Step:
            return Step(_to_int(value[len(STEP_PREFIX) :], value))
        case FieldKind.Range:
            start, end = value.split(RANGE_SEPARATOR)[:2]
            return Range(_to_int(start, value), _to_int(end, value))
        case FieldKind.List:
            return ValueList(tuple(_to_int(item, value) for item in value.split(LIST_SEPARATOR)))
        case FieldKind.Single:
            return Single(_to_int(value, value))
        case _:
            raise assert_never(kind)


def leading_int(token: str) -> int | None:
    """Return the integer *token* starts with, or ``None`` if it starts with none."""
    match = _LEADING_INT.match(token)
    if match is None:
        return None
    return int(match.group())


def _to_int(token: str, field: str) -> int:
    number = leading_int(token)
    if number is None:
        raise _invalid_field(field)
    return number


def _invalid_field(value: str) -> InvalidFieldError:
    """Build a standardised :class:`InvalidFieldError` for malformed field text."""
    return InvalidFieldError(f"{value!r} is not a valid cron field.")
