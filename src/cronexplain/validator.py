"""Range and syntax validation of individual cron fields."""

from __future__ import annotations

__all__ = ["validate", "validate_field"]

from typing import Final

from typing_extensions import assert_never

from cronexplain.common import FIELD_RANGES, CronFieldEnum
from cronexplain.cron_types import ParsedCron, ValidationResult, iter_fields
from cronexplain.errors import InvalidFieldError
from cronexplain.fields import (
    FieldKind,
    FieldSpec,
    Range,
    Single,
    Step,
    ValueList,
    Wildcard,
    field_kind,
    parse_field,
)

_ERROR_MESSAGES: Final[dict[FieldKind, str]] = {
    FieldKind.Step: "Invalid step value",
    FieldKind.Range: "Range must be {min_value}-{max_value}",
    FieldKind.List: "Values must be {min_value}-{max_value}",
    FieldKind.Single: "Must be {min_value}-{max_value}",
}


def validate_field(value: str, min_value: int, max_value: int) -> ValidationResult:
    """Check that *value* is well formed and lies within ``[min_value, max_value]``.

    Only the field itself is examined: day 31 is accepted regardless of month.
    A step's magnitude is not compared to the bounds, so ``*/1000`` is valid on
    any field.

    :param value: Raw field text.
    :param min_value: Smallest value allowed for the field.
    :param max_value: Largest value allowed for the field.
    :returns: A valid :class:`ValidationResult`, or an invalid one carrying a
        message that names the allowed bounds.
    """
    try:
        spec = parse_field(value)
    except InvalidFieldError:
        return _invalid(field_kind(value), min_value, max_value)

    if _within_bounds(spec, min_value, max_value):
        return ValidationResult(valid=True)
    return _invalid(field_kind(value), min_value, max_value)


def validate(parsed: ParsedCron) -> dict[CronFieldEnum, ValidationResult]:
    """Validate every field of *parsed* against its own domain."""
    return {
        field: validate_field(value, *FIELD_RANGES[field]) for field, value in iter_fields(parsed)
    }


def _within_bounds(spec: FieldSpec, min_value: int, max_value: int) -> bool:
    match spec:
        case Wildcard():
            return True
        case Step(step=step):
            return step > 0
        case Range(start=start, end=end):
            return min_value <= start <= end <= max_value
        case ValueList(values=values):
            return all(min_value <= item <= max_value for item in values)
        case Single(value=single):
            return min_value <= single <= max_value
        case _:
            raise assert_never(spec)


def _invalid(kind: FieldKind, min_value: int, max_value: int) -> ValidationResult:
    message = _ERROR_MESSAGES[kind].format(min_value=min_value, max_value=max_value)
    return ValidationResult(valid=False, error=message)
