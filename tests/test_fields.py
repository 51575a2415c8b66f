"""Unit tests for the single-field grammar."""

from __future__ import annotations

import re

import pytest

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
    leading_int,
    parse_field,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param("*", FieldKind.Wildcard, id="wildcard"),
        pytest.param("*/5", FieldKind.Step, id="step"),
        pytest.param("*/x", FieldKind.Step, id="malformed-step"),
        pytest.param("1-5", FieldKind.Range, id="range"),
        pytest.param("1-5,7", FieldKind.Range, id="range-wins-over-list"),
        pytest.param("1,2-3", FieldKind.Range, id="range-anywhere-wins"),
        pytest.param("1,2,3", FieldKind.List, id="list"),
        pytest.param("42", FieldKind.Single, id="single"),
        pytest.param("MON", FieldKind.Single, id="name-is-single"),
    ],
)
def test_field_kind_precedence(value: str, expected: FieldKind) -> None:
    """Shapes are chosen in wildcard, step, range, list, single order."""
    assert field_kind(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param("*", Wildcard(), id="wildcard"),
        pytest.param("*/15", Step(15), id="step"),
        pytest.param("*/-1", Step(-1), id="negative-step"),
        pytest.param("10-20", Range(10, 20), id="range"),
        pytest.param("20-10", Range(20, 10), id="descending-range-parses"),
        pytest.param("1,15,30", ValueList((1, 15, 30)), id="list"),
        pytest.param("7", Single(7), id="single"),
        pytest.param("1-5,7", Range(1, 5), id="range-ignores-trailing-list"),
        pytest.param("1-2-3", Range(1, 2), id="range-keeps-first-two-bounds"),
        pytest.param("5abc", Single(5), id="single-leading-digits"),
        pytest.param("*/5x", Step(5), id="step-leading-digits"),
        pytest.param("1,2x", ValueList((1, 2)), id="list-leading-digits"),
        pytest.param(" +3", Single(3), id="whitespace-and-sign"),
        pytest.param("1_0", Single(1), id="underscore-stops-number"),
    ],
)
def test_parse_field(value: str, expected: FieldSpec) -> None:
    assert parse_field(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        pytest.param("*/", id="empty-step"),
        pytest.param("*/abc", id="non-numeric-step"),
        pytest.param("-5", id="missing-range-start"),
        pytest.param("1-", id="missing-range-end"),
        pytest.param("x1", id="digits-not-leading"),
        pytest.param("\u0663", id="non-ascii-digit"),
        pytest.param("1,,2", id="empty-list-item"),
        pytest.param("MON", id="name"),
        pytest.param("", id="empty"),
    ],
)
def test_parse_field_rejects_malformed(value: str) -> None:
    with pytest.raises(InvalidFieldError, match=re.escape(f"{value!r} is not a valid cron field.")):
        parse_field(value)


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        pytest.param(Wildcard(), 17, True, id="wildcard"),
        pytest.param(Step(5), 0, True, id="step-zero-value"),
        pytest.param(Step(5), 25, True, id="step-multiple"),
        pytest.param(Step(5), 26, False, id="step-non-multiple"),
        pytest.param(Step(0), 0, False, id="zero-step-never-matches"),
        pytest.param(Range(9, 17), 9, True, id="range-start"),
        pytest.param(Range(9, 17), 17, True, id="range-end"),
        pytest.param(Range(9, 17), 18, False, id="range-outside"),
        pytest.param(ValueList((1, 15)), 15, True, id="list-member"),
        pytest.param(ValueList((1, 15)), 2, False, id="list-non-member"),
        pytest.param(Single(3), 3, True, id="single-equal"),
        pytest.param(Single(3), 4, False, id="single-different"),
    ],
)
def test_field_spec_contains(spec: FieldSpec, value: int, expected: bool) -> None:  # noqa: FBT001
    assert spec.contains(value) is expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        pytest.param("42", 42, id="digits"),
        pytest.param("007", 7, id="leading-zeros"),
        pytest.param("-4", -4, id="negative"),
        pytest.param("  9 ", 9, id="surrounding-whitespace"),
        pytest.param("12abc", 12, id="trailing-text"),
        pytest.param("5,7", 5, id="stops-at-comma"),
        pytest.param("abc", None, id="no-digits"),
        pytest.param("", None, id="empty"),
        pytest.param("+", None, id="sign-only"),
    ],
)
def test_leading_int(token: str, expected: int | None) -> None:
    assert leading_int(token) == expected
