"""Public interface for the cronexplain package.

Parse cron expressions, validate their fields, describe them in English and
compute their next execution times.
"""

from __future__ import annotations

from .cron_types import FiveField, ParsedCron, SixField, ValidationResult
from .errors import CronConfigError, CronError, InvalidFieldError, ParseError
from .renderer import describe, describe_field
from .settings import CronSettings
from .simulator import OccurrenceSimulator, matches_field, next_executions
from .splitter import parse, parse_cron
from .validator import validate, validate_field

__all__ = [
    "CronConfigError",
    "CronError",
    "CronSettings",
    "FiveField",
    "InvalidFieldError",
    "OccurrenceSimulator",
    "ParseError",
    "ParsedCron",
    "SixField",
    "ValidationResult",
    "describe",
    "describe_field",
    "matches_field",
    "next_executions",
    "parse",
    "parse_cron",
    "validate",
    "validate_field",
]
