"""Module containing cronexplain-related errors."""


class CronError(Exception):
    """Base class for all cronexplain-related errors."""


class ParseError(CronError, ValueError):
    """Raised when an expression does not split into five or six fields."""


class InvalidFieldError(CronError, ValueError):
    """Raised when a single field contains text that is not a valid value, range, list or step."""


class CronConfigError(CronError, ValueError):
    """Raised when a ``CRONEXPLAIN_*`` environment variable holds an invalid value."""
