"""Logging helpers: a per-class logger mixin and root logger configuration.

The library itself never configures logging; applications call
:func:`configure_logging` if they want cronexplain's debug output.
"""

from __future__ import annotations

__all__ = ["DEFAULT_LOG_FORMAT", "WithLogger", "configure_logging"]

from functools import cached_property
import logging
from typing import Final

from cronexplain.settings import CronSettings

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class WithLogger:
    """Mixin providing a logger named after the concrete class."""

    @classmethod
    def _get_logger(cls) -> logging.Logger:
        return logging.getLogger(cls.__name__)

    @cached_property
    def _logger(self) -> logging.Logger:
        return self._get_logger()


def configure_logging(level: int | str | None = None, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Apply *level* and a formatter built from *fmt* to the root logger.

    :param level: Numeric level or level name. Defaults to ``CronSettings.log_level``.
    :param fmt: Format string for the root handlers.
    :raises ValueError: If *level* is a string that does not name a logging level.
    """
    if level is None:
        level = CronSettings.load().log_level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"{level!r} is not a valid logging level name"
            raise ValueError(msg)
        level = resolved

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:
        root_logger.addHandler(logging.StreamHandler())
    formatter = logging.Formatter(fmt)
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)
