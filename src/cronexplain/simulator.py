"""Brute-force computation of upcoming execution times."""

from __future__ import annotations

__all__ = ["ONE_MINUTE", "OccurrenceSimulator", "matches_field", "next_executions"]

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Final

from cronexplain.errors import InvalidFieldError
from cronexplain.fields import parse_field
from cronexplain.logging import WithLogger
from cronexplain.settings import CronSettings

if TYPE_CHECKING:
    from collections.abc import Callable

    from cronexplain.cron_types import ParsedCron

ONE_MINUTE: Final[timedelta] = timedelta(minutes=1)


def matches_field(field: str, value: int) -> bool:
    """Return ``True`` when *value* satisfies the raw field text *field*.

    Malformed text and ``*/0`` never match.
    """
    try:
        spec = parse_field(field)
    except InvalidFieldError:
        return False
    return spec.contains(value)


class OccurrenceSimulator(WithLogger):
    """Walk the clock forward minute by minute, collecting instants matching an expression.

    The search is capped at ``count * settings.iteration_factor`` minutes, so an
    expression that can never match (``"0 0 31 2 *"``) yields an empty result
    instead of looping forever.
    """

    def __init__(
        self,
        settings: CronSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialise the simulator.

        :param settings: Settings to use; loaded from env and defaults when omitted.
        :param clock: Callable returning the current instant. Defaults to
            :meth:`datetime.now` (naive local time).
        :raises CronConfigError: If settings are loaded from an invalid environment.
        """
        self._settings = settings if settings is not None else CronSettings.load()
        self._clock = clock if clock is not None else datetime.now

    @property
    def settings(self) -> CronSettings:
        return self._settings

    def matches(self, parsed: ParsedCron, instant: datetime) -> bool:
        """Check *instant* against the minute, hour, day, month and weekday fields.

        The ``second`` field of six-field expressions is not checked.
        """
        return (
            matches_field(parsed.minute, instant.minute)
            and matches_field(parsed.hour, instant.hour)
            and matches_field(parsed.day_of_month, instant.day)
            and matches_field(parsed.month, instant.month)
            and matches_field(parsed.day_of_week, instant.isoweekday() % 7)
        )

    def next_executions(
        self, parsed: ParsedCron, count: int | None = None, *, start: datetime | None = None
    ) -> list[datetime]:
        """Return up to *count* matching instants after *start*, in ascending order.

        :param parsed: Expression to simulate.
        :param count: Number of instants wanted; defaults to ``settings.default_count``.
        :param start: Starting instant; defaults to the clock. Microseconds are
            dropped, and the first candidate is one minute after it.
        :returns: Matching instants. Fewer than *count* when the iteration ceiling
            is reached first.
        """
        if count is None:
            count = self._settings.default_count
        current = (start if start is not None else self._clock()).replace(microsecond=0)
        ceiling = count * self._settings.iteration_factor

        found: list[datetime] = []
        for _ in range(ceiling):
            if len(found) >= count:
                break
            current += ONE_MINUTE
            if self.matches(parsed, current):
                found.append(current)

        if len(found) < count:
            self._logger.debug(
                "Found %d of %d executions of %r within %d minutes",
                len(found),
                count,
                " ".join(parsed),
                ceiling,
            )
        return found


def next_executions(
    parsed: ParsedCron,
    count: int | None = None,
    *,
    start: datetime | None = None,
    settings: CronSettings | None = None,
) -> list[datetime]:
    """Return up to *count* (default 5) upcoming execution times of *parsed*.

    See :meth:`OccurrenceSimulator.next_executions`. When *settings* is omitted they
    are loaded from ``CRONEXPLAIN_*`` environment variables.

    :raises CronConfigError: If *settings* is omitted and the environment holds an
        invalid value. Invalid expressions never raise.
    """
    return OccurrenceSimulator(settings).next_executions(parsed, count, start=start)
