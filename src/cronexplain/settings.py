"""Settings for cronexplain and useful functionality to work with them."""

from __future__ import annotations

import dataclasses
import os
from typing import Any, ClassVar

from typing_extensions import NotRequired, TypedDict, Unpack

from cronexplain.errors import CronConfigError


class CronSettingsKwargs(TypedDict):
    """Kwargs accepted by :meth:`CronSettings.update`."""

    default_count: NotRequired[int]
    iteration_factor: NotRequired[int]
    log_level: NotRequired[str]


@dataclasses.dataclass
class CronSettings:
    """Strongly typed configuration holder for cronexplain.

    :param default_count: Number of executions returned when the caller does not ask
        for a specific count.
    :param iteration_factor: Minutes simulated per requested execution before the
        search gives up.
    :param log_level: Level applied by :func:`cronexplain.logging.configure_logging`
        when none is given explicitly.
    """

    env_prefix: ClassVar[str] = "CRONEXPLAIN"

    default_count: int
    iteration_factor: int
    log_level: str

    @classmethod
    def from_defaults(cls) -> dict[str, Any]:
        """Return the canonical default values for all settings fields."""
        return {
            "default_count": 5,
            "iteration_factor": 100,
            "log_level": "WARNING",
        }

    @classmethod
    def load(cls, **settings: Any) -> CronSettings:
        """Load settings from keyword overrides, env vars, and defaults (in that order).

        :param settings: Keyword arguments that override both environment variables and defaults.
        :returns: A fully instantiated :class:`CronSettings` object.
        :raises CronConfigError: If an environment variable cannot be coerced.
        """
        final_settings = cls.from_defaults()
        final_settings.update(cls.from_envs())
        final_settings.update(settings)
        return cls(**final_settings)

    def update(self, **settings: Unpack[CronSettingsKwargs]) -> None:
        """Apply keyword overrides directly to the instance."""
        for k, v in settings.items():
            if hasattr(self, k):
                setattr(self, k, v)

    def as_dict(self) -> dict[str, Any]:
        """Return settings as a plain dictionary for serialisation."""
        return dataclasses.asdict(self)

    @classmethod
    def from_envs(cls) -> dict[str, Any]:
        """Return settings overridden via ``CRONEXPLAIN_*`` environment variables."""
        coercers: dict[str, Any] = {
            "default_count": _to_positive_int,
            "iteration_factor": _to_positive_int,
            "log_level": _to_level_name,
        }

        to_return: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_var = f"{cls.env_prefix}_{field.name.upper()}"
            if env_var not in os.environ:
                continue
            raw_value = os.environ[env_var]
            try:
                to_return[field.name] = coercers[field.name](raw_value)
            except ValueError as exc:
                msg = f"{raw_value!r} is not a valid value for {field.name!r}"
                raise CronConfigError(msg) from exc
        return to_return


def _to_positive_int(value: str) -> int:
    result = int(value)
    if result <= 0:
        msg = f"Must be a positive integer, got {value!r}"
        raise ValueError(msg)
    return result


def _to_level_name(value: str) -> str:
    level = value.strip().upper()
    if not level:
        msg = "Log level must not be empty"
        raise ValueError(msg)
    return level
