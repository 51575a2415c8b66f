"""Field names, value domains and name tables shared by every cron component."""

from __future__ import annotations

import sys
from typing import Final

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum

__all__ = [
    "DAY_NAMES",
    "FIELD_RANGES",
    "FIVE_FIELD_COUNT",
    "MONTH_NAMES",
    "SIX_FIELD_COUNT",
    "CronFieldEnum",
    "StrEnum",
]

FIVE_FIELD_COUNT: Final[int] = 5
SIX_FIELD_COUNT: Final[int] = 6


class CronFieldEnum(StrEnum):
    """Enum of cron field names, valued as the attribute names of parsed records."""

    Second = "second"
    Minute = "minute"
    Hour = "hour"
    DayOfMonth = "day_of_month"
    Month = "month"
    DayOfWeek = "day_of_week"


# Inclusive (min, max) bounds per field.
FIELD_RANGES: dict[CronFieldEnum, tuple[int, int]] = {
    CronFieldEnum.Second: (0, 59),
    CronFieldEnum.Minute: (0, 59),
    CronFieldEnum.Hour: (0, 23),
    CronFieldEnum.DayOfMonth: (1, 31),
    CronFieldEnum.Month: (1, 12),
    CronFieldEnum.DayOfWeek: (0, 6),
}

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Index 0 is Sunday.
DAY_NAMES: Final[tuple[str, ...]] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
