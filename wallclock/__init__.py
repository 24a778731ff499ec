"""
wallclock - Calendar dates and times of day without a bound timezone.
"""

from .domain import (
    CalendarDate,
    CalendarMinute,
    HourOfDay,
    InvalidArgumentError,
    MinuteOfHour,
    TimeOfDay,
    TimePoint,
    WallclockError,
)

__version__ = "0.1.0"

__all__ = [
    "CalendarDate",
    "CalendarMinute",
    "HourOfDay",
    "InvalidArgumentError",
    "MinuteOfHour",
    "TimeOfDay",
    "TimePoint",
    "WallclockError",
    "__version__",
]
