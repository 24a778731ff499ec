"""
Domain layer - Immutable value types for dates, times of day and instants.
"""

from .calendar_date import CalendarDate
from .calendar_minute import CalendarMinute
from .exceptions import ConfigError, InvalidArgumentError, WallclockError
from .time_of_day import TimeOfDay
from .time_point import TimePoint, resolve_timezone
from .units import HourOfDay, MinuteOfHour

__all__ = [
    "CalendarDate",
    "CalendarMinute",
    "ConfigError",
    "HourOfDay",
    "InvalidArgumentError",
    "MinuteOfHour",
    "TimeOfDay",
    "TimePoint",
    "WallclockError",
    "resolve_timezone",
]
