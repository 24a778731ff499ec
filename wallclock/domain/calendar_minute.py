"""
A time of day on a specific calendar date.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pendulum

from .calendar_date import CalendarDate
from .exceptions import InvalidArgumentError
from .time_of_day import TimeOfDay
from .time_point import TimePoint, TimeZoneLike, resolve_timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class CalendarMinute:
    """
    Represents a wall-clock minute on a date, still without a timezone.
    
    Ordered by date first, then time of day.
    """
    date: CalendarDate
    time: TimeOfDay
    
    def __post_init__(self):
        if not isinstance(self.date, CalendarDate):
            raise InvalidArgumentError(f"date must be a CalendarDate, got {self.date!r}")
        if not isinstance(self.time, TimeOfDay):
            raise InvalidArgumentError(f"time must be a TimeOfDay, got {self.time!r}")
    
    @classmethod
    def from_parts(cls, date: CalendarDate, time_of_day: TimeOfDay) -> "CalendarMinute":
        """
        Combine a date and a time of day.
        
        Raises:
            InvalidArgumentError: If either argument is None
        """
        return cls(date=date, time=time_of_day)
    
    def as_time_point(self, time_zone: TimeZoneLike) -> TimePoint:
        """
        Resolve this wall-clock minute to an instant in the given zone.
        
        The result is second zero, millisecond zero of the minute. Local times
        skipped by a DST gap are shifted forward; times repeated by a DST
        overlap resolve to the later (post-transition) offset.
        
        Raises:
            InvalidArgumentError: If time_zone is None or unknown
        """
        zone = resolve_timezone(time_zone)
        local = pendulum.datetime(
            self.date.year,
            self.date.month,
            self.date.day,
            self.time.hour.value,
            self.time.minute.value,
            tz=zone,
        )
        
        if local.hour != self.time.hour.value or local.minute != self.time.minute.value:
            logger.debug("Local time %s does not exist in %s, shifted to %s", self, zone.name, local)
        
        return TimePoint.from_datetime(local)
    
    def __str__(self) -> str:
        return f"{self.date} {self.time}"
