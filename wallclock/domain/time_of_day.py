"""
Wall-clock time of day, independent of any date or timezone.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import TYPE_CHECKING

from .exceptions import InvalidArgumentError
from .time_point import TimePoint, TimeZoneLike
from .units import HourOfDay, MinuteOfHour

if TYPE_CHECKING:
    from .calendar_date import CalendarDate
    from .calendar_minute import CalendarMinute


def _require_time_of_day(other) -> None:
    if not isinstance(other, TimeOfDay):
        raise InvalidArgumentError(f"other must be a TimeOfDay, got {other!r}")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """
    Represents an immutable hour and minute of the day.
    
    Unlike a datetime, a TimeOfDay carries no date and no timezone. Values
    are ordered linearly from 0:00 to 23:59; there is no wraparound at
    midnight, so 23:59 is after 0:00.
    
    The hour and minute fields are exposed read-only. They hand out the
    internal representation, so prefer the comparison and derivation
    methods where one fits.
    """
    hour: HourOfDay
    minute: MinuteOfHour
    
    def __post_init__(self):
        if not isinstance(self.hour, HourOfDay):
            raise InvalidArgumentError(f"hour must be an HourOfDay, got {self.hour!r}")
        if not isinstance(self.minute, MinuteOfHour):
            raise InvalidArgumentError(f"minute must be a MinuteOfHour, got {self.minute!r}")
    
    @classmethod
    def from_parts(cls, hour: HourOfDay, minute: MinuteOfHour) -> "TimeOfDay":
        """
        Create a TimeOfDay from already validated hour and minute values.
        
        Raises:
            InvalidArgumentError: If either argument is None
        """
        return cls(hour=hour, minute=minute)
    
    @classmethod
    def from_ints(cls, hour: int, minute: int) -> "TimeOfDay":
        """
        Create a TimeOfDay from raw integers.
        
        Args:
            hour: Hour of the day (0-23)
            minute: Minute of the hour (0-59)
            
        Raises:
            InvalidArgumentError: If hour or minute is out of range
        """
        return cls(hour=HourOfDay(hour), minute=MinuteOfHour(minute))
    
    @classmethod
    def from_time(cls, value: time) -> "TimeOfDay":
        """Create a TimeOfDay from a datetime.time, dropping seconds and below."""
        if value is None:
            raise InvalidArgumentError("value must not be None")
        return cls.from_ints(value.hour, value.minute)
    
    def to_time(self) -> time:
        """Return the equivalent naive datetime.time at second zero."""
        return time(hour=self.hour.value, minute=self.minute.value)
    
    def compare_to(self, other: "TimeOfDay") -> int:
        """Three-way comparison: hour first, then minute."""
        _require_time_of_day(other)
        hour_comparison = self.hour.compare_to(other.hour)
        if hour_comparison != 0:
            return hour_comparison
        return self.minute.compare_to(other.minute)
    
    def is_after(self, other: "TimeOfDay") -> bool:
        """
        Check if this time of day is strictly later than another.
        
        Returns False when both are equal.
        """
        _require_time_of_day(other)
        return self.hour.is_after(other.hour) or (
            self.hour == other.hour and self.minute.is_after(other.minute)
        )
    
    def is_before(self, other: "TimeOfDay") -> bool:
        """
        Check if this time of day is strictly earlier than another.
        
        Returns False when both are equal.
        """
        _require_time_of_day(other)
        return self.hour.is_before(other.hour) or (
            self.hour == other.hour and self.minute.is_before(other.minute)
        )
    
    def on(self, date: "CalendarDate") -> "CalendarMinute":
        """Combine this time of day with a date."""
        from .calendar_minute import CalendarMinute
        
        if date is None:
            raise InvalidArgumentError("date must not be None")
        return CalendarMinute.from_parts(date, self)
    
    def as_time_point_given(self, date: "CalendarDate", time_zone: TimeZoneLike) -> TimePoint:
        """
        Return the instant of second zero of this time of day on the given
        date in the given zone.
        
        Raises:
            InvalidArgumentError: If date or time_zone is None
        """
        if time_zone is None:
            raise InvalidArgumentError("time_zone must not be None")
        return self.on(date).as_time_point(time_zone)
    
    def __str__(self) -> str:
        return f"{self.hour}:{self.minute}"
    
    def __repr__(self) -> str:
        return f"TimeOfDay(hour={self.hour.value}, minute={self.minute.value})"
