"""
Calendar dates without a time of day or timezone.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

import pendulum

from .exceptions import InvalidArgumentError
from .time_point import TimePoint, TimeZoneLike

if TYPE_CHECKING:
    from .calendar_minute import CalendarMinute
    from .time_of_day import TimeOfDay


ISO_DATE_FORMAT = "YYYY-MM-DD"


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    A day in the proleptic Gregorian calendar.
    
    Invariant: (year, month, day) names a date that exists.
    """
    year: int
    month: int
    day: int
    
    def __post_init__(self):
        for name in ("year", "month", "day"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"{name} must be an int, got {value!r}")
        try:
            pendulum.date(self.year, self.month, self.day)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Invalid date {self.year}-{self.month}-{self.day}: {exc}"
            ) from exc
    
    @classmethod
    def from_ints(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(year=year, month=month, day=day)
    
    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        """Create from a datetime.date, datetime or any pendulum date type."""
        if not isinstance(value, date):
            raise InvalidArgumentError(f"value must be a date, got {value!r}")
        return cls(year=value.year, month=value.month, day=value.day)
    
    @classmethod
    def from_iso(cls, text: str) -> "CalendarDate":
        """
        Create from a strict YYYY-MM-DD string.
        
        Raises:
            InvalidArgumentError: If text is not in YYYY-MM-DD form or is not a real date
        """
        if not isinstance(text, str):
            raise InvalidArgumentError(f"text must be a str, got {text!r}")
        stripped = text.strip()
        try:
            parsed = pendulum.from_format(stripped, ISO_DATE_FORMAT)
        except ValueError as exc:
            raise InvalidArgumentError(f"Expected a date as {ISO_DATE_FORMAT}, got {text!r}") from exc

        # from_format also accepts single-digit month and day
        if parsed.format(ISO_DATE_FORMAT) != stripped:
            raise InvalidArgumentError(f"Expected a date as {ISO_DATE_FORMAT}, got {text!r}")
        return cls.from_date(parsed)
    
    def at(self, time_of_day: "TimeOfDay") -> "CalendarMinute":
        """Combine this date with a time of day."""
        from .calendar_minute import CalendarMinute
        
        return CalendarMinute.from_parts(self, time_of_day)
    
    def start_as_time_point(self, time_zone: TimeZoneLike) -> TimePoint:
        """Return the instant this date begins in the given zone."""
        from .time_of_day import TimeOfDay
        
        return self.at(TimeOfDay.from_ints(0, 0)).as_time_point(time_zone)
    
    def to_date(self) -> date:
        return date(self.year, self.month, self.day)
    
    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
