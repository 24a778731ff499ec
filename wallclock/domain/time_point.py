"""
Absolute instants on the UTC time line.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Union

import pendulum
from pendulum import DateTime, Timezone, FixedTimezone

from .exceptions import InvalidArgumentError

TimeZoneLike = Union[str, Timezone, FixedTimezone]

EPOCH = datetime(1970, 1, 1)

ONE_MILLISECOND = timedelta(milliseconds=1)


def resolve_timezone(time_zone: TimeZoneLike) -> Timezone | FixedTimezone:
    """
    Resolve an IANA name or pendulum timezone into a pendulum timezone.
    
    Raises:
        InvalidArgumentError: If time_zone is None, of an unsupported type,
            or names an unknown zone
    """
    if time_zone is None:
        raise InvalidArgumentError("time_zone must not be None")
    
    if isinstance(time_zone, (Timezone, FixedTimezone)):
        return time_zone
    
    if not isinstance(time_zone, str):
        raise InvalidArgumentError(
            f"time_zone must be an IANA name or pendulum timezone, got {time_zone!r}"
        )
    
    try:
        return pendulum.timezone(time_zone)
    except (ValueError, KeyError) as exc:
        # ZoneInfoNotFoundError is a KeyError, pendulum's InvalidTimezone a ValueError
        raise InvalidArgumentError(f"Unknown time zone: {time_zone!r}") from exc


@dataclass(frozen=True, order=True)
class TimePoint:
    """
    An instant, stored as milliseconds since the Unix epoch (UTC).
    
    A TimePoint has no calendar or zone of its own; use as_datetime() to
    view it in a particular zone.
    """
    millis_since_epoch: int
    
    def __post_init__(self):
        if isinstance(self.millis_since_epoch, bool) or not isinstance(self.millis_since_epoch, int):
            raise InvalidArgumentError(
                f"millis_since_epoch must be an int, got {self.millis_since_epoch!r}"
            )
    
    @classmethod
    def from_millis(cls, millis: int) -> "TimePoint":
        return cls(millis)
    
    @classmethod
    def from_datetime(cls, value: datetime) -> "TimePoint":
        """
        Create a TimePoint from a timezone-aware datetime.
        
        Sub-millisecond precision is truncated.
        
        Raises:
            InvalidArgumentError: If value is None or naive
        """
        if value is None:
            raise InvalidArgumentError("value must not be None")
        if value.tzinfo is None or value.utcoffset() is None:
            raise InvalidArgumentError(f"datetime must be timezone-aware, got {value!r}")
        
        # Wall-clock fields minus the offset; the UTC date may fall outside
        # years 1..9999 even when the local one does not.
        local = datetime(
            value.year, value.month, value.day,
            value.hour, value.minute, value.second, value.microsecond,
        )
        return cls((local - EPOCH - value.utcoffset()) // ONE_MILLISECOND)

    def as_datetime(self, time_zone: TimeZoneLike = "UTC") -> DateTime:
        """
        Return this instant as a pendulum DateTime in the given zone.

        Raises:
            InvalidArgumentError: If the instant falls outside the years 1..9999
                in UTC or in the given zone
        """
        zone = resolve_timezone(time_zone)
        try:
            utc = EPOCH.replace(tzinfo=timezone.utc) + self.millis_since_epoch * ONE_MILLISECOND
            return pendulum.instance(utc).in_timezone(zone)
        except OverflowError as exc:
            raise InvalidArgumentError(
                f"{self.millis_since_epoch} ms is outside the representable datetime range"
            ) from exc
    
    def is_after(self, other: "TimePoint") -> bool:
        if other is None:
            raise InvalidArgumentError("other must not be None")
        return self.millis_since_epoch > other.millis_since_epoch
    
    def is_before(self, other: "TimePoint") -> bool:
        if other is None:
            raise InvalidArgumentError("other must not be None")
        return self.millis_since_epoch < other.millis_since_epoch
    
    def __str__(self) -> str:
        return self.as_datetime("UTC").to_iso8601_string()
