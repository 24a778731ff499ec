"""
Range-checked integer wrappers for the hour and minute of a wall-clock time.
"""

from dataclasses import dataclass

from .exceptions import InvalidArgumentError


def _require_int(value, name: str) -> int:
    # bool is an int subclass but never a meaningful hour or minute
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {value!r}")
    return value


@dataclass(frozen=True, order=True)
class HourOfDay:
    """
    An hour of the day on the 24-hour clock.
    
    Invariant: 0 <= value <= 23.
    """
    value: int
    
    MIN = 0
    MAX = 23
    
    def __post_init__(self):
        _require_int(self.value, "hour")
        if not self.MIN <= self.value <= self.MAX:
            raise InvalidArgumentError(
                f"Hour must be between {self.MIN} and {self.MAX}, got {self.value}"
            )
    
    @classmethod
    def from_twelve_hour(cls, value: int, am_pm: str) -> "HourOfDay":
        """
        Create an hour from the 12-hour clock.
        
        Args:
            value: Hour from 1 to 12
            am_pm: "AM" or "PM", case-insensitive
            
        Returns:
            HourOfDay on the 24-hour clock (12 AM is 0, 12 PM is 12)
            
        Raises:
            InvalidArgumentError: If value is not in 1..12 or am_pm is unknown
        """
        _require_int(value, "hour")
        if not 1 <= value <= 12:
            raise InvalidArgumentError(f"12-hour clock hour must be between 1 and 12, got {value}")
        
        marker = am_pm.strip().upper() if isinstance(am_pm, str) else None
        if marker not in ("AM", "PM"):
            raise InvalidArgumentError(f"am_pm must be 'AM' or 'PM', got {am_pm!r}")
        
        hour = value % 12
        if marker == "PM":
            hour += 12
        return cls(hour)
    
    def is_after(self, other: "HourOfDay") -> bool:
        """Check if this hour is strictly later than another."""
        if other is None:
            raise InvalidArgumentError("other must not be None")
        return self.value > other.value
    
    def is_before(self, other: "HourOfDay") -> bool:
        """Check if this hour is strictly earlier than another."""
        if other is None:
            raise InvalidArgumentError("other must not be None")
        return self.value < other.value
    
    def compare_to(self, other: "HourOfDay") -> int:
        return self.value - other.value
    
    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class MinuteOfHour:
    """
    A minute within an hour.
    
    Invariant: 0 <= value <= 59.
    """
    value: int
    
    MIN = 0
    MAX = 59
    
    def __post_init__(self):
        _require_int(self.value, "minute")
        if not self.MIN <= self.value <= self.MAX:
            raise InvalidArgumentError(
                f"Minute must be between {self.MIN} and {self.MAX}, got {self.value}"
            )
    
    def is_after(self, other: "MinuteOfHour") -> bool:
        """Check if this minute is strictly later than another."""
        if other is None:
            raise InvalidArgumentError("other must not be None")
        return self.value > other.value
    
    def is_before(self, other: "MinuteOfHour") -> bool:
        """Check if this minute is strictly earlier than another."""
        if other is None:
            raise InvalidArgumentError("other must not be None")
        return self.value < other.value
    
    def compare_to(self, other: "MinuteOfHour") -> int:
        return self.value - other.value
    
    def __str__(self) -> str:
        return str(self.value)
