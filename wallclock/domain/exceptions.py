"""
Domain-specific exception hierarchy for the wallclock library.
"""


class WallclockError(Exception):
    """Base class for all library-level errors."""


class InvalidArgumentError(WallclockError, ValueError):
    """Raised when an argument is missing, of the wrong type, or out of range."""


class ConfigError(WallclockError):
    """Raised when the configuration file cannot be read or validated."""
