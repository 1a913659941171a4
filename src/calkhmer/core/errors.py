class CalkhmerError(Exception):
    """Base error."""

class InvalidRangeError(CalkhmerError, ValueError):
    """Raised when a date lies outside the range an engine can convert."""

class LunarTableError(CalkhmerError, RuntimeError):
    """Raised when the day counter produces an ordinal with no table entry."""
