class CalzhError(Exception):
    """Base error."""

class OutOfRangeError(CalzhError, ValueError):
    """Raised when a date falls outside the span covered by the calendar tables."""

class InvalidFieldError(CalzhError, ValueError):
    """Raised when a month or day field is not valid for its calendar."""
