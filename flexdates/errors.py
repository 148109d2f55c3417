"""Custom exceptions for the flexdates utilities."""

class DatesError(Exception):
    """Base class for date utility errors."""
    pass

class InvalidInputError(DatesError, ValueError):
    """Raised when a date value cannot be coerced into a datetime."""
    pass

class InvalidArgumentError(DatesError, ValueError):
    """Raised when an enumerated or ranged parameter is out of bounds."""
    pass
