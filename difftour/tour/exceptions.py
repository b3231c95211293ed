"""Tour-related exception classes.

Contains all exception classes for hunk grouping:
- TourError: Base exception for tour errors
- SchemaViolationError: Raised when a grouping reference has the wrong shape
- DiffTooLargeError: Raised when the hunk inventory exceeds the size limit
"""


class TourError(Exception):
    """Base exception for tour-related errors."""

    pass


class SchemaViolationError(TourError):
    """Raised when a grouping reference does not match the expected schema."""

    pass


class DiffTooLargeError(TourError):
    """Raised when the formatted diff is too large to hand to a model."""

    pass
