"""Exception hierarchy for textpager."""

from __future__ import annotations


class TextPagerError(Exception):
    """Base class for all textpager errors."""
    pass


class MeasurementError(TextPagerError):
    """Font metrics provider could not measure a string."""
    pass


class BackendError(TextPagerError):
    """Document/canvas creation or I/O failure in a backend."""
    pass


class DegenerateGeometryError(TextPagerError):
    """
    Page geometry leaves no room for body text.

    Raised when the computed line capacity is zero or negative while
    content remains, or when pagination exceeds the page safety bound.

    Attributes:
        capacity: Computed body lines per page
    """

    def __init__(self, message: str, capacity: int) -> None:
        super().__init__(message)
        self.capacity = capacity
