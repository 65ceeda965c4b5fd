from __future__ import annotations


class DateCoreError(Exception):
    """Base exception for all datecore errors."""


class InvalidRangeError(DateCoreError, ValueError):
    """Raised when a DateRange would end before it starts."""
