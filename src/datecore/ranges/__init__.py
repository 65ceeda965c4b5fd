"""
datecore.ranges
~~~~~~~~~~~~~~~

Closed date ranges with inclusive and exclusive day counts.

Basic usage::

    from datecore.ranges import DateRange

    week = DateRange.days_of_history(7, ending_at=now)
    week.number_of_days_between_inclusive    # → 7
    week.number_of_days_between_exclusive    # → 5

Public API
----------
DateRange          The range value type.
DISTANT_PAST       Start of ``DateRange.all_history()``.
InvalidRangeError  Raised by ``DateRange(...)`` when start > end.
"""

from __future__ import annotations

from datecore._exceptions import InvalidRangeError
from datecore.ranges.date_range import DISTANT_PAST, DateRange

__all__ = [
    "DISTANT_PAST",
    "DateRange",
    "InvalidRangeError",
]
