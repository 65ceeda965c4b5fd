"""
datecore.days
~~~~~~~~~~~~~

Day-level operations on timestamps: canonicalization, DST-safe calendar-day
arithmetic and calendar field queries.

A canonical timestamp has its time of day pinned to 12:01:00.  Comparing
canonical timestamps answers "same day?" without DST surprises::

    from datecore.days import is_same_day, offset, to_canonical

    is_same_day(morning, evening)         # → True
    offset(t, 1)                          # same clock time tomorrow
    offset(t, -1)                         # same clock time yesterday

Functions return ``None`` when the calendar cannot represent the result.
Predicates answer ``False`` in that case.
"""

from __future__ import annotations

from datecore.days.arithmetic import (
    difference_in_days,
    end_of_day,
    next_day,
    now,
    offset,
    previous_day,
    shifted_to_future,
    shifted_to_past,
    start_of_day,
    today,
    tomorrow,
    yesterday,
)
from datecore.days.canonical import (
    CANONICAL_HOUR,
    CANONICAL_MINUTE,
    CANONICAL_SECOND,
    canonical_date,
    canonical_today,
    is_same_day,
    is_today,
    same_date_at_time,
    to_canonical,
)
from datecore.days.fields import (
    compare,
    day_number_within_month,
    is_greater,
    is_in_leap_year,
    is_in_same_month_any_year,
    is_in_same_month_same_year,
    is_in_same_year,
    is_leap_year,
    is_less,
    is_on_same_day_of_month,
    is_on_weekend,
    is_same,
    month_number,
    weekday_number,
    year_number,
)
from datecore.days.weekday import Day

__all__ = [
    "CANONICAL_HOUR",
    "CANONICAL_MINUTE",
    "CANONICAL_SECOND",
    "Day",
    "canonical_date",
    "canonical_today",
    "compare",
    "day_number_within_month",
    "difference_in_days",
    "end_of_day",
    "is_greater",
    "is_in_leap_year",
    "is_in_same_month_any_year",
    "is_in_same_month_same_year",
    "is_in_same_year",
    "is_leap_year",
    "is_less",
    "is_on_same_day_of_month",
    "is_on_weekend",
    "is_same",
    "is_same_day",
    "is_today",
    "month_number",
    "next_day",
    "now",
    "offset",
    "previous_day",
    "same_date_at_time",
    "shifted_to_future",
    "shifted_to_past",
    "start_of_day",
    "to_canonical",
    "today",
    "tomorrow",
    "weekday_number",
    "year_number",
    "yesterday",
]
