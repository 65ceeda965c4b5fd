"""
datecore
~~~~~~~~

Gregorian date utilities: DST-safe canonical days, calendar-day arithmetic,
field queries, month metadata, date ranges and pattern formatting.
"""

from __future__ import annotations

from datecore._exceptions import DateCoreError, InvalidRangeError
from datecore.calendar import CalendarFields, CalendarService, shared_calendar
from datecore.days import Day
from datecore.formatting import StandardDateFormat, format_date
from datecore.months import Month
from datecore.ranges import DateRange

__version__ = "0.1.0"

__all__ = [
    "CalendarFields",
    "CalendarService",
    "DateCoreError",
    "DateRange",
    "Day",
    "InvalidRangeError",
    "Month",
    "StandardDateFormat",
    "format_date",
    "shared_calendar",
]
