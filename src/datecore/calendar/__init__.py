"""
datecore.calendar
~~~~~~~~~~~~~~~~~

Gregorian calendar access.  A CalendarService extracts wall-clock fields from
timestamps, builds timestamps from fields and performs calendar-day
arithmetic in one time zone.

Basic usage::

    from zoneinfo import ZoneInfo
    from datecore.calendar import CalendarService

    cal = CalendarService(ZoneInfo("America/New_York"))
    t = cal.construct(2024, 3, 9, 12, 1)
    cal.add_days(t, 1)                    # → 2024-03-10 12:01 EDT
    cal.fields(t).weekday                 # → 7 (Saturday)

Every datecore operation takes an optional ``calendar=`` keyword; without it
the process-wide ``shared_calendar()`` on the system zone is used.

Public API
----------
CalendarService   Zone-bound Gregorian calendar.
CalendarFields    Field decomposition of a timestamp.
shared_calendar   The lazily created process-wide instance.
"""

from __future__ import annotations

from datecore.calendar.calendar import (
    CalendarFields,
    CalendarService,
    Timestamp,
    resolve_calendar,
    shared_calendar,
)

__all__ = [
    "CalendarFields",
    "CalendarService",
    "Timestamp",
    "resolve_calendar",
    "shared_calendar",
]
