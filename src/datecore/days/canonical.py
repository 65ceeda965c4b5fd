from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from datecore.calendar import CalendarService, Timestamp, resolve_calendar

logger = logging.getLogger(__name__)

# Canonical time of day.  Pinning every timestamp of a day to 12:01:00 keeps
# day-level comparisons clear of DST transitions, which happen around midnight.
CANONICAL_HOUR: int = 12
CANONICAL_MINUTE: int = 1
CANONICAL_SECOND: int = 0


def same_date_at_time(
    t: Timestamp,
    hour: int,
    minute: int,
    second: int,
    *,
    calendar: Optional[CalendarService] = None,
) -> Optional[datetime]:
    cal = resolve_calendar(calendar)
    f = cal.fields(t)
    if f is None:
        return None
    return cal.construct(f.year, f.month, f.day, hour, minute, second)


def to_canonical(
    t: Timestamp, *, calendar: Optional[CalendarService] = None
) -> Optional[datetime]:
    """Same calendar day as ``t`` at 12:01:00, or None if it cannot be built."""
    return same_date_at_time(
        t, CANONICAL_HOUR, CANONICAL_MINUTE, CANONICAL_SECOND, calendar=calendar
    )


def canonical_date(
    day: int, month: int, year: int, *, calendar: Optional[CalendarService] = None
) -> Optional[datetime]:
    return resolve_calendar(calendar).construct(
        year, month, day, CANONICAL_HOUR, CANONICAL_MINUTE, CANONICAL_SECOND
    )


def canonical_today(*, calendar: Optional[CalendarService] = None) -> Optional[datetime]:
    cal = resolve_calendar(calendar)
    return to_canonical(cal.now(), calendar=cal)


def is_same_day(
    a: Timestamp, b: Timestamp, *, calendar: Optional[CalendarService] = None
) -> bool:
    cal = resolve_calendar(calendar)
    ca = to_canonical(a, calendar=cal)
    cb = to_canonical(b, calendar=cal)
    if ca is None or cb is None:
        # Indeterminate collapses to False.
        logger.debug("is_same_day(%r, %r) could not canonicalize; answering False", a, b)
        return False
    return ca == cb


def is_today(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> bool:
    cal = resolve_calendar(calendar)
    today = canonical_today(calendar=cal)
    ct = to_canonical(t, calendar=cal)
    if today is None or ct is None:
        logger.debug("is_today(%r) could not canonicalize; answering False", t)
        return False
    return ct == today
