from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from datecore.calendar import CalendarService, Timestamp, resolve_calendar

logger = logging.getLogger(__name__)


# ── offsetting ───────────────────────────────────────────────────────────────

def offset(
    t: Timestamp, days: int, *, calendar: Optional[CalendarService] = None
) -> Optional[datetime]:
    """
    Move ``t`` by ``days`` calendar days, keeping its hour, minute and second.

    A day is a calendar unit, not 24 hours: the candidate date is found by
    calendar-day addition and then recombined with ``t``'s wall-clock
    time, so the result lands on the same clock time across DST changes.
    """
    cal = resolve_calendar(calendar)
    candidate = cal.add_days(t, days)
    if candidate is None:
        return None

    day = cal.fields(candidate)
    clock = cal.fields(t)
    if day is None or clock is None:
        return None
    return cal.construct(
        day.year, day.month, day.day, clock.hour, clock.minute, clock.second
    )


def shifted_to_future(
    t: Timestamp, number_of_days: int, *, calendar: Optional[CalendarService] = None
) -> Optional[datetime]:
    return offset(t, number_of_days, calendar=calendar)


def shifted_to_past(
    t: Timestamp, number_of_days: int, *, calendar: Optional[CalendarService] = None
) -> Optional[datetime]:
    return offset(t, -number_of_days, calendar=calendar)


def next_day(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> Optional[datetime]:
    return offset(t, 1, calendar=calendar)


def previous_day(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> Optional[datetime]:
    return offset(t, -1, calendar=calendar)


# ── relative to now ──────────────────────────────────────────────────────────

def now(*, calendar: Optional[CalendarService] = None) -> datetime:
    return resolve_calendar(calendar).now()


def today(*, calendar: Optional[CalendarService] = None) -> datetime:
    return now(calendar=calendar)


def tomorrow(*, calendar: Optional[CalendarService] = None) -> Optional[datetime]:
    cal = resolve_calendar(calendar)
    return next_day(today(calendar=cal), calendar=cal)


def yesterday(*, calendar: Optional[CalendarService] = None) -> Optional[datetime]:
    cal = resolve_calendar(calendar)
    return previous_day(today(calendar=cal), calendar=cal)


# ── day boundaries ───────────────────────────────────────────────────────────

def start_of_day(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> Optional[datetime]:
    cal = resolve_calendar(calendar)
    f = cal.fields(t)
    if f is None:
        return None
    return cal.construct(f.year, f.month, f.day)


def end_of_day(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> Optional[datetime]:
    """Last whole second of ``t``'s day: start of the next day minus one second."""
    cal = resolve_calendar(calendar)
    following = next_day(t, calendar=cal)
    if following is None:
        return None
    start = start_of_day(following, calendar=cal)
    if start is None:
        return None
    return cal.add_seconds(start, -1)


def difference_in_days(
    start: Timestamp, end: Timestamp, *, calendar: Optional[CalendarService] = None
) -> Optional[int]:
    """
    Signed number of whole calendar days from ``start`` to ``end``.

    Inputs are used as given.  Two timestamps on consecutive days less than a
    full day apart differ by 0; pass them through ``to_canonical`` or
    ``start_of_day`` first for a day-granular answer.
    """
    return resolve_calendar(calendar).day_difference(start, end)
