from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from datecore.calendar import CalendarService, Timestamp, resolve_calendar
from datecore.days.canonical import to_canonical
from datecore.days.weekday import Day

logger = logging.getLogger(__name__)

YearLike = Union[int, "np.ndarray"]


# ── single-field extraction ──────────────────────────────────────────────────

def year_number(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> Optional[int]:
    f = resolve_calendar(calendar).fields(t)
    return None if f is None else f.year


def month_number(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> Optional[int]:
    f = resolve_calendar(calendar).fields(t)
    return None if f is None else f.month


def day_number_within_month(
    t: Timestamp, *, calendar: Optional[CalendarService] = None
) -> Optional[int]:
    f = resolve_calendar(calendar).fields(t)
    return None if f is None else f.day


def weekday_number(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> Optional[int]:
    """1=Sunday, 2=Monday, ..., 7=Saturday."""
    f = resolve_calendar(calendar).fields(t)
    return None if f is None else f.weekday


# ── leap years ───────────────────────────────────────────────────────────────

def is_leap_year(year: YearLike) -> Union[bool, "np.ndarray"]:
    """
    Gregorian leap-year rule: divisible by 4, except centuries not divisible
    by 400.  Negative years are never leap years.  Integer arrays are
    evaluated elementwise and give a boolean array.
    """
    if np.ndim(year) == 0:
        y = int(year)
        if y < 0:
            return False
        return y % 400 == 0 or (y % 4 == 0 and y % 100 != 0)

    y = np.asarray(year, dtype=np.int64)
    return (y >= 0) & ((y % 400 == 0) | ((y % 4 == 0) & (y % 100 != 0)))


def is_in_leap_year(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> bool:
    year = year_number(t, calendar=calendar)
    if year is None:
        logger.debug("is_in_leap_year(%r) has no year; answering False", t)
        return False
    return bool(is_leap_year(year))


# ── classification ───────────────────────────────────────────────────────────

def is_on_weekend(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> bool:
    cal = resolve_calendar(calendar)
    canonical = to_canonical(t, calendar=cal)
    weekday = None if canonical is None else weekday_number(canonical, calendar=cal)
    if weekday is None:
        # Indeterminate collapses to False.
        logger.debug("is_on_weekend(%r) could not resolve a weekday; answering False", t)
        return False
    return Day(weekday).is_weekend


def is_on_same_day_of_month(
    a: Timestamp, b: Timestamp, *, calendar: Optional[CalendarService] = None
) -> bool:
    cal = resolve_calendar(calendar)
    return day_number_within_month(a, calendar=cal) == day_number_within_month(b, calendar=cal)


def is_in_same_month_same_year(
    a: Timestamp, b: Timestamp, *, calendar: Optional[CalendarService] = None
) -> bool:
    cal = resolve_calendar(calendar)
    return (
        month_number(a, calendar=cal) == month_number(b, calendar=cal)
        and year_number(a, calendar=cal) == year_number(b, calendar=cal)
    )


def is_in_same_month_any_year(
    a: Timestamp, b: Timestamp, *, calendar: Optional[CalendarService] = None
) -> bool:
    cal = resolve_calendar(calendar)
    return month_number(a, calendar=cal) == month_number(b, calendar=cal)


def is_in_same_year(
    a: Timestamp, b: Timestamp, *, calendar: Optional[CalendarService] = None
) -> bool:
    cal = resolve_calendar(calendar)
    return year_number(a, calendar=cal) == year_number(b, calendar=cal)


# ── ordering ─────────────────────────────────────────────────────────────────

def compare(a: Timestamp, b: Timestamp, *, calendar: Optional[CalendarService] = None) -> int:
    """Three-way comparison of two instants: -1, 0 or 1."""
    cal = resolve_calendar(calendar)
    la, lb = cal.as_aware(a), cal.as_aware(b)
    return (la > lb) - (la < lb)


def is_same(a: Timestamp, b: Timestamp, *, calendar: Optional[CalendarService] = None) -> bool:
    return compare(a, b, calendar=calendar) == 0


def is_greater(a: Timestamp, b: Timestamp, *, calendar: Optional[CalendarService] = None) -> bool:
    return compare(a, b, calendar=calendar) > 0


def is_less(a: Timestamp, b: Timestamp, *, calendar: Optional[CalendarService] = None) -> bool:
    return compare(a, b, calendar=calendar) < 0
