from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional, Union

import numpy as np

from datecore.calendar import CalendarService, resolve_calendar
from datecore.days.canonical import canonical_date
from datecore.days.fields import is_leap_year, weekday_number
from datecore.formatting import StandardDateFormat, format_date

logger = logging.getLogger(__name__)

YearLike = Union[int, "np.ndarray"]

# Any year will do for month names; they do not change between years.
ARBITRARY_YEAR: int = 2000

DAYS_IN_WEEK: int = 7


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def days_in(self, year: YearLike) -> Union[int, "np.ndarray"]:
        return days_in_month(self, year)

    def __str__(self) -> str:
        return self.description


_DESCRIPTIONS: dict[Month, str] = {
    Month.JANUARY: "January",
    Month.FEBRUARY: "February",
    Month.MARCH: "March",
    Month.APRIL: "April",
    Month.MAY: "May",
    Month.JUNE: "June",
    Month.JULY: "July",
    Month.AUGUST: "August",
    Month.SEPTEMBER: "September",
    Month.OCTOBER: "October",
    Month.NOVEMBER: "November",
    Month.DECEMBER: "December",
}

# Common-year lengths, indexed by month number - 1.
_DAYS_IN_MONTH: np.ndarray = np.array(
    [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64
)


# ── month lengths ────────────────────────────────────────────────────────────

def days_in_month(month: Union[Month, int], year: YearLike) -> Union[int, "np.ndarray"]:
    """
    Length of ``month`` in ``year``; February has 29 days in leap years.
    ``year`` may be an integer array, giving an array of lengths.
    """
    month = Month(month)
    base = int(_DAYS_IN_MONTH[month - 1])
    if month is not Month.FEBRUARY:
        if np.ndim(year) == 0:
            return base
        return np.full(np.shape(year), base, dtype=np.int64)

    if np.ndim(year) == 0:
        return base + int(is_leap_year(year))
    return base + is_leap_year(year).astype(np.int64)


def days_in_month_for_current_year(
    month: Union[Month, int], *, calendar: Optional[CalendarService] = None
) -> Optional[int]:
    cal = resolve_calendar(calendar)
    today = cal.fields(cal.now())
    if today is None:
        return None
    first = canonical_date(1, Month(month), today.year, calendar=cal)
    if first is None:
        return None
    days = cal.day_range_in_month(first)
    return None if days is None else len(days)


# ── names ────────────────────────────────────────────────────────────────────

def month_name(month: Union[Month, int], *, calendar: Optional[CalendarService] = None) -> str:
    """Full month name from the formatter, or "" if no date could be built."""
    cal = resolve_calendar(calendar)
    first = canonical_date(1, Month(month), ARBITRARY_YEAR, calendar=cal)
    if first is None:
        logger.debug("month_name(%r) could not build a date", month)
        return ""
    return format_date(first, StandardDateFormat.MONTH, calendar=cal)


# ── calendar grid ────────────────────────────────────────────────────────────

def number_of_weeks_in_month(
    month: Union[Month, int],
    year: int,
    start_day_number: int,
    *,
    calendar: Optional[CalendarService] = None,
) -> Optional[int]:
    """
    Number of calendar-grid rows (Sunday-first weeks) the month spans,
    counting from day ``start_day_number``.

    The row holding the start day is one week however few of its days belong
    to the month, and so is a trailing partial row.  This counts rows of a
    wall calendar; it is not ``days / 7``.
    """
    cal = resolve_calendar(calendar)
    start = canonical_date(start_day_number, Month(month), year, calendar=cal)
    weekday = None if start is None else weekday_number(start, calendar=cal)
    if weekday is None:
        return None

    days_in_first_week = DAYS_IN_WEEK - weekday + 1
    total = int(days_in_month(month, year))

    if total > days_in_first_week:
        remaining = total - days_in_first_week
        extra_weeks = int(np.ceil(remaining / DAYS_IN_WEEK))
    else:
        extra_weeks = 0

    return extra_weeks + 1
