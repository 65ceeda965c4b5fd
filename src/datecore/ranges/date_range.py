from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

import numpy as np

from datecore._exceptions import InvalidRangeError
from datecore.calendar import CalendarService, Timestamp, resolve_calendar
from datecore.days.arithmetic import shifted_to_past, start_of_day, today

logger = logging.getLogger(__name__)

# Earliest instant datetime can hold; start of "all recorded history".
DISTANT_PAST: datetime = datetime(1, 1, 1, tzinfo=timezone.utc)


class DateRange:
    """
    Closed interval [start_date, end_date] of timestamps.

    Construction fails with InvalidRangeError when start_date is later than
    end_date; ``DateRange.make`` returns None instead.  Equal endpoints are
    allowed.
    """

    __slots__ = ("_start", "_end", "_calendar")

    def __init__(
        self,
        start_date: Timestamp,
        end_date: Timestamp,
        *,
        calendar: Optional[CalendarService] = None,
    ) -> None:
        cal = resolve_calendar(calendar)
        start, end = cal.as_aware(start_date), cal.as_aware(end_date)
        if start > end:
            raise InvalidRangeError(
                f"Range start {start.isoformat()} is after its end {end.isoformat()}."
            )
        self._start: datetime = start
        self._end: datetime = end
        self._calendar: CalendarService = cal

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def make(
        cls,
        start_date: Timestamp,
        end_date: Timestamp,
        *,
        calendar: Optional[CalendarService] = None,
    ) -> Optional[DateRange]:
        try:
            return cls(start_date, end_date, calendar=calendar)
        except InvalidRangeError as exc:
            logger.debug("Refusing range: %s", exc)
            return None

    @classmethod
    def today(cls, *, calendar: Optional[CalendarService] = None) -> Optional[DateRange]:
        now = today(calendar=calendar)
        return cls.make(now, now, calendar=calendar)

    @classmethod
    def all_history(cls, *, calendar: Optional[CalendarService] = None) -> Optional[DateRange]:
        return cls.make(DISTANT_PAST, today(calendar=calendar), calendar=calendar)

    @classmethod
    def days_of_history(
        cls,
        count: int,
        ending_at: Timestamp,
        *,
        calendar: Optional[CalendarService] = None,
    ) -> Optional[DateRange]:
        """The ``count`` days ending on (and including) ``ending_at``'s day."""
        if count < 0:
            return None
        if count == 0:
            return cls.make(ending_at, ending_at, calendar=calendar)

        start = shifted_to_past(ending_at, count - 1, calendar=calendar)
        if start is None:
            return None
        return cls.make(start, ending_at, calendar=calendar)

    # ── day counts ───────────────────────────────────────────────────────

    @property
    def number_of_days_between_inclusive(self) -> Optional[int]:
        start = start_of_day(self._start, calendar=self._calendar)
        end = start_of_day(self._end, calendar=self._calendar)
        if start is None or end is None:
            return None

        # Local dates, not elapsed time: where midnight is skipped the start
        # of a day is 01:00.  Measured from the end back to the start, hence
        # the magnitude.
        days = self._calendar.date_difference(end, start)
        if days is None:
            return None
        return abs(days) + 1

    @property
    def number_of_days_between_exclusive(self) -> Optional[int]:
        inclusive = self.number_of_days_between_inclusive
        if inclusive is None or inclusive in (0, 1):
            return inclusive
        return inclusive - 2

    def days(self) -> Optional[np.ndarray]:
        """Every local calendar date in the range as a ``datetime64[D]`` array."""
        try:
            first = self._calendar.to_local(self._start).date()
            last = self._calendar.to_local(self._end).date()
        except (OverflowError, ValueError, OSError) as exc:
            logger.debug("Range %r has no local dates: %s", self, exc)
            return None
        return np.arange(
            np.datetime64(first, "D"),
            np.datetime64(last, "D") + np.timedelta64(1, "D"),
            dtype="datetime64[D]",
        )

    # ── properties / dunder ──────────────────────────────────────────────

    @property
    def start_date(self) -> datetime:
        return self._start

    @property
    def end_date(self) -> datetime:
        return self._end

    def contains(self, t: Timestamp) -> bool:
        return self._start <= self._calendar.as_aware(t) <= self._end

    def __contains__(self, t: Timestamp) -> bool:
        return self.contains(t)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return (
            f"DateRange(start_date={self._start.isoformat()}, "
            f"end_date={self._end.isoformat()})"
        )
