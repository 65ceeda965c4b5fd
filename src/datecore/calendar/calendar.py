from __future__ import annotations

import logging
import threading
from calendar import monthrange
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

logger = logging.getLogger(__name__)

Timestamp = datetime

# Gregorian dates handled here are all Anno Domini.
_ERA_AD: int = 1


@dataclass(frozen=True)
class CalendarFields:
    """Wall-clock decomposition of a timestamp; weekday is 1=Sunday..7=Saturday."""

    era: int
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int


class CalendarService:
    """
    Gregorian calendar bound to a single time zone.

    With ``tz=None`` the ambient system zone is consulted for every
    conversion, so DST rules of the host apply.  Naive datetimes passed in
    are read as wall-clock time in the calendar's zone.  Every operation that
    can fail (invalid fields, values outside the representable range) returns
    ``None`` rather than raising.
    """

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self._tz: Optional[tzinfo] = tz

    # ── zone conversion ──────────────────────────────────────────────────

    def _localize(self, wall: datetime) -> datetime:
        # Round-tripping through UTC moves wall times inside a DST gap forward.
        if self._tz is None:
            return wall.astimezone()
        aware = wall.replace(tzinfo=self._tz)
        return aware.astimezone(timezone.utc).astimezone(self._tz)

    def as_aware(self, t: Timestamp) -> datetime:
        """Attach this calendar's zone to a naive ``t``; aware values pass through."""
        return self._localize(t) if t.tzinfo is None else t

    def to_local(self, t: Timestamp) -> datetime:
        """Return ``t`` as an aware datetime in this calendar's zone.

        Raises OverflowError when the instant has no local representation.
        """
        return self.as_aware(t).astimezone(self._tz)

    def now(self) -> datetime:
        if self._tz is None:
            return datetime.now().astimezone()
        return datetime.now(self._tz)

    # ── field extraction / construction ──────────────────────────────────

    def fields(self, t: Timestamp) -> Optional[CalendarFields]:
        try:
            local = self.to_local(t)
        except (OverflowError, ValueError, OSError) as exc:
            logger.debug("Cannot extract calendar fields from %r: %s", t, exc)
            return None
        return CalendarFields(
            era=_ERA_AD,
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            weekday=local.isoweekday() % 7 + 1,
        )

    def construct(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> Optional[datetime]:
        try:
            return self._localize(datetime(year, month, day, hour, minute, second))
        except (OverflowError, ValueError, OSError) as exc:
            logger.debug(
                "Cannot construct %04d-%02d-%02d %02d:%02d:%02d: %s",
                year, month, day, hour, minute, second, exc,
            )
            return None

    # ── arithmetic ───────────────────────────────────────────────────────

    def add_days(self, t: Timestamp, n: int) -> Optional[datetime]:
        """Add ``n`` calendar days, keeping the wall-clock time where it exists."""
        try:
            wall = self.to_local(t).replace(tzinfo=None)
            return self._localize(wall + timedelta(days=n))
        except (OverflowError, ValueError, OSError) as exc:
            logger.debug("Cannot add %d days to %r: %s", n, t, exc)
            return None

    def add_seconds(self, t: Timestamp, seconds: float) -> Optional[datetime]:
        """Add elapsed (absolute) seconds, ignoring the wall clock."""
        try:
            utc = self.to_local(t).astimezone(timezone.utc)
            return self.to_local(utc + timedelta(seconds=seconds))
        except (OverflowError, ValueError, OSError) as exc:
            logger.debug("Cannot add %s seconds to %r: %s", seconds, t, exc)
            return None

    def day_range_in_month(self, t: Timestamp) -> Optional[range]:
        f = self.fields(t)
        if f is None:
            return None
        return range(1, monthrange(f.year, f.month)[1] + 1)

    def day_difference(self, start: Timestamp, end: Timestamp) -> Optional[int]:
        """
        Whole calendar days elapsed from ``start`` to ``end``.

        Signed and truncated toward zero.  Measured on the wall clock, so a
        23-hour spring-forward day still counts as one day.
        """
        try:
            a = self.to_local(start).replace(tzinfo=None)
            b = self.to_local(end).replace(tzinfo=None)
        except (OverflowError, ValueError, OSError) as exc:
            logger.debug("Cannot compute day difference %r -> %r: %s", start, end, exc)
            return None

        days = (b.date() - a.date()).days
        if days > 0 and b.time() < a.time():
            days -= 1
        elif days < 0 and b.time() > a.time():
            days += 1
        return days

    def date_difference(self, start: Timestamp, end: Timestamp) -> Optional[int]:
        """Signed difference between the local calendar dates of two instants."""
        try:
            a = self.to_local(start).date()
            b = self.to_local(end).date()
        except (OverflowError, ValueError, OSError) as exc:
            logger.debug("Cannot compute date difference %r -> %r: %s", start, end, exc)
            return None
        return (b - a).days

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def tz(self) -> Optional[tzinfo]:
        return self._tz

    def __repr__(self) -> str:
        zone = "system" if self._tz is None else str(self._tz)
        return f"CalendarService(tz={zone!r})"


_shared: Optional[CalendarService] = None
_shared_lock = threading.Lock()


def shared_calendar() -> CalendarService:
    """Process-wide calendar on the system zone, created on first use."""
    global _shared
    if _shared is None:
        with _shared_lock:
            if _shared is None:
                _shared = CalendarService()
    return _shared


def resolve_calendar(calendar: Optional[CalendarService]) -> CalendarService:
    return calendar if calendar is not None else shared_calendar()
