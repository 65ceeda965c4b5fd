"""
tests/days/test_arithmetic.py

Covers:
  - Calendar-day offsets keeping the wall-clock time
  - DST transitions (23- and 25-hour days, times inside the gap)
  - Round trips over many offsets
  - Month, year and leap-day boundaries
  - next/previous, tomorrow/yesterday, shifted helpers
  - Start and end of day, including days without a midnight
  - Whole-day differences and the canonicalize-first gotcha
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from datecore.calendar import CalendarService
from datecore.days import (
    difference_in_days,
    end_of_day,
    is_same_day,
    next_day,
    now,
    offset,
    previous_day,
    shifted_to_future,
    shifted_to_past,
    start_of_day,
    to_canonical,
    today,
    tomorrow,
    yesterday,
)


NEW_YORK = ZoneInfo("America/New_York")
SANTIAGO = ZoneInfo("America/Santiago")


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def ny():
    return CalendarService(NEW_YORK)


@pytest.fixture
def utc():
    return CalendarService(timezone.utc)


@pytest.fixture
def scl():
    """Calendar whose spring-forward skips midnight (2024-09-08 00:00 -> 01:00)."""
    return CalendarService(SANTIAGO)


def at(*args):
    return datetime(*args, tzinfo=NEW_YORK)


def wall(t):
    return (t.year, t.month, t.day, t.hour, t.minute, t.second)


def elapsed(a, b):
    return b.astimezone(timezone.utc) - a.astimezone(timezone.utc)


# ── Offsets ───────────────────────────────────────────────────────────────────

class TestOffset:

    def test_spring_forward_keeps_clock(self, ny):
        start = at(2024, 3, 9, 9, 15, 30)
        end = offset(start, 1, calendar=ny)
        assert wall(end) == (2024, 3, 10, 9, 15, 30)
        assert elapsed(start, end) == timedelta(hours=23)

    def test_fall_back_keeps_clock(self, ny):
        start = at(2024, 11, 2, 12, 0)
        end = offset(start, 1, calendar=ny)
        assert wall(end) == (2024, 11, 3, 12, 0, 0)
        assert elapsed(start, end) == timedelta(hours=25)

    def test_backwards_over_spring_forward(self, ny):
        start = at(2024, 3, 11, 0, 30)
        assert wall(offset(start, -2, calendar=ny)) == (2024, 3, 9, 0, 30, 0)

    def test_clock_time_missing_on_target_day(self, ny):
        # 02:30 does not exist on 2024-03-10; the result moves forward an hour
        end = offset(at(2024, 3, 9, 2, 30), 1, calendar=ny)
        assert wall(end) == (2024, 3, 10, 3, 30, 0)

    def test_zero_is_same_instant(self, ny):
        t = at(2024, 7, 4, 18, 30, 5)
        assert offset(t, 0, calendar=ny) == t

    @pytest.mark.parametrize(
        "start, days, expected",
        [
            ((2024, 1, 31), 1, (2024, 2, 1)),
            ((2024, 1, 1), -1, (2023, 12, 31)),
            ((2024, 2, 28), 1, (2024, 2, 29)),
            ((2023, 2, 28), 1, (2023, 3, 1)),
            ((2024, 3, 1), -1, (2024, 2, 29)),
            ((2024, 1, 1), 366, (2025, 1, 1)),
        ],
    )
    def test_boundaries(self, ny, start, days, expected):
        end = offset(at(*start, 10, 0), days, calendar=ny)
        assert wall(end) == (*expected, 10, 0, 0)

    @pytest.mark.parametrize("days", [-400, -31, -1, 1, 7, 30, 365, 1000])
    def test_round_trip(self, ny, days):
        for start in (at(2024, 3, 10, 12, 1), at(2024, 11, 3, 23, 59, 59), at(2023, 3, 12, 7)):
            there = offset(start, days, calendar=ny)
            back = offset(there, -days, calendar=ny)
            assert wall(back) == wall(start)

    def test_naive_input_read_as_wall_time(self, ny):
        end = offset(datetime(2024, 3, 9, 8, 0), 1, calendar=ny)
        assert wall(end) == (2024, 3, 10, 8, 0, 0)
        assert end.utcoffset() == timedelta(hours=-4)

    def test_overflow_gives_none(self, utc):
        assert offset(datetime(9999, 12, 31, tzinfo=timezone.utc), 1, calendar=utc) is None
        assert offset(datetime(1, 1, 1, tzinfo=timezone.utc), -1, calendar=utc) is None


class TestDayNeighbours:

    def test_next_and_previous(self, ny):
        t = at(2024, 3, 10, 1, 59)
        assert wall(next_day(t, calendar=ny)) == (2024, 3, 11, 1, 59, 0)
        assert wall(previous_day(t, calendar=ny)) == (2024, 3, 9, 1, 59, 0)

    def test_shifted(self, ny):
        t = at(2024, 6, 15, 6)
        assert shifted_to_future(t, 3, calendar=ny) == offset(t, 3, calendar=ny)
        assert shifted_to_past(t, 3, calendar=ny) == offset(t, -3, calendar=ny)

    def test_now_and_today_are_current(self, ny):
        before = datetime.now(timezone.utc)
        current = now(calendar=ny)
        assert current.tzinfo is NEW_YORK
        assert abs(elapsed(before, current)) < timedelta(seconds=5)
        assert is_same_day(today(calendar=ny), current, calendar=ny)

    def test_tomorrow_and_yesterday(self, ny):
        base = to_canonical(today(calendar=ny), calendar=ny)
        assert difference_in_days(
            base, to_canonical(tomorrow(calendar=ny), calendar=ny), calendar=ny
        ) == 1
        assert difference_in_days(
            base, to_canonical(yesterday(calendar=ny), calendar=ny), calendar=ny
        ) == -1

    def test_shared_calendar_tomorrow(self):
        assert tomorrow() is not None
        assert yesterday() is not None


# ── Day boundaries ────────────────────────────────────────────────────────────

class TestDayBoundaries:

    def test_start_of_day(self, ny):
        s = start_of_day(at(2024, 5, 17, 15, 45, 10), calendar=ny)
        assert wall(s) == (2024, 5, 17, 0, 0, 0)

    def test_end_of_day(self, ny):
        e = end_of_day(at(2024, 5, 17, 15, 45), calendar=ny)
        assert wall(e) == (2024, 5, 17, 23, 59, 59)

    def test_short_day_bounds(self, ny):
        t = at(2024, 3, 10, 12)
        s = start_of_day(t, calendar=ny)
        e = end_of_day(t, calendar=ny)
        assert elapsed(s, e) == timedelta(hours=23) - timedelta(seconds=1)

    def test_long_day_bounds(self, ny):
        t = at(2024, 11, 3, 12)
        s = start_of_day(t, calendar=ny)
        e = end_of_day(t, calendar=ny)
        assert elapsed(s, e) == timedelta(hours=25) - timedelta(seconds=1)
        assert e.utcoffset() == timedelta(hours=-5)

    def test_end_of_last_day_gives_none(self, utc):
        assert end_of_day(datetime(9999, 12, 31, 8, tzinfo=timezone.utc), calendar=utc) is None


# ── Differences ───────────────────────────────────────────────────────────────

class TestDifferenceInDays:

    def test_signed(self, ny):
        a, b = at(2024, 1, 1, 12), at(2024, 1, 11, 12)
        assert difference_in_days(a, b, calendar=ny) == 10
        assert difference_in_days(b, a, calendar=ny) == -10

    def test_not_canonicalized(self, ny):
        a, b = at(2024, 1, 1, 18), at(2024, 1, 2, 9)
        assert difference_in_days(a, b, calendar=ny) == 0
        ca, cb = to_canonical(a, calendar=ny), to_canonical(b, calendar=ny)
        assert difference_in_days(ca, cb, calendar=ny) == 1

    def test_across_dst(self, ny):
        a = to_canonical(at(2024, 3, 1), calendar=ny)
        b = to_canonical(at(2024, 3, 31), calendar=ny)
        assert difference_in_days(a, b, calendar=ny) == 30

    def test_same_instant(self, ny):
        t = at(2024, 1, 1)
        assert difference_in_days(t, t, calendar=ny) == 0


# ── Days without a midnight ───────────────────────────────────────────────────

class TestMidnightGapBoundaries:

    def test_start_of_day_is_first_existing_time(self, scl):
        s = start_of_day(datetime(2024, 9, 8, 12, tzinfo=SANTIAGO), calendar=scl)
        assert wall(s) == (2024, 9, 8, 1, 0, 0)

    def test_end_of_day_before_gap(self, scl):
        e = end_of_day(datetime(2024, 9, 7, 12, tzinfo=SANTIAGO), calendar=scl)
        assert wall(e) == (2024, 9, 7, 23, 59, 59)
        assert e.utcoffset() == timedelta(hours=-4)

    def test_short_day_bounds(self, scl):
        t = datetime(2024, 9, 8, 12, tzinfo=SANTIAGO)
        s = start_of_day(t, calendar=scl)
        e = end_of_day(t, calendar=scl)
        assert wall(e) == (2024, 9, 8, 23, 59, 59)
        assert elapsed(s, e) == timedelta(hours=23) - timedelta(seconds=1)

    def test_offset_over_gap(self, scl):
        end = offset(datetime(2024, 9, 7, 0, 30, tzinfo=SANTIAGO), 1, calendar=scl)
        assert wall(end) == (2024, 9, 8, 1, 30, 0)

    def test_canonical_difference_over_gap(self, scl):
        a = to_canonical(datetime(2024, 9, 7, 6, tzinfo=SANTIAGO), calendar=scl)
        b = to_canonical(datetime(2024, 9, 9, 6, tzinfo=SANTIAGO), calendar=scl)
        assert difference_in_days(a, b, calendar=scl) == 2
