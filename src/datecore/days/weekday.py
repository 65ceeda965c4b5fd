from __future__ import annotations

from enum import IntEnum


class Day(IntEnum):
    """Days of the week, numbered the Gregorian way: 1=Sunday..7=Saturday."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_weekend(self) -> bool:
        return self in (Day.SATURDAY, Day.SUNDAY)

    def __str__(self) -> str:
        return self.description


_DESCRIPTIONS: dict[Day, str] = {
    Day.SUNDAY: "Sunday",
    Day.MONDAY: "Monday",
    Day.TUESDAY: "Tuesday",
    Day.WEDNESDAY: "Wednesday",
    Day.THURSDAY: "Thursday",
    Day.FRIDAY: "Friday",
    Day.SATURDAY: "Saturday",
}
