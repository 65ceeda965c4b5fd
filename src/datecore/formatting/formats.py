from __future__ import annotations

import logging
import re
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from datecore.calendar import CalendarService, Timestamp, resolve_calendar

logger = logging.getLogger(__name__)


class StandardDateFormat(str, Enum):
    YEAR = "yyyy"
    MONTH = "MMMM"
    DAY = "dd"
    SHORT_DATE = "EEEE, MMM dd yyyy"
    SHORT_TIME = "h:mm a"
    LONG_TIME = "h:mm:ss a"


Pattern = Union[StandardDateFormat, str]

# Runs of one pattern letter, a quoted literal, or a doubled quote.
_TOKEN_RE = re.compile(r"''|'(?:[^']|'')*'|y+|M+|d+|E+|H+|h+|m+|s+|a+")


def _render(token: str, local: datetime) -> str:
    if token == "''":
        return "'"
    if token.startswith("'"):
        return token[1:-1].replace("''", "'")

    letter, width = token[0], len(token)
    if letter == "y":
        if width == 2:
            return f"{local.year % 100:02d}"
        return f"{local.year:0{width}d}"
    if letter == "M":
        if width >= 4:
            return local.strftime("%B")
        if width == 3:
            return local.strftime("%b")
        return f"{local.month:0{width}d}"
    if letter == "E":
        return local.strftime("%A" if width >= 4 else "%a")
    if letter == "a":
        return local.strftime("%p")

    value = {
        "d": local.day,
        "H": local.hour,
        "h": local.hour % 12 or 12,
        "m": local.minute,
        "s": local.second,
    }[letter]
    return f"{value:0{min(width, 2)}d}"


def format_date(
    t: Timestamp, pattern: Pattern, *, calendar: Optional[CalendarService] = None
) -> str:
    """
    Render ``t`` in the calendar's zone using an LDML-style pattern
    (``yyyy``, ``MMMM``, ``dd``, ``EEEE``, ``h:mm a`` ...).  Text between
    single quotes is copied verbatim; characters that are not pattern letters
    pass through unchanged.  Month, weekday and AM/PM names come from the
    platform locale.  Instants with no local date in the calendar's zone
    format as "".
    """
    if isinstance(pattern, StandardDateFormat):
        pattern = pattern.value
    try:
        local = resolve_calendar(calendar).to_local(t)
    except (OverflowError, ValueError, OSError) as exc:
        logger.debug("Cannot format %r: %s", t, exc)
        return ""
    return _TOKEN_RE.sub(lambda m: _render(m.group(0), local), pattern)


def _joined(*parts: StandardDateFormat) -> str:
    return ", ".join(p.value for p in parts)


# ── presets ──────────────────────────────────────────────────────────────────

def year_description(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> str:
    return format_date(t, StandardDateFormat.YEAR, calendar=calendar)


def month_description(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> str:
    return format_date(t, StandardDateFormat.MONTH, calendar=calendar)


def day_description(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> str:
    return format_date(t, StandardDateFormat.DAY, calendar=calendar)


def short_date_description(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> str:
    return format_date(t, StandardDateFormat.SHORT_DATE, calendar=calendar)


def short_time_description(t: Timestamp, *, calendar: Optional[CalendarService] = None) -> str:
    return format_date(t, StandardDateFormat.SHORT_TIME, calendar=calendar)


def short_date_long_time_description(
    t: Timestamp, *, calendar: Optional[CalendarService] = None
) -> str:
    pattern = _joined(StandardDateFormat.SHORT_DATE, StandardDateFormat.LONG_TIME)
    return format_date(t, pattern, calendar=calendar)


def short_date_time_description(
    t: Timestamp, *, calendar: Optional[CalendarService] = None
) -> str:
    pattern = _joined(StandardDateFormat.SHORT_DATE, StandardDateFormat.SHORT_TIME)
    return format_date(t, pattern, calendar=calendar)
