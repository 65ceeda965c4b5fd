"""
datecore.formatting
~~~~~~~~~~~~~~~~~~~

Pattern-based rendering of timestamps.

Basic usage::

    from datecore.formatting import StandardDateFormat, format_date

    format_date(t, StandardDateFormat.SHORT_DATE)   # → "Monday, Jan 01 2024"
    format_date(t, "yyyy-MM-dd 'at' HH:mm")         # → "2024-01-01 at 12:01"
"""

from __future__ import annotations

from datecore.formatting.formats import (
    StandardDateFormat,
    day_description,
    format_date,
    month_description,
    short_date_description,
    short_date_long_time_description,
    short_date_time_description,
    short_time_description,
    year_description,
)

__all__ = [
    "StandardDateFormat",
    "day_description",
    "format_date",
    "month_description",
    "short_date_description",
    "short_date_long_time_description",
    "short_date_time_description",
    "short_time_description",
    "year_description",
]
