"""
datecore.months
~~~~~~~~~~~~~~~

Month constants and derived quantities: month lengths, display names and the
number of calendar-grid weeks a month spans.

Basic usage::

    from datecore.months import Month, days_in_month, number_of_weeks_in_month

    days_in_month(Month.FEBRUARY, 2024)                # → 29
    number_of_weeks_in_month(Month.JANUARY, 2024, 1)   # → 5

NumPy arrays are accepted for the year::

    import numpy as np
    days_in_month(Month.FEBRUARY, np.array([2023, 2024]))   # → array([28, 29])
"""

from __future__ import annotations

from datecore.months.month import (
    Month,
    days_in_month,
    days_in_month_for_current_year,
    month_name,
    number_of_weeks_in_month,
)

__all__ = [
    "Month",
    "days_in_month",
    "days_in_month_for_current_year",
    "month_name",
    "number_of_weeks_in_month",
]
