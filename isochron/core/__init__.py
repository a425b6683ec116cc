"""Calendar value types.

This module provides the ISO calendar values:
    - DayOfWeek: Monday (1) to Sunday (7)
    - Month: January (1) to December (12)
    - Date: Calendar date in the proleptic ISO calendar
    - YearMonth: A year and month, such as 2024-02
    - MonthDay: A recurring month and day, such as --12-25
    - Year: A proleptic year
"""

from __future__ import annotations

from isochron.core.day_of_week import DayOfWeek
from isochron.core.month import Month
from isochron.core.date import Date
from isochron.core.year_month import YearMonth
from isochron.core.month_day import MonthDay
from isochron.core.year import Year

__all__: list[str] = [
    "DayOfWeek",
    "Month",
    "Date",
    "YearMonth",
    "MonthDay",
    "Year",
]
