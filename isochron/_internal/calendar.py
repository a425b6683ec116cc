"""Calendar utilities for Isochron.

This module provides internal functions for proleptic ISO calendar
calculations: the leap year rule, month lengths, and conversion between
(year, month, day) and the epoch day count.

Epoch day 0 = 1970-01-01.

This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.constants import (
    DAYS_0000_TO_1970,
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
    ORDINAL_UNIX_EPOCH,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1

    # Python's // floors toward negative infinity, so this holds for
    # negative years too
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + days_before_month(year, month) + day


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to the epoch day (1970-01-01 is 0)."""
    return ymd_to_ordinal(year, month, day) - ORDINAL_UNIX_EPOCH


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch day to year, month, day.

    The computation works on years starting in March so that the leap day
    falls at the end of the year, and on whole 400 year cycles so that
    every intermediate value is non-negative.

    Args:
        epoch_day: Days since 1970-01-01.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(-1)
        (1969, 12, 31)
    """
    # Shift to 0000-03-01
    zero_day = epoch_day + DAYS_0000_TO_1970 - 60
    cycles, zero_day = divmod(zero_day, DAYS_PER_CYCLE)

    year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
    doy_est = zero_day - (
        365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
    )
    if doy_est < 0:
        year_est -= 1
        doy_est = zero_day - (
            365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
        )

    # March-based month and day
    march_month0 = (doy_est * 5 + 2) // 153
    month = (march_month0 + 2) % 12 + 1
    day = doy_est - (march_month0 * 306 + 5) // 10 + 1
    year = year_est + march_month0 // 10 + cycles * 400
    return (year, month, day)


def epoch_day_to_day_of_week(epoch_day: int) -> int:
    """Convert an epoch day to the ISO day of week (Monday=1, Sunday=7).

    1970-01-01 was a Thursday.
    """
    return (epoch_day + 3) % 7 + 1


def day_of_year_to_md(year: int, day_of_year: int) -> tuple[int, int]:
    """Convert day-of-year to month and day.

    Args:
        year: The year (for leap year calculation).
        day_of_year: Day of year (1-366).

    Returns:
        Tuple of (month, day).
    """
    doy = day_of_year
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {day_of_year} for year {year}")


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_day_of_week",
    "day_of_year_to_md",
]
