"""Internal constants for Isochron.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_SECOND: int = 1_000_000_000
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Average Gregorian year, 365.2425 days
SECONDS_PER_YEAR: int = 31_556_952

# Year limits
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# Signed integer limits used by exact arithmetic
INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1
LONG_MIN: int = -(2**63)
LONG_MAX: int = 2**63 - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days in a 400 year Gregorian cycle
DAYS_PER_CYCLE: int = 146_097

# Days from 0000-01-01 to 1970-01-01
DAYS_0000_TO_1970: int = DAYS_PER_CYCLE * 5 - (30 * 365 + 7)  # 719_528

# Ordinal (0001-01-01 == 1) of the epoch day 1970-01-01
ORDINAL_UNIX_EPOCH: int = 719_163


__all__ = [
    "NANOS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "INT_MIN",
    "INT_MAX",
    "LONG_MIN",
    "LONG_MAX",
    "DAYS_IN_MONTH",
    "DAYS_PER_CYCLE",
    "DAYS_0000_TO_1970",
    "ORDINAL_UNIX_EPOCH",
]
