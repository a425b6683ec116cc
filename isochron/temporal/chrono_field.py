"""ChronoField enumeration, the standard set of date-time fields.

This module provides the ChronoField enum. Each member carries its display
name, base unit, range unit and outer ValueRange. Temporal types answer
these fields directly; every other TemporalField is dispatched back to the
field itself.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from isochron._internal.constants import (
    LONG_MAX,
    LONG_MIN,
    MAX_YEAR,
    MIN_YEAR,
    SECONDS_PER_DAY,
)
from isochron.temporal.interfaces import TemporalField
from isochron.temporal.value_range import ValueRange
from isochron.units.chrono_unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.temporal.interfaces import Temporal, TemporalAccessor

_NANOS = ChronoUnit.NANOS
_MICROS = ChronoUnit.MICROS
_MILLIS = ChronoUnit.MILLIS
_SECONDS = ChronoUnit.SECONDS
_MINUTES = ChronoUnit.MINUTES
_HOURS = ChronoUnit.HOURS
_HALF_DAYS = ChronoUnit.HALF_DAYS
_DAYS = ChronoUnit.DAYS
_WEEKS = ChronoUnit.WEEKS
_MONTHS = ChronoUnit.MONTHS
_YEARS = ChronoUnit.YEARS
_ERAS = ChronoUnit.ERAS
_FOREVER = ChronoUnit.FOREVER

# 1,000,000,000 years either side of the epoch, less the days to 0000-01-01
_EPOCH_DAY_LIMIT = 365_249_999_634


class ChronoField(TemporalField, Enum):
    """A standard set of fields.

    The declaration order is significant: fields before DAY_OF_WEEK are
    time based, and DAY_OF_WEEK through ERA are date based. INSTANT_SECONDS
    and OFFSET_SECONDS are neither.

    Examples:
        >>> ChronoField.DAY_OF_MONTH.range()
        ValueRange.of(1, 28, 31)
        >>> str(ChronoField.MONTH_OF_YEAR)
        'MonthOfYear'
        >>> ChronoField.HOUR_OF_DAY.is_time_based()
        True
    """

    NANO_OF_SECOND = ("NanoOfSecond", _NANOS, _SECONDS, ValueRange.of(0, 999_999_999))
    NANO_OF_DAY = (
        "NanoOfDay",
        _NANOS,
        _DAYS,
        ValueRange.of(0, SECONDS_PER_DAY * 1_000_000_000 - 1),
    )
    MICRO_OF_SECOND = ("MicroOfSecond", _MICROS, _SECONDS, ValueRange.of(0, 999_999))
    MICRO_OF_DAY = (
        "MicroOfDay",
        _MICROS,
        _DAYS,
        ValueRange.of(0, SECONDS_PER_DAY * 1_000_000 - 1),
    )
    MILLI_OF_SECOND = ("MilliOfSecond", _MILLIS, _SECONDS, ValueRange.of(0, 999))
    MILLI_OF_DAY = (
        "MilliOfDay",
        _MILLIS,
        _DAYS,
        ValueRange.of(0, SECONDS_PER_DAY * 1000 - 1),
    )
    SECOND_OF_MINUTE = ("SecondOfMinute", _SECONDS, _MINUTES, ValueRange.of(0, 59))
    SECOND_OF_DAY = (
        "SecondOfDay",
        _SECONDS,
        _DAYS,
        ValueRange.of(0, SECONDS_PER_DAY - 1),
    )
    MINUTE_OF_HOUR = ("MinuteOfHour", _MINUTES, _HOURS, ValueRange.of(0, 59))
    MINUTE_OF_DAY = ("MinuteOfDay", _MINUTES, _DAYS, ValueRange.of(0, 24 * 60 - 1))
    HOUR_OF_AMPM = ("HourOfAmPm", _HOURS, _HALF_DAYS, ValueRange.of(0, 11))
    CLOCK_HOUR_OF_AMPM = ("ClockHourOfAmPm", _HOURS, _HALF_DAYS, ValueRange.of(1, 12))
    HOUR_OF_DAY = ("HourOfDay", _HOURS, _DAYS, ValueRange.of(0, 23))
    CLOCK_HOUR_OF_DAY = ("ClockHourOfDay", _HOURS, _DAYS, ValueRange.of(1, 24))
    AMPM_OF_DAY = ("AmPmOfDay", _HALF_DAYS, _DAYS, ValueRange.of(0, 1))
    DAY_OF_WEEK = ("DayOfWeek", _DAYS, _WEEKS, ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_MONTH = (
        "AlignedDayOfWeekInMonth",
        _DAYS,
        _WEEKS,
        ValueRange.of(1, 7),
    )
    ALIGNED_DAY_OF_WEEK_IN_YEAR = (
        "AlignedDayOfWeekInYear",
        _DAYS,
        _WEEKS,
        ValueRange.of(1, 7),
    )
    DAY_OF_MONTH = ("DayOfMonth", _DAYS, _MONTHS, ValueRange.of(1, 28, 31))
    DAY_OF_YEAR = ("DayOfYear", _DAYS, _YEARS, ValueRange.of(1, 365, 366))
    EPOCH_DAY = (
        "EpochDay",
        _DAYS,
        _FOREVER,
        ValueRange.of(-_EPOCH_DAY_LIMIT, _EPOCH_DAY_LIMIT),
    )
    ALIGNED_WEEK_OF_MONTH = ("AlignedWeekOfMonth", _WEEKS, _MONTHS, ValueRange.of(1, 4, 5))
    ALIGNED_WEEK_OF_YEAR = ("AlignedWeekOfYear", _WEEKS, _YEARS, ValueRange.of(1, 53))
    MONTH_OF_YEAR = ("MonthOfYear", _MONTHS, _YEARS, ValueRange.of(1, 12))
    PROLEPTIC_MONTH = (
        "ProlepticMonth",
        _MONTHS,
        _FOREVER,
        ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
    )
    YEAR_OF_ERA = (
        "YearOfEra",
        _YEARS,
        _FOREVER,
        ValueRange.of(1, MAX_YEAR, MAX_YEAR + 1),
    )
    YEAR = ("Year", _YEARS, _FOREVER, ValueRange.of(MIN_YEAR, MAX_YEAR))
    ERA = ("Era", _ERAS, _FOREVER, ValueRange.of(0, 1))
    INSTANT_SECONDS = (
        "InstantSeconds",
        _SECONDS,
        _FOREVER,
        ValueRange.of(LONG_MIN, LONG_MAX),
    )
    OFFSET_SECONDS = (
        "OffsetSeconds",
        _SECONDS,
        _FOREVER,
        ValueRange.of(-18 * 3600, 18 * 3600),
    )

    def __init__(
        self,
        display_name: str,
        base_unit: ChronoUnit,
        range_unit: ChronoUnit,
        value_range: ValueRange,
    ) -> None:
        self._display_name = display_name
        self._base_unit = base_unit
        self._range_unit = range_unit
        self._range = value_range

    @property
    def base_unit(self) -> ChronoUnit:
        return self._base_unit

    @property
    def range_unit(self) -> ChronoUnit:
        return self._range_unit

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    def range(self) -> ValueRange:
        """Return the outer range of the field.

        The range is for the ISO calendar system. Use
        ``temporal.range(field)`` for the range refined by a specific date.
        """
        return self._range

    def is_date_based(self) -> bool:
        return (
            _ORDINALS[ChronoField.DAY_OF_WEEK]
            <= self.ordinal
            <= _ORDINALS[ChronoField.ERA]
        )

    def is_time_based(self) -> bool:
        return self.ordinal < _ORDINALS[ChronoField.DAY_OF_WEEK]

    def check_valid_value(self, value: int) -> int:
        """Check value against the outer range of this field.

        Raises:
            ValidationError: If the value is invalid.

        Examples:
            >>> ChronoField.MONTH_OF_YEAR.check_valid_value(13)
            Traceback (most recent call last):
            ...
            ValidationError: Invalid value for MonthOfYear (valid values 1 - 12): 13
        """
        return self._range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        """Check value against the outer range and that it fits in an int.

        Raises:
            ValidationError: If the value is invalid or the field's range is
                wider than a 32-bit int.
        """
        return self._range.check_valid_int_value(value, self)

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(self)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        return temporal.range(self)

    def get_from(self, temporal: TemporalAccessor) -> int:
        return temporal.get_long(self)

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        return temporal.with_field(self, new_value)

    def __repr__(self) -> str:
        return f"ChronoField.{self.name}"

    def __str__(self) -> str:
        return self._display_name


_ORDINALS: dict[ChronoField, int] = {
    field: i for i, field in enumerate(ChronoField)
}


__all__ = ["ChronoField"]
