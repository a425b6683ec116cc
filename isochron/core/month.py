"""Month enumeration, the twelve months of the ISO calendar.

This module provides the Month enum. Month is a TemporalAccessor answering
MONTH_OF_YEAR and a TemporalAdjuster setting it. All per-month data
(lengths, first day of year) is table driven.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable

from isochron.errors import DateTimeError, UnsupportedTemporalTypeError, ValidationError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import TemporalAccessor, TemporalAdjuster

if TYPE_CHECKING:
    from isochron.temporal.interfaces import Temporal, TemporalField
    from isochron.temporal.value_range import ValueRange


class Month(TemporalAccessor, TemporalAdjuster, IntEnum):
    """A month-of-year, January (1) to December (12).

    Examples:
        >>> Month.of(2).length(leap_year=True)
        29
        >>> Month.NOVEMBER.plus(3)
        <Month.FEBRUARY: 2>
        >>> str(Month.MARCH)
        'MARCH'
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Obtain a Month from its int value.

        Raises:
            ValidationError: If month is not in 1-12.
        """
        if month < 1 or month > 12:
            raise ValidationError(f"Invalid value for MonthOfYear: {month}")
        return cls(month)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> Month:
        """Obtain the Month of a temporal object.

        Temporals of another calendar system are converted to an ISO date
        first.

        Raises:
            DateTimeError: If the temporal has no month-of-year.
        """
        if isinstance(temporal, Month):
            return temporal
        from isochron.chrono.iso import ISO, Chronology
        from isochron.core.date import Date

        try:
            if Chronology.from_temporal(temporal) is not ISO:
                temporal = Date.from_temporal(temporal)
            return cls.of(temporal.get(ChronoField.MONTH_OF_YEAR))
        except DateTimeError as e:
            raise DateTimeError(
                f"Unable to obtain Month from TemporalAccessor: {temporal!r} "
                f"of type {type(temporal).__name__}"
            ) from e

    def plus(self, months: int) -> Month:
        """Return the month that is months later, wrapping around December.

        Examples:
            >>> Month.DECEMBER.plus(1)
            <Month.JANUARY: 1>
            >>> Month.JANUARY.plus(-1)
            <Month.DECEMBER: 12>
        """
        return Month((self.value - 1 + months) % 12 + 1)

    def minus(self, months: int) -> Month:
        return self.plus(-(months % 12))

    def length(self, leap_year: bool) -> int:
        """Return the number of days in this month."""
        return (_MAX_LENGTHS if leap_year else _MIN_LENGTHS)[self.value]

    def min_length(self) -> int:
        return _MIN_LENGTHS[self.value]

    def max_length(self) -> int:
        return _MAX_LENGTHS[self.value]

    def first_day_of_year(self, leap_year: bool) -> int:
        """Return the day-of-year of the first day of this month.

        Examples:
            >>> Month.MARCH.first_day_of_year(leap_year=False)
            60
            >>> Month.MARCH.first_day_of_year(leap_year=True)
            61
        """
        leap = 1 if leap_year and self.value > 2 else 0
        return _FIRST_DAYS[self.value] + leap

    def first_month_of_quarter(self) -> Month:
        """Return the first month of the quarter containing this month."""
        return Month((self.value - 1) // 3 * 3 + 1)

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field is ChronoField.MONTH_OF_YEAR
        return field is not None and field.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if field is ChronoField.MONTH_OF_YEAR:
            return field.range()
        return super().range(field)

    def get(self, field: TemporalField) -> int:
        if field is ChronoField.MONTH_OF_YEAR:
            return self.value
        return super().get(field)

    def get_long(self, field: TemporalField) -> int:
        if field is ChronoField.MONTH_OF_YEAR:
            return self.value
        if isinstance(field, ChronoField):
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
        return field.get_from(self)

    def query(self, query: Callable[[TemporalAccessor], Any]) -> Any:
        from isochron.chrono.iso import ISO
        from isochron.temporal import queries
        from isochron.units.chrono_unit import ChronoUnit

        if query is queries.chronology:
            return ISO
        if query is queries.precision:
            return ChronoUnit.MONTHS
        return super().query(query)

    def adjust_into(self, temporal: Temporal) -> Temporal:
        """Set the month-of-year of temporal to this month.

        Raises:
            DateTimeError: If temporal is not an ISO temporal.
        """
        from isochron.chrono.iso import ISO, Chronology

        if Chronology.from_temporal(temporal) is not ISO:
            raise DateTimeError("Adjustment only supported on ISO date-time")
        return temporal.with_field(ChronoField.MONTH_OF_YEAR, self.value)

    def __str__(self) -> str:
        return self.name


# Index 0 is unused, months are 1-indexed
_MIN_LENGTHS = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_MAX_LENGTHS = (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_FIRST_DAYS = (0, 1, 32, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)


__all__ = ["Month"]
