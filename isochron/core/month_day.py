"""MonthDay class representing a recurring day of the year.

This module provides MonthDay, a month and day-of-month without a year,
such as --12-25. February 29th is always allowed; it is only invalid
when combined with a non-leap year.
"""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, Any, Callable

from isochron._internal.calendar import is_leap_year
from isochron.core.date import Date
from isochron.core.month import Month
from isochron.errors import DateTimeError, UnsupportedTemporalTypeError, ValidationError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import TemporalAccessor, TemporalAdjuster
from isochron.temporal.value_range import ValueRange

if TYPE_CHECKING:
    from isochron.temporal.interfaces import Temporal, TemporalField


@total_ordering
class MonthDay(TemporalAccessor, TemporalAdjuster):
    """A month-day in the ISO calendar.

    Examples:
        >>> md = MonthDay(2, 29)
        >>> md.is_valid_year(2023)
        False
        >>> md.at_year(2023)
        Date(2023, 2, 28)
        >>> str(MonthDay(12, 3))
        '--12-03'
    """

    __slots__ = ("_month", "_day")

    def __init__(self, month: int, day: int) -> None:
        """Create a MonthDay.

        Raises:
            ValidationError: If the month is invalid or the day is never
                valid for that month.

        Examples:
            >>> MonthDay(4, 31)
            Traceback (most recent call last):
            ...
            ValidationError: Illegal value for DayOfMonth field, value 31 is not valid for month APRIL
        """
        month_value = Month.of(month)
        ChronoField.DAY_OF_MONTH.check_valid_value(day)
        if day > month_value.max_length():
            raise ValidationError(
                f"Illegal value for DayOfMonth field, value {day} is not valid "
                f"for month {month_value.name}"
            )
        self._month = month_value.value
        self._day = day

    @classmethod
    def of(cls, month: int, day: int) -> MonthDay:
        return cls(month, day)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> MonthDay:
        """Obtain the MonthDay of a temporal object.

        Raises:
            DateTimeError: If the temporal has no month-of-year or
                day-of-month.
        """
        if isinstance(temporal, MonthDay):
            return temporal
        from isochron.chrono.iso import ISO, Chronology

        try:
            if Chronology.from_temporal(temporal) is not ISO:
                temporal = Date.from_temporal(temporal)
            return cls(
                temporal.get(ChronoField.MONTH_OF_YEAR),
                temporal.get(ChronoField.DAY_OF_MONTH),
            )
        except DateTimeError as e:
            raise DateTimeError(
                f"Unable to obtain MonthDay from TemporalAccessor: {temporal!r} "
                f"of type {type(temporal).__name__}"
            ) from e

    @property
    def month(self) -> Month:
        return Month(self._month)

    @property
    def day(self) -> int:
        return self._day

    def is_valid_year(self, year: int) -> bool:
        """Return False only for February 29th in a non-leap year."""
        return not (self._day == 29 and self._month == 2 and not is_leap_year(year))

    def with_month(self, month: int) -> MonthDay:
        """Return a copy with the month changed, clamping the day."""
        new_month = Month.of(month)
        if new_month.value == self._month:
            return self
        return MonthDay(new_month, min(self._day, new_month.max_length()))

    def with_day_of_month(self, day: int) -> MonthDay:
        if day == self._day:
            return self
        return MonthDay(self._month, day)

    def at_year(self, year: int) -> Date:
        """Combine with a year, using February 28th for the 29th in a non-leap year."""
        return Date(year, self._month, self._day if self.is_valid_year(year) else 28)

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field in (ChronoField.MONTH_OF_YEAR, ChronoField.DAY_OF_MONTH)
        return field is not None and field.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if field is ChronoField.MONTH_OF_YEAR:
            return field.range()
        if field is ChronoField.DAY_OF_MONTH:
            month = self.month
            return ValueRange.of(1, month.min_length(), month.max_length())
        return super().range(field)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if field is ChronoField.DAY_OF_MONTH:
                return self._day
            if field is ChronoField.MONTH_OF_YEAR:
                return self._month
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
        return field.get_from(self)

    def query(self, query: Callable[[TemporalAccessor], Any]) -> Any:
        from isochron.chrono.iso import ISO
        from isochron.temporal import queries

        if query is queries.chronology:
            return ISO
        return super().query(query)

    def adjust_into(self, temporal: Temporal) -> Temporal:
        """Set the month and day of temporal, clamping the day to the month.

        Raises:
            DateTimeError: If temporal is not an ISO temporal.
        """
        from isochron.chrono.iso import ISO, Chronology

        if Chronology.from_temporal(temporal) is not ISO:
            raise DateTimeError("Adjustment only supported on ISO date-time")
        temporal = temporal.with_field(ChronoField.MONTH_OF_YEAR, self._month)
        max_day = temporal.range(ChronoField.DAY_OF_MONTH).maximum
        return temporal.with_field(ChronoField.DAY_OF_MONTH, min(max_day, self._day))

    # ------------------------------------------------------------------
    # Comparison and representation
    # ------------------------------------------------------------------

    def is_after(self, other: MonthDay) -> bool:
        return self > other

    def is_before(self, other: MonthDay) -> bool:
        return self < other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._month == other._month and self._day == other._day

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return (self._month, self._day) < (other._month, other._day)

    def __hash__(self) -> int:
        return (self._month << 6) + self._day

    def __repr__(self) -> str:
        return f"MonthDay({self._month}, {self._day})"

    def __str__(self) -> str:
        return f"--{self._month:02d}-{self._day:02d}"


__all__ = ["MonthDay"]
