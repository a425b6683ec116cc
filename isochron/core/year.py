"""Year class representing a year in the ISO calendar.

This module provides Year, a proleptic year without month or day. Years
are astronomical: year 0 is 1 BCE and year -1 is 2 BCE.
"""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, Any, Callable

from isochron._internal.calendar import days_in_year, is_leap_year
from isochron._internal.constants import MAX_YEAR
from isochron._internal.validation import add_exact, multiply_exact, trunc_div
from isochron.core.date import Date
from isochron.core.month_day import MonthDay
from isochron.core.year_month import YearMonth
from isochron.errors import DateTimeError, UnsupportedTemporalTypeError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import Temporal, TemporalAdjuster
from isochron.temporal.value_range import ValueRange
from isochron.units.chrono_unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.temporal.interfaces import (
        TemporalAccessor,
        TemporalField,
        TemporalUnit,
    )

_SUPPORTED_FIELDS = frozenset({ChronoField.YEAR, ChronoField.YEAR_OF_ERA, ChronoField.ERA})
_SUPPORTED_UNITS = frozenset(
    {
        ChronoUnit.YEARS,
        ChronoUnit.DECADES,
        ChronoUnit.CENTURIES,
        ChronoUnit.MILLENNIA,
        ChronoUnit.ERAS,
    }
)


@total_ordering
class Year(Temporal, TemporalAdjuster):
    """A year in the ISO calendar, such as 2024.

    Examples:
        >>> y = Year(2024)
        >>> y.is_leap_year
        True
        >>> y.at_day(60)
        Date(2024, 2, 29)
        >>> Year(0).get(ChronoField.YEAR_OF_ERA)
        1
    """

    __slots__ = ("_year",)

    def __init__(self, year: int) -> None:
        """Create a Year.

        Raises:
            ValidationError: If year is outside -999,999,999 to 999,999,999.
        """
        ChronoField.YEAR.check_valid_value(year)
        self._year = year

    @classmethod
    def of(cls, year: int) -> Year:
        return cls(year)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> Year:
        """Obtain the Year of a temporal object.

        Raises:
            DateTimeError: If the temporal has no year.
        """
        if isinstance(temporal, Year):
            return temporal
        from isochron.chrono.iso import ISO, Chronology

        try:
            if Chronology.from_temporal(temporal) is not ISO:
                temporal = Date.from_temporal(temporal)
            return cls(temporal.get(ChronoField.YEAR))
        except DateTimeError as e:
            raise DateTimeError(
                f"Unable to obtain Year from TemporalAccessor: {temporal!r} "
                f"of type {type(temporal).__name__}"
            ) from e

    @staticmethod
    def is_leap(year: int) -> bool:
        """Check the ISO leap year rule for a proleptic year.

        Examples:
            >>> Year.is_leap(2000), Year.is_leap(2100)
            (True, False)
        """
        return is_leap_year(year)

    @property
    def value(self) -> int:
        return self._year

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def length(self) -> int:
        return days_in_year(self._year)

    def is_valid_month_day(self, month_day: MonthDay | None) -> bool:
        return month_day is not None and month_day.is_valid_year(self._year)

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field in _SUPPORTED_FIELDS
        return field is not None and field.is_supported_by(self)

    def is_supported_unit(self, unit: TemporalUnit) -> bool:
        if isinstance(unit, ChronoUnit):
            return unit in _SUPPORTED_UNITS
        return unit is not None and unit.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if field is ChronoField.YEAR_OF_ERA:
            if self._year <= 0:
                return ValueRange.of(1, MAX_YEAR + 1)
            return ValueRange.of(1, MAX_YEAR)
        return super().range(field)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if field is ChronoField.YEAR_OF_ERA:
                return 1 - self._year if self._year < 1 else self._year
            if field is ChronoField.YEAR:
                return self._year
            if field is ChronoField.ERA:
                return 0 if self._year < 1 else 1
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
        return field.get_from(self)

    def query(self, query: Callable[[TemporalAccessor], Any]) -> Any:
        from isochron.chrono.iso import ISO
        from isochron.temporal import queries

        if query is queries.chronology:
            return ISO
        if query is queries.precision:
            return ChronoUnit.YEARS
        return super().query(query)

    # ------------------------------------------------------------------
    # Adjustment and arithmetic
    # ------------------------------------------------------------------

    def with_field(self, field: TemporalField, new_value: int) -> Year:
        if isinstance(field, ChronoField):
            field.check_valid_value(new_value)
            if field is ChronoField.YEAR_OF_ERA:
                return Year(1 - new_value if self._year < 1 else new_value)
            if field is ChronoField.YEAR:
                return Year(new_value)
            if field is ChronoField.ERA:
                if self.get_long(ChronoField.ERA) == new_value:
                    return self
                return Year(1 - self._year)
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
        return field.adjust_into(self, new_value)

    def plus(self, amount: int, unit: TemporalUnit) -> Year:
        if isinstance(unit, ChronoUnit):
            if unit is ChronoUnit.YEARS:
                return self.plus_years(amount)
            if unit is ChronoUnit.DECADES:
                return self.plus_years(multiply_exact(amount, 10))
            if unit is ChronoUnit.CENTURIES:
                return self.plus_years(multiply_exact(amount, 100))
            if unit is ChronoUnit.MILLENNIA:
                return self.plus_years(multiply_exact(amount, 1000))
            if unit is ChronoUnit.ERAS:
                return self.with_field(
                    ChronoField.ERA, add_exact(self.get_long(ChronoField.ERA), amount)
                )
            raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")
        return unit.add_to(self, amount)

    def minus(self, amount: int, unit: TemporalUnit) -> Year:
        return self.plus(-amount, unit)

    def plus_years(self, years: int) -> Year:
        if years == 0:
            return self
        return Year(ChronoField.YEAR.check_valid_int_value(self._year + years))

    def minus_years(self, years: int) -> Year:
        return self.plus_years(-years)

    def until(self, end_exclusive: TemporalAccessor, unit: TemporalUnit) -> int:
        """Return the whole number of units to end_exclusive.

        Examples:
            >>> Year(2024).until(Year(2005), ChronoUnit.DECADES)
            -1
        """
        end = Year.from_temporal(end_exclusive)
        if isinstance(unit, ChronoUnit):
            years_until = end._year - self._year
            if unit is ChronoUnit.YEARS:
                return years_until
            if unit is ChronoUnit.DECADES:
                return trunc_div(years_until, 10)
            if unit is ChronoUnit.CENTURIES:
                return trunc_div(years_until, 100)
            if unit is ChronoUnit.MILLENNIA:
                return trunc_div(years_until, 1000)
            if unit is ChronoUnit.ERAS:
                return end.get_long(ChronoField.ERA) - self.get_long(ChronoField.ERA)
            raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")
        return unit.between(self, end)

    def at_day(self, day_of_year: int) -> Date:
        return Date.of_year_day(self._year, day_of_year)

    def at_month(self, month: int) -> YearMonth:
        return YearMonth(self._year, month)

    def at_month_day(self, month_day: MonthDay) -> Date:
        return month_day.at_year(self._year)

    def adjust_into(self, temporal: Temporal) -> Temporal:
        """Set the year of temporal to this year.

        Raises:
            DateTimeError: If temporal is not an ISO temporal.
        """
        from isochron.chrono.iso import ISO, Chronology

        if Chronology.from_temporal(temporal) is not ISO:
            raise DateTimeError("Adjustment only supported on ISO date-time")
        return temporal.with_field(ChronoField.YEAR, self._year)

    # ------------------------------------------------------------------
    # Comparison and representation
    # ------------------------------------------------------------------

    def is_after(self, other: Year) -> bool:
        return self._year > other._year

    def is_before(self, other: Year) -> bool:
        return self._year < other._year

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._year == other._year

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._year < other._year

    def __hash__(self) -> int:
        return hash(self._year)

    def __repr__(self) -> str:
        return f"Year({self._year})"

    def __str__(self) -> str:
        return str(self._year)


__all__ = ["Year"]
