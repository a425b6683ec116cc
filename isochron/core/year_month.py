"""YearMonth class representing a month of a specific year.

This module provides YearMonth, a year and month without a day, such as
2024-02. It is useful for values like credit card expiry dates.
"""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, Any, Callable

from isochron._internal.calendar import days_in_month, days_in_year, is_leap_year
from isochron._internal.constants import MAX_YEAR
from isochron._internal.validation import add_exact, multiply_exact, trunc_div
from isochron.core.date import Date, format_year
from isochron.core.month import Month
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

_SUPPORTED_FIELDS = frozenset(
    {
        ChronoField.YEAR,
        ChronoField.MONTH_OF_YEAR,
        ChronoField.PROLEPTIC_MONTH,
        ChronoField.YEAR_OF_ERA,
        ChronoField.ERA,
    }
)
_SUPPORTED_UNITS = frozenset(
    {
        ChronoUnit.MONTHS,
        ChronoUnit.YEARS,
        ChronoUnit.DECADES,
        ChronoUnit.CENTURIES,
        ChronoUnit.MILLENNIA,
        ChronoUnit.ERAS,
    }
)


@total_ordering
class YearMonth(Temporal, TemporalAdjuster):
    """A year and month in the ISO calendar.

    Examples:
        >>> ym = YearMonth(2024, 1)
        >>> str(ym)
        '2024-01'
        >>> ym.plus_months(13)
        YearMonth(2025, 2)
        >>> ym.length_of_month()
        31
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: int, month: int) -> None:
        """Create a YearMonth.

        Raises:
            ValidationError: If year or month is out of range.
        """
        ChronoField.YEAR.check_valid_value(year)
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        self._year = year
        self._month = int(month)

    @classmethod
    def of(cls, year: int, month: int) -> YearMonth:
        return cls(year, month)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> YearMonth:
        """Obtain the YearMonth of a temporal object.

        Raises:
            DateTimeError: If the temporal has no year or month-of-year.
        """
        if isinstance(temporal, YearMonth):
            return temporal
        from isochron.chrono.iso import ISO, Chronology

        try:
            if Chronology.from_temporal(temporal) is not ISO:
                temporal = Date.from_temporal(temporal)
            return cls(
                temporal.get(ChronoField.YEAR),
                temporal.get(ChronoField.MONTH_OF_YEAR),
            )
        except DateTimeError as e:
            raise DateTimeError(
                f"Unable to obtain YearMonth from TemporalAccessor: {temporal!r} "
                f"of type {type(temporal).__name__}"
            ) from e

    def _with(self, year: int, month: int) -> YearMonth:
        if year == self._year and month == self._month:
            return self
        return YearMonth(year, month)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> Month:
        return Month(self._month)

    @property
    def proleptic_month(self) -> int:
        """The count of months from year 0, January."""
        return self._year * 12 + self._month - 1

    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def is_valid_day(self, day_of_month: int) -> bool:
        return 1 <= day_of_month <= self.length_of_month()

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def length_of_year(self) -> int:
        return days_in_year(self._year)

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
            if field is ChronoField.MONTH_OF_YEAR:
                return self._month
            if field is ChronoField.PROLEPTIC_MONTH:
                return self.proleptic_month
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
            return ChronoUnit.MONTHS
        return super().query(query)

    # ------------------------------------------------------------------
    # Adjustment and arithmetic
    # ------------------------------------------------------------------

    def with_field(self, field: TemporalField, new_value: int) -> YearMonth:
        if isinstance(field, ChronoField):
            field.check_valid_value(new_value)
            if field is ChronoField.MONTH_OF_YEAR:
                return self.with_month(new_value)
            if field is ChronoField.PROLEPTIC_MONTH:
                return self.plus_months(new_value - self.proleptic_month)
            if field is ChronoField.YEAR_OF_ERA:
                return self.with_year(new_value if self._year >= 1 else 1 - new_value)
            if field is ChronoField.YEAR:
                return self.with_year(new_value)
            if field is ChronoField.ERA:
                if self.get_long(ChronoField.ERA) == new_value:
                    return self
                return self.with_year(1 - self._year)
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
        return field.adjust_into(self, new_value)

    def with_year(self, year: int) -> YearMonth:
        ChronoField.YEAR.check_valid_value(year)
        return self._with(year, self._month)

    def with_month(self, month: int) -> YearMonth:
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        return self._with(self._year, int(month))

    def plus(self, amount: int, unit: TemporalUnit) -> YearMonth:
        if isinstance(unit, ChronoUnit):
            if unit is ChronoUnit.MONTHS:
                return self.plus_months(amount)
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

    def minus(self, amount: int, unit: TemporalUnit) -> YearMonth:
        return self.plus(-amount, unit)

    def plus_years(self, years: int) -> YearMonth:
        if years == 0:
            return self
        year = ChronoField.YEAR.check_valid_int_value(self._year + years)
        return self._with(year, self._month)

    def plus_months(self, months: int) -> YearMonth:
        """Add months, carrying into the year.

        Examples:
            >>> YearMonth(2024, 1).plus_months(-1)
            YearMonth(2023, 12)
        """
        if months == 0:
            return self
        calc_months = self.proleptic_month + months
        year = ChronoField.YEAR.check_valid_int_value(calc_months // 12)
        return self._with(year, calc_months % 12 + 1)

    def minus_years(self, years: int) -> YearMonth:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> YearMonth:
        return self.plus_months(-months)

    def until(self, end_exclusive: TemporalAccessor, unit: TemporalUnit) -> int:
        """Return the whole number of units to end_exclusive.

        Examples:
            >>> YearMonth(2024, 3).until(YearMonth(2023, 4), ChronoUnit.YEARS)
            0
        """
        end = YearMonth.from_temporal(end_exclusive)
        if isinstance(unit, ChronoUnit):
            months_until = end.proleptic_month - self.proleptic_month
            if unit is ChronoUnit.MONTHS:
                return months_until
            if unit is ChronoUnit.YEARS:
                return trunc_div(months_until, 12)
            if unit is ChronoUnit.DECADES:
                return trunc_div(months_until, 120)
            if unit is ChronoUnit.CENTURIES:
                return trunc_div(months_until, 1200)
            if unit is ChronoUnit.MILLENNIA:
                return trunc_div(months_until, 12000)
            if unit is ChronoUnit.ERAS:
                return end.get_long(ChronoField.ERA) - self.get_long(ChronoField.ERA)
            raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")
        return unit.between(self, end)

    def at_day(self, day_of_month: int) -> Date:
        return Date(self._year, self._month, day_of_month)

    def at_end_of_month(self) -> Date:
        return Date(self._year, self._month, self.length_of_month())

    def adjust_into(self, temporal: Temporal) -> Temporal:
        """Set the year and month of temporal to this year-month.

        Raises:
            DateTimeError: If temporal is not an ISO temporal.
        """
        from isochron.chrono.iso import ISO, Chronology

        if Chronology.from_temporal(temporal) is not ISO:
            raise DateTimeError("Adjustment only supported on ISO date-time")
        return temporal.with_field(ChronoField.PROLEPTIC_MONTH, self.proleptic_month)

    # ------------------------------------------------------------------
    # Comparison and representation
    # ------------------------------------------------------------------

    def is_after(self, other: YearMonth) -> bool:
        return self > other

    def is_before(self, other: YearMonth) -> bool:
        return self < other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._year == other._year and self._month == other._month

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) < (other._year, other._month)

    def __hash__(self) -> int:
        return hash((self._year, self._month))

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month})"

    def __str__(self) -> str:
        """Return the ISO-8601 form, such as 2024-01 or -0044-03."""
        return f"{format_year(self._year)}-{self._month:02d}"


__all__ = ["YearMonth"]
