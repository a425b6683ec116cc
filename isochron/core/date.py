"""Date class representing an ISO calendar date.

This module provides the Date class, a date without time or time zone in
the proleptic ISO calendar. Date is the concrete Temporal every field and
unit in Isochron is computed against.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from isochron._internal.calendar import (
    day_of_year_to_md,
    days_before_month,
    days_in_month,
    days_in_year,
    epoch_day_to_day_of_week,
    epoch_day_to_ymd,
    is_leap_year,
    ymd_to_epoch_day,
)
from isochron._internal.constants import MAX_YEAR
from isochron._internal.validation import add_exact, multiply_exact, trunc_div
from isochron.core.day_of_week import DayOfWeek
from isochron.core.month import Month
from isochron.errors import DateTimeError, UnsupportedTemporalTypeError, ValidationError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import Temporal, TemporalAdjuster
from isochron.temporal.value_range import ValueRange
from isochron.units.chrono_unit import ChronoUnit
from isochron.units.era import IsoEra

if TYPE_CHECKING:
    from isochron.chrono.iso import IsoChronology
    from isochron.temporal.interfaces import (
        TemporalAccessor,
        TemporalField,
        TemporalUnit,
    )


class Date(Temporal, TemporalAdjuster):
    """A calendar date in the proleptic ISO calendar.

    The ISO calendar applies the Gregorian leap year rules to every year,
    including those before its adoption in 1582. Years are astronomical:
    year 0 exists and equals 1 BCE.

    Attributes:
        year: The proleptic year.
        month: The month-of-year as a Month.
        day: The day-of-month.

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.day_of_week
        <DayOfWeek.MONDAY: 1>
        >>> d.plus(1, ChronoUnit.MONTHS)
        Date(2024, 2, 15)
        >>> Date(2024, 1, 31).plus_months(1)  # clamped to the month length
        Date(2024, 2, 29)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month and day.

        Args:
            year: The proleptic year, -999,999,999 to 999,999,999.
            month: The month-of-year, 1-12 or a Month.
            day: The day-of-month, valid for the year and month.

        Raises:
            ValidationError: If any component is out of range or the
                components do not form a real date.

        Examples:
            >>> Date(2023, 2, 29)
            Traceback (most recent call last):
            ...
            ValidationError: Invalid date 'February 29' as '2023' is not a leap year
        """
        ChronoField.YEAR.check_valid_value(year)
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        ChronoField.DAY_OF_MONTH.check_valid_value(day)
        if day > 28 and day > days_in_month(year, month):
            if day == 29:
                raise ValidationError(
                    f"Invalid date 'February 29' as '{year}' is not a leap year"
                )
            raise ValidationError(
                f"Invalid date '{Month(month).name.capitalize()} {day}'"
            )
        self._year = year
        self._month = int(month)
        self._day = day

    @classmethod
    def _resolve_previous_valid(cls, year: int, month: int, day: int) -> Date:
        """Create a date, clamping day to the last day of the month."""
        return cls(year, month, min(day, days_in_month(year, month)))

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> Date:
        """Create a Date from a count of days since 1970-01-01.

        Raises:
            ValidationError: If epoch_day is outside the supported range.

        Examples:
            >>> Date.of_epoch_day(0)
            Date(1970, 1, 1)
            >>> Date.of_epoch_day(-1)
            Date(1969, 12, 31)
        """
        ChronoField.EPOCH_DAY.check_valid_value(epoch_day)
        return cls(*epoch_day_to_ymd(epoch_day))

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> Date:
        """Create a Date from a year and day-of-year.

        Raises:
            ValidationError: If day_of_year is 366 in a non-leap year or
                otherwise out of range.
        """
        ChronoField.YEAR.check_valid_value(year)
        ChronoField.DAY_OF_YEAR.check_valid_value(day_of_year)
        if day_of_year == 366 and not is_leap_year(year):
            raise ValidationError(
                f"Invalid date 'DayOfYear 366' as '{year}' is not a leap year"
            )
        month, day = day_of_year_to_md(year, day_of_year)
        return cls(year, month, day)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> Date:
        """Obtain a Date from any temporal that can produce one.

        Raises:
            DateTimeError: If the temporal has no ISO date.
        """
        from isochron.temporal import queries

        date = temporal.query(queries.local_date)
        if date is None:
            raise DateTimeError(
                f"Unable to obtain Date from TemporalAccessor: {temporal!r} "
                f"of type {type(temporal).__name__}"
            )
        return date

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> Month:
        return Month(self._month)

    @property
    def day(self) -> int:
        return self._day

    @property
    def day_of_week(self) -> DayOfWeek:
        """The ISO day of week.

        Examples:
            >>> Date(1970, 1, 1).day_of_week
            <DayOfWeek.THURSDAY: 4>
        """
        return DayOfWeek(epoch_day_to_day_of_week(self.to_epoch_day()))

    @property
    def day_of_year(self) -> int:
        """The day of the year, 1 to 365, or 366 in a leap year."""
        return days_before_month(self._year, self._month) + self._day

    @property
    def era(self) -> IsoEra:
        return IsoEra.CE if self._year >= 1 else IsoEra.BCE

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    @property
    def chronology(self) -> IsoChronology:
        from isochron.chrono.iso import ISO

        return ISO

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def length_of_year(self) -> int:
        return days_in_year(self._year)

    def to_epoch_day(self) -> int:
        """Return the count of days since 1970-01-01."""
        return ymd_to_epoch_day(self._year, self._month, self._day)

    def _proleptic_month(self) -> int:
        return self._year * 12 + self._month - 1

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field.is_date_based()
        return field is not None and field.is_supported_by(self)

    def is_supported_unit(self, unit: TemporalUnit) -> bool:
        if isinstance(unit, ChronoUnit):
            return unit.is_date_based()
        return unit is not None and unit.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        """Return the range of field, refined by this date.

        Examples:
            >>> Date(2023, 2, 1).range(ChronoField.DAY_OF_MONTH)
            ValueRange.of(1, 28, 28)
        """
        if isinstance(field, ChronoField):
            if not field.is_date_based():
                raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
            if field is ChronoField.DAY_OF_MONTH:
                return ValueRange.of(1, self.length_of_month())
            if field is ChronoField.DAY_OF_YEAR:
                return ValueRange.of(1, self.length_of_year())
            if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
                short_february = self._month == 2 and not self.is_leap_year
                return ValueRange.of(1, 4 if short_february else 5)
            if field is ChronoField.YEAR_OF_ERA:
                if self._year <= 0:
                    return ValueRange.of(1, MAX_YEAR + 1)
                return ValueRange.of(1, MAX_YEAR)
            return field.range()
        return field.range_refined_by(self)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if field is ChronoField.EPOCH_DAY:
                return self.to_epoch_day()
            if field is ChronoField.PROLEPTIC_MONTH:
                return self._proleptic_month()
            return self._get0(field)
        return field.get_from(self)

    def _get0(self, field: ChronoField) -> int:
        if field is ChronoField.DAY_OF_WEEK:
            return self.day_of_week.value
        if field is ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self._day - 1) % 7 + 1
        if field is ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.day_of_year - 1) % 7 + 1
        if field is ChronoField.DAY_OF_MONTH:
            return self._day
        if field is ChronoField.DAY_OF_YEAR:
            return self.day_of_year
        if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
            return (self._day - 1) // 7 + 1
        if field is ChronoField.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year - 1) // 7 + 1
        if field is ChronoField.MONTH_OF_YEAR:
            return self._month
        if field is ChronoField.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        if field is ChronoField.YEAR:
            return self._year
        if field is ChronoField.ERA:
            return 1 if self._year >= 1 else 0
        raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")

    def query(self, query: Callable[[TemporalAccessor], Any]) -> Any:
        from isochron.chrono.iso import ISO
        from isochron.temporal import queries

        if query is queries.local_date:
            return self
        if query is queries.chronology:
            return ISO
        if query is queries.precision:
            return ChronoUnit.DAYS
        return super().query(query)

    # ------------------------------------------------------------------
    # Adjustment
    # ------------------------------------------------------------------

    def with_field(self, field: TemporalField, new_value: int) -> Date:
        """Return a copy of this date with field set to new_value.

        Where the result would be an invalid date the day-of-month is
        clamped, so setting MONTH_OF_YEAR to 2 on January 31st gives the
        last day of February.

        Raises:
            ValidationError: If new_value is out of range for the field.
            UnsupportedTemporalTypeError: If the field is a time field.
        """
        if isinstance(field, ChronoField):
            field.check_valid_value(new_value)
            if field is ChronoField.DAY_OF_WEEK:
                return self.plus_days(new_value - self.day_of_week.value)
            if field in (
                ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
                ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR,
            ):
                return self.plus_days(new_value - self.get_long(field))
            if field is ChronoField.DAY_OF_MONTH:
                return self.with_day_of_month(new_value)
            if field is ChronoField.DAY_OF_YEAR:
                return self.with_day_of_year(new_value)
            if field is ChronoField.EPOCH_DAY:
                return Date.of_epoch_day(new_value)
            if field in (
                ChronoField.ALIGNED_WEEK_OF_MONTH,
                ChronoField.ALIGNED_WEEK_OF_YEAR,
            ):
                return self.plus_weeks(new_value - self.get_long(field))
            if field is ChronoField.MONTH_OF_YEAR:
                return self.with_month(new_value)
            if field is ChronoField.PROLEPTIC_MONTH:
                return self.plus_months(new_value - self._proleptic_month())
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

    def with_year(self, year: int) -> Date:
        if year == self._year:
            return self
        ChronoField.YEAR.check_valid_value(year)
        return Date._resolve_previous_valid(year, self._month, self._day)

    def with_month(self, month: int) -> Date:
        if month == self._month:
            return self
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        return Date._resolve_previous_valid(self._year, month, self._day)

    def with_day_of_month(self, day: int) -> Date:
        if day == self._day:
            return self
        return Date(self._year, self._month, day)

    def with_day_of_year(self, day_of_year: int) -> Date:
        if day_of_year == self.day_of_year:
            return self
        return Date.of_year_day(self._year, day_of_year)

    def adjust_into(self, temporal: Temporal) -> Temporal:
        """Set the date of temporal to this date."""
        return temporal.with_field(ChronoField.EPOCH_DAY, self.to_epoch_day())

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def plus(self, amount: int, unit: TemporalUnit) -> Date:
        """Return a copy of this date with amount of unit added.

        Raises:
            UnsupportedTemporalTypeError: If the unit is a time unit.
            ValidationError: If the result is outside the supported range.
        """
        if isinstance(unit, ChronoUnit):
            if unit is ChronoUnit.DAYS:
                return self.plus_days(amount)
            if unit is ChronoUnit.WEEKS:
                return self.plus_weeks(amount)
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

    def minus(self, amount: int, unit: TemporalUnit) -> Date:
        return self.plus(-amount, unit)

    def plus_days(self, days: int) -> Date:
        if days == 0:
            return self
        return Date.of_epoch_day(add_exact(self.to_epoch_day(), days))

    def plus_weeks(self, weeks: int) -> Date:
        return self.plus_days(multiply_exact(weeks, 7))

    def plus_months(self, months: int) -> Date:
        """Add months, clamping the day to the length of the new month.

        Examples:
            >>> Date(2023, 3, 31).plus_months(-1)
            Date(2023, 2, 28)
        """
        if months == 0:
            return self
        calc_months = add_exact(self._proleptic_month(), months)
        year = ChronoField.YEAR.check_valid_value(calc_months // 12)
        month = calc_months % 12 + 1
        return Date._resolve_previous_valid(year, month, self._day)

    def plus_years(self, years: int) -> Date:
        if years == 0:
            return self
        year = ChronoField.YEAR.check_valid_value(add_exact(self._year, years))
        return Date._resolve_previous_valid(year, self._month, self._day)

    def minus_days(self, days: int) -> Date:
        return self.plus_days(-days)

    def minus_weeks(self, weeks: int) -> Date:
        return self.plus_weeks(-weeks)

    def minus_months(self, months: int) -> Date:
        return self.plus_months(-months)

    def minus_years(self, years: int) -> Date:
        return self.plus_years(-years)

    def until(self, end_exclusive: TemporalAccessor, unit: TemporalUnit) -> int:
        """Return the whole number of units from this date to end_exclusive.

        Months are complete only once the day-of-month is reached, so
        2024-01-31 to 2024-02-29 is zero months.

        Examples:
            >>> Date(2024, 1, 15).until(Date(2024, 3, 14), ChronoUnit.MONTHS)
            1
            >>> Date(2024, 1, 15).until(Date(2024, 1, 2), ChronoUnit.WEEKS)
            -1
        """
        end = Date.from_temporal(end_exclusive)
        if isinstance(unit, ChronoUnit):
            if unit is ChronoUnit.DAYS:
                return self._days_until(end)
            if unit is ChronoUnit.WEEKS:
                return trunc_div(self._days_until(end), 7)
            if unit is ChronoUnit.MONTHS:
                return self._months_until(end)
            if unit is ChronoUnit.YEARS:
                return trunc_div(self._months_until(end), 12)
            if unit is ChronoUnit.DECADES:
                return trunc_div(self._months_until(end), 120)
            if unit is ChronoUnit.CENTURIES:
                return trunc_div(self._months_until(end), 1200)
            if unit is ChronoUnit.MILLENNIA:
                return trunc_div(self._months_until(end), 12000)
            if unit is ChronoUnit.ERAS:
                return end.get_long(ChronoField.ERA) - self.get_long(ChronoField.ERA)
            raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")
        return unit.between(self, end)

    def _days_until(self, end: Date) -> int:
        return end.to_epoch_day() - self.to_epoch_day()

    def _months_until(self, end: Date) -> int:
        # Pack month and day so a partial month truncates away
        packed1 = self._proleptic_month() * 32 + self._day
        packed2 = end._proleptic_month() * 32 + end._day
        return trunc_div(packed2 - packed1, 32)

    # ------------------------------------------------------------------
    # Comparison and representation
    # ------------------------------------------------------------------

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def is_after(self, other: Date) -> bool:
        return self._key() > other._key()

    def is_before(self, other: Date) -> bool:
        return self._key() < other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the ISO-8601 form, such as 2024-01-15 or -0044-03-15."""
        return f"{format_year(self._year)}-{self._month:02d}-{self._day:02d}"


def format_year(year: int) -> str:
    """Format a proleptic year the way ISO-8601 extended dates do.

    Years below 1000 in magnitude are padded to four digits and years
    beyond 9999 carry an explicit sign.

    Examples:
        >>> format_year(44)
        '0044'
        >>> format_year(-44)
        '-0044'
        >>> format_year(12345)
        '+12345'
    """
    if abs(year) < 1000:
        return f"{'-' if year < 0 else ''}{abs(year):04d}"
    if year > 9999:
        return f"+{year}"
    return str(year)


__all__ = ["Date", "format_year"]
