"""ISO-8601 quarter and week-based-year fields and units.

The quarter fields split the year into four quarters of three months.
DAY_OF_QUARTER runs from 1 to 90, 91 or 92 and QUARTER_OF_YEAR from 1 to
4.

The week-based-year fields implement ISO week numbering. Every week starts
on a Monday and belongs to exactly one week-based-year, and week 1 is the
week containing the first Thursday of the year. The first few days of a
calendar year may therefore be in week 52 or 53 of the previous
week-based-year, and the last few in week 1 of the next.

All fields and units here are only supported by ISO temporals.

Examples:
    >>> from isochron import Date
    >>> d = Date(2008, 12, 29)
    >>> d.get(IsoFields.WEEK_BASED_YEAR), d.get(IsoFields.WEEK_OF_WEEK_BASED_YEAR)
    (2009, 1)
    >>> Date(2012, 5, 15).get(IsoFields.DAY_OF_QUARTER)
    45
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isochron._internal.constants import SECONDS_PER_YEAR
from isochron._internal.validation import add_exact, subtract_exact, trunc_div, trunc_mod
from isochron.chrono.iso import ISO, Chronology
from isochron.core.date import Date
from isochron.core.day_of_week import DayOfWeek
from isochron.errors import DateTimeError, UnsupportedTemporalTypeError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import TemporalField, TemporalUnit
from isochron.temporal.resolver import ResolverStyle
from isochron.temporal.value_range import ValueRange
from isochron.units.chrono_unit import ChronoUnit
from isochron.units.duration import Duration

if TYPE_CHECKING:
    from isochron.temporal.interfaces import Temporal, TemporalAccessor
    from isochron.temporal.resolver import ResolutionContext

# Day-of-year before the first day of each quarter, non-leap then leap
_QUARTER_DAYS = (0, 90, 181, 273, 0, 91, 182, 274)


def _is_iso(temporal: TemporalAccessor) -> bool:
    return Chronology.from_temporal(temporal) is ISO


def _ensure_iso(context: ResolutionContext) -> None:
    if context.chronology is not ISO:
        raise DateTimeError("Resolve requires IsoChronology")


# ----------------------------------------------------------------------
# Week-based-year calculations
# ----------------------------------------------------------------------


def get_week_range(week_based_year: int) -> int:
    """Return the number of weeks, 52 or 53, in a week-based-year.

    A year has 53 weeks if it starts on a Thursday, or on a Wednesday in a
    leap year.

    Examples:
        >>> get_week_range(2009)
        53
        >>> get_week_range(2010)
        52
    """
    first = Date(week_based_year, 1, 1)
    dow = first.day_of_week
    if dow is DayOfWeek.THURSDAY or (dow is DayOfWeek.WEDNESDAY and first.is_leap_year):
        return 53
    return 52


def _week_range_of(date: Date) -> ValueRange:
    return ValueRange.of(1, get_week_range(get_week_based_year(date)))


def get_week(date: Date) -> int:
    """Return the ISO week-of-week-based-year of date.

    Examples:
        >>> get_week(Date(2008, 12, 29))
        1
        >>> get_week(Date(2010, 1, 3))
        53
    """
    dow0 = date.day_of_week.value - 1
    doy0 = date.day_of_year - 1
    # Day-of-year of the Thursday in the same week
    doy_thu0 = doy0 + (3 - dow0)
    first_mon_doy0 = doy_thu0 % 7 - 3
    if doy0 < first_mon_doy0:
        # Still in the last week of the previous week-based-year
        return _week_range_of(date.with_day_of_year(180).minus_years(1)).maximum
    week = (doy0 - first_mon_doy0) // 7 + 1
    if week == 53:
        if not (first_mon_doy0 == -3 or (first_mon_doy0 == -2 and date.is_leap_year)):
            week = 1
    return week


def get_week_based_year(date: Date) -> int:
    """Return the ISO week-based-year of date.

    Examples:
        >>> get_week_based_year(Date(2008, 12, 29))
        2009
        >>> get_week_based_year(Date(2010, 1, 3))
        2009
    """
    year = date.year
    doy = date.day_of_year
    dow0 = date.day_of_week.value - 1
    if doy <= 3:
        if doy - dow0 < -2:
            year -= 1
    elif doy >= 363:
        doy = doy - 363 - (1 if date.is_leap_year else 0)
        if doy - dow0 >= 0:
            year += 1
    return year


# ----------------------------------------------------------------------
# Units
# ----------------------------------------------------------------------


class _IsoUnit(TemporalUnit):
    """A unit defined in terms of ISO quarters or week-based-years."""

    def __init__(self, name: str, constant: str, duration: Duration) -> None:
        self._name = name
        self._constant = constant
        self._duration = duration

    @property
    def duration(self) -> Duration:
        return self._duration

    def is_duration_estimated(self) -> bool:
        return True

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY) and _is_iso(temporal)

    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        if self is QUARTER_YEARS:
            return temporal.plus(trunc_div(amount, 4), ChronoUnit.YEARS).plus(
                trunc_mod(amount, 4) * 3, ChronoUnit.MONTHS
            )
        return temporal.with_field(
            WEEK_BASED_YEAR, add_exact(temporal.get(WEEK_BASED_YEAR), amount)
        )

    def between(self, start: Temporal, end: Temporal) -> int:
        if type(start) is not type(end):
            return start.until(end, self)
        if self is QUARTER_YEARS:
            return trunc_div(start.until(end, ChronoUnit.MONTHS), 3)
        return subtract_exact(
            end.get_long(WEEK_BASED_YEAR), start.get_long(WEEK_BASED_YEAR)
        )

    def __repr__(self) -> str:
        return f"IsoFields.{self._constant}"

    def __str__(self) -> str:
        return self._name


WEEK_BASED_YEARS = _IsoUnit(
    "WeekBasedYears",
    "WEEK_BASED_YEARS",
    Duration.of_seconds(SECONDS_PER_YEAR),
)
QUARTER_YEARS = _IsoUnit(
    "QuarterYears",
    "QUARTER_YEARS",
    Duration.of_seconds(SECONDS_PER_YEAR // 4),
)


# ----------------------------------------------------------------------
# Fields
# ----------------------------------------------------------------------


class _IsoField(TemporalField):
    """Common behavior of the ISO quarter and week fields."""

    _name: str
    _constant: str

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def _check_supported(self, temporal: TemporalAccessor) -> None:
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError(f"Unsupported field: {self}")

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        self._check_supported(temporal)
        return self.range()

    def __repr__(self) -> str:
        return f"IsoFields.{self._constant}"

    def __str__(self) -> str:
        return self._name


class _DayOfQuarterField(_IsoField):
    _name = "DayOfQuarter"
    _constant = "DAY_OF_QUARTER"

    @property
    def base_unit(self) -> TemporalUnit:
        return ChronoUnit.DAYS

    @property
    def range_unit(self) -> TemporalUnit:
        return QUARTER_YEARS

    def range(self) -> ValueRange:
        return ValueRange.of(1, 90, 92)

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return (
            temporal.is_supported(ChronoField.DAY_OF_YEAR)
            and temporal.is_supported(ChronoField.MONTH_OF_YEAR)
            and temporal.is_supported(ChronoField.YEAR)
            and _is_iso(temporal)
        )

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        """Return 1-90 or 1-91 for Q1 by leap year, 1-91 for Q2, else 1-92."""
        self._check_supported(temporal)
        quarter = temporal.get_long(QUARTER_OF_YEAR)
        if quarter == 1:
            year = temporal.get_long(ChronoField.YEAR)
            return ValueRange.of(1, 91 if ISO.is_leap_year(year) else 90)
        if quarter == 2:
            return ValueRange.of(1, 91)
        if quarter in (3, 4):
            return ValueRange.of(1, 92)
        return self.range()

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        moy = temporal.get(ChronoField.MONTH_OF_YEAR)
        year = temporal.get_long(ChronoField.YEAR)
        leap_offset = 4 if ISO.is_leap_year(year) else 0
        return doy - _QUARTER_DAYS[(moy - 1) // 3 + leap_offset]

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        current = self.get_from(temporal)
        self.range().check_valid_value(new_value, self)
        return temporal.with_field(
            ChronoField.DAY_OF_YEAR,
            temporal.get_long(ChronoField.DAY_OF_YEAR) + (new_value - current),
        )

    def resolve(self, context: ResolutionContext) -> Date | None:
        """Combine YEAR, QUARTER_OF_YEAR and this field into a date.

        Smart resolution accepts day 92 of any quarter, rolling into the
        next quarter; strict resolution checks the quarter's real length.
        """
        values = context.field_values
        year_value = values.get(ChronoField.YEAR)
        quarter_value = values.get(QUARTER_OF_YEAR)
        if year_value is None or quarter_value is None:
            return None
        year = ChronoField.YEAR.check_valid_int_value(year_value)
        doq = values[self]
        _ensure_iso(context)
        if context.style is ResolverStyle.LENIENT:
            date = Date(year, 1, 1).plus_months((quarter_value - 1) * 3)
            doq = subtract_exact(doq, 1)
        else:
            quarter = QUARTER_OF_YEAR.range().check_valid_int_value(
                quarter_value, QUARTER_OF_YEAR
            )
            date = Date(year, (quarter - 1) * 3 + 1, 1)
            if doq < 1 or doq > 90:
                if context.style is ResolverStyle.STRICT:
                    self.range_refined_by(date).check_valid_value(doq, self)
                else:
                    self.range().check_valid_value(doq, self)
            doq -= 1
        del values[self]
        del values[ChronoField.YEAR]
        del values[QUARTER_OF_YEAR]
        return date.plus_days(doq)


class _QuarterOfYearField(_IsoField):
    _name = "QuarterOfYear"
    _constant = "QUARTER_OF_YEAR"

    @property
    def base_unit(self) -> TemporalUnit:
        return QUARTER_YEARS

    @property
    def range_unit(self) -> TemporalUnit:
        return ChronoUnit.YEARS

    def range(self) -> ValueRange:
        return ValueRange.of(1, 4)

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(ChronoField.MONTH_OF_YEAR) and _is_iso(temporal)

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        return (temporal.get_long(ChronoField.MONTH_OF_YEAR) + 2) // 3

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        """Move temporal to the same month and day of another quarter."""
        current = self.get_from(temporal)
        self.range().check_valid_value(new_value, self)
        return temporal.with_field(
            ChronoField.MONTH_OF_YEAR,
            temporal.get_long(ChronoField.MONTH_OF_YEAR) + (new_value - current) * 3,
        )


class _WeekOfWeekBasedYearField(_IsoField):
    _name = "WeekOfWeekBasedYear"
    _constant = "WEEK_OF_WEEK_BASED_YEAR"

    @property
    def base_unit(self) -> TemporalUnit:
        return ChronoUnit.WEEKS

    @property
    def range_unit(self) -> TemporalUnit:
        return WEEK_BASED_YEARS

    def range(self) -> ValueRange:
        return ValueRange.of(1, 52, 53)

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY) and _is_iso(temporal)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        self._check_supported(temporal)
        return _week_range_of(Date.from_temporal(temporal))

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        return get_week(Date.from_temporal(temporal))

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        self.range().check_valid_value(new_value, self)
        return temporal.plus(
            subtract_exact(new_value, self.get_from(temporal)), ChronoUnit.WEEKS
        )

    def resolve(self, context: ResolutionContext) -> Date | None:
        """Combine WEEK_BASED_YEAR, this field and DAY_OF_WEEK into a date.

        Smart resolution accepts week 53 of any year, rolling into the next
        week-based-year; strict resolution checks the year's real length.
        """
        values = context.field_values
        wby_value = values.get(WEEK_BASED_YEAR)
        dow_value = values.get(ChronoField.DAY_OF_WEEK)
        if wby_value is None or dow_value is None:
            return None
        wby = WEEK_BASED_YEAR.range().check_valid_int_value(wby_value, WEEK_BASED_YEAR)
        wowby = values[self]
        _ensure_iso(context)
        # The 4th of January is always in week 1
        date = Date(wby, 1, 4)
        if context.style is ResolverStyle.LENIENT:
            dow = dow_value
            if dow > 7:
                date = date.plus_weeks(trunc_div(dow - 1, 7))
                dow = trunc_mod(dow - 1, 7) + 1
            elif dow < 1:
                date = date.plus_weeks(trunc_div(subtract_exact(dow, 7), 7))
                dow = (dow + 6) % 7 + 1
            date = date.plus_weeks(subtract_exact(wowby, 1)).with_field(
                ChronoField.DAY_OF_WEEK, dow
            )
        else:
            dow = ChronoField.DAY_OF_WEEK.check_valid_int_value(dow_value)
            if wowby < 1 or wowby > 52:
                if context.style is ResolverStyle.STRICT:
                    _week_range_of(date).check_valid_value(wowby, self)
                else:
                    self.range().check_valid_value(wowby, self)
            date = date.plus_weeks(wowby - 1).with_field(ChronoField.DAY_OF_WEEK, dow)
        del values[self]
        del values[WEEK_BASED_YEAR]
        del values[ChronoField.DAY_OF_WEEK]
        return date


class _WeekBasedYearField(_IsoField):
    _name = "WeekBasedYear"
    _constant = "WEEK_BASED_YEAR"

    @property
    def base_unit(self) -> TemporalUnit:
        return WEEK_BASED_YEARS

    @property
    def range_unit(self) -> TemporalUnit:
        return ChronoUnit.FOREVER

    def range(self) -> ValueRange:
        return ChronoField.YEAR.range()

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY) and _is_iso(temporal)

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        return get_week_based_year(Date.from_temporal(temporal))

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        """Move temporal to the same week and day-of-week of another year.

        Week 53 becomes week 52 when the target year has only 52 weeks.
        """
        self._check_supported(temporal)
        new_wby = self.range().check_valid_int_value(new_value, self)
        date = Date.from_temporal(temporal)
        dow = date.day_of_week.value
        week = get_week(date)
        if week == 53 and get_week_range(new_wby) == 52:
            week = 52
        resolved = Date(new_wby, 1, 4)
        days = (dow - resolved.day_of_week.value) + (week - 1) * 7
        return temporal.adjust(resolved.plus_days(days))


DAY_OF_QUARTER = _DayOfQuarterField()
QUARTER_OF_YEAR = _QuarterOfYearField()
WEEK_OF_WEEK_BASED_YEAR = _WeekOfWeekBasedYearField()
WEEK_BASED_YEAR = _WeekBasedYearField()


class IsoFields:
    """The ISO-8601 quarter and week-based-year fields and units."""

    DAY_OF_QUARTER = DAY_OF_QUARTER
    QUARTER_OF_YEAR = QUARTER_OF_YEAR
    WEEK_OF_WEEK_BASED_YEAR = WEEK_OF_WEEK_BASED_YEAR
    WEEK_BASED_YEAR = WEEK_BASED_YEAR
    WEEK_BASED_YEARS = WEEK_BASED_YEARS
    QUARTER_YEARS = QUARTER_YEARS


__all__ = [
    "IsoFields",
    "get_week",
    "get_week_range",
    "get_week_based_year",
]
