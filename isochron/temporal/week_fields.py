"""Localized week numbering.

A week definition is a pair: the first day of the week, and the minimal
number of days that must fall in the first week of a month or year. ISO-8601
uses Monday and 4, so week 1 of a year is the first Monday-based week with
at least four days in that year, which is the week containing the first
Thursday. The US convention is Sunday and 1.

Days before week 1 of a month or year are in week 0. The week-based-year
fields instead assign those days to the last week of the previous
week-based-year, so that every week belongs to exactly one year.

Examples:
    >>> from isochron import Date
    >>> wf = WeekFields.ISO
    >>> d = Date(2008, 12, 28)
    >>> d.get(wf.week_based_year), d.get(wf.week_of_week_based_year)
    (2008, 52)
    >>> Date(2008, 12, 28).get(WeekFields.SUNDAY_START.day_of_week)
    1
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from isochron._internal.validation import add_exact, multiply_exact, subtract_exact
from isochron.chrono.iso import Chronology
from isochron.core.day_of_week import DayOfWeek
from isochron.errors import DateTimeError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import TemporalField
from isochron.temporal.iso_fields import IsoFields
from isochron.temporal.resolver import ResolverStyle
from isochron.temporal.value_range import ValueRange
from isochron.units.chrono_unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.chrono.iso import IsoChronology
    from isochron.core.date import Date
    from isochron.temporal.interfaces import Temporal, TemporalAccessor, TemporalUnit
    from isochron.temporal.resolver import ResolutionContext

logger = logging.getLogger(__name__)

_DAY_OF_WEEK_RANGE = ValueRange.of(1, 7)
_WEEK_OF_MONTH_RANGE = ValueRange.of(0, 1, 4, 6)
_WEEK_OF_YEAR_RANGE = ValueRange.of(0, 1, 52, 54)
_WEEK_OF_WEEK_BASED_YEAR_RANGE = ValueRange.of(1, 52, 53)

_CACHE: dict[tuple[DayOfWeek, int], WeekFields] = {}


class WeekFields:
    """A week definition and the five fields it gives rise to.

    There is one instance per (first day of week, minimal days) pair.
    Calling the class is the same as calling WeekFields.of().

    Attributes:
        first_day_of_week: The day each week starts on.
        minimal_days: Minimal number of days in the first week, 1-7.
        day_of_week: Localized day-of-week, 1 on first_day_of_week.
        week_of_month: Week of the month, 0 for days before week 1.
        week_of_year: Week of the year, 0 for days before week 1.
        week_of_week_based_year: Week of the week-based-year, from 1.
        week_based_year: The year a week belongs to.
    """

    ISO: WeekFields
    SUNDAY_START: WeekFields

    def __new__(cls, first_day_of_week: DayOfWeek, minimal_days: int) -> WeekFields:
        return cls.of(first_day_of_week, minimal_days)

    @classmethod
    def _create(cls, first_day_of_week: DayOfWeek, minimal_days: int) -> WeekFields:
        self = object.__new__(cls)
        self._init(first_day_of_week, minimal_days)
        return self

    def _init(self, first_day_of_week: DayOfWeek, minimal_days: int) -> None:
        self._first_day_of_week = DayOfWeek(first_day_of_week)
        self._minimal_days = minimal_days
        self.day_of_week = ComputedDayOfField(
            "DayOfWeek", self, ChronoUnit.DAYS, ChronoUnit.WEEKS, _DAY_OF_WEEK_RANGE
        )
        self.week_of_month = ComputedDayOfField(
            "WeekOfMonth",
            self,
            ChronoUnit.WEEKS,
            ChronoUnit.MONTHS,
            _WEEK_OF_MONTH_RANGE,
        )
        self.week_of_year = ComputedDayOfField(
            "WeekOfYear", self, ChronoUnit.WEEKS, ChronoUnit.YEARS, _WEEK_OF_YEAR_RANGE
        )
        self.week_of_week_based_year = ComputedDayOfField(
            "WeekOfWeekBasedYear",
            self,
            ChronoUnit.WEEKS,
            IsoFields.WEEK_BASED_YEARS,
            _WEEK_OF_WEEK_BASED_YEAR_RANGE,
        )
        self.week_based_year = ComputedDayOfField(
            "WeekBasedYear",
            self,
            IsoFields.WEEK_BASED_YEARS,
            ChronoUnit.FOREVER,
            ChronoField.YEAR.range(),
        )

    @classmethod
    def of(cls, first_day_of_week: DayOfWeek, minimal_days: int) -> WeekFields:
        """Obtain the cached instance for a week definition.

        Raises:
            ValueError: If minimal_days is not in 1-7.

        Examples:
            >>> WeekFields.of(DayOfWeek.MONDAY, 4) is WeekFields.ISO
            True
        """
        if minimal_days < 1 or minimal_days > 7:
            raise ValueError("Minimal number of days is invalid")
        key = (DayOfWeek(first_day_of_week), minimal_days)
        rules = _CACHE.get(key)
        if rules is None:
            logger.debug("creating week definition %s/%d", key[0], minimal_days)
            _CACHE.setdefault(key, cls._create(first_day_of_week, minimal_days))
            rules = _CACHE[key]
        return rules

    @property
    def first_day_of_week(self) -> DayOfWeek:
        return self._first_day_of_week

    @property
    def minimal_days(self) -> int:
        return self._minimal_days

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekFields):
            return NotImplemented
        return (
            self._first_day_of_week == other._first_day_of_week
            and self._minimal_days == other._minimal_days
        )

    def __hash__(self) -> int:
        return (self._first_day_of_week.value - 1) * 7 + self._minimal_days

    def __repr__(self) -> str:
        return (
            f"WeekFields.of(DayOfWeek.{self._first_day_of_week.name}, "
            f"{self._minimal_days})"
        )

    def __str__(self) -> str:
        return f"WeekFields[{self._first_day_of_week.name},{self._minimal_days}]"


class ComputedDayOfField(TemporalField):
    """A field computed from a week definition.

    The kind of field is identified by its range unit: WEEKS for the
    localized day-of-week, MONTHS for week-of-month, YEARS for
    week-of-year, WEEK_BASED_YEARS for week-of-week-based-year and FOREVER
    for the week-based-year itself.
    """

    def __init__(
        self,
        name: str,
        week_def: WeekFields,
        base_unit: TemporalUnit,
        range_unit: TemporalUnit,
        value_range: ValueRange,
    ) -> None:
        self._name = name
        self._week_def = week_def
        self._base_unit = base_unit
        self._range_unit = range_unit
        self._range = value_range

    @property
    def week_def(self) -> WeekFields:
        return self._week_def

    @property
    def base_unit(self) -> TemporalUnit:
        return self._base_unit

    @property
    def range_unit(self) -> TemporalUnit:
        return self._range_unit

    def range(self) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    # ------------------------------------------------------------------
    # Week arithmetic
    # ------------------------------------------------------------------

    def localized_day_of_week(self, temporal: TemporalAccessor) -> int:
        """Return the day-of-week of temporal counted from the week start."""
        return self._localized_dow(temporal.get(ChronoField.DAY_OF_WEEK))

    def _localized_dow(self, iso_dow: int) -> int:
        return (iso_dow - self._week_def.first_day_of_week.value) % 7 + 1

    def _lenient_iso_dow(self, value: int) -> int:
        """Convert a localized day-of-week to ISO, carrying whole weeks.

        Values outside 1-7 keep their week overflow, so localized 9 is the
        ISO day of localized 2 one week later.
        """
        weeks, day = divmod(value - 1, 7)
        start_dow = self._week_def.first_day_of_week.value
        return (start_dow - 1 + day) % 7 + 1 + weeks * 7

    def _lenient_localized_dow(self, iso_dow: int) -> int:
        """Inverse of _lenient_iso_dow."""
        weeks, day = divmod(iso_dow - 1, 7)
        return self._localized_dow(day + 1) + weeks * 7

    def start_of_week_offset(self, day: int, dow: int) -> int:
        """Return the offset of the first week start from day 1 of the period.

        Args:
            day: The day-of-month or day-of-year.
            dow: The localized day-of-week of that day.

        Returns:
            The offset to add before counting weeks. A partial first week
            with at least minimal_days days counts as week 1, a shorter one
            as week 0.
        """
        week_start = (day - dow) % 7
        offset = -week_start
        if week_start + 1 > self._week_def.minimal_days:
            # The partial week has enough days to be week 1
            offset = 7 - week_start
        return offset

    @staticmethod
    def compute_week(offset: int, day: int) -> int:
        """Return the week number of day given the first week offset."""
        return (7 + offset + (day - 1)) // 7

    def _localized_week_of_month(self, temporal: TemporalAccessor) -> int:
        dow = self.localized_day_of_week(temporal)
        dom = temporal.get(ChronoField.DAY_OF_MONTH)
        return self.compute_week(self.start_of_week_offset(dom, dow), dom)

    def _localized_week_of_year(self, temporal: TemporalAccessor) -> int:
        dow = self.localized_day_of_week(temporal)
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        return self.compute_week(self.start_of_week_offset(doy, dow), doy)

    def _new_year_week(self, temporal: TemporalAccessor, offset: int) -> int:
        """Return the week number at which the next week-based-year starts."""
        year_length = temporal.range(ChronoField.DAY_OF_YEAR).maximum
        return self.compute_week(offset, year_length + self._week_def.minimal_days)

    def _localized_week_based_year(self, temporal: TemporalAccessor) -> int:
        dow = self.localized_day_of_week(temporal)
        year = temporal.get(ChronoField.YEAR)
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self.start_of_week_offset(doy, dow)
        week = self.compute_week(offset, doy)
        if week == 0:
            # In the last week of the previous year
            return year - 1
        if week >= self._new_year_week(temporal, offset):
            # In the first week of the next year
            return year + 1
        return year

    def _localized_week_of_week_based_year(self, temporal: TemporalAccessor) -> int:
        dow = self.localized_day_of_week(temporal)
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self.start_of_week_offset(doy, dow)
        week = self.compute_week(offset, doy)
        if week == 0:
            # Recompute from the last day of the previous year
            date = Chronology.from_temporal(temporal).date_from(temporal)
            return self._localized_week_of_week_based_year(
                date.minus(doy, ChronoUnit.DAYS)
            )
        if week > 50:
            new_year_week = self._new_year_week(temporal, offset)
            if week >= new_year_week:
                week = week - new_year_week + 1
        return week

    def of_week_based_year(
        self, chronology: IsoChronology, year: int, week: int, dow: int
    ) -> Date:
        """Build the date of a localized week-based-year, week and day-of-week.

        The week is clamped to the last week of the year so the result
        stays in the requested week-based-year.
        """
        date = chronology.date(year, 1, 1)
        offset = self.start_of_week_offset(1, self.localized_day_of_week(date))
        new_year_week = self.compute_week(
            offset, date.length_of_year() + self._week_def.minimal_days
        )
        week = min(week, new_year_week - 1)
        days = -offset + (dow - 1) + (week - 1) * 7
        return date.plus(days, ChronoUnit.DAYS)

    # ------------------------------------------------------------------
    # TemporalField
    # ------------------------------------------------------------------

    def get_from(self, temporal: TemporalAccessor) -> int:
        unit = self._range_unit
        if unit is ChronoUnit.WEEKS:
            return self.localized_day_of_week(temporal)
        if unit is ChronoUnit.MONTHS:
            return self._localized_week_of_month(temporal)
        if unit is ChronoUnit.YEARS:
            return self._localized_week_of_year(temporal)
        if unit is IsoFields.WEEK_BASED_YEARS:
            return self._localized_week_of_week_based_year(temporal)
        return self._localized_week_based_year(temporal)

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        if not temporal.is_supported(ChronoField.DAY_OF_WEEK):
            return False
        unit = self._range_unit
        if unit is ChronoUnit.WEEKS:
            return True
        if unit is ChronoUnit.MONTHS:
            return temporal.is_supported(ChronoField.DAY_OF_MONTH)
        if unit is ChronoUnit.YEARS or unit is IsoFields.WEEK_BASED_YEARS:
            return temporal.is_supported(ChronoField.DAY_OF_YEAR)
        return temporal.is_supported(ChronoField.YEAR)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        unit = self._range_unit
        if unit is ChronoUnit.WEEKS:
            return self._range
        if unit is ChronoUnit.MONTHS:
            return self._range_by_week(temporal, ChronoField.DAY_OF_MONTH)
        if unit is ChronoUnit.YEARS:
            return self._range_by_week(temporal, ChronoField.DAY_OF_YEAR)
        if unit is IsoFields.WEEK_BASED_YEARS:
            return self._range_week_of_week_based_year(temporal)
        return ChronoField.YEAR.range()

    def _range_by_week(self, temporal: TemporalAccessor, field: ChronoField) -> ValueRange:
        dow = self.localized_day_of_week(temporal)
        offset = self.start_of_week_offset(temporal.get(field), dow)
        field_range = temporal.range(field)
        return ValueRange.of(
            self.compute_week(offset, field_range.minimum),
            self.compute_week(offset, field_range.maximum),
        )

    def _range_week_of_week_based_year(self, temporal: TemporalAccessor) -> ValueRange:
        if not temporal.is_supported(ChronoField.DAY_OF_YEAR):
            return _WEEK_OF_YEAR_RANGE
        dow = self.localized_day_of_week(temporal)
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self.start_of_week_offset(doy, dow)
        week = self.compute_week(offset, doy)
        if week == 0:
            # Recompute from a day in the previous year
            date = Chronology.from_temporal(temporal).date_from(temporal)
            return self._range_week_of_week_based_year(
                date.minus(doy + 7, ChronoUnit.DAYS)
            )
        year_length = temporal.range(ChronoField.DAY_OF_YEAR).maximum
        new_year_week = self.compute_week(
            offset, year_length + self._week_def.minimal_days
        )
        if week >= new_year_week:
            # Recompute from a day in the following year
            date = Chronology.from_temporal(temporal).date_from(temporal)
            return self._range_week_of_week_based_year(
                date.plus(year_length - doy + 1 + 7, ChronoUnit.DAYS)
            )
        return ValueRange.of(1, new_year_week - 1)

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        """Set this field, keeping the other localized fields.

        Setting the week-based-year keeps the week and day-of-week, with
        the week clamped to the last week of the new year. Every other
        field moves the temporal by the difference in its base unit.
        """
        new_value = self._range.check_valid_int_value(new_value, self)
        current = temporal.get(self)
        if new_value == current:
            return temporal
        if self._range_unit is ChronoUnit.FOREVER:
            dow = temporal.get(self._week_def.day_of_week)
            week = temporal.get(self._week_def.week_of_week_based_year)
            date = self.of_week_based_year(
                Chronology.from_temporal(temporal), new_value, week, dow
            )
            return temporal.adjust(date)
        return temporal.plus(new_value - current, self._base_unit)

    def resolve(self, context: ResolutionContext) -> Date | None:
        """Resolve this field together with the fields it combines with.

        The localized day-of-week always becomes the ISO DAY_OF_WEEK first.
        The other fields need DAY_OF_WEEK plus YEAR and MONTH_OF_YEAR
        (week-of-month), YEAR (week-of-year), or both week-based-year
        fields of this week definition. Under the lenient style a
        day-of-week outside 1-7 is not rejected; its overflow moves the
        date by whole weeks.
        """
        values = context.field_values
        value = values[self]
        lenient = context.style is ResolverStyle.LENIENT
        if self._range_unit is ChronoUnit.WEEKS:
            if lenient:
                iso_dow = self._lenient_iso_dow(value)
            else:
                checked = self._range.check_valid_int_value(value, self)
                start_dow = self._week_def.first_day_of_week.value
                iso_dow = ((start_dow - 1) + (checked - 1)) % 7 + 1
            del values[self]
            context.add_field_value(ChronoField.DAY_OF_WEEK, iso_dow)
            return None

        if ChronoField.DAY_OF_WEEK not in values:
            return None
        if lenient:
            dow = self._lenient_localized_dow(values[ChronoField.DAY_OF_WEEK])
        else:
            iso_dow = ChronoField.DAY_OF_WEEK.check_valid_int_value(
                values[ChronoField.DAY_OF_WEEK]
            )
            dow = self._localized_dow(iso_dow)

        chronology = context.chronology
        if ChronoField.YEAR in values:
            year = ChronoField.YEAR.check_valid_int_value(values[ChronoField.YEAR])
            if (
                self._range_unit is ChronoUnit.MONTHS
                and ChronoField.MONTH_OF_YEAR in values
            ):
                month = values[ChronoField.MONTH_OF_YEAR]
                return self._resolve_week_of_month(
                    context, chronology, year, month, value, dow
                )
            if self._range_unit is ChronoUnit.YEARS:
                return self._resolve_week_of_year(context, chronology, year, value, dow)
        elif (
            self._range_unit is IsoFields.WEEK_BASED_YEARS
            or self._range_unit is ChronoUnit.FOREVER
        ) and (
            self._week_def.week_based_year in values
            and self._week_def.week_of_week_based_year in values
        ):
            return self._resolve_week_based_year(context, chronology, dow)
        return None

    def _resolve_week_of_month(
        self,
        context: ResolutionContext,
        chronology: IsoChronology,
        year: int,
        month: int,
        week: int,
        dow: int,
    ) -> Date:
        if context.style is ResolverStyle.LENIENT:
            date = chronology.date(year, 1, 1).plus(
                subtract_exact(month, 1), ChronoUnit.MONTHS
            )
            weeks = subtract_exact(week, self._localized_week_of_month(date))
            days = dow - self.localized_day_of_week(date)
            date = date.plus(add_exact(multiply_exact(weeks, 7), days), ChronoUnit.DAYS)
        else:
            month = ChronoField.MONTH_OF_YEAR.check_valid_int_value(month)
            date = chronology.date(year, month, 1)
            week = self._range.check_valid_int_value(week, self)
            weeks = week - self._localized_week_of_month(date)
            days = dow - self.localized_day_of_week(date)
            date = date.plus(weeks * 7 + days, ChronoUnit.DAYS)
            if (
                context.style is ResolverStyle.STRICT
                and date.get_long(ChronoField.MONTH_OF_YEAR) != month
            ):
                logger.debug("strict resolver rejected %s for %s", date, self)
                raise DateTimeError(
                    "Strict mode rejected resolved date as it is in a different month"
                )
        values = context.field_values
        del values[self]
        del values[ChronoField.YEAR]
        del values[ChronoField.MONTH_OF_YEAR]
        del values[ChronoField.DAY_OF_WEEK]
        return date

    def _resolve_week_of_year(
        self,
        context: ResolutionContext,
        chronology: IsoChronology,
        year: int,
        week: int,
        dow: int,
    ) -> Date:
        date = chronology.date(year, 1, 1)
        if context.style is ResolverStyle.LENIENT:
            weeks = subtract_exact(week, self._localized_week_of_year(date))
            days = dow - self.localized_day_of_week(date)
            date = date.plus(add_exact(multiply_exact(weeks, 7), days), ChronoUnit.DAYS)
        else:
            week = self._range.check_valid_int_value(week, self)
            weeks = week - self._localized_week_of_year(date)
            days = dow - self.localized_day_of_week(date)
            date = date.plus(weeks * 7 + days, ChronoUnit.DAYS)
            if (
                context.style is ResolverStyle.STRICT
                and date.get_long(ChronoField.YEAR) != year
            ):
                logger.debug("strict resolver rejected %s for %s", date, self)
                raise DateTimeError(
                    "Strict mode rejected resolved date as it is in a different year"
                )
        values = context.field_values
        del values[self]
        del values[ChronoField.YEAR]
        del values[ChronoField.DAY_OF_WEEK]
        return date

    def _resolve_week_based_year(
        self,
        context: ResolutionContext,
        chronology: IsoChronology,
        dow: int,
    ) -> Date:
        values = context.field_values
        wby_field = self._week_def.week_based_year
        wowby_field = self._week_def.week_of_week_based_year
        wby = wby_field.range().check_valid_int_value(values[wby_field], wby_field)
        if context.style is ResolverStyle.LENIENT:
            date = self.of_week_based_year(chronology, wby, 1, dow)
            weeks = subtract_exact(values[wowby_field], 1)
            date = date.plus(weeks, ChronoUnit.WEEKS)
        else:
            wowby = wowby_field.range().check_valid_int_value(
                values[wowby_field], wowby_field
            )
            date = self.of_week_based_year(chronology, wby, wowby, dow)
            if (
                context.style is ResolverStyle.STRICT
                and self._localized_week_based_year(date) != wby
            ):
                logger.debug("strict resolver rejected %s for %s", date, self)
                raise DateTimeError(
                    "Strict mode rejected resolved date as it is in a "
                    "different week-based-year"
                )
        del values[self]
        values.pop(wby_field, None)
        values.pop(wowby_field, None)
        del values[ChronoField.DAY_OF_WEEK]
        return date

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComputedDayOfField):
            return NotImplemented
        return self._week_def == other._week_def and self._name == other._name

    def __hash__(self) -> int:
        return hash((self._week_def, self._name))

    def __repr__(self) -> str:
        return f"{self._name}[{self._week_def}]"

    def __str__(self) -> str:
        return f"{self._name}[{self._week_def}]"


WeekFields.ISO = WeekFields.of(DayOfWeek.MONDAY, 4)
WeekFields.SUNDAY_START = WeekFields.of(DayOfWeek.SUNDAY, 1)


__all__ = ["WeekFields", "ComputedDayOfField"]
