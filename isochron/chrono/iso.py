"""The ISO calendar system.

This module provides IsoChronology and its singleton ISO. The ISO
calendar is the proleptic Gregorian calendar: today's leap year rules
applied to every year, with year 0 as 1 BCE.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from isochron._internal.calendar import is_leap_year
from isochron._internal.validation import subtract_exact, trunc_div, trunc_mod
from isochron.core.date import Date
from isochron.core.day_of_week import DayOfWeek
from isochron.core.month import Month
from isochron.errors import DateTimeError
from isochron.temporal.adjusters import TemporalAdjusters
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.resolver import ResolverStyle
from isochron.units.chrono_unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.temporal.interfaces import TemporalAccessor
    from isochron.temporal.resolver import ResolutionContext
    from isochron.temporal.value_range import ValueRange

logger = logging.getLogger(__name__)

_YEAR = ChronoField.YEAR
_MONTH_OF_YEAR = ChronoField.MONTH_OF_YEAR
_DAY_OF_MONTH = ChronoField.DAY_OF_MONTH
_DAY_OF_YEAR = ChronoField.DAY_OF_YEAR
_DAY_OF_WEEK = ChronoField.DAY_OF_WEEK


class Chronology:
    """A calendar system."""

    @staticmethod
    def from_temporal(temporal: TemporalAccessor) -> IsoChronology:
        """Return the calendar system of temporal, ISO if it reports none."""
        from isochron.temporal import queries

        chronology = temporal.query(queries.chronology)
        return chronology if chronology is not None else ISO

    @property
    def id(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return self.id

    def __str__(self) -> str:
        return self.id


class IsoChronology(Chronology):
    """The ISO calendar system.

    Use the module level ISO singleton rather than constructing this class.

    Examples:
        >>> ISO.date(2024, 1, 15)
        Date(2024, 1, 15)
        >>> ISO.is_leap_year(1900)
        False
    """

    @property
    def id(self) -> str:
        return "ISO"

    @property
    def calendar_type(self) -> str:
        return "iso8601"

    def is_leap_year(self, proleptic_year: int) -> bool:
        return is_leap_year(proleptic_year)

    def date(self, proleptic_year: int, month: int, day_of_month: int) -> Date:
        return Date(proleptic_year, month, day_of_month)

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> Date:
        return Date.of_year_day(proleptic_year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> Date:
        return Date.of_epoch_day(epoch_day)

    def date_from(self, temporal: TemporalAccessor) -> Date:
        return Date.from_temporal(temporal)

    def range(self, field: ChronoField) -> ValueRange:
        return field.range()

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_date(self, context: ResolutionContext) -> Date | None:
        """Resolve the ChronoFields of context into a date.

        Consumed fields are removed from ``context.field_values``.

        Returns:
            The date, or None if the fields do not determine one.

        Raises:
            DateTimeError: If the values are invalid for the resolver style
                or conflict with each other.
        """
        values = context.field_values
        if ChronoField.EPOCH_DAY in values:
            return self.date_epoch_day(values.pop(ChronoField.EPOCH_DAY))

        self._resolve_proleptic_month(context)
        self._resolve_year_of_era(context)

        if _YEAR in values:
            if _MONTH_OF_YEAR in values:
                if _DAY_OF_MONTH in values:
                    return self._resolve_ymd(context)
                if ChronoField.ALIGNED_WEEK_OF_MONTH in values:
                    if ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH in values:
                        return self._resolve_ymaa(context)
                    if _DAY_OF_WEEK in values:
                        return self._resolve_ymad(context)
            if _DAY_OF_YEAR in values:
                return self._resolve_yd(context)
            if ChronoField.ALIGNED_WEEK_OF_YEAR in values:
                if ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR in values:
                    return self._resolve_yaa(context)
                if _DAY_OF_WEEK in values:
                    return self._resolve_yad(context)
        return None

    def _resolve_proleptic_month(self, context: ResolutionContext) -> None:
        proleptic_month = context.field_values.pop(ChronoField.PROLEPTIC_MONTH, None)
        if proleptic_month is None:
            return
        if context.style is not ResolverStyle.LENIENT:
            ChronoField.PROLEPTIC_MONTH.check_valid_value(proleptic_month)
        context.add_field_value(_MONTH_OF_YEAR, proleptic_month % 12 + 1)
        context.add_field_value(_YEAR, proleptic_month // 12)

    def _resolve_year_of_era(self, context: ResolutionContext) -> None:
        values = context.field_values
        year_of_era = values.pop(ChronoField.YEAR_OF_ERA, None)
        if year_of_era is None:
            if ChronoField.ERA in values:
                ChronoField.ERA.check_valid_value(values[ChronoField.ERA])
            return
        if context.style is not ResolverStyle.LENIENT:
            ChronoField.YEAR_OF_ERA.check_valid_value(year_of_era)
        era = values.pop(ChronoField.ERA, None)
        if era is None:
            year = values.get(_YEAR)
            if context.style is ResolverStyle.STRICT:
                # Without an era only a year can say which era is meant
                if year is not None:
                    context.add_field_value(
                        _YEAR,
                        year_of_era if year > 0 else subtract_exact(1, year_of_era),
                    )
                else:
                    values[ChronoField.YEAR_OF_ERA] = year_of_era
            else:
                context.add_field_value(
                    _YEAR,
                    year_of_era
                    if year is None or year > 0
                    else subtract_exact(1, year_of_era),
                )
        elif era == 1:
            context.add_field_value(_YEAR, year_of_era)
        elif era == 0:
            context.add_field_value(_YEAR, subtract_exact(1, year_of_era))
        else:
            raise DateTimeError(f"Invalid value for era: {era}")

    def _resolve_ymd(self, context: ResolutionContext) -> Date:
        values = context.field_values
        year = _YEAR.check_valid_int_value(values.pop(_YEAR))
        if context.style is ResolverStyle.LENIENT:
            months = subtract_exact(values.pop(_MONTH_OF_YEAR), 1)
            days = subtract_exact(values.pop(_DAY_OF_MONTH), 1)
            return self.date(year, 1, 1).plus_months(months).plus_days(days)
        month = _MONTH_OF_YEAR.check_valid_int_value(values.pop(_MONTH_OF_YEAR))
        day = _DAY_OF_MONTH.check_valid_int_value(values.pop(_DAY_OF_MONTH))
        if context.style is ResolverStyle.SMART:
            day = min(day, Month(month).length(is_leap_year(year)))
        return self.date(year, month, day)

    def _resolve_yd(self, context: ResolutionContext) -> Date:
        values = context.field_values
        year = _YEAR.check_valid_int_value(values.pop(_YEAR))
        if context.style is ResolverStyle.LENIENT:
            days = subtract_exact(values.pop(_DAY_OF_YEAR), 1)
            return self.date_year_day(year, 1).plus_days(days)
        day_of_year = _DAY_OF_YEAR.check_valid_int_value(values.pop(_DAY_OF_YEAR))
        return self.date_year_day(year, day_of_year)

    def _resolve_ymaa(self, context: ResolutionContext) -> Date:
        values = context.field_values
        year = _YEAR.check_valid_int_value(values.pop(_YEAR))
        if context.style is ResolverStyle.LENIENT:
            months = subtract_exact(values.pop(_MONTH_OF_YEAR), 1)
            weeks = subtract_exact(values.pop(ChronoField.ALIGNED_WEEK_OF_MONTH), 1)
            days = subtract_exact(
                values.pop(ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH), 1
            )
            return (
                self.date(year, 1, 1)
                .plus(months, ChronoUnit.MONTHS)
                .plus(weeks, ChronoUnit.WEEKS)
                .plus(days, ChronoUnit.DAYS)
            )
        month = _MONTH_OF_YEAR.check_valid_int_value(values.pop(_MONTH_OF_YEAR))
        week = ChronoField.ALIGNED_WEEK_OF_MONTH.check_valid_int_value(
            values.pop(ChronoField.ALIGNED_WEEK_OF_MONTH)
        )
        day = ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH.check_valid_int_value(
            values.pop(ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH)
        )
        date = self.date(year, month, 1).plus_days((week - 1) * 7 + (day - 1))
        _check_strict_month(context, date, month)
        return date

    def _resolve_ymad(self, context: ResolutionContext) -> Date:
        values = context.field_values
        year = _YEAR.check_valid_int_value(values.pop(_YEAR))
        if context.style is ResolverStyle.LENIENT:
            months = subtract_exact(values.pop(_MONTH_OF_YEAR), 1)
            weeks = subtract_exact(values.pop(ChronoField.ALIGNED_WEEK_OF_MONTH), 1)
            day_of_week = values.pop(_DAY_OF_WEEK)
            return _resolve_aligned(self.date(year, 1, 1), months, weeks, day_of_week)
        month = _MONTH_OF_YEAR.check_valid_int_value(values.pop(_MONTH_OF_YEAR))
        week = ChronoField.ALIGNED_WEEK_OF_MONTH.check_valid_int_value(
            values.pop(ChronoField.ALIGNED_WEEK_OF_MONTH)
        )
        day_of_week = _DAY_OF_WEEK.check_valid_int_value(values.pop(_DAY_OF_WEEK))
        date = (
            self.date(year, month, 1)
            .plus_days((week - 1) * 7)
            .adjust(TemporalAdjusters.next_or_same(DayOfWeek(day_of_week)))
        )
        _check_strict_month(context, date, month)
        return date

    def _resolve_yaa(self, context: ResolutionContext) -> Date:
        values = context.field_values
        year = _YEAR.check_valid_int_value(values.pop(_YEAR))
        if context.style is ResolverStyle.LENIENT:
            weeks = subtract_exact(values.pop(ChronoField.ALIGNED_WEEK_OF_YEAR), 1)
            days = subtract_exact(
                values.pop(ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR), 1
            )
            return self.date_year_day(year, 1).plus_weeks(weeks).plus_days(days)
        week = ChronoField.ALIGNED_WEEK_OF_YEAR.check_valid_int_value(
            values.pop(ChronoField.ALIGNED_WEEK_OF_YEAR)
        )
        day = ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR.check_valid_int_value(
            values.pop(ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR)
        )
        date = self.date_year_day(year, 1).plus_days((week - 1) * 7 + (day - 1))
        _check_strict_year(context, date, year)
        return date

    def _resolve_yad(self, context: ResolutionContext) -> Date:
        values = context.field_values
        year = _YEAR.check_valid_int_value(values.pop(_YEAR))
        if context.style is ResolverStyle.LENIENT:
            weeks = subtract_exact(values.pop(ChronoField.ALIGNED_WEEK_OF_YEAR), 1)
            day_of_week = values.pop(_DAY_OF_WEEK)
            return _resolve_aligned(self.date_year_day(year, 1), 0, weeks, day_of_week)
        week = ChronoField.ALIGNED_WEEK_OF_YEAR.check_valid_int_value(
            values.pop(ChronoField.ALIGNED_WEEK_OF_YEAR)
        )
        day_of_week = _DAY_OF_WEEK.check_valid_int_value(values.pop(_DAY_OF_WEEK))
        date = (
            self.date_year_day(year, 1)
            .plus_days((week - 1) * 7)
            .adjust(TemporalAdjusters.next_or_same(DayOfWeek(day_of_week)))
        )
        _check_strict_year(context, date, year)
        return date


def _resolve_aligned(base: Date, months: int, weeks: int, day_of_week: int) -> Date:
    """Apply lenient month, week and day-of-week offsets to base."""
    date = base.plus_months(months).plus_weeks(weeks)
    if day_of_week > 7:
        date = date.plus_weeks(trunc_div(day_of_week - 1, 7))
        day_of_week = trunc_mod(day_of_week - 1, 7) + 1
    elif day_of_week < 1:
        date = date.plus_weeks(trunc_div(subtract_exact(day_of_week, 7), 7))
        day_of_week = (day_of_week + 6) % 7 + 1
    return date.adjust(TemporalAdjusters.next_or_same(DayOfWeek(day_of_week)))


def _check_strict_month(context: ResolutionContext, date: Date, month: int) -> None:
    if context.style is ResolverStyle.STRICT and date.month != month:
        logger.debug("strict resolver rejected %s, expected month %d", date, month)
        raise DateTimeError(
            "Strict mode rejected resolved date as it is in a different month"
        )


def _check_strict_year(context: ResolutionContext, date: Date, year: int) -> None:
    if context.style is ResolverStyle.STRICT and date.year != year:
        logger.debug("strict resolver rejected %s, expected year %d", date, year)
        raise DateTimeError(
            "Strict mode rejected resolved date as it is in a different year"
        )


ISO = IsoChronology()


__all__ = ["Chronology", "IsoChronology", "ISO"]
