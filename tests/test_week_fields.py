"""Tests for WeekFields localized week numbering."""

from __future__ import annotations

import logging

import pytest

from isochron.core.date import Date
from isochron.core.day_of_week import DayOfWeek
from isochron.errors import DateTimeError, ValidationError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.iso_fields import IsoFields
from isochron.temporal.resolver import ResolverStyle, resolve
from isochron.temporal.value_range import ValueRange
from isochron.temporal.week_fields import WeekFields
from isochron.units.chrono_unit import ChronoUnit

ISO = WeekFields.ISO
US = WeekFields.SUNDAY_START


class TestWeekDefinition:
    """Tests for creating and comparing week definitions."""

    def test_constants(self) -> None:
        """Test the ISO and Sunday start definitions."""
        assert ISO.first_day_of_week is DayOfWeek.MONDAY
        assert ISO.minimal_days == 4
        assert US.first_day_of_week is DayOfWeek.SUNDAY
        assert US.minimal_days == 1

    def test_of_is_cached(self) -> None:
        """Test of() returns one instance per definition."""
        assert WeekFields.of(DayOfWeek.MONDAY, 4) is ISO
        assert WeekFields.of(DayOfWeek.SUNDAY, 1) is US
        assert WeekFields.of(DayOfWeek.SATURDAY, 2) is WeekFields.of(DayOfWeek.SATURDAY, 2)

    @pytest.mark.parametrize("minimal_days", [0, 8, -1])
    def test_invalid_minimal_days(self, minimal_days: int) -> None:
        """Test minimal days must be 1-7."""
        with pytest.raises(ValueError, match="Minimal number of days is invalid"):
            WeekFields.of(DayOfWeek.MONDAY, minimal_days)

    def test_constructor_uses_cache(self) -> None:
        """Test calling the class returns the cached definition."""
        assert WeekFields(DayOfWeek.MONDAY, 4) is ISO
        assert WeekFields(DayOfWeek.SUNDAY, 1) is US
        assert WeekFields(DayOfWeek.FRIDAY, 3) is WeekFields.of(DayOfWeek.FRIDAY, 3)
        with pytest.raises(ValueError, match="Minimal number of days is invalid"):
            WeekFields(DayOfWeek.MONDAY, 0)

    def test_equality(self) -> None:
        """Test definitions compare by their two values."""
        assert WeekFields.of(DayOfWeek.MONDAY, 4) == ISO
        assert ISO != US
        assert ISO != WeekFields.of(DayOfWeek.MONDAY, 1)
        assert hash(WeekFields.of(DayOfWeek.MONDAY, 4)) == hash(ISO)

    def test_representation(self) -> None:
        """Test str and repr of definitions and fields."""
        assert str(ISO) == "WeekFields[MONDAY,4]"
        assert repr(US) == "WeekFields.of(DayOfWeek.SUNDAY, 1)"
        assert str(ISO.week_of_year) == "WeekOfYear[WeekFields[MONDAY,4]]"
        assert ISO.week_of_year.week_def is ISO

    def test_field_equality(self) -> None:
        """Test fields of equal definitions are equal."""
        other = WeekFields(DayOfWeek.MONDAY, 4)
        assert other.week_of_month == ISO.week_of_month
        assert other.week_of_month != ISO.week_of_year
        assert hash(other.day_of_week) == hash(ISO.day_of_week)

    def test_field_metadata(self) -> None:
        """Test base and range units of the fields."""
        assert ISO.day_of_week.range_unit is ChronoUnit.WEEKS
        assert ISO.week_of_month.range_unit is ChronoUnit.MONTHS
        assert ISO.week_of_year.base_unit is ChronoUnit.WEEKS
        assert ISO.week_of_week_based_year.range_unit is IsoFields.WEEK_BASED_YEARS
        assert ISO.week_based_year.range_unit is ChronoUnit.FOREVER
        assert ISO.week_of_year.range() == ValueRange.of(0, 1, 52, 54)
        assert ISO.week_of_year.is_date_based()


class TestLocalizedValues:
    """Tests for reading localized week values."""

    def test_day_of_week(self) -> None:
        """Test day-of-week counts from the first day of the week."""
        sunday = Date(2008, 12, 28)
        assert sunday.get(ISO.day_of_week) == 7
        assert sunday.get(US.day_of_week) == 1
        assert Date(2008, 12, 29).get(US.day_of_week) == 2

    def test_iso_week_based_year(
        self, iso_week_dates: list[tuple[tuple[int, int, int], int, int]]
    ) -> None:
        """Test the ISO definition on dates around the turn of the year."""
        for ymd, week_based_year, week in iso_week_dates:
            d = Date(*ymd)
            assert d.get(ISO.week_based_year) == week_based_year, ymd
            assert d.get(ISO.week_of_week_based_year) == week, ymd

    def test_week_of_year_starts_at_zero(self) -> None:
        """Test days before week 1 are in week 0."""
        # 2010-01-01 is a Friday, only three days of that week are in 2010
        assert Date(2010, 1, 1).get(ISO.week_of_year) == 0
        assert Date(2010, 1, 4).get(ISO.week_of_year) == 1
        assert Date(2010, 1, 1).get(US.week_of_year) == 1

    def test_week_of_month(self) -> None:
        """Test week-of-month values."""
        # February 2024 starts on a Thursday
        assert Date(2024, 2, 1).get(ISO.week_of_month) == 1
        assert Date(2024, 2, 5).get(ISO.week_of_month) == 2
        assert Date(2024, 2, 29).get(ISO.week_of_month) == 5

    def test_sunday_start_week_based_year(self) -> None:
        """Test a one day first week puts late December in the next year."""
        # 2011-01-01 is a Saturday, so its week starts on 2010-12-26
        assert Date(2010, 12, 26).get(US.week_based_year) == 2011
        assert Date(2010, 12, 26).get(US.week_of_week_based_year) == 1
        assert Date(2010, 12, 25).get(US.week_based_year) == 2010

    def test_refined_ranges(self) -> None:
        """Test ranges in the context of a date."""
        assert Date(2024, 2, 15).range(ISO.week_of_month) == ValueRange.of(1, 5)
        assert Date(2009, 6, 1).range(ISO.week_of_week_based_year) == ValueRange.of(1, 53)
        assert Date(2010, 6, 1).range(ISO.week_of_week_based_year) == ValueRange.of(1, 52)
        assert Date(2024, 6, 1).range(ISO.day_of_week) == ValueRange.of(1, 7)

    def test_supported(self) -> None:
        """Test only values with a day-of-week support the fields."""
        assert Date(2024, 1, 1).is_supported(ISO.week_of_year)
        assert not DayOfWeek.MONDAY.is_supported(ISO.week_of_year)
        assert DayOfWeek.MONDAY.is_supported(ISO.day_of_week)


class TestLocalizedAdjustment:
    """Tests for setting localized week fields."""

    def test_with_day_of_week(self) -> None:
        """Test setting the localized day-of-week stays in the same week."""
        wednesday = Date(2024, 1, 10)
        assert wednesday.with_field(US.day_of_week, 1) == Date(2024, 1, 7)
        assert wednesday.with_field(ISO.day_of_week, 1) == Date(2024, 1, 8)

    def test_with_week_of_year(self) -> None:
        """Test setting the week moves by whole weeks."""
        assert Date(2024, 1, 10).with_field(ISO.week_of_year, 10) == Date(2024, 3, 6)

    def test_with_week_based_year(self) -> None:
        """Test week 53 is clamped in a 52 week year."""
        assert Date(2009, 12, 31).with_field(ISO.week_based_year, 2010) == (
            Date(2010, 12, 30)
        )
        assert Date(2008, 12, 29).with_field(ISO.week_based_year, 2010) == (
            Date(2010, 1, 4)
        )

    def test_with_same_value(self) -> None:
        """Test setting the current value returns the same date."""
        d = Date(2024, 1, 10)
        assert d.with_field(ISO.week_of_year, d.get(ISO.week_of_year)) is d

    def test_with_invalid_value(self) -> None:
        """Test values outside the outer range are rejected."""
        with pytest.raises(ValidationError):
            Date(2024, 1, 10).with_field(ISO.day_of_week, 8)


class TestLocalizedResolution:
    """Tests for resolving localized week fields."""

    def test_day_of_week_becomes_iso(self) -> None:
        """Test the localized day-of-week resolves to DAY_OF_WEEK."""
        context = resolve({US.day_of_week: 1})
        assert context.date is None
        assert context.field_values == {ChronoField.DAY_OF_WEEK: 7}

    def test_day_of_week_cross_checked(self) -> None:
        """Test the derived DAY_OF_WEEK is checked against the date."""
        values = {
            ChronoField.YEAR: 2024,
            ChronoField.MONTH_OF_YEAR: 1,
            ChronoField.DAY_OF_MONTH: 7,
            US.day_of_week: 1,
        }
        context = resolve(values)
        assert context.date == Date(2024, 1, 7)
        assert context.field_values == {}
        values[US.day_of_week] = 2
        with pytest.raises(DateTimeError, match="Conflict found"):
            resolve(values)

    def test_week_of_year(self) -> None:
        """Test year, week-of-year and day-of-week by style."""
        values = {ChronoField.YEAR: 2009, ISO.week_of_year: 1, ChronoField.DAY_OF_WEEK: 1}
        assert resolve(values, ResolverStyle.SMART).date == Date(2008, 12, 29)
        assert resolve(values, ResolverStyle.LENIENT).date == Date(2008, 12, 29)
        with pytest.raises(DateTimeError, match="different year"):
            resolve(values, ResolverStyle.STRICT)

    def test_week_of_year_inside_year(self) -> None:
        """Test a week fully inside the year."""
        values = {ChronoField.YEAR: 2009, ISO.week_of_year: 2, ChronoField.DAY_OF_WEEK: 3}
        context = resolve(values, ResolverStyle.STRICT)
        assert context.date == Date(2009, 1, 7)
        assert context.field_values == {}

    def test_week_of_month(self) -> None:
        """Test year, month, week-of-month and day-of-week."""
        values = {
            ChronoField.YEAR: 2024,
            ChronoField.MONTH_OF_YEAR: 1,
            ISO.week_of_month: 2,
            ChronoField.DAY_OF_WEEK: 3,
        }
        assert resolve(values).date == Date(2024, 1, 10)

    def test_week_of_month_strict(self) -> None:
        """Test week 0 of a month lands in the previous month."""
        values = {
            ChronoField.YEAR: 2024,
            ChronoField.MONTH_OF_YEAR: 2,
            ISO.week_of_month: 0,
            ChronoField.DAY_OF_WEEK: 1,
        }
        assert resolve(values, ResolverStyle.SMART).date == Date(2024, 1, 22)
        with pytest.raises(DateTimeError, match="different month"):
            resolve(values, ResolverStyle.STRICT)

    def test_week_based_year(self) -> None:
        """Test the localized week-based-year fields."""
        values = {
            ISO.week_based_year: 2009,
            ISO.week_of_week_based_year: 1,
            ChronoField.DAY_OF_WEEK: 1,
        }
        context = resolve(values, ResolverStyle.STRICT)
        assert context.date == Date(2008, 12, 29)
        assert context.field_values == {}

    def test_week_based_year_clamps_week(self) -> None:
        """Test week 53 of a 52 week year is clamped to week 52."""
        values = {
            ISO.week_based_year: 2010,
            ISO.week_of_week_based_year: 53,
            ChronoField.DAY_OF_WEEK: 1,
        }
        assert resolve(values).date == Date(2010, 12, 27)

    def test_week_based_year_lenient(self) -> None:
        """Test lenient weeks past the end of the year."""
        values = {
            ISO.week_based_year: 2010,
            ISO.week_of_week_based_year: 54,
            ChronoField.DAY_OF_WEEK: 1,
        }
        assert resolve(values, ResolverStyle.LENIENT).date == Date(2011, 1, 10)

    def test_week_of_month_lenient(self) -> None:
        """Test lenient month and week-of-month past their ranges."""
        values = {
            ChronoField.YEAR: 2024,
            ChronoField.MONTH_OF_YEAR: 14,
            ISO.week_of_month: 9,
            ChronoField.DAY_OF_WEEK: 3,
        }
        context = resolve(values, ResolverStyle.LENIENT)
        assert context.date == Date(2025, 4, 2)
        assert context.field_values == {}

    @pytest.mark.parametrize(
        ("day_of_week", "expected"),
        [(0, Date(2009, 1, 4)), (8, Date(2009, 1, 12)), (9, Date(2009, 1, 13))],
    )
    def test_lenient_iso_day_of_week(self, day_of_week: int, expected: Date) -> None:
        """Test a lenient DAY_OF_WEEK outside 1-7 moves into adjacent weeks."""
        values = {
            ChronoField.YEAR: 2009,
            ISO.week_of_year: 2,
            ChronoField.DAY_OF_WEEK: day_of_week,
        }
        assert resolve(values, ResolverStyle.LENIENT).date == expected
        iso_values = {
            IsoFields.WEEK_BASED_YEAR: 2009,
            IsoFields.WEEK_OF_WEEK_BASED_YEAR: 2,
            ChronoField.DAY_OF_WEEK: day_of_week,
        }
        assert resolve(iso_values, ResolverStyle.LENIENT).date == expected

    @pytest.mark.parametrize(
        ("day_of_week", "expected"),
        [(0, Date(2009, 1, 4)), (8, Date(2009, 1, 12)), (9, Date(2009, 1, 13))],
    )
    def test_lenient_localized_day_of_week_monday_start(
        self, day_of_week: int, expected: Date
    ) -> None:
        """Test a lenient localized day-of-week outside 1-7, Monday start."""
        values = {
            ChronoField.YEAR: 2009,
            ISO.week_of_year: 2,
            ISO.day_of_week: day_of_week,
        }
        context = resolve(values, ResolverStyle.LENIENT)
        assert context.date == expected
        assert context.field_values == {}

    @pytest.mark.parametrize(
        ("day_of_week", "expected"),
        [(0, Date(2009, 1, 3)), (8, Date(2009, 1, 11)), (9, Date(2009, 1, 12))],
    )
    def test_lenient_localized_day_of_week_sunday_start(
        self, day_of_week: int, expected: Date
    ) -> None:
        """Test a lenient localized day-of-week outside 1-7, Sunday start."""
        # Week 2 of 2009 runs from Sunday 4 January to Saturday 10 January
        values = {
            ChronoField.YEAR: 2009,
            US.week_of_year: 2,
            US.day_of_week: day_of_week,
        }
        context = resolve(values, ResolverStyle.LENIENT)
        assert context.date == expected
        assert context.field_values == {}

    def test_lenient_matches_smart_in_range(self) -> None:
        """Test lenient and smart agree for day-of-week values 1-7."""
        for day_of_week in range(1, 8):
            for field in (US.day_of_week, ChronoField.DAY_OF_WEEK):
                values = {ChronoField.YEAR: 2009, US.week_of_year: 2, field: day_of_week}
                smart = resolve(values, ResolverStyle.SMART).date
                assert resolve(values, ResolverStyle.LENIENT).date == smart

    def test_lenient_week_based_year_day_of_week(self) -> None:
        """Test a lenient day-of-week past the end of week 1."""
        values = {
            ISO.week_based_year: 2010,
            ISO.week_of_week_based_year: 1,
            ChronoField.DAY_OF_WEEK: 9,
        }
        assert resolve(values, ResolverStyle.LENIENT).date == Date(2010, 1, 12)

    @pytest.mark.parametrize("style", [ResolverStyle.STRICT, ResolverStyle.SMART])
    def test_day_of_week_out_of_range(self, style: ResolverStyle) -> None:
        """Test strict and smart reject a day-of-week outside 1-7."""
        values = {ChronoField.YEAR: 2009, ISO.week_of_year: 2, ChronoField.DAY_OF_WEEK: 9}
        with pytest.raises(ValidationError):
            resolve(values, style)
        localized = {ChronoField.YEAR: 2009, US.week_of_year: 2, US.day_of_week: 0}
        with pytest.raises(ValidationError):
            resolve(localized, style)

    def test_missing_day_of_week(self) -> None:
        """Test a week without a day-of-week stays unresolved."""
        context = resolve({ChronoField.YEAR: 2009, ISO.week_of_year: 1})
        assert context.date is None
        assert ISO.week_of_year in context.field_values


class TestWeekFieldLogging:
    """Tests for debug logging of week definitions."""

    def test_new_definition_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test creating a definition emits a debug record."""
        caplog.set_level(logging.DEBUG, logger="isochron")
        WeekFields.of(DayOfWeek.FRIDAY, 6)
        assert any(
            "creating week definition" in record.getMessage() for record in caplog.records
        )
