"""Tests for field resolution."""

from __future__ import annotations

import logging

import pytest

from isochron.chrono.iso import ISO
from isochron.core.date import Date
from isochron.errors import DateTimeError, ValidationError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import TemporalField
from isochron.temporal.resolver import (
    MAX_RESOLVE_ROUNDS,
    ResolutionContext,
    ResolverStyle,
    resolve,
)
from isochron.temporal.value_range import ValueRange
from isochron.units.chrono_unit import ChronoUnit

YEAR = ChronoField.YEAR
MONTH = ChronoField.MONTH_OF_YEAR
DAY = ChronoField.DAY_OF_MONTH


class _StuckField(TemporalField):
    """A field whose resolve() never consumes itself."""

    def __init__(self) -> None:
        self.calls = 0

    @property
    def base_unit(self) -> ChronoUnit:
        return ChronoUnit.DAYS

    @property
    def range_unit(self) -> ChronoUnit:
        return ChronoUnit.FOREVER

    def range(self) -> ValueRange:
        return ValueRange.of(0, 10)

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: object) -> bool:
        return False

    def resolve(self, context: ResolutionContext) -> Date:
        self.calls += 1
        return Date(2024, 1, 1)

    def __str__(self) -> str:
        return "Stuck"


class TestResolverStyle:
    """Tests for the ResolverStyle enum."""

    def test_members(self) -> None:
        """Test the three styles."""
        assert [s.name for s in ResolverStyle] == ["STRICT", "SMART", "LENIENT"]
        assert str(ResolverStyle.SMART) == "SMART"


class TestYearMonthDay:
    """Tests for resolving year, month and day-of-month."""

    def test_valid(self) -> None:
        """Test a valid date resolves in every style."""
        values = {YEAR: 2024, MONTH: 2, DAY: 29}
        for style in ResolverStyle:
            context = resolve(values, style)
            assert context.date == Date(2024, 2, 29)
            assert context.field_values == {}

    def test_input_not_modified(self) -> None:
        """Test the caller's mapping is copied."""
        values = {YEAR: 2024, MONTH: 2, DAY: 29}
        resolve(values)
        assert values == {YEAR: 2024, MONTH: 2, DAY: 29}

    def test_smart_clamps_day(self) -> None:
        """Test smart resolution clamps the day to the month length."""
        assert resolve({YEAR: 2024, MONTH: 2, DAY: 30}).date == Date(2024, 2, 29)
        assert resolve({YEAR: 2023, MONTH: 2, DAY: 31}).date == Date(2023, 2, 28)
        assert resolve({YEAR: 2024, MONTH: 4, DAY: 31}).date == Date(2024, 4, 30)

    def test_smart_rejects_out_of_range(self) -> None:
        """Test smart resolution still checks the outer range."""
        with pytest.raises(ValidationError):
            resolve({YEAR: 2024, MONTH: 2, DAY: 32})
        with pytest.raises(ValidationError):
            resolve({YEAR: 2024, MONTH: 13, DAY: 1})

    def test_strict_rejects_invalid_date(self) -> None:
        """Test strict resolution rejects February 30th."""
        with pytest.raises(DateTimeError, match="Invalid date 'February 30'"):
            resolve({YEAR: 2024, MONTH: 2, DAY: 30}, ResolverStyle.STRICT)

    def test_lenient_overflow(self) -> None:
        """Test lenient resolution applies excess values as deltas."""
        assert resolve({YEAR: 2008, MONTH: 15, DAY: 1}, ResolverStyle.LENIENT).date == (
            Date(2009, 3, 1)
        )
        assert resolve({YEAR: 2024, MONTH: 1, DAY: 0}, ResolverStyle.LENIENT).date == (
            Date(2023, 12, 31)
        )
        assert resolve({YEAR: 2024, MONTH: 2, DAY: 30}, ResolverStyle.LENIENT).date == (
            Date(2024, 3, 1)
        )


class TestOtherCombinations:
    """Tests for the other ISO field combinations."""

    def test_year_day(self) -> None:
        """Test year and day-of-year."""
        context = resolve({YEAR: 2024, ChronoField.DAY_OF_YEAR: 60})
        assert context.date == Date(2024, 2, 29)

    def test_year_day_lenient(self) -> None:
        """Test lenient day-of-year past the end of the year."""
        values = {YEAR: 2023, ChronoField.DAY_OF_YEAR: 366}
        assert resolve(values, ResolverStyle.LENIENT).date == Date(2024, 1, 1)
        with pytest.raises(DateTimeError):
            resolve(values, ResolverStyle.STRICT)

    def test_epoch_day(self) -> None:
        """Test EPOCH_DAY alone."""
        assert resolve({ChronoField.EPOCH_DAY: 19_723}).date == Date(2024, 1, 1)

    def test_proleptic_month(self) -> None:
        """Test PROLEPTIC_MONTH splits into year and month."""
        context = resolve({ChronoField.PROLEPTIC_MONTH: 2024 * 12 + 1, DAY: 15})
        assert context.date == Date(2024, 2, 15)
        assert context.field_values == {}

    def test_proleptic_month_conflict(self) -> None:
        """Test PROLEPTIC_MONTH must agree with an explicit year."""
        with pytest.raises(DateTimeError, match="Conflict found"):
            resolve({ChronoField.PROLEPTIC_MONTH: 2024 * 12, YEAR: 2023, DAY: 1})

    def test_year_of_era(self) -> None:
        """Test YEAR_OF_ERA with and without ERA."""
        assert resolve({ChronoField.YEAR_OF_ERA: 2024, MONTH: 1, DAY: 1}).date == (
            Date(2024, 1, 1)
        )
        values = {ChronoField.ERA: 0, ChronoField.YEAR_OF_ERA: 44, MONTH: 3, DAY: 15}
        assert resolve(values).date == Date(-43, 3, 15)

    def test_year_of_era_strict_without_era(self) -> None:
        """Test strict resolution keeps a lone YEAR_OF_ERA unresolved."""
        context = resolve(
            {ChronoField.YEAR_OF_ERA: 2024, MONTH: 1, DAY: 1}, ResolverStyle.STRICT
        )
        assert context.date is None
        assert context.field_values[ChronoField.YEAR_OF_ERA] == 2024

    def test_invalid_era(self) -> None:
        """Test an era other than 0 or 1."""
        with pytest.raises(DateTimeError):
            resolve({ChronoField.ERA: 2, ChronoField.YEAR_OF_ERA: 1}, ResolverStyle.LENIENT)

    def test_aligned_week_of_month(self) -> None:
        """Test year, month, aligned week and aligned day."""
        values = {
            YEAR: 2024,
            MONTH: 1,
            ChronoField.ALIGNED_WEEK_OF_MONTH: 2,
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: 3,
        }
        assert resolve(values).date == Date(2024, 1, 10)

    def test_aligned_week_of_month_strict(self) -> None:
        """Test strict rejection of an aligned week past the month end."""
        values = {
            YEAR: 2023,
            MONTH: 2,
            ChronoField.ALIGNED_WEEK_OF_MONTH: 5,
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: 1,
        }
        assert resolve(values).date == Date(2023, 3, 1)
        with pytest.raises(DateTimeError, match="different month"):
            resolve(values, ResolverStyle.STRICT)

    def test_aligned_week_of_year_day_of_week(self) -> None:
        """Test year, aligned week-of-year and day-of-week."""
        values = {
            YEAR: 2024,
            ChronoField.ALIGNED_WEEK_OF_YEAR: 2,
            ChronoField.DAY_OF_WEEK: 5,
        }
        assert resolve(values).date == Date(2024, 1, 12)


class TestCrossCheck:
    """Tests for checking leftover fields against the resolved date."""

    def test_matching_fields_removed(self) -> None:
        """Test fields that agree with the date are consumed."""
        context = resolve({YEAR: 2024, MONTH: 1, DAY: 1, ChronoField.DAY_OF_WEEK: 1})
        assert context.date == Date(2024, 1, 1)
        assert context.field_values == {}

    def test_mismatch(self) -> None:
        """Test a field that disagrees with the date."""
        with pytest.raises(DateTimeError, match="Conflict found"):
            resolve({YEAR: 2024, MONTH: 1, DAY: 1, ChronoField.DAY_OF_WEEK: 2})

    def test_unresolved_fields_stay(self) -> None:
        """Test fields that do not make a date are left alone."""
        context = resolve({YEAR: 2024, MONTH: 1})
        assert context.date is None
        assert context.field_values == {YEAR: 2024, MONTH: 1}


class TestResolutionContext:
    """Tests for the ResolutionContext helpers."""

    def test_add_field_value(self) -> None:
        """Test adding the same value twice is allowed."""
        context = ResolutionContext({}, ISO)
        context.add_field_value(YEAR, 2024)
        context.add_field_value(YEAR, 2024)
        assert context.field_values == {YEAR: 2024}

    def test_add_conflicting_value(self) -> None:
        """Test adding a different value raises."""
        context = ResolutionContext({YEAR: 2024}, ISO)
        with pytest.raises(DateTimeError, match="Conflict found"):
            context.add_field_value(YEAR, 2023)

    def test_update_date_conflict(self) -> None:
        """Test two different resolved dates."""
        context = ResolutionContext({}, ISO)
        context.update_date(Date(2024, 1, 1))
        context.update_date(Date(2024, 1, 1))
        with pytest.raises(DateTimeError, match="two different dates"):
            context.update_date(Date(2024, 1, 2))

    def test_defaults(self) -> None:
        """Test the default style and date."""
        context = ResolutionContext({}, ISO)
        assert context.style is ResolverStyle.SMART
        assert context.date is None


class TestMisbehavingField:
    """Tests for fields that never finish resolving."""

    def test_round_limit(self) -> None:
        """Test resolution gives up after a bounded number of rounds."""
        field = _StuckField()
        with pytest.raises(DateTimeError, match="incorrectly implemented resolve"):
            resolve({field: 1})
        assert field.calls == MAX_RESOLVE_ROUNDS


class TestResolverLogging:
    """Tests for debug logging during resolution."""

    def test_debug_records(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test resolve() logs its input and outcome."""
        caplog.set_level(logging.DEBUG, logger="isochron")
        resolve({YEAR: 2024, MONTH: 2, DAY: 30})
        messages = [record.getMessage() for record in caplog.records]
        assert "resolving 3 field values with SMART resolver" in messages
        assert "resolved to 2024-02-29 with 0 field values left" in messages
