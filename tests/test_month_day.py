"""Tests for the MonthDay class."""

from __future__ import annotations

import pytest

from isochron.core.date import Date
from isochron.core.month import Month
from isochron.core.month_day import MonthDay
from isochron.errors import DateTimeError, UnsupportedTemporalTypeError, ValidationError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.value_range import ValueRange


class TestMonthDayConstruction:
    """Tests for MonthDay construction."""

    def test_every_valid_day(self) -> None:
        """Test every month and day of a leap year is a valid month-day."""
        for month in Month:
            for day in range(1, month.max_length() + 1):
                md = MonthDay(month, day)
                assert md.month is month
                assert md.day == day

    def test_day_past_month_end(self) -> None:
        """Test April 31st is never valid."""
        with pytest.raises(ValidationError, match="value 31 is not valid for month APRIL"):
            MonthDay(4, 31)

    def test_february_30(self) -> None:
        """Test February 30th is never valid."""
        with pytest.raises(ValidationError):
            MonthDay(2, 30)

    @pytest.mark.parametrize(("month", "day"), [(0, 1), (13, 1), (1, 0), (1, 32)])
    def test_out_of_range(self, month: int, day: int) -> None:
        """Test values outside the field ranges."""
        with pytest.raises(ValidationError):
            MonthDay(month, day)

    def test_from_temporal(self) -> None:
        """Test obtaining a month-day from a date."""
        assert MonthDay.from_temporal(Date(2024, 12, 25)) == MonthDay(12, 25)
        with pytest.raises(DateTimeError, match="Unable to obtain MonthDay"):
            MonthDay.from_temporal(Month.MAY)


class TestMonthDayYears:
    """Tests for combining with years."""

    def test_is_valid_year(self) -> None:
        """Test only February 29th depends on the year."""
        assert MonthDay(2, 29).is_valid_year(2024)
        assert not MonthDay(2, 29).is_valid_year(2023)
        assert MonthDay(2, 28).is_valid_year(2023)

    def test_at_year(self) -> None:
        """Test February 29th becomes the 28th in a non-leap year."""
        assert MonthDay(2, 29).at_year(2024) == Date(2024, 2, 29)
        assert MonthDay(2, 29).at_year(2023) == Date(2023, 2, 28)
        assert MonthDay(12, 25).at_year(2023) == Date(2023, 12, 25)

    def test_with_month_clamps(self) -> None:
        """Test changing the month clamps the day."""
        assert MonthDay(3, 31).with_month(4) == MonthDay(4, 30)
        assert MonthDay(3, 31).with_month(2) == MonthDay(2, 29)
        md = MonthDay(3, 31)
        assert md.with_month(3) is md

    def test_with_day_of_month(self) -> None:
        """Test changing the day."""
        assert MonthDay(3, 31).with_day_of_month(1) == MonthDay(3, 1)
        with pytest.raises(ValidationError):
            MonthDay(4, 1).with_day_of_month(31)

    def test_adjust_into(self) -> None:
        """Test a month-day used as an adjuster clamps to the month."""
        assert Date(2023, 1, 31).adjust(MonthDay(2, 29)) == Date(2023, 2, 28)
        assert Date(2024, 1, 1).adjust(MonthDay(2, 29)) == Date(2024, 2, 29)


class TestMonthDayFields:
    """Tests for field access."""

    def test_get(self) -> None:
        """Test the two supported fields."""
        md = MonthDay(12, 3)
        assert md.get(ChronoField.MONTH_OF_YEAR) == 12
        assert md.get(ChronoField.DAY_OF_MONTH) == 3
        assert not md.is_supported(ChronoField.YEAR)
        with pytest.raises(UnsupportedTemporalTypeError):
            md.get(ChronoField.YEAR)

    def test_day_range(self) -> None:
        """Test the day range depends on the month."""
        assert MonthDay(2, 1).range(ChronoField.DAY_OF_MONTH) == ValueRange.of(1, 28, 29)
        assert MonthDay(4, 1).range(ChronoField.DAY_OF_MONTH) == ValueRange.of(1, 30, 30)


class TestMonthDayComparison:
    """Tests for comparison and representation."""

    def test_ordering(self) -> None:
        """Test month-days order by month then day."""
        assert MonthDay(1, 31) < MonthDay(2, 1)
        assert MonthDay(12, 25).is_after(MonthDay(12, 24))
        assert MonthDay(1, 1).is_before(MonthDay(1, 2))

    def test_equality(self) -> None:
        """Test equality and hashing."""
        assert MonthDay(12, 25) == MonthDay(12, 25)
        assert len({MonthDay(12, 25), MonthDay(12, 25), MonthDay(12, 24)}) == 2

    def test_representation(self) -> None:
        """Test str and repr."""
        assert str(MonthDay(12, 3)) == "--12-03"
        assert repr(MonthDay(2, 29)) == "MonthDay(2, 29)"
