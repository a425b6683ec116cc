"""Tests for ChronoUnit, Duration and IsoEra."""

from __future__ import annotations

import pytest

from isochron.core.date import Date
from isochron.errors import UnsupportedTemporalTypeError, ValidationError
from isochron.units.chrono_unit import ChronoUnit
from isochron.units.duration import Duration
from isochron.units.era import IsoEra


class TestChronoUnitClassification:
    """Tests for date based, time based and estimated units."""

    def test_time_based_units(self) -> None:
        """Test that NANOS through HALF_DAYS are time based."""
        for unit in (ChronoUnit.NANOS, ChronoUnit.SECONDS, ChronoUnit.HALF_DAYS):
            assert unit.is_time_based()
            assert not unit.is_date_based()
            assert not unit.is_duration_estimated()

    def test_date_based_units(self) -> None:
        """Test that DAYS through ERAS are date based and estimated."""
        for unit in (ChronoUnit.DAYS, ChronoUnit.MONTHS, ChronoUnit.ERAS):
            assert unit.is_date_based()
            assert not unit.is_time_based()
            assert unit.is_duration_estimated()

    def test_forever_is_neither(self) -> None:
        """Test that FOREVER is neither date nor time based."""
        assert not ChronoUnit.FOREVER.is_date_based()
        assert not ChronoUnit.FOREVER.is_time_based()
        assert ChronoUnit.FOREVER.is_duration_estimated()

    def test_declaration_order(self) -> None:
        """Test the ordinals follow the declaration order."""
        assert ChronoUnit.NANOS.ordinal == 0
        assert ChronoUnit.DAYS.ordinal == 7
        assert ChronoUnit.FOREVER.ordinal == len(ChronoUnit) - 1


class TestChronoUnitDuration:
    """Tests for unit durations."""

    def test_exact_durations(self) -> None:
        """Test the exact time unit durations."""
        assert ChronoUnit.HOURS.duration == Duration.of_seconds(3600)
        assert ChronoUnit.MILLIS.duration == Duration.of_nanos(1_000_000)
        assert ChronoUnit.DAYS.duration == Duration(days=1)

    def test_estimated_durations(self) -> None:
        """Test the year based estimates use 365.2425 days."""
        assert ChronoUnit.YEARS.duration.seconds == 31_556_952
        assert ChronoUnit.MONTHS.duration.seconds == 31_556_952 // 12
        assert ChronoUnit.WEEKS.duration == Duration(days=1) * 7

    def test_forever_duration(self) -> None:
        """Test FOREVER is the longest representable duration."""
        forever = ChronoUnit.FOREVER.duration
        assert forever.seconds == 2**63 - 1
        assert forever.nanoseconds == 999_999_999
        assert forever > ChronoUnit.ERAS.duration


class TestChronoUnitDispatch:
    """Tests for add_to(), between() and is_supported_by()."""

    def test_add_to(self) -> None:
        """Test add_to delegates to the temporal."""
        assert ChronoUnit.WEEKS.add_to(Date(2024, 1, 1), 2) == Date(2024, 1, 15)

    def test_between(self) -> None:
        """Test between truncates toward zero."""
        start = Date(2024, 1, 1)
        assert ChronoUnit.MONTHS.between(start, Date(2024, 3, 15)) == 2
        assert ChronoUnit.WEEKS.between(start, Date(2023, 12, 19)) == -1

    def test_is_supported_by(self) -> None:
        """Test a date supports date units only."""
        d = Date(2024, 1, 1)
        assert ChronoUnit.DAYS.is_supported_by(d)
        assert not ChronoUnit.HOURS.is_supported_by(d)
        assert not ChronoUnit.FOREVER.is_supported_by(d)

    def test_unsupported_unit_raises(self) -> None:
        """Test that adding a time unit to a date fails."""
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported unit: Hours"):
            Date(2024, 1, 1).plus(1, ChronoUnit.HOURS)

    def test_str_and_repr(self) -> None:
        """Test the display name and repr."""
        assert str(ChronoUnit.HALF_DAYS) == "HalfDays"
        assert repr(ChronoUnit.DAYS) == "ChronoUnit.DAYS"


class TestDuration:
    """Tests for the Duration value."""

    def test_normalization(self) -> None:
        """Test that nanoseconds are normalized into [0, 1e9)."""
        d = Duration(nanoseconds=-1)
        assert d.seconds == -1
        assert d.nanoseconds == 999_999_999
        assert d.is_negative()

    def test_components(self) -> None:
        """Test days and seconds combine."""
        d = Duration(days=1, seconds=3600)
        assert d.seconds == 90_000
        assert d.total_nanoseconds == 90_000 * 1_000_000_000

    def test_multiply(self) -> None:
        """Test scaling by an int from either side."""
        assert Duration(seconds=2) * 3 == Duration(seconds=6)
        assert 3 * Duration(seconds=2) == Duration(seconds=6)

    def test_zero(self) -> None:
        """Test the zero duration is falsy."""
        assert Duration().is_zero()
        assert not Duration()
        assert Duration(nanoseconds=1)

    def test_ordering(self) -> None:
        """Test comparisons."""
        assert Duration(seconds=1) < Duration(seconds=1, nanoseconds=1)
        assert Duration(seconds=2) >= Duration(seconds=2)


class TestIsoEra:
    """Tests for the IsoEra enum."""

    def test_values(self) -> None:
        """Test the ERA field values."""
        assert IsoEra.BCE == 0
        assert IsoEra.CE == 1

    def test_of(self) -> None:
        """Test lookup by value."""
        assert IsoEra.of(0) is IsoEra.BCE
        assert IsoEra.of(1) is IsoEra.CE

    def test_of_invalid(self) -> None:
        """Test an invalid era raises ValidationError."""
        with pytest.raises(ValidationError, match="Invalid era: 2"):
            IsoEra.of(2)

    def test_is_before_common_era(self) -> None:
        """Test the BCE check."""
        assert IsoEra.BCE.is_before_common_era
        assert not IsoEra.CE.is_before_common_era
        assert str(IsoEra.CE) == "CE"
