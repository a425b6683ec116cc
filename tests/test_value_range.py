"""Tests for ValueRange."""

from __future__ import annotations

import re

import pytest

from isochron._internal.constants import INT_MAX, INT_MIN
from isochron.errors import ValidationError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.value_range import ValueRange


class TestValueRangeConstruction:
    """Tests for ValueRange.of() and its ordering invariant."""

    def test_fixed_range(self) -> None:
        """Test a two bound range is fixed."""
        r = ValueRange.of(1, 12)
        assert r.minimum == 1
        assert r.largest_minimum == 1
        assert r.smallest_maximum == 12
        assert r.maximum == 12
        assert r.is_fixed()

    def test_variable_maximum(self) -> None:
        """Test a three bound range varies in its maximum only."""
        r = ValueRange.of(1, 28, 31)
        assert r.minimum == 1
        assert r.largest_minimum == 1
        assert r.smallest_maximum == 28
        assert r.maximum == 31
        assert not r.is_fixed()

    def test_fully_variable(self) -> None:
        """Test a four bound range."""
        r = ValueRange.of(0, 1, 52, 54)
        assert r.minimum == 0
        assert r.largest_minimum == 1
        assert r.smallest_maximum == 52
        assert r.maximum == 54
        assert not r.is_fixed()

    def test_minimum_above_maximum(self) -> None:
        """Test that min > max raises ValueError."""
        with pytest.raises(ValueError, match="Minimum value must be less than maximum"):
            ValueRange.of(5, 1)

    def test_smallest_maximum_above_largest(self) -> None:
        """Test that the maximums must be ordered."""
        with pytest.raises(ValueError, match="Smallest maximum value"):
            ValueRange.of(1, 31, 28)

    def test_smallest_minimum_above_largest(self) -> None:
        """Test that the minimums must be ordered."""
        with pytest.raises(ValueError, match="Smallest minimum value"):
            ValueRange.of(2, 1, 5, 6)

    def test_largest_minimum_above_largest_maximum(self) -> None:
        """Test that the largest minimum cannot exceed the largest maximum."""
        with pytest.raises(ValueError):
            ValueRange.of(1, 8, 5, 6)

    def test_wrong_number_of_bounds(self) -> None:
        """Test that one or five bounds are rejected."""
        with pytest.raises(TypeError):
            ValueRange.of(1)
        with pytest.raises(TypeError):
            ValueRange.of(1, 2, 3, 4, 5)


class TestValueRangeValidation:
    """Tests for is_valid_value() and the check methods."""

    def test_outer_bounds_only(self) -> None:
        """Test that validity uses the outer bounds, not the smallest maximum."""
        r = ValueRange.of(1, 4, 6)
        assert not r.is_valid_value(0)
        assert r.is_valid_value(1)
        assert r.is_valid_value(5)
        assert r.is_valid_value(6)
        assert not r.is_valid_value(7)

    def test_is_int_value(self) -> None:
        """Test detection of ranges that fit in a 32-bit int."""
        assert ValueRange.of(INT_MIN, INT_MAX).is_int_value()
        assert not ValueRange.of(0, INT_MAX + 1).is_int_value()
        assert not ValueRange.of(INT_MIN - 1, 0).is_int_value()

    def test_is_valid_int_value(self) -> None:
        """Test that a wide range never has valid int values."""
        assert ValueRange.of(1, 12).is_valid_int_value(6)
        assert not ValueRange.of(0, 2**40).is_valid_int_value(6)

    def test_check_valid_value_returns_value(self) -> None:
        """Test that a valid value is returned unchanged."""
        assert ValueRange.of(1, 12).check_valid_value(12) == 12

    def test_check_valid_value_message_names_field(self) -> None:
        """Test the error message names the field, the range and the value."""
        r = ChronoField.DAY_OF_MONTH.range()
        expected = "Invalid value for DayOfMonth (valid values 1 - 28/31): 32"
        with pytest.raises(ValidationError, match=re.escape(expected)):
            r.check_valid_value(32, ChronoField.DAY_OF_MONTH)

    def test_check_valid_value_without_field(self) -> None:
        """Test the error message when no field is given."""
        with pytest.raises(
            ValidationError, match=re.escape("Invalid value (valid values 1 - 12): 0")
        ):
            ValueRange.of(1, 12).check_valid_value(0)

    def test_check_valid_int_value_on_wide_range(self) -> None:
        """Test that an in-range value still fails when the range is not int-sized."""
        with pytest.raises(ValidationError):
            ValueRange.of(0, 2**40).check_valid_int_value(5)


class TestValueRangeRepresentation:
    """Tests for equality and string forms."""

    def test_equality_and_hash(self) -> None:
        """Test that ranges are equal by their four bounds."""
        assert ValueRange.of(1, 12) == ValueRange.of(1, 1, 12, 12)
        assert ValueRange.of(1, 28, 31) != ValueRange.of(1, 31)
        assert hash(ValueRange.of(1, 28, 31)) == hash(ValueRange.of(1, 1, 28, 31))

    def test_str(self) -> None:
        """Test the min - max rendering."""
        assert str(ValueRange.of(1, 12)) == "1 - 12"
        assert str(ValueRange.of(1, 28, 31)) == "1 - 28/31"
        assert str(ValueRange.of(0, 1, 52, 54)) == "0/1 - 52/54"

    def test_repr(self) -> None:
        """Test the factory style repr."""
        assert repr(ValueRange.of(1, 12)) == "ValueRange.of(1, 12, 12)"
        assert repr(ValueRange.of(0, 1, 4, 6)) == "ValueRange.of(0, 1, 4, 6)"
