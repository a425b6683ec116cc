"""The range of valid values for a date-time field.

This module provides ValueRange, the validator every field carries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isochron._internal.constants import INT_MAX, INT_MIN
from isochron.errors import ValidationError

if TYPE_CHECKING:
    from isochron.temporal.interfaces import TemporalField


class ValueRange:
    """The range of valid values for a date-time field.

    A range has an outer minimum and maximum, and may be variable: the
    minimum may be one of two values (smallest and largest minimum) and so
    may the maximum. Day-of-month, for example, is always at least 1 but
    ends at 28, 29, 30 or 31 depending on the month, which is written
    ``1 - 28/31``.

    Validation only uses the outer bounds. A field whose valid values have
    internal gaps cannot be described precisely by a ValueRange, so callers
    must not assume every value between the outer bounds is valid.

    Examples:
        >>> r = ValueRange.of(1, 28, 31)
        >>> r.is_fixed()
        False
        >>> r.is_valid_value(30)
        True
        >>> str(r)
        '1 - 28/31'
    """

    __slots__ = ("_min_smallest", "_min_largest", "_max_smallest", "_max_largest")

    def __init__(
        self,
        min_smallest: int,
        min_largest: int,
        max_smallest: int,
        max_largest: int,
    ) -> None:
        self._min_smallest = min_smallest
        self._min_largest = min_largest
        self._max_smallest = max_smallest
        self._max_largest = max_largest

    @classmethod
    def of(cls, *bounds: int) -> ValueRange:
        """Obtain a fixed or variable range.

        Accepts two, three or four bounds:

        - ``of(min, max)``: a fixed range
        - ``of(min, max_smallest, max_largest)``: a variable maximum
        - ``of(min_smallest, min_largest, max_smallest, max_largest)``

        Raises:
            ValueError: If the bounds violate the ordering invariant
                ``min_smallest <= min_largest <= max_largest`` and
                ``min_smallest <= max_smallest <= max_largest``.

        Examples:
            >>> ValueRange.of(1, 12)
            ValueRange.of(1, 12, 12)
            >>> ValueRange.of(0, 1, 52, 54).minimum
            0
        """
        if len(bounds) == 2:
            minimum, maximum = bounds
            if minimum > maximum:
                raise ValueError("Minimum value must be less than maximum value")
            return cls(minimum, minimum, maximum, maximum)
        if len(bounds) == 3:
            minimum, max_smallest, max_largest = bounds
            return cls.of(minimum, minimum, max_smallest, max_largest)
        if len(bounds) == 4:
            min_smallest, min_largest, max_smallest, max_largest = bounds
            if min_smallest > min_largest:
                raise ValueError(
                    "Smallest minimum value must be less than largest minimum value"
                )
            if max_smallest > max_largest:
                raise ValueError(
                    "Smallest maximum value must be less than largest maximum value"
                )
            if min_largest > max_largest:
                raise ValueError("Minimum value must be less than maximum value")
            if min_smallest > max_smallest:
                raise ValueError(
                    "Smallest minimum value must be less than smallest maximum value"
                )
            return cls(min_smallest, min_largest, max_smallest, max_largest)
        raise TypeError(f"ValueRange.of() takes 2 to 4 bounds, got {len(bounds)}")

    @property
    def minimum(self) -> int:
        """The outer (smallest) minimum."""
        return self._min_smallest

    @property
    def largest_minimum(self) -> int:
        return self._min_largest

    @property
    def smallest_maximum(self) -> int:
        return self._max_smallest

    @property
    def maximum(self) -> int:
        """The outer (largest) maximum."""
        return self._max_largest

    def is_fixed(self) -> bool:
        """Return True if both the minimum and the maximum are single values."""
        return (
            self._min_smallest == self._min_largest
            and self._max_smallest == self._max_largest
        )

    def is_int_value(self) -> bool:
        """Return True if every value in the outer range fits in a 32-bit int."""
        return self._min_smallest >= INT_MIN and self._max_largest <= INT_MAX

    def is_valid_value(self, value: int) -> bool:
        """Check a value against the outer bounds.

        Examples:
            >>> ValueRange.of(1, 4, 6).is_valid_value(5)
            True
            >>> ValueRange.of(1, 4, 6).is_valid_value(0)
            False
        """
        return self._min_smallest <= value <= self._max_largest

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value() and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: TemporalField | None = None) -> int:
        """Return value if it is valid, raising ValidationError otherwise.

        Args:
            value: The value to check.
            field: The field being checked, used in the error message.

        Raises:
            ValidationError: If the value is outside the outer bounds.

        Examples:
            >>> ValueRange.of(1, 12).check_valid_value(13)
            Traceback (most recent call last):
            ...
            ValidationError: Invalid value (valid values 1 - 12): 13
        """
        if not self.is_valid_value(value):
            raise ValidationError(self._error_message(value, field))
        return value

    def check_valid_int_value(
        self, value: int, field: TemporalField | None = None
    ) -> int:
        """Return value as an int if it is valid and the range is int-sized.

        Raises:
            ValidationError: If the value is invalid or the range does not
                fit in a 32-bit int.
        """
        if not self.is_valid_int_value(value):
            raise ValidationError(self._error_message(value, field))
        return int(value)

    def _error_message(self, value: int, field: TemporalField | None) -> str:
        if field is not None:
            return f"Invalid value for {field} (valid values {self}): {value}"
        return f"Invalid value (valid values {self}): {value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueRange):
            return NotImplemented
        return (
            self._min_smallest == other._min_smallest
            and self._min_largest == other._min_largest
            and self._max_smallest == other._max_smallest
            and self._max_largest == other._max_largest
        )

    def __hash__(self) -> int:
        return hash(
            (self._min_smallest, self._min_largest, self._max_smallest, self._max_largest)
        )

    def __repr__(self) -> str:
        if self._min_smallest == self._min_largest:
            return (
                f"ValueRange.of({self._min_smallest}, "
                f"{self._max_smallest}, {self._max_largest})"
            )
        return (
            f"ValueRange.of({self._min_smallest}, {self._min_largest}, "
            f"{self._max_smallest}, {self._max_largest})"
        )

    def __str__(self) -> str:
        text = str(self._min_smallest)
        if self._min_smallest != self._min_largest:
            text += f"/{self._min_largest}"
        text += f" - {self._max_smallest}"
        if self._max_smallest != self._max_largest:
            text += f"/{self._max_largest}"
        return text


__all__ = ["ValueRange"]
