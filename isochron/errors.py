"""Isochron exception hierarchy.

All Isochron-specific exceptions inherit from IsochronError. Everything
raised while computing with fields, units and calendar values is a
DateTimeError.
"""

from __future__ import annotations


class IsochronError(Exception):
    """Base exception for all Isochron errors."""

    pass


class DateTimeError(IsochronError):
    """A date-time calculation could not be completed.

    Examples:
        - Unable to obtain a Year from an accessor without a year field
        - Strict resolution rejected a date in a different month
        - Two resolved fields disagree about the date
    """

    pass


class ValidationError(DateTimeError):
    """Invalid input values.

    Raised when a value is outside the valid range of its field, or when
    field values do not form a real date.

    Examples:
        - Month value outside 1-12
        - April 31
        - Week-of-year 55
    """

    pass


class UnsupportedTemporalTypeError(DateTimeError):
    """A field or unit is not supported by the temporal it was used with.

    Examples:
        - Asking a Year for DAY_OF_MONTH
        - Adding HOURS to a Date
    """

    pass


class OverflowError(DateTimeError):
    """Arithmetic operation exceeded representable range.

    Raised when exact arithmetic leaves the signed 64-bit range, or a
    value that must fit in a signed 32-bit int does not.
    """

    pass


class ParseError(IsochronError):
    """Failed to decode a serialized temporal value.

    Examples:
        - Unknown type tag
        - Payload shorter than the tag requires
    """

    pass


__all__ = [
    "IsochronError",
    "DateTimeError",
    "ValidationError",
    "UnsupportedTemporalTypeError",
    "OverflowError",
    "ParseError",
]
