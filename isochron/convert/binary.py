"""Binary serialization of calendar values.

This module provides functions for converting calendar values to and from
a compact tagged byte form.

Functions:
    to_bytes: Encode a Date, Year, YearMonth or MonthDay.
    from_bytes: Decode bytes produced by to_bytes.

Every payload starts with a one byte type tag followed by big-endian
fields:

    3   Date        int32 year, byte month, byte day
    11  Year        int32 year
    12  YearMonth   int32 year, byte month
    13  MonthDay    byte month, byte day

Examples:
    >>> from isochron import Date
    >>> data = to_bytes(Date(2024, 2, 29))
    >>> data.hex()
    '03000007e8021d'
    >>> from_bytes(data)
    Date(2024, 2, 29)
"""

from __future__ import annotations

import logging
import struct
from typing import TYPE_CHECKING, Union

from isochron.errors import ParseError, ValidationError

if TYPE_CHECKING:
    from isochron.core.date import Date
    from isochron.core.month_day import MonthDay
    from isochron.core.year import Year
    from isochron.core.year_month import YearMonth

logger = logging.getLogger(__name__)

# Type alias for serializable values
CalendarValue = Union["Date", "Year", "YearMonth", "MonthDay"]

DATE_TYPE = 3
YEAR_TYPE = 11
YEAR_MONTH_TYPE = 12
MONTH_DAY_TYPE = 13

_FORMATS: dict[int, struct.Struct] = {
    DATE_TYPE: struct.Struct(">iBB"),
    YEAR_TYPE: struct.Struct(">i"),
    YEAR_MONTH_TYPE: struct.Struct(">iB"),
    MONTH_DAY_TYPE: struct.Struct(">BB"),
}


def to_bytes(value: CalendarValue) -> bytes:
    """Encode a calendar value as tagged bytes.

    Args:
        value: A Date, Year, YearMonth, or MonthDay to encode.

    Returns:
        The type tag followed by the packed fields.

    Raises:
        TypeError: If value is not a supported calendar value.

    Examples:
        >>> from isochron import MonthDay, Year
        >>> to_bytes(Year(2024))
        b'\\x0b\\x00\\x00\\x07\\xe8'
        >>> to_bytes(MonthDay(12, 25))
        b'\\r\\x0c\\x19'
    """
    # Import here to avoid circular imports
    from isochron.core.date import Date
    from isochron.core.month_day import MonthDay
    from isochron.core.year import Year
    from isochron.core.year_month import YearMonth

    if isinstance(value, Date):
        tag, fields = DATE_TYPE, (value.year, value.month.value, value.day)
    elif isinstance(value, Year):
        tag, fields = YEAR_TYPE, (value.value,)
    elif isinstance(value, YearMonth):
        tag, fields = YEAR_MONTH_TYPE, (value.year, value.month.value)
    elif isinstance(value, MonthDay):
        tag, fields = MONTH_DAY_TYPE, (value.month.value, value.day)
    else:
        raise TypeError(
            f"expected Date, Year, YearMonth, or MonthDay, got {type(value).__name__}"
        )

    logger.debug("Encoding %r with type tag %d", value, tag)
    return bytes([tag]) + _FORMATS[tag].pack(*fields)


def from_bytes(data: bytes) -> CalendarValue:
    """Decode tagged bytes into a calendar value.

    Args:
        data: Bytes produced by to_bytes.

    Returns:
        A Date, Year, YearMonth, or MonthDay based on the type tag.

    Raises:
        ParseError: If the data is empty, has an unknown tag, has the wrong
            length for its tag, or holds field values that do not form a
            valid calendar value.

    Examples:
        >>> from_bytes(b'\\x0c\\x00\\x00\\x07\\xe8\\x02')
        YearMonth(2024, 2)
    """
    # Import here to avoid circular imports
    from isochron.core.date import Date
    from isochron.core.month_day import MonthDay
    from isochron.core.year import Year
    from isochron.core.year_month import YearMonth

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise ParseError(f"expected bytes, got {type(data).__name__}")
    data = bytes(data)
    if not data:
        raise ParseError("empty payload")

    tag = data[0]
    layout = _FORMATS.get(tag)
    if layout is None:
        raise ParseError(f"unknown type tag: {tag}")

    payload = data[1:]
    if len(payload) < layout.size:
        raise ParseError(
            f"payload for type tag {tag} is too short: "
            f"expected {layout.size} bytes, got {len(payload)}"
        )
    if len(payload) > layout.size:
        raise ParseError(
            f"payload for type tag {tag} has {len(payload) - layout.size} trailing bytes"
        )

    fields = layout.unpack(payload)
    logger.debug("Decoding type tag %d with fields %r", tag, fields)
    try:
        if tag == DATE_TYPE:
            return Date(*fields)
        elif tag == YEAR_TYPE:
            return Year(*fields)
        elif tag == YEAR_MONTH_TYPE:
            return YearMonth(*fields)
        else:
            return MonthDay(*fields)
    except ValidationError as e:
        raise ParseError(f"invalid value for type tag {tag}: {e}") from e


__all__ = [
    "to_bytes",
    "from_bytes",
    "DATE_TYPE",
    "YEAR_TYPE",
    "YEAR_MONTH_TYPE",
    "MONTH_DAY_TYPE",
]
