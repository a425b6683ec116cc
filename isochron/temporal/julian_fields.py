"""Julian day fields.

The Julian day family counts days continuously from a fixed origin, with
no months or years. Each field here is the epoch day plus a constant
offset and is supported by any temporal that supports EPOCH_DAY.

- JULIAN_DAY: days since noon on 4713 BCE January 1 in the proleptic
  Julian calendar. The count changes at midnight, not noon, as is usual
  for date-only values.
- MODIFIED_JULIAN_DAY: days since 1858-11-17.
- RATA_DIE: days since 0000-12-31, so 0001-01-01 is day 1.

Examples:
    >>> from isochron import Date
    >>> Date(1970, 1, 1).get_long(JulianFields.JULIAN_DAY)
    2440588
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isochron.errors import DateTimeError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import TemporalField
from isochron.temporal.resolver import ResolverStyle
from isochron.temporal.value_range import ValueRange
from isochron.units.chrono_unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.core.date import Date
    from isochron.temporal.interfaces import Temporal, TemporalAccessor
    from isochron.temporal.resolver import ResolutionContext

# Epoch days of the first and last supported dates
_MIN_EPOCH_DAY = -365_243_219_162
_MAX_EPOCH_DAY = 365_241_780_471


class JulianField(TemporalField):
    """A day count field offset from the epoch day."""

    __slots__ = ("_name", "_base_unit", "_range_unit", "_range", "_offset")

    def __init__(
        self,
        name: str,
        base_unit: ChronoUnit,
        range_unit: ChronoUnit,
        offset: int,
    ) -> None:
        self._name = name
        self._base_unit = base_unit
        self._range_unit = range_unit
        self._range = ValueRange.of(_MIN_EPOCH_DAY + offset, _MAX_EPOCH_DAY + offset)
        self._offset = offset

    @property
    def offset(self) -> int:
        """The value of this field on 1970-01-01."""
        return self._offset

    @property
    def base_unit(self) -> ChronoUnit:
        return self._base_unit

    @property
    def range_unit(self) -> ChronoUnit:
        return self._range_unit

    def range(self) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        if not self.is_supported_by(temporal):
            raise DateTimeError(f"Unsupported field: {self}")
        return self._range

    def get_from(self, temporal: TemporalAccessor) -> int:
        return temporal.get_long(ChronoField.EPOCH_DAY) + self._offset

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        if not self._range.is_valid_value(new_value):
            raise DateTimeError(f"Invalid value: {self} {new_value}")
        return temporal.with_field(ChronoField.EPOCH_DAY, new_value - self._offset)

    def resolve(self, context: ResolutionContext) -> Date:
        """Consume this field and produce the date it names.

        The value is range checked except under the lenient resolver.
        """
        value = context.field_values.pop(self)
        if context.style is not ResolverStyle.LENIENT:
            self._range.check_valid_value(value, self)
        return context.chronology.date_epoch_day(value - self._offset)

    def __repr__(self) -> str:
        return f"JulianFields.{_CONSTANT_NAMES[self._name]}"

    def __str__(self) -> str:
        return self._name


_CONSTANT_NAMES = {
    "JulianDay": "JULIAN_DAY",
    "ModifiedJulianDay": "MODIFIED_JULIAN_DAY",
    "RataDie": "RATA_DIE",
}


class JulianFields:
    """The Julian day fields."""

    JULIAN_DAY = JulianField("JulianDay", ChronoUnit.DAYS, ChronoUnit.FOREVER, 2_440_588)
    MODIFIED_JULIAN_DAY = JulianField(
        "ModifiedJulianDay", ChronoUnit.DAYS, ChronoUnit.FOREVER, 40_587
    )
    RATA_DIE = JulianField("RataDie", ChronoUnit.DAYS, ChronoUnit.FOREVER, 719_163)


__all__ = ["JulianField", "JulianFields"]
