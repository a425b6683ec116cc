"""DayOfWeek enumeration, the seven days of the ISO week.

The int values follow ISO-8601, from Monday (1) to Sunday (7). Localized
numbering, where the week starts on another day, is provided by
WeekFields.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable

from isochron.errors import DateTimeError, UnsupportedTemporalTypeError, ValidationError
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import TemporalAccessor, TemporalAdjuster

if TYPE_CHECKING:
    from isochron.temporal.interfaces import Temporal, TemporalField
    from isochron.temporal.value_range import ValueRange


class DayOfWeek(TemporalAccessor, TemporalAdjuster, IntEnum):
    """A day-of-week, Monday (1) to Sunday (7).

    Examples:
        >>> DayOfWeek.of(1)
        <DayOfWeek.MONDAY: 1>
        >>> DayOfWeek.SUNDAY.plus(1)
        <DayOfWeek.MONDAY: 1>
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, day_of_week: int) -> DayOfWeek:
        """Obtain a DayOfWeek from its ISO int value.

        Raises:
            ValidationError: If day_of_week is not in 1-7.
        """
        if day_of_week < 1 or day_of_week > 7:
            raise ValidationError(f"Invalid value for DayOfWeek: {day_of_week}")
        return cls(day_of_week)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> DayOfWeek:
        """Obtain the DayOfWeek of a temporal object.

        Raises:
            DateTimeError: If the temporal has no day-of-week.
        """
        if isinstance(temporal, DayOfWeek):
            return temporal
        try:
            return cls.of(temporal.get(ChronoField.DAY_OF_WEEK))
        except DateTimeError as e:
            raise DateTimeError(
                f"Unable to obtain DayOfWeek from TemporalAccessor: {temporal!r} "
                f"of type {type(temporal).__name__}"
            ) from e

    def plus(self, days: int) -> DayOfWeek:
        """Return the day-of-week that is days later, wrapping around Sunday."""
        return DayOfWeek((self.value - 1 + days) % 7 + 1)

    def minus(self, days: int) -> DayOfWeek:
        return self.plus(-(days % 7))

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field is ChronoField.DAY_OF_WEEK
        return field is not None and field.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if field is ChronoField.DAY_OF_WEEK:
            return field.range()
        return super().range(field)

    def get(self, field: TemporalField) -> int:
        if field is ChronoField.DAY_OF_WEEK:
            return self.value
        return super().get(field)

    def get_long(self, field: TemporalField) -> int:
        if field is ChronoField.DAY_OF_WEEK:
            return self.value
        if isinstance(field, ChronoField):
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
        return field.get_from(self)

    def query(self, query: Callable[[TemporalAccessor], Any]) -> Any:
        from isochron.temporal import queries
        from isochron.units.chrono_unit import ChronoUnit

        if query is queries.precision:
            return ChronoUnit.DAYS
        return super().query(query)

    def adjust_into(self, temporal: Temporal) -> Temporal:
        """Move temporal to this day within the same Monday-based week."""
        return temporal.with_field(ChronoField.DAY_OF_WEEK, self.value)

    def __str__(self) -> str:
        return self.name


__all__ = ["DayOfWeek"]
