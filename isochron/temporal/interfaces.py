"""Capability contracts for fields, units and temporal objects.

Fields and units are double dispatched: a temporal object answers the
canonical ChronoField and ChronoUnit members itself and hands every other
field or unit back to that field or unit. Any object implementing
TemporalField or TemporalUnit therefore works with every temporal type,
and any temporal type works with every field.

These are plain base classes rather than ABCs so that the Enum based
catalogs (ChronoField, ChronoUnit) can inherit from them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Union

from isochron.errors import DateTimeError, UnsupportedTemporalTypeError

if TYPE_CHECKING:
    from isochron.units.duration import Duration
    from isochron.temporal.resolver import ResolutionContext
    from isochron.temporal.value_range import ValueRange


class TemporalField:
    """A field of date-time, such as month-of-year or week-of-year."""

    @property
    def base_unit(self) -> TemporalUnit:
        """The unit the field is measured in, DAYS for day-of-week."""
        raise NotImplementedError

    @property
    def range_unit(self) -> TemporalUnit:
        """The unit the field is bound by, WEEKS for day-of-week."""
        raise NotImplementedError

    def range(self) -> ValueRange:
        """Return the outer range of valid values for the field.

        For non-ISO calendar systems this may be inaccurate. Use
        range_refined_by() for the range in a specific context.
        """
        raise NotImplementedError

    def is_date_based(self) -> bool:
        """Return True if the field represents a component of a date."""
        raise NotImplementedError

    def is_time_based(self) -> bool:
        """Return True if the field represents a component of a time.

        Date based and time based are mutually exclusive, but a field may
        be neither.
        """
        raise NotImplementedError

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        raise NotImplementedError

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        """Return the range of valid values within the context of temporal.

        Day-of-month, for example, is bounded by the length of the month
        the temporal falls in.
        """
        raise NotImplementedError

    def get_from(self, temporal: TemporalAccessor) -> int:
        """Extract the value of this field from temporal.

        Raises:
            UnsupportedTemporalTypeError: If temporal lacks the field.
        """
        raise NotImplementedError

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        """Return a copy of temporal with this field set to new_value.

        Raises:
            UnsupportedTemporalTypeError: If temporal lacks the field.
            ValidationError: If new_value is out of range.
        """
        raise NotImplementedError

    def resolve(self, context: ResolutionContext) -> TemporalAccessor | None:
        """Resolve this field into other fields or a complete date.

        Called while combining raw field values. An implementation may
        consume related entries of ``context.field_values``, either
        replacing them with simpler fields or building a date, and must
        remove every entry it consumed.

        Returns:
            The resolved date, or None if no date was produced.
        """
        return None


class TemporalUnit:
    """A unit of date-time, such as days or months."""

    @property
    def duration(self) -> Duration:
        """The exact or estimated duration of one unit."""
        raise NotImplementedError

    def is_duration_estimated(self) -> bool:
        raise NotImplementedError

    def is_date_based(self) -> bool:
        raise NotImplementedError

    def is_time_based(self) -> bool:
        raise NotImplementedError

    def is_supported_by(self, temporal: Temporal) -> bool:
        """Check whether temporal can be moved by this unit.

        Probes addition in both directions; a failure other than an
        unsupported unit in one direction may just be the edge of the
        temporal's range.
        """
        try:
            temporal.plus(1, self)
            return True
        except UnsupportedTemporalTypeError:
            return False
        except DateTimeError:
            try:
                temporal.plus(-1, self)
                return True
            except DateTimeError:
                return False

    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        raise NotImplementedError

    def between(self, start: Temporal, end: Temporal) -> int:
        """Return the whole number of units from start to end.

        The result is truncated toward zero and negative if end is
        before start.
        """
        raise NotImplementedError


class TemporalAccessor:
    """Read-only access to a temporal object."""

    def is_supported(self, field: TemporalField) -> bool:
        raise NotImplementedError

    def get_long(self, field: TemporalField) -> int:
        raise NotImplementedError

    def range(self, field: TemporalField) -> ValueRange:
        """Return the range of valid values for field in this context."""
        from isochron.temporal.chrono_field import ChronoField

        if isinstance(field, ChronoField):
            if self.is_supported(field):
                return field.range()
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
        return field.range_refined_by(self)

    def get(self, field: TemporalField) -> int:
        """Return the value of field as an int.

        Raises:
            UnsupportedTemporalTypeError: If the field's range does not fit
                in an int, or the field is unsupported.
            DateTimeError: If the value is outside the field's range.
        """
        value_range = self.range(field)
        if not value_range.is_int_value():
            raise UnsupportedTemporalTypeError(
                f"Invalid field {field} for get() method, use get_long() instead"
            )
        value = self.get_long(field)
        if not value_range.is_valid_value(value):
            raise DateTimeError(
                f"Invalid value for {field} (valid values {value_range}): {value}"
            )
        return value

    def query(self, query: Callable[[TemporalAccessor], Any]) -> Any:
        """Query this temporal.

        The chronology and precision queries answer None unless a subclass
        overrides them; any other query is invoked with this temporal.
        """
        from isochron.temporal import queries

        if query is queries.chronology or query is queries.precision:
            return None
        return query(self)


class Temporal(TemporalAccessor):
    """Read-write access to a temporal object.

    All operations return new objects; temporals are immutable.
    """

    def is_supported_unit(self, unit: TemporalUnit) -> bool:
        raise NotImplementedError

    def with_field(self, field: TemporalField, new_value: int) -> Temporal:
        raise NotImplementedError

    def adjust(self, adjuster: Adjuster) -> Temporal:
        """Return a copy of this temporal adjusted by adjuster.

        Args:
            adjuster: A TemporalAdjuster or a callable taking and returning
                a temporal.
        """
        if isinstance(adjuster, TemporalAdjuster):
            return adjuster.adjust_into(self)
        return adjuster(self)

    def plus(self, amount: int, unit: TemporalUnit) -> Temporal:
        raise NotImplementedError

    def minus(self, amount: int, unit: TemporalUnit) -> Temporal:
        return self.plus(-amount, unit)

    def until(self, end_exclusive: Temporal, unit: TemporalUnit) -> int:
        raise NotImplementedError


class TemporalAdjuster:
    """Strategy for adjusting a temporal object."""

    def adjust_into(self, temporal: Temporal) -> Temporal:
        raise NotImplementedError


Adjuster = Union[TemporalAdjuster, Callable[[Temporal], Temporal]]


__all__ = [
    "TemporalField",
    "TemporalUnit",
    "TemporalAccessor",
    "Temporal",
    "TemporalAdjuster",
    "Adjuster",
]
