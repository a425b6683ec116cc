"""Resolution of raw field values into a date.

A map of field values, such as {YEAR: 2009, WEEK_OF_YEAR: 1,
DAY_OF_WEEK: 1}, is resolved in two phases. First every field that is not
a ChronoField is offered the chance to resolve itself, repeatedly, until
nothing changes: localized week fields compute a date, and fields such as
JULIAN_DAY replace themselves with simpler ones. Then the chronology
resolves the remaining ChronoFields into a date, and whatever is left is
cross-checked against that date.

Examples:
    >>> from isochron.temporal.chrono_field import ChronoField
    >>> context = resolve({
    ...     ChronoField.YEAR: 2024,
    ...     ChronoField.MONTH_OF_YEAR: 2,
    ...     ChronoField.DAY_OF_MONTH: 30,
    ... })
    >>> context.date
    Date(2024, 2, 29)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Mapping

from isochron.errors import DateTimeError
from isochron.temporal.chrono_field import ChronoField

if TYPE_CHECKING:
    from isochron.chrono.iso import IsoChronology
    from isochron.core.date import Date
    from isochron.temporal.interfaces import TemporalField

logger = logging.getLogger(__name__)

# Upper bound on resolution steps, guarding against fields whose resolve()
# keeps reporting a change
MAX_RESOLVE_ROUNDS = 50


class ResolverStyle(Enum):
    """How strictly field values are combined into a date.

    STRICT rejects any value outside its range in context. SMART clamps
    where a sensible answer exists, for example day-of-month 30 in
    February. LENIENT accepts out of range values and applies them as
    deltas, so month 15 of 2008 is March 2009.
    """

    STRICT = "strict"
    SMART = "smart"
    LENIENT = "lenient"

    def __str__(self) -> str:
        return self.name


@dataclass
class ResolutionContext:
    """The mutable state of one resolution.

    Attributes:
        field_values: Field values not yet consumed. Resolving fields
            remove the entries they use.
        chronology: The calendar system dates are built in.
        style: The resolver style in effect.
        date: The resolved date, once one has been produced.
    """

    field_values: dict[TemporalField, int]
    chronology: IsoChronology
    style: ResolverStyle = ResolverStyle.SMART
    date: Date | None = None

    def add_field_value(self, field: TemporalField, value: int) -> None:
        """Add a derived field value, checking it against any existing one.

        Raises:
            DateTimeError: If the field already has a different value.
        """
        existing = self.field_values.get(field)
        if existing is not None and existing != value:
            raise DateTimeError(
                f"Conflict found: {field} {existing} differs from {field} {value}"
            )
        self.field_values[field] = value

    def update_date(self, date: Date) -> None:
        """Record a resolved date.

        Raises:
            DateTimeError: If a different date was already resolved, or the
                date is not in the context's chronology.
        """
        from isochron.temporal import queries

        if date.query(queries.chronology) is not self.chronology:
            raise DateTimeError(
                f"Date must use the effective parsed chronology: {self.chronology}"
            )
        if self.date is not None and self.date != date:
            raise DateTimeError(
                "Conflict found: Fields resolved to two different dates: "
                f"{self.date} {date}"
            )
        self.date = date


def resolve(
    field_values: Mapping[TemporalField, int],
    style: ResolverStyle = ResolverStyle.SMART,
    chronology: IsoChronology | None = None,
) -> ResolutionContext:
    """Resolve field values into a date.

    Args:
        field_values: The raw field values. The mapping is copied, never
            modified.
        style: The resolver style.
        chronology: The calendar system, ISO by default.

    Returns:
        The finished context. Its ``date`` is the resolved date, or None if
        the fields did not determine one, and its ``field_values`` hold the
        entries that were not consumed.

    Raises:
        DateTimeError: If values conflict, are invalid under the style, or a
            field never stops resolving.
    """
    if chronology is None:
        from isochron.chrono.iso import ISO

        chronology = ISO

    context = ResolutionContext(dict(field_values), chronology, style)
    logger.debug(
        "resolving %d field values with %s resolver", len(context.field_values), style
    )
    _resolve_fields(context)
    date = chronology.resolve_date(context)
    if date is not None:
        context.update_date(date)
    if context.date is not None:
        _cross_check(context, context.date)
    logger.debug(
        "resolved to %s with %d field values left",
        context.date,
        len(context.field_values),
    )
    return context


def _resolve_fields(context: ResolutionContext) -> None:
    changed = 0
    while changed < MAX_RESOLVE_ROUNDS:
        for field in list(context.field_values):
            if isinstance(field, ChronoField):
                continue
            resolved = field.resolve(context)
            if resolved is not None:
                from isochron.core.date import Date

                context.update_date(Date.from_temporal(resolved))
                logger.debug("field %s resolved to date %s", field, context.date)
                changed += 1
                break
            if field not in context.field_values:
                logger.debug("field %s resolved into other fields", field)
                changed += 1
                break
        else:
            return
    raise DateTimeError(
        "One of the parsed fields has an incorrectly implemented resolve method"
    )


def _cross_check(context: ResolutionContext, date: Date) -> None:
    for field, value in list(context.field_values.items()):
        if not date.is_supported(field):
            continue
        derived = date.get_long(field)
        if derived != value:
            raise DateTimeError(
                f"Conflict found: Field {field} {derived} differs from "
                f"{field} {value} derived from {date}"
            )
        del context.field_values[field]


__all__ = ["MAX_RESOLVE_ROUNDS", "ResolverStyle", "ResolutionContext", "resolve"]
