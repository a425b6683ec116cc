"""Common queries against temporal objects.

A query is any callable taking a TemporalAccessor. Pass it to
``temporal.query(...)`` or call it directly with the temporal.

Examples:
    >>> from isochron import Date
    >>> from isochron.temporal import queries
    >>> Date(2024, 1, 15).query(queries.precision)
    ChronoUnit.DAYS
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from isochron.chrono.iso import IsoChronology
    from isochron.core.date import Date
    from isochron.temporal.interfaces import TemporalAccessor
    from isochron.units.chrono_unit import ChronoUnit


def chronology(temporal: TemporalAccessor) -> IsoChronology | None:
    """Return the calendar system of temporal, or None if it has none."""
    return temporal.query(chronology)


def precision(temporal: TemporalAccessor) -> ChronoUnit | None:
    """Return the smallest supported unit of temporal, or None."""
    return temporal.query(precision)


def local_date(temporal: TemporalAccessor) -> Date | None:
    """Return the ISO date of temporal, or None if it has no EPOCH_DAY."""
    from isochron.core.date import Date
    from isochron.temporal.chrono_field import ChronoField

    if temporal.is_supported(ChronoField.EPOCH_DAY):
        return Date.of_epoch_day(temporal.get_long(ChronoField.EPOCH_DAY))
    return None


__all__ = ["chronology", "precision", "local_date"]
