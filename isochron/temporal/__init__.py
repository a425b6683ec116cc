"""Fields, units and the rules that connect them.

This module provides:
    - ValueRange: The valid values of a field
    - TemporalField, TemporalUnit, TemporalAccessor, Temporal, TemporalAdjuster:
      The capability interfaces every field, unit and value type implements
    - ChronoField: The standard ISO fields
    - TemporalAdjusters: Common date adjustments
    - ResolverStyle, ResolutionContext, resolve: Field map resolution
    - JulianFields, IsoFields, WeekFields: Additional date fields
"""

from __future__ import annotations

from isochron.temporal.value_range import ValueRange
from isochron.temporal.interfaces import (
    Temporal,
    TemporalAccessor,
    TemporalAdjuster,
    TemporalField,
    TemporalUnit,
)
from isochron.temporal.chrono_field import ChronoField
from isochron.temporal import queries
from isochron.temporal.adjusters import TemporalAdjusters
from isochron.temporal.resolver import ResolutionContext, ResolverStyle, resolve
from isochron.temporal.julian_fields import JulianFields
from isochron.temporal.iso_fields import IsoFields
from isochron.temporal.week_fields import ComputedDayOfField, WeekFields

__all__: list[str] = [
    "ValueRange",
    "Temporal",
    "TemporalAccessor",
    "TemporalAdjuster",
    "TemporalField",
    "TemporalUnit",
    "ChronoField",
    "queries",
    "TemporalAdjusters",
    "ResolutionContext",
    "ResolverStyle",
    "resolve",
    "JulianFields",
    "IsoFields",
    "ComputedDayOfField",
    "WeekFields",
]
