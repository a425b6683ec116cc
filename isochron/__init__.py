"""Isochron: ISO-8601 calendar fields, units and values.

Isochron models dates the way ISO-8601 does: as a set of fields (year,
month-of-year, day-of-week, week-of-week-based-year, ...) and units (days,
months, eras, ...) that know how to read, adjust and add to any temporal
value that supports them.

Calendar Values:
    Date: Calendar date (year, month, day)
    Year: Proleptic year
    YearMonth: Year and month, such as 2024-02
    MonthDay: Recurring month and day, such as --12-25
    Month: January to December
    DayOfWeek: Monday to Sunday

Fields and Units:
    ChronoField: Standard ISO fields
    ChronoUnit: Standard units, NANOS to FOREVER
    IsoFields: Quarter and week-based-year fields
    JulianFields: Julian day, modified Julian day and Rata Die
    WeekFields: Localized week definitions
    ValueRange: Valid values of a field

Resolution and Adjustment:
    resolve: Combine a map of field values into a date
    ResolverStyle: STRICT, SMART or LENIENT
    TemporalAdjusters: Common adjustments such as last_day_of_month

Exceptions:
    IsochronError: Base exception
    DateTimeError: Calculation failed
    ValidationError: Value outside its valid range
    UnsupportedTemporalTypeError: Field or unit not supported
    OverflowError: Arithmetic overflow
    ParseError: Malformed binary payload

Example:
    >>> from isochron import Date, IsoFields, TemporalAdjusters
    >>> d = Date(2008, 12, 29)
    >>> d.get(IsoFields.WEEK_BASED_YEAR), d.get(IsoFields.WEEK_OF_WEEK_BASED_YEAR)
    (2009, 1)
    >>> d.adjust(TemporalAdjusters.last_day_of_month())
    Date(2008, 12, 31)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

from isochron._internal.logging import configure_logging

# Exceptions
from isochron.errors import (
    DateTimeError,
    IsochronError,
    OverflowError,
    ParseError,
    UnsupportedTemporalTypeError,
    ValidationError,
)

# Fields and resolution; temporal must load before units and core
from isochron.temporal import (
    ChronoField,
    IsoFields,
    JulianFields,
    ResolutionContext,
    ResolverStyle,
    Temporal,
    TemporalAccessor,
    TemporalAdjuster,
    TemporalAdjusters,
    TemporalField,
    TemporalUnit,
    ValueRange,
    WeekFields,
    resolve,
)

# Units
from isochron.units import ChronoUnit, Duration, IsoEra

# Calendar values
from isochron.core import Date, DayOfWeek, Month, MonthDay, Year, YearMonth

# Calendar systems
from isochron.chrono import ISO, Chronology, IsoChronology

# Conversion
from isochron.convert import from_bytes, to_bytes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    "configure_logging",
    # Calendar values
    "Date",
    "DayOfWeek",
    "Month",
    "MonthDay",
    "Year",
    "YearMonth",
    # Fields and units
    "ChronoField",
    "ChronoUnit",
    "Duration",
    "IsoEra",
    "IsoFields",
    "JulianFields",
    "WeekFields",
    "ValueRange",
    # Interfaces
    "Temporal",
    "TemporalAccessor",
    "TemporalAdjuster",
    "TemporalField",
    "TemporalUnit",
    # Resolution and adjustment
    "resolve",
    "ResolutionContext",
    "ResolverStyle",
    "TemporalAdjusters",
    # Calendar systems
    "Chronology",
    "IsoChronology",
    "ISO",
    # Conversion
    "to_bytes",
    "from_bytes",
    # Exceptions
    "IsochronError",
    "DateTimeError",
    "ValidationError",
    "UnsupportedTemporalTypeError",
    "OverflowError",
    "ParseError",
]
