"""ChronoUnit enumeration, the standard set of date period units.

This module provides the ChronoUnit enum representing units of time from
nanoseconds up to eras, plus the FOREVER pseudo-unit. Date and time types
answer these units directly; every other TemporalUnit is dispatched back
to the unit itself.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from isochron._internal.constants import LONG_MAX, SECONDS_PER_YEAR
from isochron.units.duration import Duration
from isochron.temporal.interfaces import TemporalUnit

if TYPE_CHECKING:
    from isochron.temporal.interfaces import Temporal


class ChronoUnit(TemporalUnit, Enum):
    """A standard set of date period units.

    The declaration order is significant: units before DAYS are time based,
    DAYS and after (excluding FOREVER) are date based, and every unit from
    DAYS onwards has an estimated duration.

    Examples:
        >>> ChronoUnit.HOURS.duration
        Duration(seconds=3600, nanoseconds=0)
        >>> ChronoUnit.MONTHS.is_duration_estimated()
        True
        >>> str(ChronoUnit.HALF_DAYS)
        'HalfDays'
    """

    NANOS = ("Nanos", Duration.of_nanos(1))
    MICROS = ("Micros", Duration.of_nanos(1_000))
    MILLIS = ("Millis", Duration.of_nanos(1_000_000))
    SECONDS = ("Seconds", Duration.of_seconds(1))
    MINUTES = ("Minutes", Duration.of_seconds(60))
    HOURS = ("Hours", Duration.of_seconds(3600))
    HALF_DAYS = ("HalfDays", Duration.of_seconds(43200))
    DAYS = ("Days", Duration.of_seconds(86400))
    WEEKS = ("Weeks", Duration.of_seconds(7 * 86400))
    MONTHS = ("Months", Duration.of_seconds(SECONDS_PER_YEAR // 12))
    YEARS = ("Years", Duration.of_seconds(SECONDS_PER_YEAR))
    DECADES = ("Decades", Duration.of_seconds(SECONDS_PER_YEAR * 10))
    CENTURIES = ("Centuries", Duration.of_seconds(SECONDS_PER_YEAR * 100))
    MILLENNIA = ("Millennia", Duration.of_seconds(SECONDS_PER_YEAR * 1000))
    ERAS = ("Eras", Duration.of_seconds(SECONDS_PER_YEAR * 1_000_000_000))
    FOREVER = ("Forever", Duration.of_seconds(LONG_MAX, 999_999_999))

    def __init__(self, display_name: str, duration: Duration) -> None:
        self._display_name = display_name
        self._duration = duration

    @property
    def duration(self) -> Duration:
        """The exact duration for time units, an estimate from DAYS on."""
        return self._duration

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    def is_duration_estimated(self) -> bool:
        return self.ordinal >= _ORDINALS[ChronoUnit.DAYS]

    def is_date_based(self) -> bool:
        return (
            self.ordinal >= _ORDINALS[ChronoUnit.DAYS]
            and self is not ChronoUnit.FOREVER
        )

    def is_time_based(self) -> bool:
        return self.ordinal < _ORDINALS[ChronoUnit.DAYS]

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported_unit(self)

    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        return temporal.plus(amount, self)

    def between(self, start: Temporal, end: Temporal) -> int:
        return start.until(end, self)

    def __repr__(self) -> str:
        return f"ChronoUnit.{self.name}"

    def __str__(self) -> str:
        return self._display_name


_ORDINALS: dict[ChronoUnit, int] = {unit: i for i, unit in enumerate(ChronoUnit)}


__all__ = ["ChronoUnit"]
