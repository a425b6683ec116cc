"""Common temporal adjusters.

Each adjuster is written purely in terms of fields and units, so it works
with any Temporal supporting DAY_OF_MONTH, DAY_OF_YEAR or DAY_OF_WEEK as
needed.

Examples:
    >>> from isochron import Date, DayOfWeek
    >>> Date(2011, 12, 15).adjust(TemporalAdjusters.last_day_of_month())
    Date(2011, 12, 31)
    >>> Date(2011, 12, 15).adjust(
    ...     TemporalAdjusters.day_of_week_in_month(-1, DayOfWeek.MONDAY)
    ... )
    Date(2011, 12, 26)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from isochron.temporal.chrono_field import ChronoField
from isochron.temporal.interfaces import TemporalAdjuster
from isochron.units.chrono_unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.core.date import Date
    from isochron.core.day_of_week import DayOfWeek
    from isochron.temporal.interfaces import Temporal


class _FunctionAdjuster(TemporalAdjuster):
    """A TemporalAdjuster backed by a function."""

    __slots__ = ("_function", "_description")

    def __init__(self, function: Callable[[Temporal], Temporal], description: str):
        self._function = function
        self._description = description

    def adjust_into(self, temporal: Temporal) -> Temporal:
        return self._function(temporal)

    def __repr__(self) -> str:
        return f"TemporalAdjusters.{self._description}"


class TemporalAdjusters:
    """Factory for the common adjusters."""

    @staticmethod
    def of_date_adjuster(function: Callable[[Date], Date]) -> TemporalAdjuster:
        """Wrap a Date to Date function as an adjuster.

        The temporal being adjusted is converted to a Date, passed to the
        function, and the result applied back with ``temporal.adjust()``.
        """

        def adjust(temporal: Temporal) -> Temporal:
            from isochron.core.date import Date

            return temporal.adjust(function(Date.from_temporal(temporal)))

        return _FunctionAdjuster(adjust, f"of_date_adjuster({function!r})")

    @staticmethod
    def first_day_of_month() -> TemporalAdjuster:
        return _FunctionAdjuster(
            lambda t: t.with_field(ChronoField.DAY_OF_MONTH, 1),
            "first_day_of_month()",
        )

    @staticmethod
    def last_day_of_month() -> TemporalAdjuster:
        """Return an adjuster to the last day of the month.

        The last day comes from the temporal's own range for DAY_OF_MONTH,
        so it is 29 for February of a leap year.
        """
        return _FunctionAdjuster(
            lambda t: t.with_field(
                ChronoField.DAY_OF_MONTH, t.range(ChronoField.DAY_OF_MONTH).maximum
            ),
            "last_day_of_month()",
        )

    @staticmethod
    def first_day_of_next_month() -> TemporalAdjuster:
        return _FunctionAdjuster(
            lambda t: t.with_field(ChronoField.DAY_OF_MONTH, 1).plus(
                1, ChronoUnit.MONTHS
            ),
            "first_day_of_next_month()",
        )

    @staticmethod
    def first_day_of_year() -> TemporalAdjuster:
        return _FunctionAdjuster(
            lambda t: t.with_field(ChronoField.DAY_OF_YEAR, 1),
            "first_day_of_year()",
        )

    @staticmethod
    def last_day_of_year() -> TemporalAdjuster:
        return _FunctionAdjuster(
            lambda t: t.with_field(
                ChronoField.DAY_OF_YEAR, t.range(ChronoField.DAY_OF_YEAR).maximum
            ),
            "last_day_of_year()",
        )

    @staticmethod
    def first_day_of_next_year() -> TemporalAdjuster:
        return _FunctionAdjuster(
            lambda t: t.with_field(ChronoField.DAY_OF_YEAR, 1).plus(
                1, ChronoUnit.YEARS
            ),
            "first_day_of_next_year()",
        )

    @staticmethod
    def first_in_month(day_of_week: DayOfWeek) -> TemporalAdjuster:
        return TemporalAdjusters.day_of_week_in_month(1, day_of_week)

    @staticmethod
    def last_in_month(day_of_week: DayOfWeek) -> TemporalAdjuster:
        return TemporalAdjusters.day_of_week_in_month(-1, day_of_week)

    @staticmethod
    def day_of_week_in_month(ordinal: int, day_of_week: DayOfWeek) -> TemporalAdjuster:
        """Return an adjuster to the ordinal day-of-week within the month.

        A positive ordinal counts from the start of the month and a
        negative one from the end, so (2, TUESDAY) is the second Tuesday
        and (-1, MONDAY) the last Monday. Ordinals past the end of the
        month continue into later months. Ordinal 0 is the last matching
        day of the previous month.
        """
        dow_value = day_of_week.value
        description = f"day_of_week_in_month({ordinal}, {day_of_week.name})"
        if ordinal >= 0:

            def forward(temporal: Temporal) -> Temporal:
                first = temporal.with_field(ChronoField.DAY_OF_MONTH, 1)
                current = first.get(ChronoField.DAY_OF_WEEK)
                diff = (dow_value - current + 7) % 7 + (ordinal - 1) * 7
                return first.plus(diff, ChronoUnit.DAYS)

            return _FunctionAdjuster(forward, description)

        def backward(temporal: Temporal) -> Temporal:
            last = temporal.with_field(
                ChronoField.DAY_OF_MONTH,
                temporal.range(ChronoField.DAY_OF_MONTH).maximum,
            )
            current = last.get(ChronoField.DAY_OF_WEEK)
            diff = dow_value - current
            if diff > 0:
                diff -= 7
            diff -= (-ordinal - 1) * 7
            return last.plus(diff, ChronoUnit.DAYS)

        return _FunctionAdjuster(backward, description)

    @staticmethod
    def next(day_of_week: DayOfWeek) -> TemporalAdjuster:
        """Return an adjuster to the first matching day strictly after."""
        dow_value = day_of_week.value

        def adjust(temporal: Temporal) -> Temporal:
            diff = temporal.get(ChronoField.DAY_OF_WEEK) - dow_value
            return temporal.plus(7 - diff if diff >= 0 else -diff, ChronoUnit.DAYS)

        return _FunctionAdjuster(adjust, f"next({day_of_week.name})")

    @staticmethod
    def next_or_same(day_of_week: DayOfWeek) -> TemporalAdjuster:
        """Return an adjuster to the first matching day on or after."""
        dow_value = day_of_week.value

        def adjust(temporal: Temporal) -> Temporal:
            current = temporal.get(ChronoField.DAY_OF_WEEK)
            if current == dow_value:
                return temporal
            diff = current - dow_value
            return temporal.plus(7 - diff if diff >= 0 else -diff, ChronoUnit.DAYS)

        return _FunctionAdjuster(adjust, f"next_or_same({day_of_week.name})")

    @staticmethod
    def previous(day_of_week: DayOfWeek) -> TemporalAdjuster:
        """Return an adjuster to the last matching day strictly before."""
        dow_value = day_of_week.value

        def adjust(temporal: Temporal) -> Temporal:
            diff = dow_value - temporal.get(ChronoField.DAY_OF_WEEK)
            return temporal.minus(7 - diff if diff >= 0 else -diff, ChronoUnit.DAYS)

        return _FunctionAdjuster(adjust, f"previous({day_of_week.name})")

    @staticmethod
    def previous_or_same(day_of_week: DayOfWeek) -> TemporalAdjuster:
        """Return an adjuster to the last matching day on or before."""
        dow_value = day_of_week.value

        def adjust(temporal: Temporal) -> Temporal:
            current = temporal.get(ChronoField.DAY_OF_WEEK)
            if current == dow_value:
                return temporal
            diff = dow_value - current
            return temporal.minus(7 - diff if diff >= 0 else -diff, ChronoUnit.DAYS)

        return _FunctionAdjuster(adjust, f"previous_or_same({day_of_week.name})")


__all__ = ["TemporalAdjusters"]
