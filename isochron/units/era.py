"""Era enumeration for the ISO calendar system.

This module provides the IsoEra enum for distinguishing between
Before Common Era (BCE) and Common Era (CE) dates. The int values are the
values of the ERA field.
"""

from __future__ import annotations

from enum import IntEnum

from isochron.errors import ValidationError


class IsoEra(IntEnum):
    """ISO era designation.

    Year 0 exists (astronomical convention) and is considered BCE, so
    proleptic year 0 is year-of-era 1 BCE.

    Examples:
        >>> IsoEra.CE.is_before_common_era
        False

        >>> IsoEra.of(0)
        <IsoEra.BCE: 0>
    """

    BCE = 0  # Before Common Era
    CE = 1  # Common Era

    @classmethod
    def of(cls, era: int) -> IsoEra:
        """Obtain an era from its ERA field value.

        Raises:
            ValidationError: If era is not 0 or 1.
        """
        if era not in (0, 1):
            raise ValidationError(f"Invalid era: {era}")
        return cls(era)

    @property
    def is_before_common_era(self) -> bool:
        """Return True if this is IsoEra.BCE, False if IsoEra.CE."""
        return self is IsoEra.BCE

    def __str__(self) -> str:
        return self.name


__all__ = ["IsoEra"]
