"""Temporal units and enumerations.

This module provides:
    - ChronoUnit: Standard units (NANOS through ERAS, plus FOREVER)
    - Duration: The exact or estimated length of a unit
    - IsoEra: BCE/CE era designation enum
"""

from __future__ import annotations

from isochron.units.chrono_unit import ChronoUnit
from isochron.units.duration import Duration
from isochron.units.era import IsoEra

__all__: list[str] = [
    "ChronoUnit",
    "Duration",
    "IsoEra",
]
