"""Calendar systems.

Only the ISO calendar system is provided:
    - Chronology: Base class, with Chronology.from_temporal()
    - IsoChronology: The proleptic ISO calendar
    - ISO: The IsoChronology singleton
"""

from __future__ import annotations

from isochron.chrono.iso import ISO, Chronology, IsoChronology

__all__: list[str] = [
    "Chronology",
    "IsoChronology",
    "ISO",
]
