"""Calendar value conversion utilities.

This module provides functions for converting calendar values to and from
their tagged binary form.

Examples:
    >>> from isochron import YearMonth
    >>> from isochron.convert import to_bytes, from_bytes

    >>> ym = YearMonth(2024, 2)
    >>> from_bytes(to_bytes(ym)) == ym
    True
"""

from __future__ import annotations

from isochron.convert.binary import from_bytes, to_bytes

__all__ = [
    "to_bytes",
    "from_bytes",
]
