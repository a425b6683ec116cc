"""Internal utilities for Isochron.

This module contains private implementation details:
    - Calendar arithmetic (leap years, epoch days)
    - Checked arithmetic helpers
    - Constants and magic numbers
    - Logging configuration

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.logging import configure_logging
from isochron._internal.validation import (
    add_exact,
    multiply_exact,
    subtract_exact,
    trunc_div,
    trunc_mod,
)

__all__: list[str] = [
    "configure_logging",
    "add_exact",
    "multiply_exact",
    "subtract_exact",
    "trunc_div",
    "trunc_mod",
]
