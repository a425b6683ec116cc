"""Checked arithmetic for Isochron.

Python integers never overflow, but the calendar model is defined over
signed 64-bit amounts. These helpers keep results inside
those bounds and raise OverflowError instead of producing values
that no other implementation of the model could represent.

This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.constants import LONG_MAX, LONG_MIN
from isochron.errors import OverflowError


def validate_long(value: int, operation: str) -> int:
    """Return value if it fits in a signed 64-bit integer.

    Raises:
        OverflowError: If the value is outside the 64-bit range.
    """
    if value < LONG_MIN or value > LONG_MAX:
        raise OverflowError(f"long overflow in {operation}: {value}")
    return value


def add_exact(a: int, b: int) -> int:
    """Add two 64-bit values, raising OverflowError on overflow."""
    return validate_long(a + b, "addition")


def subtract_exact(a: int, b: int) -> int:
    """Subtract two 64-bit values, raising OverflowError on overflow."""
    return validate_long(a - b, "subtraction")


def multiply_exact(a: int, b: int) -> int:
    """Multiply two 64-bit values, raising OverflowError on overflow."""
    return validate_long(a * b, "multiplication")


def trunc_div(a: int, b: int) -> int:
    """Divide, truncating toward zero.

    Counting whole units between two points truncates rather than floors:
    -13 days is -1 week, not -2.

    Examples:
        >>> trunc_div(-13, 7)
        -1
        >>> -13 // 7
        -2
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching trunc_div, carrying the sign of the dividend."""
    return a - b * trunc_div(a, b)


__all__ = [
    "validate_long",
    "add_exact",
    "subtract_exact",
    "multiply_exact",
    "trunc_div",
    "trunc_mod",
]
