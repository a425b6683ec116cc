"""Pytest configuration and fixtures for Isochron tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so isochron can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def iso_week_dates() -> list[tuple[tuple[int, int, int], int, int]]:
    """Dates around week-based-year boundaries with their ISO (year, week)."""
    return [
        ((2008, 12, 28), 2008, 52),
        ((2008, 12, 29), 2009, 1),
        ((2009, 1, 4), 2009, 1),
        ((2009, 12, 31), 2009, 53),
        ((2010, 1, 3), 2009, 53),
        ((2010, 1, 4), 2010, 1),
        ((2012, 1, 1), 2011, 52),
        ((2012, 1, 2), 2012, 1),
        ((2015, 12, 31), 2015, 53),
        ((2020, 12, 31), 2020, 53),
        ((2021, 1, 3), 2020, 53),
        ((2024, 12, 30), 2025, 1),
    ]
