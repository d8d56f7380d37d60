"""Pytest configuration and fixtures for Partime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so partime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def sample_values():
    """One value of each precision, all inside 2024-02-29."""
    from partime import Date, DateTime, Year, YearMonth

    return [
        Year(2024),
        YearMonth(2024, 2),
        Date(2024, 2, 29),
        DateTime(2024, 2, 29, 12, 30, 0),
    ]
