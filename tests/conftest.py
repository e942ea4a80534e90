"""Pytest configuration and fixtures for Calendra tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so calendra can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def fixed_clock():
    """A clock frozen at 2024-03-15T14:30:45Z (a Friday)."""
    from calendra import DateTime, FixedClock

    return FixedClock.at(DateTime.from_components(2024, 3, 15, 14, 30, 45))
