"""Pytest configuration and fixtures for solarhijri tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so solarhijri can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from solarhijri.units.zone import ZoneContext  # noqa: E402


@pytest.fixture
def utc() -> ZoneContext:
    """The UTC zone context."""
    return ZoneContext.utc()


@pytest.fixture
def tehran() -> ZoneContext:
    """Fixed Iran Standard Time context (+03:30, no DST)."""
    return ZoneContext(12600, False, "IRST", "Asia/Tehran")
