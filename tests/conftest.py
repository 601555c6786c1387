"""Shared test fixtures."""

import pytest

from pyxsdduration import DAY, DEFAULT_UNITS, UnitTable


@pytest.fixture
def default_units():
    return DEFAULT_UNITS


@pytest.fixture
def calendar_units():
    """A table whose year is exactly twelve months."""
    return UnitTable(year=360 * DAY)
