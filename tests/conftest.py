"""
Pytest configuration and shared fixtures for the level core tests.
"""

import pytest

from level_catalog import LevelCatalog
from maze_pieces import parse_rows


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: full level-range sweeps (minutes)")


@pytest.fixture
def board():
    """Parse '#'/'.'/'S' rows into (grid, width, height, start)."""

    def _parse(*rows):
        return parse_rows(list(rows))

    return _parse


@pytest.fixture(scope="module")
def catalog():
    """One catalog per test module so generated levels are reused."""
    return LevelCatalog()
