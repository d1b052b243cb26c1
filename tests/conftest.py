"""
Pytest fixtures for oriented_mbr tests.
"""

from typing import Generator, List

import pytest

from oriented_mbr.config import MBRConfig, get_config


def pytest_configure(config):
    """Add custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def clear_config_cache() -> Generator[None, None, None]:
    """Drop the cached configuration so env changes are picked up."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config() -> MBRConfig:
    """Configuration with the default tolerances."""
    return MBRConfig()


@pytest.fixture
def unit_square_points() -> List[float]:
    """Unit square on the y=0 plane as a flat coordinate list."""
    return [0, 0, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1]
