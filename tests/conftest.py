"""
Pytest configuration and shared fixtures for the algokit test suite.
"""

import pytest

from algokit.mazes import (
    BinaryTreeGenerator,
    DFSGenerator,
    KruskalsGenerator,
    PrimsGenerator,
    RecursiveDivisionGenerator,
    SidewinderGenerator,
)
from algokit.utils.logging import configure_logging

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths and names."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Generator Fixtures
# =============================================================================

ALL_GENERATORS = [
    DFSGenerator,
    KruskalsGenerator,
    PrimsGenerator,
    RecursiveDivisionGenerator,
    BinaryTreeGenerator,
    SidewinderGenerator,
]

ROOTED_GENERATORS = [DFSGenerator, PrimsGenerator]


@pytest.fixture(params=ALL_GENERATORS, ids=lambda cls: cls.__name__)
def generator(request):
    """Every maze generator, one at a time."""
    return request.param()


@pytest.fixture(params=ROOTED_GENERATORS, ids=lambda cls: cls.__name__)
def rooted_generator(request):
    """Generators that grow from a start point."""
    return request.param()


@pytest.fixture
def reset_logging():
    """Restore default logging configuration after a test."""
    yield
    configure_logging()
