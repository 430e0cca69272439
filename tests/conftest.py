"""Shared fixtures for DebugTreeLib tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from debugtreelib import TreeBuilder, get_registry


@pytest.fixture(autouse=True)
def isolated_registry():
    """Give every test a fresh default tree and no named trees."""
    get_registry().reset()
    yield
    get_registry().reset()


@pytest.fixture
def builder():
    """A private, unlocked builder with the default config."""
    return TreeBuilder()


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: threaded stress tests (deselect with '-m \"not slow\"')"
    )
