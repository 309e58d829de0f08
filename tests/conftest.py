"""
Pytest configuration and shared fixtures for canonical_merkle tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_odd_tree = _common.make_odd_tree
make_even_tree = _common.make_even_tree
make_family = _common.make_family


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def odd_tree():
    """Tree over sha256 of "a".."e"."""
    return make_odd_tree()


@pytest.fixture
def even_tree():
    """Tree over sha256 of "a".."d"."""
    return make_even_tree()


@pytest.fixture
def family():
    """(root, left, right) nodes linked by hand."""
    return make_family()


@pytest.fixture(autouse=True)
def _isolate_merkle_env(monkeypatch):
    """Keep MERKLE_* variables from the developer's shell out of tests."""
    for name in ("MERKLE_HASH_ALGORITHM", "MERKLE_LOG_LEVEL", "MERKLE_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
