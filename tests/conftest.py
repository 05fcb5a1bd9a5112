"""Pytest configuration and shared fixtures for aspipes tests.

This module provides:
- Basic pytest configuration
- Fresh pipeline environments so registry state never leaks between tests
- Setup/teardown for test isolation
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path to allow imports from aspipes
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from aspipes import create_pipes, create_stream_pipes  # noqa: E402
from tests.fixtures.sample_events import CountingSource  # noqa: E402


# ==================== Pytest Configuration ====================

def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers",
        "asyncio: mark test as async (automatically handled by pytest-asyncio)"
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as a unit test (fast, isolated)"
    )
    config.addinivalue_line(
        "markers",
        "integration: mark test as an integration test (several components together)"
    )


# ==================== Environment Fixtures ====================

@pytest.fixture(scope="function", autouse=True)
def isolate_environment():
    """Restore environment variables after each test."""
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def pipes():
    """Provide an isolated pipeline environment with its own registry."""
    return create_pipes("test")


@pytest.fixture
def stream_pipes(pipes):
    """Provide map/filter/take/scan/reduce bound to the test environment."""
    return create_stream_pipes(pipes.lift)


@pytest.fixture
def arithmetic(pipes):
    """Provide common numeric operations lifted into the test environment.

    Returns:
        Dict with inc, add, multiply, square operations
    """
    return pipes.lift({
        "inc": lambda x: x + 1,
        "add": lambda x, n: x + n,
        "multiply": lambda x, n: x * n,
        "square": lambda x: x * x,
    })


@pytest.fixture
def counting_source():
    """Provide a factory for infinite sources that count their pulls."""
    return CountingSource
