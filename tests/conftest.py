"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest
import pytz

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))



@pytest.fixture(scope="session")
def observatories():
    """Load the bundled observatory metadata."""
    from src.geomag_service.services import load_observatories
    return load_observatories()


@pytest.fixture
def reference_time():
    """Fixed "now" in the middle of 2024-01-01 UTC."""
    return lambda: datetime(2024, 1, 1, 15, 30, 12, tzinfo=pytz.UTC)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring a wave server"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
