"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from ynab_tracker.tracker import PriceResolver
from tests.fixtures.ynab_data import StaticQuoteSource


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def quote_source() -> StaticQuoteSource:
    """Quote source with a few synthetic prices."""
    return StaticQuoteSource(
        {
            "AAPL": "100.1234",
            "BTC": "42000.5",
            "XYZ": "10.0000",
        }
    )


@pytest.fixture
def resolver(quote_source) -> PriceResolver:
    """Price resolver over the synthetic quote source."""
    return PriceResolver(quote_source)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    # Ensure tests don't use production data
    monkeypatch.setenv("TRACKER_ENV", "test")
    monkeypatch.setenv("TRACKER_DATA_DIR", str(Path(tempfile.gettempdir()) / "test_ynab_tracker_data"))

    # Mock sensitive environment variables
    monkeypatch.setenv("YNAB_API_TOKEN", "test-token")


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "ynab: Tests for YNAB integration")
    config.addinivalue_line("markers", "tracker: Tests for memo tracking and reconciliation")
