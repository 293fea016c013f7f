"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest

from cashdrawer.core.config import Config, reload_config
from cashdrawer.drawer.state import DrawerState, InputMode


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Pin the test environment and a per-test data directory."""
    monkeypatch.setenv("CASHDRAWER_ENV", "test")
    monkeypatch.setenv("CASHDRAWER_DATA_DIR", str(tmp_path / "data"))
    for name in (
        "CASHDRAWER_FIXED_DEDUCTION",
        "CASHDRAWER_TOLERANCE",
        "CASHDRAWER_MAX_ADJUSTMENTS",
        "CASHDRAWER_SNAPSHOT_TTL",
        "CASHDRAWER_CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr("cashdrawer.core.config._config", None)


@pytest.fixture
def config() -> Config:
    """Fresh configuration for the test environment."""
    return reload_config()


@pytest.fixture
def state() -> DrawerState:
    """Empty drawer in amount mode."""
    return DrawerState()


@pytest.fixture
def count_state() -> DrawerState:
    """Empty drawer in count mode."""
    return DrawerState(mode=InputMode.COUNT)


@pytest.fixture
def shift_state() -> DrawerState:
    """
    A realistic end-of-shift drawer (amount mode).

    Bills 1500 + coins 37.50 + safe box 80 + channels 450 + exoda 25.60
    """
    drawer = DrawerState()
    drawer.set_value("bill-100", "500")
    drawer.set_value("bill-50", "600")
    drawer.set_value("bill-20", "260")
    drawer.set_value("bill-10", "90")
    drawer.set_value("bill-5", "50")
    drawer.set_value("coin-2", "20")
    drawer.set_value("coin-1", "11")
    drawer.set_value("coin-0-5", "4,5")
    drawer.set_value("coin-0-2", "1.6")
    drawer.set_value("coin-0-1", "0.3")
    drawer.set_value("coin-0-05", "0.1")
    drawer.set_value("kermata", "80")
    drawer.set_value("wolt", "120")
    drawer.set_value("efood", "30")
    drawer.set_value("mypos", "250")
    drawer.set_value("eurobank", "50")
    drawer.resize_adjustments(2)
    drawer.set_adjustment(1, amount="20.60", label="Bakery")
    drawer.set_adjustment(2, amount="5")
    return drawer


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency parsing and rounding")
    config.addinivalue_line("markers", "allocation: Tests for the envelope allocation engine")
    config.addinivalue_line("markers", "persistence: Tests for snapshot storage")
    config.addinivalue_line("markers", "cli: Tests for the command-line interface")
