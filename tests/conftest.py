"""
Pytest configuration and shared fixtures for bridge tests.

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

_server = importlib.import_module("fixtures.http_server")
_relay = importlib.import_module("fixtures.relay_fixtures")

RelayTestServer = _server.RelayTestServer
FakeHttpClient = _relay.FakeHttpClient
ScriptedRelay = _relay.ScriptedRelay
make_response = _relay.make_response


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(scope="session")
def relay_server():
    """Provide a running local HTTP server for round-trip tests."""
    server = RelayTestServer().start()
    yield server
    server.stop()


@pytest.fixture
def mock_notifier():
    """Provide a MockNotifier that grants permission."""
    from bridge.notifications import MockNotifier
    return MockNotifier()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove BRIDGE_* variables so config tests see only what they set."""
    for name in (
        "BRIDGE_HTTP_TIMEOUT",
        "BRIDGE_USER_AGENT",
        "BRIDGE_HTTP_PROXY",
        "BRIDGE_MAX_RETRIES",
        "BRIDGE_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def commands_reset():
    """Reset boundary command collaborators before and after a test."""
    import commands
    from bridge.config import set_default_config

    commands.reset()
    yield commands
    commands.reset()
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
