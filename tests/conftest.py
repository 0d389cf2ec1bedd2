"""
Pytest configuration and shared fixtures for http-template tests.

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

make_response = _common.make_response
make_session = _common.make_session
FakeTransport = _common.FakeTransport


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def ok_response():
    """A 200 response with body 'pong'."""
    return make_response(200, "pong")


@pytest.fixture
def session(ok_response):
    """A Mock session returning ok_response for GET and POST."""
    return make_session(ok_response)


@pytest.fixture
def fake_transport(monkeypatch, session):
    """Route every transport client HttpTemplate creates to `session`."""
    from http_template.http import transport

    fake = FakeTransport(session)
    monkeypatch.setattr(transport, "new_http_client", fake)
    return fake


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep HTTP_TEMPLATE_* variables from the outer environment out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("HTTP_TEMPLATE_"):
            monkeypatch.delenv(key, raising=False)

    from http_template.config import set_default_config
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (local socket server)"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
