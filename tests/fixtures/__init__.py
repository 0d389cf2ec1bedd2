"""
Test fixtures package for http-template tests.

Provides factory functions for transport doubles:
- common.py: requests.Response / requests.Session factories and a fake
  transport that records how HttpTemplate asked for its client

Usage:
    from fixtures import make_response, make_session

    def test_something():
        session = make_session(make_response(200, "pong"))
"""

from .common import (
    FakeTransport,
    make_response,
    make_session,
)

__all__ = [
    "FakeTransport",
    "make_response",
    "make_session",
]
