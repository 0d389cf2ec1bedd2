"""
Common test fixtures shared by all modules.

Provides factory functions for the transport side of HttpTemplate:
- requests.Response objects with a fixed status and body
- Mock sessions returning those responses
- FakeTransport, a stand-in for transport.new_http_client
"""

from typing import Any, Optional
from unittest.mock import Mock

import requests
from requests.structures import CaseInsensitiveDict

from http_template.schemas.enums import Protocol


# =============================================================================
# Response / Session Factories
# =============================================================================

def make_response(
    status_code: int = 200,
    body: bytes | str | None = b"",
    headers: Optional[dict[str, str]] = None,
    url: str = "http://example.com/",
    charset: str = "utf-8",
) -> requests.Response:
    """
    Create a requests.Response without touching the network.

    Args:
        status_code: HTTP status
        body: Entity bytes (str is encoded with charset); None means no entity
        headers: Response headers
        url: Final URL
        charset: Encoding used when body is a str
    """
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, str):
        body = body.encode(charset)
    response._content = body
    # No raw stream behind this response, so close() must not try to drain it
    response._content_consumed = True
    response.headers = CaseInsensitiveDict(headers or {})
    response.url = url
    return response


def make_session(response: Any = None) -> Mock:
    """Create a Mock session whose get/post return the given response."""
    session = Mock(spec=requests.Session)
    session.get.return_value = response
    session.post.return_value = response
    return session


# =============================================================================
# Fake Transport
# =============================================================================

class FakeTransport:
    """
    Replacement for http_template.http.transport.new_http_client.

    Records every (protocol, timeout) request and hands out the session.
    """

    def __init__(self, session: Mock) -> None:
        self.session = session
        self.calls: list[tuple[Protocol, float]] = []

    def __call__(self, protocol: Protocol, timeout: float) -> Mock:
        self.calls.append((protocol, timeout))
        return self.session

    @property
    def called(self) -> bool:
        return bool(self.calls)
