"""
Transport clients.

Builds the requests.Session used for a single exchange. HttpTemplate opens a
fresh session per call and closes it when the call finishes.
"""

from __future__ import annotations

import logging

import requests

from http_template.schemas.enums import Protocol

from .https_support import TrustAllAdapter


logger = logging.getLogger(__name__)


def new_default_session() -> requests.Session:
    """Create a session with requests' default trust and no timeout."""
    return requests.Session()


def new_trust_all_session(timeout: float) -> requests.Session:
    """
    Create a session that trusts every certificate and hostname.

    Both connect and read timeouts are set to ``timeout`` seconds.
    """
    logger.warning(
        "Building trust-all HTTPS session: certificate and hostname "
        "verification are disabled"
    )
    session = requests.Session()
    session.verify = False
    adapter = TrustAllAdapter(timeout=timeout)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def new_http_client(protocol: Protocol, timeout: float) -> requests.Session:
    """Create the transport client for the given protocol."""
    if protocol == Protocol.HTTP:
        return new_default_session()
    return new_trust_all_session(timeout)
