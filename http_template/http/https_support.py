"""
HTTPS Support

Trust-all TLS plumbing for the HTTPS transport client.

WARNING: everything here disables certificate chain validation and hostname
verification. It exists for internal and test endpoints with self-signed
certificates and must not be used against untrusted networks.
"""

from __future__ import annotations

import ssl
from typing import Any, Optional

from requests.adapters import HTTPAdapter


def new_trust_all_ssl_context() -> ssl.SSLContext:
    """Create an SSL context that accepts any certificate for any host."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    # check_hostname has to go first, CERT_NONE is rejected while it is on
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


class TrustAllAdapter(HTTPAdapter):
    """
    requests transport adapter with trust-all TLS and a default timeout.

    The timeout (seconds) is used for both connect and read whenever the
    caller does not pass one explicitly.
    """

    def __init__(self, timeout: float, **kwargs: Any) -> None:
        # HTTPAdapter.__init__ calls init_poolmanager, so these go first
        self.timeout = timeout
        self.ssl_context = new_trust_all_ssl_context()
        super().__init__(**kwargs)

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        pool_kwargs["ssl_context"] = self.ssl_context
        pool_kwargs["assert_hostname"] = False
        super().init_poolmanager(connections, maxsize, block=block, **pool_kwargs)

    def proxy_manager_for(self, proxy, **proxy_kwargs):
        proxy_kwargs["ssl_context"] = self.ssl_context
        proxy_kwargs["assert_hostname"] = False
        return super().proxy_manager_for(proxy, **proxy_kwargs)

    def send(
        self,
        request,
        stream: bool = False,
        timeout: Optional[Any] = None,
        verify: Any = True,
        cert: Optional[Any] = None,
        proxies: Optional[dict[str, str]] = None,
    ):
        if timeout is None:
            timeout = (self.timeout, self.timeout)
        return super().send(
            request,
            stream=stream,
            timeout=timeout,
            verify=False,
            cert=cert,
            proxies=proxies,
        )
