"""
HTTP Template

Facade that turns a URL, a parameter set and a request method into one HTTP
exchange and hands the decoded body to a caller supplied result parser.

Usage:
    template = HttpTemplate.Builder().protocol(Protocol.HTTPS).build()
    data = template.do_post(url, {"q": "term"}, json_parser)

Every call opens its own transport client and closes it before returning, so
one template can be shared between threads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional, TypeVar
from urllib.parse import urlencode

import requests

from http_template.config.runtime import HttpTemplateConfig
from http_template.schemas.enums import SUPPORTED_METHODS, Protocol, RequestMethod
from http_template.schemas.errors import HttpErrorKind, HttpException
from http_template.utils.reflect import to_string_map

from . import transport
from .callbacks import ResultParser
from .configurator import HttpConfigurator
from .outcome import HttpOutcome


logger = logging.getLogger(__name__)

T = TypeVar("T")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpTemplate(HttpConfigurator):
    """
    GET/POST helpers over requests with a result-parser hook.

    Construct with HttpTemplate.Builder, with an HttpTemplateConfig, or with no
    arguments to use the class attribute defaults of HttpConfigurator.

    Any failure surfaces as HttpException:
    - RESPONSE_IS_EMPTY: no response or no entity
    - RESPONSE_STATUS_CODE_INVALID: status other than 200
    - UNSUPPORTED_REQUEST_METHOD: method other than GET/POST
    - SYSTEM_INTERNAL_ERROR: transport or parser failure
    - CLOSE_CHANNEL_ERROR: releasing the response/client failed after success
    """

    def __init__(self, config: Optional[HttpTemplateConfig] = None) -> None:
        # Without a config, validate whatever the class (or a subclass) declares
        self._apply_config(config if config is not None else self.config)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def do_get(self, url: str, action: ResultParser[T]) -> T:
        """GET url; query parameters must already be part of the URL."""
        return self.execute(url, None, RequestMethod.GET, action)

    def do_post(self, url: str, params: Any, action: ResultParser[T]) -> T:
        """POST params (a mapping or any object) as a form body."""
        return self.execute(url, params, RequestMethod.POST, action)

    def request(self, url: str, action: ResultParser[T], params: Any = None) -> T:
        """Execute with the configured default request method."""
        return self.execute(url, params, self.request_method, action)

    def execute(
        self,
        url: str,
        params: Any,
        method: RequestMethod | str,
        action: ResultParser[T],
    ) -> T:
        """
        Run one exchange and return action(decoded body).

        Args:
            url: Request URL
            params: Mapping, arbitrary object or None; only sent for POST
            method: GET or POST (member or name)
            action: Result parser called with the decoded body

        Raises:
            HttpException
        """
        request_method = self._resolve_method(method, url)

        client: Optional[requests.Session] = None
        response: Optional[requests.Response] = None
        try:
            form = to_string_map(params)

            # 1. create http or https client
            client = self.new_http_client()

            # 2. send request
            response = self._do_execute(client, url, form, request_method)

            # 3. consume response
            body = self._consume(response, url)

            # 4. invoke callback
            result = action(body)

        except HttpException as e:
            self._close_quietly(response, client, url)
            logger.debug(f"{request_method.value} {url} failed: [{e.code}] {e.message}")
            raise
        except Exception as e:
            self._close_quietly(response, client, url)
            logger.exception(f"{request_method.value} {url} failed")
            raise HttpException(
                HttpErrorKind.SYSTEM_INTERNAL_ERROR,
                details={"url": url, "method": request_method.value},
            ) from e

        self._close(response, client, url)
        return result

    def new_http_client(self) -> requests.Session:
        """Create the transport client for the configured protocol."""
        return transport.new_http_client(self.protocol, self.connection_timeout)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    @staticmethod
    def _resolve_method(method: RequestMethod | str, url: str) -> RequestMethod:
        try:
            resolved = RequestMethod.parse(method)
        except ValueError:
            resolved = None
        if resolved not in SUPPORTED_METHODS:
            raise HttpException(
                HttpErrorKind.UNSUPPORTED_REQUEST_METHOD,
                details={"url": url, "method": str(getattr(method, "value", method))},
            )
        return resolved

    def _do_execute(
        self,
        client: requests.Session,
        url: str,
        params: dict[str, str],
        method: RequestMethod,
    ) -> requests.Response:
        logger.debug(f"{method.value} {url} ({len(params)} params, protocol={self.protocol.value})")
        if method == RequestMethod.POST:
            return self._do_post_internal(client, url, params)
        return self._do_get_internal(client, url)

    def _do_get_internal(self, client: requests.Session, url: str) -> requests.Response:
        return client.get(url)

    def _do_post_internal(
        self,
        client: requests.Session,
        url: str,
        params: dict[str, str],
    ) -> requests.Response:
        if not params:
            return client.post(url)

        body = urlencode(params, encoding=self.charset)
        headers = {"Content-Type": f"{FORM_CONTENT_TYPE}; charset={self.charset}"}
        return client.post(url, data=body.encode("ascii"), headers=headers)

    def _consume(self, response: Optional[requests.Response], url: str) -> str:
        if response is None:
            raise HttpException(HttpErrorKind.RESPONSE_IS_EMPTY, details={"url": url})

        outcome = HttpOutcome.from_response(response)
        logger.debug(
            f"{url} -> {outcome.status_code} in {outcome.elapsed_ms:.1f}ms"
        )

        if not outcome.has_entity:
            raise HttpException(
                HttpErrorKind.RESPONSE_IS_EMPTY,
                details={"url": url, "status_code": outcome.status_code},
            )

        if not outcome.ok:
            raise HttpException(
                HttpErrorKind.RESPONSE_STATUS_CODE_INVALID,
                details={"url": url, "status_code": outcome.status_code},
            )

        return outcome.text(self.charset)

    @staticmethod
    def _release(
        response: Optional[requests.Response],
        client: Optional[requests.Session],
    ) -> Optional[Exception]:
        """Close both resources; return the first failure, if any."""
        error: Optional[Exception] = None
        for resource in (response, client):
            if resource is None:
                continue
            try:
                resource.close()
            except Exception as e:
                error = error or e
        return error

    def _close(
        self,
        response: Optional[requests.Response],
        client: Optional[requests.Session],
        url: str,
    ) -> None:
        error = self._release(response, client)
        if error is not None:
            raise HttpException(
                HttpErrorKind.CLOSE_CHANNEL_ERROR,
                details={"url": url},
            ) from error

    def _close_quietly(
        self,
        response: Optional[requests.Response],
        client: Optional[requests.Session],
        url: str,
    ) -> None:
        # The call has already failed; keep that failure instead of this one
        error = self._release(response, client)
        if error is not None:
            logger.warning(f"Failed to release resources for {url}: {error}")

    # -------------------------------------------------------------------------
    # Builder
    # -------------------------------------------------------------------------

    class Builder:
        """
        Fluent builder for HttpTemplate.

        Defaults: HTTP, "application/json", "UTF-8", POST.
        """

        def __init__(self, base: Optional[HttpTemplateConfig] = None) -> None:
            base = base or HttpTemplateConfig()
            self._protocol = base.protocol
            self._content_type = base.content_type
            self._charset = base.charset
            self._request_method = base.request_method
            self._connection_timeout = base.connection_timeout

        def protocol(self, protocol: Protocol | str) -> "HttpTemplate.Builder":
            self._protocol = protocol
            return self

        def content_type(self, content_type: str) -> "HttpTemplate.Builder":
            self._content_type = content_type
            return self

        def charset(self, charset: str) -> "HttpTemplate.Builder":
            self._charset = charset
            return self

        def request_method(self, request_method: RequestMethod | str) -> "HttpTemplate.Builder":
            self._request_method = request_method
            return self

        def connection_timeout(self, seconds: float) -> "HttpTemplate.Builder":
            self._connection_timeout = seconds
            return self

        def build_config(self) -> HttpTemplateConfig:
            return HttpTemplateConfig(
                protocol=self._protocol,
                content_type=self._content_type,
                charset=self._charset,
                request_method=self._request_method,
                connection_timeout=self._connection_timeout,
            )

        def build(self) -> "HttpTemplate":
            return HttpTemplate(self.build_config())
