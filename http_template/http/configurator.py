"""
HTTP Configurator

Configuration holder that HttpTemplate extends. Defaults live on the class so
a subclass can configure itself by overriding attributes:

    class InternalApi(HttpTemplate):
        protocol = Protocol.HTTPS
        connection_timeout = 3.0
"""

from __future__ import annotations

from http_template.config.runtime import (
    DEFAULT_CHARSET,
    DEFAULT_CONNECTION_TIMEOUT,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_PROTOCOL,
    DEFAULT_REQUEST_METHOD,
    HttpTemplateConfig,
)
from http_template.schemas.enums import Protocol, RequestMethod


class HttpConfigurator:
    """
    Holds protocol, content type, charset, default method and timeout.

    The values are fixed once a config is applied; assigning to them on an
    instance raises AttributeError.
    """

    protocol: Protocol = DEFAULT_PROTOCOL
    content_type: str = DEFAULT_CONTENT_TYPE
    charset: str = DEFAULT_CHARSET
    request_method: RequestMethod = DEFAULT_REQUEST_METHOD
    connection_timeout: float = DEFAULT_CONNECTION_TIMEOUT

    _CONFIG_FIELDS = frozenset(
        {"protocol", "content_type", "charset", "request_method", "connection_timeout"}
    )

    def _apply_config(self, config: HttpTemplateConfig) -> None:
        object.__setattr__(self, "_config", config)
        for name in self._CONFIG_FIELDS:
            object.__setattr__(self, name, getattr(config, name))

    def __setattr__(self, name: str, value: object) -> None:
        if name in self._CONFIG_FIELDS or name == "_config":
            raise AttributeError(
                f"{name} is read-only; build a new template to change the configuration"
            )
        super().__setattr__(name, value)

    @property
    def config(self) -> HttpTemplateConfig:
        """The effective configuration."""
        applied = self.__dict__.get("_config")
        if applied is not None:
            return applied
        return HttpTemplateConfig(
            protocol=self.protocol,
            content_type=self.content_type,
            charset=self.charset,
            request_method=self.request_method,
            connection_timeout=self.connection_timeout,
        )
