"""
Runtime Configuration

Immutable configuration for HttpTemplate and the helpers that load it from
environment variables, YAML files or plain dictionaries.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from http_template.schemas.enums import SUPPORTED_METHODS, Protocol, RequestMethod

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "HTTP_TEMPLATE_"

DEFAULT_PROTOCOL = Protocol.HTTP
DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_CHARSET = "UTF-8"
DEFAULT_REQUEST_METHOD = RequestMethod.POST
DEFAULT_CONNECTION_TIMEOUT = 10.0


@dataclass(frozen=True)
class HttpTemplateConfig:
    """
    Configuration of a single HttpTemplate.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction (directly or via HttpTemplate.Builder)

    connection_timeout is in seconds and is applied to both the connect and
    the read phase, on the HTTPS path only.
    """
    protocol: Protocol = DEFAULT_PROTOCOL
    content_type: str = DEFAULT_CONTENT_TYPE
    charset: str = DEFAULT_CHARSET
    request_method: RequestMethod = DEFAULT_REQUEST_METHOD
    connection_timeout: float = DEFAULT_CONNECTION_TIMEOUT

    def __post_init__(self) -> None:
        # Frozen: normalise through object.__setattr__
        object.__setattr__(self, "protocol", Protocol.parse(self.protocol))

        method = RequestMethod.parse(self.request_method)
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Default request method must be GET or POST, got {method.value}")
        object.__setattr__(self, "request_method", method)

        try:
            codecs.lookup(self.charset)
        except LookupError:
            raise ValueError(f"Unknown charset: {self.charset!r}") from None

        if not self.content_type:
            raise ValueError("content_type must not be empty")

        timeout = float(self.connection_timeout)
        if timeout <= 0:
            raise ValueError(f"connection_timeout must be positive, got {timeout}")
        object.__setattr__(self, "connection_timeout", timeout)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - HTTP_TEMPLATE_PROTOCOL: http or https
        - HTTP_TEMPLATE_CONTENT_TYPE: content type string
        - HTTP_TEMPLATE_CHARSET: charset used for form bodies and decoding
        - HTTP_TEMPLATE_REQUEST_METHOD: GET or POST
        - HTTP_TEMPLATE_CONNECTION_TIMEOUT: seconds (HTTPS path)
        """
        overrides: dict[str, Any] = {}
        for f in fields(HttpTemplateConfig):
            value = os.getenv(f"{ENV_PREFIX}{f.name.upper()}")
            if value:
                overrides[f.name] = value
        return overrides

    @classmethod
    def from_env(cls) -> "HttpTemplateConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "HttpTemplateConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HttpTemplateConfig":
        """Load configuration from a dictionary (supports partial data, ignores unknown keys)."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})

    def with_env_overrides(self) -> "HttpTemplateConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "protocol": self.protocol.value,
            "content_type": self.content_type,
            "charset": self.charset,
            "request_method": self.request_method.value,
            "connection_timeout": self.connection_timeout,
        }


# Global default configuration
_default_config: Optional[HttpTemplateConfig] = None


def get_default_config() -> HttpTemplateConfig:
    """Get the default configuration (loaded from the environment once)."""
    global _default_config
    if _default_config is None:
        _default_config = HttpTemplateConfig.from_env()
    return _default_config


def set_default_config(config: Optional[HttpTemplateConfig]) -> None:
    """Set (or with None, reset) the default configuration."""
    global _default_config
    _default_config = config
