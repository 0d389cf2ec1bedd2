"""
Schemas
File: enums.py

Purpose: Protocol and request method enumerations used by the template
configuration and dispatch.
"""

from __future__ import annotations

from enum import Enum


class Protocol(str, Enum):
    """
    Transport protocol the template builds its client for.

    HTTPS selects the trust-all client (see http_template.http.https_support).
    """
    HTTP = "http"
    HTTPS = "https"

    @classmethod
    def parse(cls, value: "Protocol | str") -> "Protocol":
        """Accept a member or its (case-insensitive) name/value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown protocol: {value!r}") from None


class RequestMethod(str, Enum):
    """
    HTTP request methods.

    Only GET and POST are dispatched by HttpTemplate; the remaining members
    exist so callers can name them and receive UNSUPPORTED_REQUEST_METHOD.
    """
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: "RequestMethod | str") -> "RequestMethod":
        """Accept a member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown request method: {value!r}") from None


SUPPORTED_METHODS = frozenset({RequestMethod.GET, RequestMethod.POST})
