"""
http-template

Builder-configured HTTP facade with GET/POST helpers, an opt-in trust-all
HTTPS mode and callback based result parsing.

Usage:
    from http_template import HttpTemplate, Protocol, json_parser

    template = HttpTemplate.Builder().protocol(Protocol.HTTPS).build()
    payload = template.do_get("https://internal.example/status", json_parser)
"""

from http_template.config import HttpTemplateConfig
from http_template.http import (
    HttpConfigurator,
    HttpOutcome,
    HttpTemplate,
    ResultParser,
    json_parser,
    model_parser,
    text_parser,
)
from http_template.schemas import (
    HttpError,
    HttpErrorKind,
    HttpException,
    Protocol,
    RequestMethod,
)
from http_template.utils import to_string_map

__version__ = "0.1.0"

__all__ = [
    "HttpConfigurator",
    "HttpError",
    "HttpErrorKind",
    "HttpException",
    "HttpOutcome",
    "HttpTemplate",
    "HttpTemplateConfig",
    "Protocol",
    "RequestMethod",
    "ResultParser",
    "json_parser",
    "model_parser",
    "text_parser",
    "to_string_map",
]
