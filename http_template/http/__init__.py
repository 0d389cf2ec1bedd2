"""
HTTP Module

HttpTemplate facade, its transport clients and result parsers.
"""

from .callbacks import ResultParser, json_parser, model_parser, text_parser
from .configurator import HttpConfigurator
from .outcome import HttpOutcome
from .template import HttpTemplate

__all__ = [
    "HttpConfigurator",
    "HttpOutcome",
    "HttpTemplate",
    "ResultParser",
    "json_parser",
    "model_parser",
    "text_parser",
]
