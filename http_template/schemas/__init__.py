"""
Schemas

Purpose: Export the enumerations and error taxonomy shared by the template,
its configuration and the CLI.
"""

from .enums import SUPPORTED_METHODS, Protocol, RequestMethod
from .errors import HttpError, HttpErrorKind, HttpException

__all__ = [
    "Protocol",
    "RequestMethod",
    "SUPPORTED_METHODS",
    "HttpError",
    "HttpErrorKind",
    "HttpException",
]
