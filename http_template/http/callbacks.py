"""
Result parsers.

A result parser is any callable taking the decoded response body and
returning the caller's result. Raising signals failure; HttpTemplate reports
it as SYSTEM_INTERNAL_ERROR unless an HttpException is raised.
"""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

ResultParser = Callable[[str], T]


def text_parser(body: str) -> str:
    """Return the body unchanged."""
    return body


def json_parser(body: str) -> Any:
    """Parse the body as JSON."""
    return json.loads(body)


def model_parser(model: type[M]) -> ResultParser[M]:
    """
    Build a parser that validates the JSON body into a pydantic model.

    Usage:
        user = template.do_get(url, model_parser(User))
    """
    def _parse(body: str) -> M:
        return model.model_validate_json(body)

    _parse.__name__ = f"parse_{model.__name__}"
    return _parse
