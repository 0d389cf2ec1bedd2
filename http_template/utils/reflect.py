"""
Object to string-map conversion.

Turns request parameter objects into the flat ``dict[str, str]`` that gets
form-encoded. Supports mappings, dataclasses, pydantic models and plain
objects (public instance attributes or __slots__).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel


def to_param_value(value: Any) -> str:
    """Render a single parameter value as a string."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _public_attributes(obj: Any) -> dict[str, Any]:
    if hasattr(obj, "__dict__"):
        items = vars(obj).items()
    else:
        slots: list[str] = []
        for klass in type(obj).__mro__:
            declared = getattr(klass, "__slots__", ())
            if isinstance(declared, str):
                declared = (declared,)
            slots.extend(declared)
        items = ((name, getattr(obj, name, None)) for name in slots)

    return {
        name: value
        for name, value in items
        if not name.startswith("_") and not callable(value)
    }


def _fields_of(obj: Any) -> Mapping[Any, Any]:
    if isinstance(obj, Mapping):
        return obj
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    return _public_attributes(obj)


def to_string_map(obj: Any) -> dict[str, str]:
    """
    Convert obj into a string-keyed mapping of string values.

    None becomes an empty mapping and None-valued fields are dropped.
    """
    if obj is None:
        return {}
    # pydantic models are iterable but carry named fields
    sequence_like = (
        isinstance(obj, Iterable)
        and not isinstance(obj, (Mapping, BaseModel))
    )
    if sequence_like or isinstance(obj, (str, bytes, int, float)):
        raise TypeError(f"Cannot convert {type(obj).__name__} to a parameter map")

    return {
        str(name): to_param_value(value)
        for name, value in _fields_of(obj).items()
        if value is not None
    }
