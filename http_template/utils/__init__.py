"""
Utilities.
"""

from .reflect import to_param_value, to_string_map

__all__ = [
    "to_param_value",
    "to_string_map",
]
