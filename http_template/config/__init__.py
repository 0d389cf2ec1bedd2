"""
Runtime Configuration Module

Provides configuration loading and management for HttpTemplate.
"""

from .runtime import (
    ENV_PREFIX,
    HttpTemplateConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "ENV_PREFIX",
    "HttpTemplateConfig",
    "get_default_config",
    "set_default_config",
]
