"""
CLI command modules.
"""

from http_template_cli.commands import request

__all__ = ["request"]
