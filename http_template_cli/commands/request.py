"""
CLI Request Commands

Issue a single GET or POST through HttpTemplate and print the body.

Usage:
    http-template get "https://internal.example/status" --https --json
    http-template post "http://example.com/submit" -d a=1 -d b=2
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from typing import Any, Sequence

from http_template import HttpException, HttpTemplate, HttpTemplateConfig, Protocol
from http_template.http.callbacks import json_parser, text_parser


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_HTTP_ERROR = 2


def parse_form_pairs(pairs: Sequence[str] | None) -> dict[str, str]:
    """Turn ["a=1", "b=2"] into {"a": "1", "b": "2"}."""
    params: dict[str, str] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise ValueError(f"Expected key=value, got {pair!r}")
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Empty parameter name in {pair!r}")
        params[key] = value
    return params


def build_template(base: HttpTemplateConfig, args: Namespace) -> HttpTemplate:
    """Apply command-line overrides on top of the loaded configuration."""
    builder = HttpTemplate.Builder(base)
    if getattr(args, "https", False):
        builder.protocol(Protocol.HTTPS)
    if getattr(args, "charset", None):
        builder.charset(args.charset)
    if getattr(args, "timeout", None):
        builder.connection_timeout(args.timeout)
    return builder.build()


def _emit(result: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"ok": True, "result": result}, indent=2, ensure_ascii=False))
    else:
        print(result)


def _emit_error(e: HttpException, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"ok": False, "error": e.to_error_model().model_dump()}, indent=2))
    else:
        print(f"Error [{e.code}]: {e.message}", file=sys.stderr)


def _run(args: Namespace, call) -> int:
    try:
        template = build_template(args.template_config, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    parser = json_parser if args.json else text_parser
    try:
        result = call(template, parser)
    except HttpException as e:
        logger.debug(f"Request failed: {e!r}")
        _emit_error(e, args.json)
        return EXIT_HTTP_ERROR

    _emit(result, args.json)
    return EXIT_SUCCESS


def get_cmd(args: Namespace) -> int:
    """Handle get command."""
    return _run(args, lambda template, parser: template.do_get(args.url, parser))


def post_cmd(args: Namespace) -> int:
    """Handle post command."""
    try:
        params = parse_form_pairs(args.data)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    return _run(args, lambda template, parser: template.do_post(args.url, params, parser))
