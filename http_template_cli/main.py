"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m http_template_cli get "<url>" [--https] [--charset C] [--timeout S] [--json]
    python -m http_template_cli post "<url>" [-d key=value ...] [--https] [--json]
    python -m http_template_cli config --show
    python -m http_template_cli config --file http.yaml

Environment Variables:
    HTTP_TEMPLATE_PROTOCOL              http or https (default: http)
    HTTP_TEMPLATE_CONTENT_TYPE          Content type (default: application/json)
    HTTP_TEMPLATE_CHARSET               Charset (default: UTF-8)
    HTTP_TEMPLATE_REQUEST_METHOD        Default method, GET or POST (default: POST)
    HTTP_TEMPLATE_CONNECTION_TIMEOUT    HTTPS connect/read timeout in seconds (default: 10)
    HTTP_TEMPLATE_LOG_LEVEL             Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import traceback
from pathlib import Path
from typing import Sequence

from http_template.config import ENV_PREFIX, HttpTemplateConfig, get_default_config
from http_template_cli.commands import request
from http_template_cli.commands.request import (
    EXIT_HTTP_ERROR,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def load_template_config(config_path: Path | None = None) -> HttpTemplateConfig:
    """
    Load configuration from a YAML file and/or the environment.

    Environment variables override file settings.
    """
    if config_path is None:
        return get_default_config()
    return HttpTemplateConfig.from_yaml(config_path).with_env_overrides()


def _add_request_options(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("url", type=str, help="Target URL")
    sub.add_argument(
        "--https",
        action="store_true",
        default=False,
        help="Use the trust-all HTTPS client (no certificate or hostname checks)",
    )
    sub.add_argument(
        "--charset",
        type=str,
        default=None,
        help="Charset for the form body and response decoding",
    )
    sub.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Connect/read timeout in seconds for the HTTPS client",
    )
    sub.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Parse the body as JSON and print a machine-readable result",
    )
    sub.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks for unexpected errors",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="http-template",
        description="Issue GET/POST requests through HttpTemplate.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides HTTP_TEMPLATE_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- get command ---
    get_parser = subparsers.add_parser(
        "get",
        help="Send a GET request",
        description="GET a URL; query parameters must be part of the URL.",
    )
    _add_request_options(get_parser)
    get_parser.set_defaults(func=request.get_cmd)

    # --- post command ---
    post_parser = subparsers.add_parser(
        "post",
        help="Send a form-encoded POST request",
        description="POST key=value pairs as an application/x-www-form-urlencoded body.",
    )
    _add_request_options(post_parser)
    post_parser.add_argument(
        "--data", "-d",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Form parameter (repeatable)",
    )
    post_parser.set_defaults(func=request.post_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Show the effective configuration",
        description="Display the configuration after file and environment overrides.",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--file", "-f",
        type=Path,
        default=None,
        help="Show the configuration loaded from this YAML file (env vars still override)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.file is not None:
        try:
            config = load_template_config(args.file)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error loading configuration: {e}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
        print(json.dumps(config.to_dict(), indent=2))
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.template_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: http-template config [--show|--file PATH]")
    print("  --show  Show current configuration")
    print("  --file  Show configuration loaded from a YAML file")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=HTTP failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO")
    setup_logging(level=log_level)

    # Load configuration
    try:
        args.template_config = load_template_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
