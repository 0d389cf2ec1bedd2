"""
http-template CLI

Command-line front end for HttpTemplate.

Usage:
    python -m http_template_cli get "<url>" [--https] [--json]
    python -m http_template_cli post "<url>" -d key=value [-d key=value ...]
    python -m http_template_cli config --show
"""

__version__ = "0.1.0"
