"""
Module execution entry point.

Allows running with: python -m http_template_cli
"""

import sys
from http_template_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
