"""
Entry point for running markup_layout as a module.

Usage:
    python -m markup_layout input.html -o output.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
