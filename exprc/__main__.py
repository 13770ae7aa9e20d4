"""
Entry point for running exprc as a module.

Usage:
    python -m exprc compile "3 + 4 * 2"
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
