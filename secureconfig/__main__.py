"""
Main entry point for running secureconfig as a module.

Usage:
    python -m secureconfig [options]
"""

from .cli import main
import sys

if __name__ == "__main__":
    sys.exit(main())
