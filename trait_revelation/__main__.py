"""
Run the developer CLI.

Usage:
    python -m trait_revelation replay script.yaml
"""

import sys

from .interface.cli import main

if __name__ == "__main__":
    sys.exit(main())
