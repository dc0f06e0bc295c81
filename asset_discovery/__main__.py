"""
Entry point for running asset_discovery as a module.

This allows the package to be executed with: python -m asset_discovery
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
