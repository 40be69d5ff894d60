"""
Entry point for running gometrics as a module.

Usage:
    python -m gometrics analyze ./pkg
"""

import sys
from gometrics.cli import main

if __name__ == "__main__":
    sys.exit(main())
