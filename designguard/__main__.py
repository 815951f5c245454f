"""
Entry point for running designguard as a module: python -m designguard
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
