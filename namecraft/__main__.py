"""Module: __main__.py

Author: Michael Economou
Date: 2026-10-16

Allows ``python -m namecraft``.
"""

import sys

from namecraft.cli import main

if __name__ == "__main__":
    sys.exit(main())
