"""namecraft - batch file renaming with word-level editing.

Author: Michael Economou
Date: 2026-10-12
"""

from namecraft.config import APP_VERSION

__version__ = APP_VERSION
