"""Module: namecraft.config

Author: Michael Economou
Date: 2026-10-12

Configuration package for namecraft.

This package organizes configuration into logical modules:
- app: Application info, debug flags, logging
- paths: Filename validation rules, media extensions
- features: Word engine thresholds, history limits, rename method defaults

All settings are re-exported from this module:
    from namecraft.config import APP_NAME, SIMILAR_PATTERN_THRESHOLD
"""

from namecraft.config.app import *  # noqa: F401, F403
from namecraft.config.features import *  # noqa: F401, F403
from namecraft.config.paths import *  # noqa: F401, F403
