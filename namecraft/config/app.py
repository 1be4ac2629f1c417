"""Module: namecraft.config.app

Author: Michael Economou
Date: 2026-10-12

Application-level configuration: app info, debug flags, logging settings.
"""

# =====================================
# DEBUG SETTINGS
# =====================================

# Config reset - if True, deletes config.json on startup
DEBUG_RESET_CONFIG = False

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "namecraft"
APP_VERSION = "1.0"
APP_AUTHOR = "Michael Economou"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 10_000_000  # 10MB per file
LOG_FILE_BACKUP_COUNT = 5

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_LEVEL = "DEBUG"
LOG_DEBUG_FILE_MAX_BYTES = 20_000_000  # 20MB per debug file
LOG_DEBUG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False

# =====================================
# CONFIG FILE SETTINGS
# =====================================

CONFIG_FILENAME = "config.json"
CONFIG_BACKUP_ON_SAVE = True
