"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-12

logger_setup.py
This module provides the ConfigureLogger class for setting up logging in the application.
The root logger gets a console handler (INFO+ by default, dev-only records hidden),
a rotating application log file and, optionally, a rotating debug log file.
Levels and sizes come from namecraft.config.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from namecraft.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from namecraft.utils.logging.logger_file_helper import add_file_handler
from namecraft.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """Configures application-wide logging on the root logger."""

    def __init__(
        self,
        log_name: str = "app",
        log_dir: str = "logs",
        console_enabled: bool = LOG_TO_CONSOLE,
        file_enabled: bool = LOG_TO_FILE,
        debug_enabled: bool = LOG_DEBUG_FILE_ENABLED,
        console_level: int | None = None,
    ):
        """Initializes and configures the logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            console_enabled (bool): Attach a console handler.
            file_enabled (bool): Attach the rotating application log.
            debug_enabled (bool): Attach the rotating debug log.
            console_level (int, optional): Overrides LOG_CONSOLE_LEVEL.

        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels

        if console_level is None:
            console_level = getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO)
        file_level = getattr(logging, LOG_FILE_LEVEL, logging.INFO)

        if self.logger.hasHandlers():
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if console_enabled:
            self._setup_console_handler(console_level)

        if file_enabled or debug_enabled:
            os.makedirs(log_dir, exist_ok=True)

        if file_enabled:
            add_file_handler(
                logger=self.logger,
                log_path=os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                level=file_level,
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )

        if debug_enabled:
            add_file_handler(
                logger=self.logger,
                log_path=os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                level=logging.DEBUG,
                max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int) -> None:
        """Sets up console handler with UTF-8-safe output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stderr)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)
