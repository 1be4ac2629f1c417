"""Module: json_config_manager.py

Author: Michael Economou
Date: 2026-10-13

json_config_manager.py
JSON-based configuration manager for namecraft. Settings are grouped in
categories, saved with a backup of the previous file, and guarded by a
lock so a save from one thread never interleaves with an update from
another.
"""

import json
import os
import shutil
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Generic, TypeVar

from namecraft.config import (
    APP_NAME,
    APP_VERSION,
    CONFIG_BACKUP_ON_SAVE,
    CONFIG_DIR_ENV_POSIX,
    CONFIG_DIR_ENV_WINDOWS,
    CONFIG_FILENAME,
    DEBUG_RESET_CONFIG,
    DEFAULT_DATE_FORMAT,
    DEFAULT_EXPRESSION,
    DEFAULT_NUMBERING_PATTERN,
    DEFAULT_PATTERN,
    DEFAULT_RENAME_METHOD,
)
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

T = TypeVar("T")


def get_user_config_dir(app_name: str = APP_NAME) -> str:
    """Per-user configuration directory.

    ``%APPDATA%/<app>`` on Windows, ``$XDG_CONFIG_HOME/<app>`` elsewhere,
    falling back to ``~/.config/<app>``.
    """
    if sys.platform.startswith("win"):
        base = os.environ.get(CONFIG_DIR_ENV_WINDOWS) or os.path.expanduser("~")
    else:
        base = os.environ.get(CONFIG_DIR_ENV_POSIX) or os.path.join(
            os.path.expanduser("~"), ".config"
        )
    return os.path.join(base, app_name)


class ConfigCategory(Generic[T]):
    """Base class for configuration categories with defaults."""

    def __init__(self, name: str, defaults: dict[str, Any]):
        self.name = name
        self.defaults = defaults
        self._data = defaults.copy()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with fallback to default."""
        return self._data.get(key, default if default is not None else self.defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def update(self, data: dict[str, Any]) -> None:
        self._data.update(data)

    def reset(self) -> None:
        """Reset all values to defaults."""
        self._data = self.defaults.copy()

    def to_dict(self) -> dict[str, Any]:
        return self._data.copy()

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load from dictionary, applying defaults for missing keys."""
        self._data = self.defaults.copy()
        self._data.update(data)


class RenameConfig(ConfigCategory[Any]):
    """Last used rename method and its options."""

    def __init__(self) -> None:
        defaults = {
            "method": DEFAULT_RENAME_METHOD,
            "pattern": DEFAULT_PATTERN,
            "date_format": DEFAULT_DATE_FORMAT,
            "numbering_pattern": DEFAULT_NUMBERING_PATTERN,
            "numbering_start": 1,
            "numbering_step": 1,
            "numbering_padding": 0,
            "numbering_sort": "name",
            "numbering_reverse": False,
            "expression": DEFAULT_EXPRESSION,
            "case_sensitive": False,
            "apply_similar_pattern": True,
            "use_similar_pattern_filter": False,
            "treat_selection_as_one": False,
        }
        super().__init__("rename", defaults)


class JSONConfigManager:
    """JSON-based configuration manager with category registration and backups."""

    def __init__(self, app_name: str = APP_NAME, config_dir: str | None = None):
        self.app_name = app_name
        self.config_dir = Path(config_dir or get_user_config_dir(app_name))
        self.config_file = self.config_dir / CONFIG_FILENAME
        self.backup_file = self.config_dir / f"{CONFIG_FILENAME}.bak"

        self._lock = threading.RLock()
        self._categories: dict[str, ConfigCategory[Any]] = {}

        logger.debug(
            "[JSONConfigManager] Initialized for '%s' with dir: %s",
            app_name,
            self.config_dir,
            extra={"dev_only": True},
        )

    def register_category(self, category: ConfigCategory[Any]) -> None:
        with self._lock:
            self._categories[category.name] = category

    def get_category(
        self, category_name: str, create_if_not_exists: bool = False
    ) -> ConfigCategory[Any] | None:
        """Get configuration category by name."""
        with self._lock:
            category = self._categories.get(category_name)
            if category is None and create_if_not_exists:
                logger.debug(
                    "[JSONConfigManager] Category '%s' not found, creating it", category_name
                )
                category = ConfigCategory(category_name, {})
                self._categories[category_name] = category
            return category

    def list_categories(self) -> list[str]:
        return list(self._categories.keys())

    def load(self) -> bool:
        """Load configuration from the JSON file; a missing file keeps the defaults."""
        with self._lock:
            if DEBUG_RESET_CONFIG and self.config_file.exists():
                logger.info("[DEBUG] Deleting config file for fresh start: %s", self.config_file)
                self.config_file.unlink()

            if not self.config_file.exists():
                logger.info(
                    "[JSONConfigManager] No config file found, using defaults",
                    extra={"dev_only": True},
                )
                return True

            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("[JSONConfigManager] Failed to load configuration: %s", e)
                return False

            if not isinstance(data, dict):
                logger.error("[JSONConfigManager] Configuration root is not an object")
                return False

            for category_name, category in self._categories.items():
                if isinstance(data.get(category_name), dict):
                    category.from_dict(data[category_name])

            logger.info(
                "[JSONConfigManager] Configuration loaded successfully",
                extra={"dev_only": True},
            )
            return True

    def save(self, create_backup: bool = CONFIG_BACKUP_ON_SAVE) -> bool:
        """Save configuration to the JSON file, copying the previous file to a backup."""
        with self._lock:
            data: dict[str, Any] = {
                category_name: category.to_dict()
                for category_name, category in self._categories.items()
            }
            data["_metadata"] = {
                "last_saved": datetime.now().isoformat(),
                "version": f"v{APP_VERSION}",
                "app_name": self.app_name,
            }

            try:
                self.config_dir.mkdir(parents=True, exist_ok=True)
                if create_backup and self.config_file.exists():
                    shutil.copy2(self.config_file, self.backup_file)

                with open(self.config_file, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
            except (OSError, TypeError) as e:
                logger.error("[JSONConfigManager] Failed to save configuration: %s", e)
                return False

            logger.debug("[JSONConfigManager] Configuration saved successfully")
            return True

    def get_config_info(self) -> dict[str, Any]:
        """Get information about configuration file and categories."""
        info: dict[str, Any] = {
            "config_file": str(self.config_file),
            "backup_file": str(self.backup_file),
            "file_exists": self.config_file.exists(),
            "backup_exists": self.backup_file.exists(),
            "app_name": self.app_name,
            "categories": {name: len(cat.to_dict()) for name, cat in self._categories.items()},
        }

        if self.config_file.exists():
            stat = self.config_file.stat()
            info["file_size"] = stat.st_size
            info["last_modified"] = datetime.fromtimestamp(stat.st_mtime).isoformat()

        return info


def create_app_config_manager(
    app_name: str = APP_NAME, config_dir: str | None = None
) -> JSONConfigManager:
    """Create a JSONConfigManager with the default namecraft categories."""
    manager = JSONConfigManager(app_name=app_name, config_dir=config_dir)
    manager.register_category(RenameConfig())
    return manager
