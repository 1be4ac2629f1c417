"""
file_item.py

Author: Michael Economou
Date: 2026-10-12

This module defines the FileItem class, which represents a single file queued
for renaming, with its path, extension, last modification date and size.

Classes:
    FileItem: Represents a single file of the rename batch.
"""

import os
from datetime import datetime

from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class FileItem:
    """
    Represents a file of the rename batch.
    The filename is always derived from the current full path.
    """

    def __init__(self, path: str, extension: str, modified: datetime, size: int = 0):
        self.full_path = path
        self.extension = extension
        self.modified = modified
        self.size = size

    @property
    def filename(self) -> str:
        """Base name of the file, extension included."""
        return os.path.basename(self.full_path)

    @property
    def folder(self) -> str:
        return os.path.dirname(self.full_path)

    def __str__(self) -> str:
        return f"FileItem({self.filename})"

    def __repr__(self) -> str:
        return (
            f"FileItem(full_path='{self.full_path}', extension='{self.extension}', "
            f"modified='{self.modified}')"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileItem):
            return NotImplemented
        return self.full_path == other.full_path

    def __hash__(self) -> int:
        return hash(self.full_path)

    def renamed_to(self, new_path: str) -> "FileItem":
        """Return a copy of this item pointing at ``new_path``."""
        return FileItem(new_path, self.extension, self.modified, self.size)

    @classmethod
    def from_path(cls, file_path: str) -> "FileItem":
        """
        Create a FileItem from a file path by auto-detecting properties.
        Missing files get an epoch modification date and size 0.

        Args:
            file_path: Full path to the file

        Returns:
            FileItem instance with auto-detected properties
        """
        filename = os.path.basename(file_path)
        _, ext = os.path.splitext(filename)
        extension = ext[1:].lower() if ext.startswith(".") else ""

        try:
            stat = os.stat(file_path)
            modified = datetime.fromtimestamp(stat.st_mtime)
            size = stat.st_size
        except (OSError, ValueError):
            logger.debug("[FileItem] No stat for %s", file_path, extra={"dev_only": True})
            modified = datetime.fromtimestamp(0)
            size = 0

        return cls(path=file_path, extension=extension, modified=modified, size=size)
