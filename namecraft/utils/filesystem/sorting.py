"""Module: sorting.py

Author: Michael Economou
Date: 2026-10-13

File list ordering: by name, type, date or size, plus the index map the
numbering method uses to number files in a chosen order while keeping the
list itself untouched.
"""

import os
import random
import re
from collections.abc import Sequence
from datetime import datetime

from namecraft.utils.filesystem.file_utils import get_file_name, split_file_name
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_NAME_DATE_RE = re.compile(r"(\d{4})[-_]?(\d{2})[-_]?(\d{2})")
_EPOCH = datetime.fromtimestamp(0)


def remove_duplicates(files: Sequence[str]) -> list[str]:
    """Drop repeated paths, keeping the first occurrence."""
    unique = list(dict.fromkeys(files))
    if len(unique) != len(files):
        logger.warning("[Sorting] Removed duplicate files: %d -> %d", len(files), len(unique))
    return unique


def _name_key(path: str) -> str:
    return get_file_name(path).lower()


def date_from_file_name(file_name: str) -> datetime | None:
    """Parse a ``YYYYMMDD`` / ``YYYY-MM-DD`` / ``YYYY_MM_DD`` date found in a name."""
    match = _NAME_DATE_RE.search(file_name)
    if match is None:
        return None
    try:
        return datetime(*(int(part) for part in match.groups()))
    except ValueError:
        return None


def file_date(path: str) -> datetime:
    """Modification time, else a date embedded in the name, else the epoch."""
    try:
        return datetime.fromtimestamp(os.stat(path).st_mtime)
    except OSError:
        pass
    return date_from_file_name(get_file_name(path)) or _EPOCH


def file_size(path: str) -> int:
    try:
        return os.stat(path).st_size
    except OSError:
        return 0


def sort_by_name(files: Sequence[str]) -> list[str]:
    return sorted(files, key=_name_key)


def sort_by_type(files: Sequence[str]) -> list[str]:
    """Group by extension, then by name."""

    def key(path: str) -> tuple[str, str]:
        file_name = get_file_name(path)
        return split_file_name(file_name)[1].lower(), file_name

    return sorted(files, key=key)


def sort_by_date(files: Sequence[str]) -> list[str]:
    """Newest first."""
    return sorted(files, key=file_date, reverse=True)


def sort_by_size(files: Sequence[str]) -> list[str]:
    """Largest first."""
    return sorted(files, key=file_size, reverse=True)


_SORTERS = {
    "name": sort_by_name,
    "type": sort_by_type,
    "date": sort_by_date,
    "size": sort_by_size,
}


def sort_files(files: Sequence[str], sort_by: str = "name") -> list[str]:
    """Deduplicate and sort ``files``; an unknown method keeps the list order."""
    unique = remove_duplicates(files)
    sorter = _SORTERS.get(sort_by)
    if sorter is None:
        logger.warning("[Sorting] Unsupported sort method: %s", sort_by)
        return unique
    return sorter(unique)


def create_sorted_index_map(
    files: Sequence[str], sort_method: str = "name", reverse: bool = False
) -> list[int]:
    """Indices of ``files`` in numbering order.

    ``result[position]`` is the index of the file numbered at ``position``.
    Name order is case-insensitive, date and size order are ascending
    (oldest and smallest first). Unknown methods keep the list order.
    """
    indices = list(range(len(files)))

    if sort_method == "name":
        indices.sort(key=lambda i: _name_key(files[i]))
    elif sort_method == "date":
        indices.sort(key=lambda i: file_date(files[i]))
    elif sort_method == "size":
        indices.sort(key=lambda i: file_size(files[i]))
    elif sort_method == "random":
        random.shuffle(indices)

    if reverse:
        indices.reverse()
    return indices


def positions_from_index_map(index_map: Sequence[int]) -> dict[int, int]:
    """Invert a sorted index map: file index -> numbering position."""
    return {file_index: position for position, file_index in enumerate(index_map)}
