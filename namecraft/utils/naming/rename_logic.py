"""Module: rename_logic.py.

Author: Michael Economou
Date: 2026-10-13

Low-level helpers used when a rename reaches the filesystem.
Functions:
- is_case_only_change: Detect renames that only change letter case.
- safe_case_rename: Rename a file, working around case-insensitive filesystems.
- has_rename_conflict: Check whether a target path is taken by another file.
"""

import os
import platform

from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# Upper bound on temporary names tried for a two-step case rename
MAX_TEMP_NAME_ATTEMPTS = 100


def is_case_only_change(old: str, new: str) -> bool:
    """Check if the only difference between old and new names is case."""
    return old.lower() == new.lower() and old != new


def has_rename_conflict(src_path: str, dst_path: str) -> bool:
    """True when ``dst_path`` exists and is a different file than ``src_path``.

    A case-only change of the same file is not a conflict, even on
    case-insensitive filesystems where both paths resolve to one entry.
    """
    if not os.path.exists(dst_path):
        return False
    if os.path.abspath(dst_path) == os.path.abspath(src_path):
        return False
    return not is_case_only_change(os.path.basename(src_path), os.path.basename(dst_path))


def _temp_path_for(src_dir: str, dst_name: str) -> str | None:
    temp_path = os.path.join(src_dir, f"_temp_rename_{abs(hash(dst_name))}.tmp")
    counter = 0
    while os.path.exists(temp_path):
        counter += 1
        if counter > MAX_TEMP_NAME_ATTEMPTS:
            return None
        temp_path = os.path.join(src_dir, f"_temp_rename_{abs(hash(dst_name))}_{counter}.tmp")
    return temp_path


def safe_case_rename(src_path: str, dst_path: str) -> None:
    """Rename ``src_path`` to ``dst_path``.

    On Windows, NTFS is case-insensitive, so os.rename(file.txt, FILE.TXT)
    fails. Case-only changes go through a temporary name there.

    Raises:
        OSError: When the rename fails. A half-done case rename is rolled
            back before the error propagates.

    """
    src_dir = os.path.dirname(src_path)
    src_name = os.path.basename(src_path)
    dst_name = os.path.basename(dst_path)

    if not is_case_only_change(src_name, dst_name) or platform.system() != "Windows":
        os.rename(src_path, dst_path)
        return

    temp_path = _temp_path_for(src_dir, dst_name)
    if temp_path is None:
        raise OSError(f"Could not find a free temporary name for case rename of {src_path}")

    os.rename(src_path, temp_path)
    logger.debug("[RenameLogic] Case rename step 1: %s -> %s", src_name, temp_path)
    try:
        os.rename(temp_path, dst_path)
    except OSError:
        if not os.path.exists(src_path):
            os.rename(temp_path, src_path)
            logger.info("[RenameLogic] Restored original after failed case rename: %s", src_path)
        raise

    logger.info("[RenameLogic] Completed case-only rename: %s -> %s", src_name, dst_name)
