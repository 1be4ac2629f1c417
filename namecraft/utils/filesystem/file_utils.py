"""Module: file_utils.py

Author: Michael Economou
Date: 2026-10-13

Path splitting helpers and the rename result summary shown to the user.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

_PATH_SEPARATORS_RE = re.compile(r"[\\/]")


def get_file_name(file_path: str) -> str:
    """Last path component; both ``/`` and ``\\`` are separators."""
    return _PATH_SEPARATORS_RE.split(file_path)[-1]


def split_file_name(file_name: str) -> tuple[str, str]:
    """Split at the last dot: ``("archive.tar", ".gz")``; no dot gives ``(name, "")``."""
    dot_index = file_name.rfind(".")
    if dot_index == -1:
        return file_name, ""
    return file_name[:dot_index], file_name[dot_index:]


def split_file_path(file_path: str) -> tuple[str, str, str]:
    """Return ``(base_name, extension, file_name)`` for a path."""
    file_name = get_file_name(file_path)
    base_name, extension = split_file_name(file_name)
    return base_name, extension, file_name


@dataclass(frozen=True)
class RenameSummary:
    """User-facing outcome of a rename batch."""

    message: str
    level: str
    success_count: int
    error_count: int


def summarize_rename_results(results: Iterable[Mapping[str, Any]]) -> RenameSummary:
    """Count successes and failures of per-file results (dicts with a ``success`` key)."""
    results = list(results)
    success_count = sum(1 for result in results if result.get("success"))
    error_count = len(results) - success_count

    if success_count > 0 and error_count == 0:
        return RenameSummary(
            f"{success_count} files renamed successfully", "success", success_count, 0
        )
    if success_count > 0:
        return RenameSummary(
            f"{success_count} successful, {error_count} failed",
            "warning",
            success_count,
            error_count,
        )
    return RenameSummary(f"Rename failed: {error_count} files", "error", 0, error_count)
