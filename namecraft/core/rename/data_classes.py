"""namecraft.core.rename.data_classes.

Data classes for the unified rename engine.

This module contains lightweight data classes that hold preview, validation
and execution results used throughout the rename workflow.

Author: Michael Economou
Date: 2026-10-15
"""

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from namecraft.utils.filesystem.file_utils import RenameSummary

if TYPE_CHECKING:
    from namecraft.models.file_item import FileItem

__all__ = [
    "ExecutionItem",
    "ExecutionResult",
    "PreviewResult",
    "RenameState",
    "RenameSummary",
    "ValidationItem",
    "ValidationResult",
]


@dataclass
class PreviewResult:
    """Container for preview generation output.

    Attributes:
        name_pairs: List of tuples of (original_filename, proposed_filename).
        has_changes: True if at least one proposed filename differs from the
            original.
        errors: Error messages captured while computing names; a file whose
            name could not be computed keeps its original name.
        timestamp: Time when preview was generated (for staleness checking).

    """

    name_pairs: list[tuple[str, str]]
    has_changes: bool
    errors: list[str] = field(default_factory=list)
    timestamp: float = 0.0

    def __post_init__(self) -> None:
        if self.timestamp == 0.0:
            self.timestamp = time.time()

    @property
    def new_names(self) -> list[str]:
        return [new_name for _, new_name in self.name_pairs]

    def is_stale(self, max_age_seconds: float = 300.0) -> bool:
        """True if the preview is older than ``max_age_seconds``."""
        return time.time() - self.timestamp > max_age_seconds


@dataclass
class ValidationItem:
    """Validation information for a single file preview entry.

    Attributes:
        old_name: Original filename.
        new_name: Proposed filename produced by the preview.
        is_valid: True when the proposed name passes filename validation.
        is_duplicate: True when the proposed name was already proposed for
            an earlier file of the same preview.
        is_unchanged: True when `old_name == new_name`.
        error_message: Optional human-readable validation error.

    """

    old_name: str
    new_name: str
    is_valid: bool
    is_duplicate: bool
    is_unchanged: bool
    error_message: str = ""


@dataclass
class ValidationResult:
    """Aggregate result of validating a preview.

    Counts and flags are computed from ``items``.
    """

    items: list[ValidationItem]
    duplicates: set[str]
    has_errors: bool = False
    has_unchanged: bool = False
    unchanged_count: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    duplicate_count: int = 0

    def __post_init__(self) -> None:
        self.has_errors = any(not item.is_valid or item.is_duplicate for item in self.items)
        self.unchanged_count = sum(1 for item in self.items if item.is_unchanged)
        self.has_unchanged = self.unchanged_count == len(self.items) if self.items else False
        self.valid_count = sum(1 for item in self.items if item.is_valid and not item.is_unchanged)
        self.invalid_count = sum(1 for item in self.items if not item.is_valid)
        self.duplicate_count = sum(1 for item in self.items if item.is_duplicate)


@dataclass
class ExecutionItem:
    """Result/plan entry for executing a single file rename.

    Attributes:
        old_path: Absolute path of the original file.
        new_path: Absolute path of the target filename.
        success: True when the rename was applied (or nothing had to change).
        error_message: Error text if execution failed.
        skip_reason: Why no filesystem operation was needed ("unchanged").
        is_conflict: True when another file already held the target path.

    """

    old_path: str
    new_path: str
    success: bool = False
    error_message: str = ""
    skip_reason: str = ""
    is_conflict: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Per-file result as reported to callers.

        Successful items carry the new path, failed items the error.
        """
        if self.success:
            return {"success": True, "old_path": self.old_path, "new_path": self.new_path}
        return {"success": False, "old_path": self.old_path, "error": self.error_message}


@dataclass
class ExecutionResult:
    """Aggregate execution summary after attempting a batch rename.

    Attributes:
        items: List of :class:`ExecutionItem` for each attempted rename.
        success_count: Number of successful renames, unchanged files included.
        error_count: Number of failed items.
        skipped_count: Number of unchanged files.
        conflicts_count: Number of items that hit an existing target.

    """

    items: list[ExecutionItem]
    success_count: int = 0
    error_count: int = 0
    skipped_count: int = 0
    conflicts_count: int = 0

    def __post_init__(self) -> None:
        self.success_count = sum(1 for item in self.items if item.success)
        self.error_count = sum(1 for item in self.items if not item.success)
        self.skipped_count = sum(1 for item in self.items if item.skip_reason)
        self.conflicts_count = sum(1 for item in self.items if item.is_conflict)

    @property
    def renamed_count(self) -> int:
        """Files whose name actually changed on disk."""
        return sum(1 for item in self.items if item.success and not item.skip_reason)

    def to_dicts(self) -> list[dict[str, Any]]:
        return [item.to_dict() for item in self.items]


@dataclass
class RenameState:
    """Latest inputs and results of the rename workflow.

    Attributes:
        files: Files currently in the batch.
        method: Rename method used for the latest preview.
        data: Options of that method.
        preview_result: Latest :class:`PreviewResult` produced.
        validation_result: Latest :class:`ValidationResult` produced.
        execution_result: Latest :class:`ExecutionResult` produced.

    """

    files: list["FileItem"] = field(default_factory=list)
    method: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    preview_result: PreviewResult | None = None
    validation_result: ValidationResult | None = None
    execution_result: ExecutionResult | None = None
