"""namecraft.core.rename.unified_rename_engine.

Central rename engine facade for previewing, validating and executing
batch rename operations.

This module provides the `UnifiedRenameEngine` pure Python facade used by
the command line and by the Qt adapter (namecraft.ui.adapters). It owns
the current file list, the word method session and the undo history.

The engine respects the preview -> validate -> execute workflow.

Author: Michael Economou
Date: 2026-10-15
"""

from collections.abc import Sequence
from typing import Any

from namecraft.app.state.word_session import WordSession
from namecraft.config import DEFAULT_RENAME_METHOD
from namecraft.core.rename.data_classes import (
    ExecutionResult,
    PreviewResult,
    RenameState,
    RenameSummary,
    ValidationResult,
)
from namecraft.core.rename.execution_manager import ExecutionManager, Validator
from namecraft.core.rename.history_manager import RenameHistoryManager
from namecraft.core.rename.preview_manager import PreviewManager
from namecraft.core.rename.validation_manager import ValidationManager
from namecraft.models.file_item import FileItem
from namecraft.utils.filesystem.file_utils import summarize_rename_results
from namecraft.utils.filesystem.sorting import remove_duplicates
from namecraft.utils.logging.logger_factory import get_cached_logger
from namecraft.utils.naming.filename_validator import validate_filename

logger = get_cached_logger(__name__)


class UnifiedRenameEngine:
    """Pure Python facade for the unified rename workflow.

    This Qt-free object exposes high-level methods for:
        - generating previews (`generate_preview`)
        - validating previewed names (`validate_preview`)
        - executing renames (`execute_rename`)
        - stepping through executed renames (`undo`, `redo`)
    """

    def __init__(
        self,
        files: Sequence[str] = (),
        session: WordSession | None = None,
        history_manager: RenameHistoryManager | None = None,
    ) -> None:
        self.preview_manager = PreviewManager()
        self.validation_manager = ValidationManager()
        self.execution_manager = ExecutionManager()
        self.history_manager = history_manager or RenameHistoryManager()
        self.session = session or WordSession()
        self.state = RenameState()

        if files:
            self.set_files(files)

        logger.debug("[UnifiedRenameEngine] Initialized", extra={"dev_only": True})

    # =====================================
    # Files
    # =====================================

    @property
    def files(self) -> list[FileItem]:
        return self.state.files

    @property
    def file_paths(self) -> list[str]:
        return [file.full_path for file in self.state.files]

    def set_files(self, paths: Sequence[str]) -> None:
        """Load a new batch. Selection, results and history are reset."""
        unique = remove_duplicates(paths)
        self.state = RenameState(files=[FileItem.from_path(path) for path in unique])
        self.session.set_files(unique)
        self.history_manager.clear()
        logger.info("[UnifiedRenameEngine] Loaded %d file(s)", len(unique))

    def _replace_paths(self, paths: Sequence[str]) -> None:
        """Point the batch at new paths of the same files (after rename, undo or redo)."""
        files = [
            file if file.full_path == new_path else file.renamed_to(new_path)
            for file, new_path in zip(self.state.files, paths, strict=False)
        ]
        self.state.files = files
        self.session.update_file_paths([file.full_path for file in files])

    # =====================================
    # Workflow
    # =====================================

    def generate_preview(
        self,
        method: str = DEFAULT_RENAME_METHOD,
        data: dict[str, Any] | None = None,
        metadata_cache: dict[str, Any] | None = None,
    ) -> PreviewResult:
        """Compute the proposed names of the current batch.

        Raises:
            UnknownRenameMethodError: If ``method`` is not supported.

        """
        data = dict(data or {})
        result = self.preview_manager.generate_preview(
            self.state.files, method, data, self.session, metadata_cache
        )
        self.state.method = method
        self.state.data = data
        self.state.preview_result = result
        self.state.validation_result = None
        return result

    def validate_preview(
        self, preview_pairs: list[tuple[str, str]] | None = None
    ) -> ValidationResult:
        """Validate ``preview_pairs``, or the latest preview when omitted."""
        if preview_pairs is None:
            preview = self.state.preview_result
            preview_pairs = preview.name_pairs if preview is not None else []
        result = self.validation_manager.validate_preview(preview_pairs)
        self.state.validation_result = result
        return result

    def execute_rename(
        self,
        new_names: list[str] | None = None,
        validator: Validator | None = validate_filename,
    ) -> ExecutionResult:
        """Rename the batch to ``new_names`` (default: the latest preview).

        Successful renames update the batch paths and the word session, and
        the before/after lists are recorded for undo.
        """
        if new_names is None:
            preview = self.state.preview_result
            new_names = preview.new_names if preview is not None else []

        old_paths = self.file_paths
        result = self.execution_manager.execute_rename(self.state.files, new_names, validator)

        new_paths = list(old_paths)
        for index, item in enumerate(result.items):
            if item.success:
                new_paths[index] = item.new_path

        if new_paths != old_paths:
            self.history_manager.record(old_paths, new_paths)
            self._replace_paths(new_paths)

        self.state.execution_result = result
        self.state.preview_result = None
        self.state.validation_result = None
        return result

    def rename(
        self,
        method: str = DEFAULT_RENAME_METHOD,
        data: dict[str, Any] | None = None,
        metadata_cache: dict[str, Any] | None = None,
    ) -> ExecutionResult:
        """Preview with ``method`` and execute the result in one call."""
        preview = self.generate_preview(method, data, metadata_cache)
        return self.execute_rename(preview.new_names)

    # =====================================
    # History
    # =====================================

    def can_undo(self) -> bool:
        return self.history_manager.can_undo()

    def can_redo(self) -> bool:
        return self.history_manager.can_redo()

    def undo(self) -> ExecutionResult | None:
        """Revert the last rename batch; None when there is nothing to undo."""
        step = self.history_manager.undo()
        if step is None:
            return None
        paths, result = step
        self._replace_paths(paths)
        self.state.execution_result = result
        return result

    def redo(self) -> ExecutionResult | None:
        """Reapply the last undone rename batch; None when there is nothing to redo."""
        step = self.history_manager.redo()
        if step is None:
            return None
        paths, result = step
        self._replace_paths(paths)
        self.state.execution_result = result
        return result

    # =====================================
    # Reporting
    # =====================================

    @staticmethod
    def summarize(result: ExecutionResult) -> RenameSummary:
        return summarize_rename_results(result.to_dicts())

    def get_current_state(self) -> RenameState:
        return self.state
