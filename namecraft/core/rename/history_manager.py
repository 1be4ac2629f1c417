"""namecraft.core.rename.history_manager.

Undo/redo of executed renames.

This module provides the RenameHistoryManager class that records the file
list before and after each rename and replays the difference on disk
when stepping through the history.

Author: Michael Economou
Date: 2026-10-15
"""

import os
from collections.abc import Sequence

from namecraft.app.state.history import FileHistory
from namecraft.core.rename.data_classes import ExecutionItem, ExecutionResult
from namecraft.core.rename.execution_manager import CONFLICT_MESSAGE
from namecraft.utils.logging.logger_factory import get_cached_logger
from namecraft.utils.naming.rename_logic import has_rename_conflict, safe_case_rename

logger = get_cached_logger(__name__)

RENAME_OPERATION = "rename"


class RenameHistoryManager:
    """Record rename batches and revert or reapply them on disk.

    Snapshots are matched index by index: the file at position ``i`` of one
    snapshot is the file at position ``i`` of the next.
    """

    def __init__(self, history: FileHistory | None = None) -> None:
        self.history = history if history is not None else FileHistory()

    def record(self, old_paths: Sequence[str], new_paths: Sequence[str]) -> None:
        """Store the list before and after a rename batch."""
        self.history.save(old_paths)
        self.history.save(new_paths, RENAME_OPERATION)

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def clear(self) -> None:
        self.history.clear()

    def undo(self) -> tuple[list[str], ExecutionResult] | None:
        """Revert the current snapshot to the previous one.

        Returns:
            The resulting file list and the per-file results, or None when
            there is nothing to undo.

        """
        step = self.history.undo()
        if step is None:
            return None
        logger.info("[RenameHistoryManager] Undo")
        return self._apply(*step)

    def redo(self) -> tuple[list[str], ExecutionResult] | None:
        """Reapply the next snapshot."""
        step = self.history.redo()
        if step is None:
            return None
        logger.info("[RenameHistoryManager] Redo")
        return self._apply(*step)

    def _apply(
        self, current: list[str], target: list[str]
    ) -> tuple[list[str], ExecutionResult]:
        """Rename ``current[i]`` to ``target[i]`` wherever they differ.

        A file that could not be moved keeps its current path in the
        returned list.
        """
        resulting = list(target)
        items: list[ExecutionItem] = []

        for index, (old_path, new_path) in enumerate(zip(current, target, strict=False)):
            if old_path == new_path:
                continue

            item = ExecutionItem(old_path=old_path, new_path=new_path)
            if has_rename_conflict(old_path, new_path):
                item.is_conflict = True
                item.error_message = CONFLICT_MESSAGE
            else:
                try:
                    safe_case_rename(old_path, new_path)
                    item.success = True
                except OSError as e:
                    item.error_message = str(e)
                    logger.error(
                        "[RenameHistoryManager] Could not move %s back to %s: %s",
                        os.path.basename(old_path),
                        os.path.basename(new_path),
                        e,
                    )

            if not item.success:
                resulting[index] = old_path
            items.append(item)

        result = ExecutionResult(items)
        if result.error_count:
            logger.warning(
                "[RenameHistoryManager] %d file(s) could not be moved", result.error_count
            )
        return resulting, result
