"""namecraft.core.rename.execution_manager.

Execution management for the unified rename engine.

This module provides the ExecutionManager class that applies renames on
disk, one file at a time, inside each file's own folder.

Author: Michael Economou
Date: 2026-10-15
"""

import os
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from namecraft.models.file_item import FileItem

from namecraft.core.rename.data_classes import ExecutionItem, ExecutionResult
from namecraft.utils.logging.logger_factory import get_cached_logger
from namecraft.utils.naming.rename_logic import has_rename_conflict, safe_case_rename

logger = get_cached_logger(__name__)

CONFLICT_MESSAGE = "A file with this name already exists"

Validator = Callable[[str], tuple[bool, str]]


class ExecutionManager:
    """Execute rename operations.

    Unchanged names succeed without touching the disk. A target held by
    another file fails the item; filesystem errors are recorded per item and
    never stop the batch.
    """

    def execute_rename(
        self,
        files: list["FileItem"],
        new_names: list[str],
        validator: Validator | None = None,
    ) -> ExecutionResult:
        """Attempt to rename `files` to `new_names`.

        Args:
            files: Sequence of FileItem objects in original order.
            new_names: Corresponding list of target filenames (not paths).
            validator: Optional callable accepting a basename and returning
                (is_valid, error_message).

        Returns:
            An :class:`ExecutionResult` summarizing the applied operations.

        """
        if not files or not new_names:
            return ExecutionResult([])

        if len(files) != len(new_names):
            logger.warning(
                "[ExecutionManager] %d files but %d names; extra entries are ignored",
                len(files),
                len(new_names),
            )

        results = []
        for item in self._build_execution_plan(files, new_names):
            if not item.success:
                self._execute_item(item, validator)
            results.append(item)

        result = ExecutionResult(results)
        logger.info(
            "[ExecutionManager] Renamed %d file(s), %d unchanged, %d failed",
            result.renamed_count,
            result.skipped_count,
            result.error_count,
        )
        return result

    def _build_execution_plan(
        self, files: list["FileItem"], new_names: list[str]
    ) -> list[ExecutionItem]:
        """Pair source paths with target paths in the same folder.

        Files with no actual name change are marked as already successful.
        """
        items = []
        for file, new_name in zip(files, new_names, strict=False):
            old_path = file.full_path
            new_path = os.path.join(os.path.dirname(old_path), new_name)
            item = ExecutionItem(old_path=old_path, new_path=new_path)

            if file.filename == new_name:
                item.success = True
                item.skip_reason = "unchanged"

            items.append(item)
        return items

    def _execute_item(self, item: ExecutionItem, validator: Validator | None) -> None:
        if validator is not None:
            is_valid, error = validator(os.path.basename(item.new_path))
            if not is_valid:
                item.error_message = error
                return

        if has_rename_conflict(item.old_path, item.new_path):
            item.is_conflict = True
            item.error_message = CONFLICT_MESSAGE
            logger.warning("[ExecutionManager] Target exists, skipping: %s", item.new_path)
            return

        try:
            safe_case_rename(item.old_path, item.new_path)
        except OSError as e:
            item.error_message = str(e)
            logger.exception("[ExecutionManager] Rename failed for %s", item.old_path)
            return

        item.success = True
        logger.debug(
            "[ExecutionManager] %s -> %s",
            os.path.basename(item.old_path),
            os.path.basename(item.new_path),
            extra={"dev_only": True},
        )
