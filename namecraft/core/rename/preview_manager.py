"""namecraft.core.rename.preview_manager.

Preview generation for the unified rename engine.

This module provides the PreviewManager class that computes the proposed
name of every file with the selected rename method.

Author: Michael Economou
Date: 2026-10-15
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from namecraft.app.state.word_session import WordSession
    from namecraft.models.file_item import FileItem

from namecraft.core.exceptions import UnknownRenameMethodError
from namecraft.core.rename.data_classes import PreviewResult
from namecraft.modules.logic import (
    ExpressionLogic,
    FindReplaceLogic,
    NumberingLogic,
    PatternLogic,
    RegexLogic,
    WordLogic,
)
from namecraft.utils.filesystem.sorting import create_sorted_index_map, positions_from_index_map
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# Rename method -> logic class
METHOD_LOGIC_MAP = {
    "pattern": PatternLogic,
    "replace": FindReplaceLogic,
    "regex": RegexLogic,
    "numbering": NumberingLogic,
    "expression": ExpressionLogic,
    "word": WordLogic,
}


class PreviewManager:
    """Compose proposed names by applying one rename method to each file."""

    def generate_preview(
        self,
        files: list[FileItem],
        method: str,
        data: dict[str, Any] | None = None,
        session: WordSession | None = None,
        metadata_cache: dict[str, Any] | None = None,
    ) -> PreviewResult:
        """Generate filename preview for `files`.

        Args:
            files: Files to preview, in list order.
            method: One of the keys of ``METHOD_LOGIC_MAP``.
            data: Options of the method.
            session: Word method state; required for ``"word"``.
            metadata_cache: Media information keyed by full path.

        Returns:
            A :class:`PreviewResult` with one (old, new) pair per file.

        Raises:
            UnknownRenameMethodError: If ``method`` is not supported.

        """
        logic = METHOD_LOGIC_MAP.get(method)
        if logic is None:
            raise UnknownRenameMethodError(method)

        if not files:
            return PreviewResult([], False)

        data = data or {}
        start_time = time.time()

        if method == "word" and session is not None:
            paths = [file.full_path for file in files]
            if session.files != paths:
                logger.debug(
                    "[PreviewManager] Word session file list out of date, resetting it",
                    extra={"dev_only": True},
                )
                session.set_files(paths)

        positions = self._numbering_positions(files, data) if method == "numbering" else None

        name_pairs: list[tuple[str, str]] = []
        errors: list[str] = []
        for index, file_item in enumerate(files):
            position = positions[index] if positions is not None else index
            try:
                if method == "word":
                    new_name = WordLogic.apply_from_data(data, file_item, index, session)
                else:
                    new_name = logic.apply_from_data(data, file_item, position, metadata_cache)
            except Exception as e:
                logger.exception(
                    "[PreviewManager] Failed to compute name for %s", file_item.filename
                )
                errors.append(f"{file_item.filename}: {e}")
                new_name = file_item.filename
            name_pairs.append((file_item.filename, new_name))

        has_changes = any(old_name != new_name for old_name, new_name in name_pairs)
        result = PreviewResult(name_pairs, has_changes, errors)

        elapsed = time.time() - start_time
        if elapsed > 0.05:
            logger.info(
                "[PreviewManager] Preview generation took %.3fs for %d files",
                elapsed,
                len(files),
            )
        return result

    @staticmethod
    def _numbering_positions(files: list[FileItem], data: dict[str, Any]) -> dict[int, int]:
        index_map = create_sorted_index_map(
            [file.full_path for file in files],
            data.get("sort", "name"),
            bool(data.get("reverse", False)),
        )
        return positions_from_index_map(index_map)
