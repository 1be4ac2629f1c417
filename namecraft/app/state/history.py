"""Undo/redo history of the file list.

Each entry is a snapshot of the file paths after an operation. Undo and
redo move through the snapshots and hand back the pair of lists the
caller has to reconcile on disk.

The history:
    - starts with a snapshot of the list as it was before the first change
    - ignores saves identical to the current snapshot
    - drops the redo branch when a new snapshot is saved after an undo
    - keeps at most MAX_HISTORY snapshots, dropping the oldest

Author:
    Michael Economou

Date:
    2026-10-13
"""

from collections.abc import Sequence
from dataclasses import dataclass

from namecraft.config import MAX_HISTORY
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """Snapshot of the file list.

    Attributes:
        files: File paths, in list order.
        operation: Name of the operation that produced the snapshot, or
            None for the initial snapshot.
    """

    files: tuple[str, ...]
    operation: str | None = None


class FileHistory:
    """Bounded snapshot stack with a movable current position."""

    def __init__(self, limit: int = MAX_HISTORY) -> None:
        self.limit = limit
        self.entries: list[HistoryEntry] = []
        self.index = -1

    def clear(self) -> None:
        self.entries = []
        self.index = -1

    @property
    def current(self) -> HistoryEntry | None:
        if 0 <= self.index < len(self.entries):
            return self.entries[self.index]
        return None

    def save(self, files: Sequence[str], operation: str | None = None) -> bool:
        """Record ``files`` as the newest snapshot.

        The first save of a non-empty list only records the initial
        snapshot. Returns True when a new snapshot was stored.
        """
        snapshot = tuple(files)

        if not self.entries:
            if not snapshot:
                return False
            self.entries.append(HistoryEntry(snapshot, None))
            self.index = 0
            logger.debug("[FileHistory] Initial state saved", extra={"dev_only": True})
            return True

        if self.current is not None and self.current.files == snapshot:
            return False

        if self.index < len(self.entries) - 1:
            del self.entries[self.index + 1 :]

        self.entries.append(HistoryEntry(snapshot, operation))

        if len(self.entries) > self.limit:
            self.entries.pop(0)
        self.index = len(self.entries) - 1

        logger.debug(
            "[FileHistory] History saved: index=%d, total=%d, operation=%s",
            self.index,
            len(self.entries),
            operation,
            extra={"dev_only": True},
        )
        return True

    def can_undo(self) -> bool:
        return self.index > 0

    def can_redo(self) -> bool:
        return 0 <= self.index < len(self.entries) - 1

    def undo(self) -> tuple[list[str], list[str]] | None:
        """Step back; returns ``(current_files, target_files)`` or None."""
        if not self.can_undo():
            return None
        current = self.entries[self.index]
        self.index -= 1
        return list(current.files), list(self.entries[self.index].files)

    def redo(self) -> tuple[list[str], list[str]] | None:
        """Step forward; returns ``(current_files, target_files)`` or None."""
        if not self.can_redo():
            return None
        current = self.entries[self.index]
        self.index += 1
        return list(current.files), list(self.entries[self.index].files)
