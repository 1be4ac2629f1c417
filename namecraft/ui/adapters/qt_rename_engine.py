"""namecraft.ui.adapters.qt_rename_engine.

Qt-aware wrapper for UnifiedRenameEngine that adds signals.

This adapter wraps the pure Python UnifiedRenameEngine from core and emits
Qt signals after each major operation. UI code should use this class instead
of the core engine directly.

Author: Michael Economou
Date: 2026-10-16
"""

from collections.abc import Sequence
from typing import Any

from PyQt5.QtCore import QObject, pyqtSignal

from namecraft.app.state.word_session import WordSession
from namecraft.config import DEFAULT_RENAME_METHOD
from namecraft.core.rename.data_classes import (
    ExecutionResult,
    PreviewResult,
    RenameState,
    ValidationResult,
)
from namecraft.core.rename.unified_rename_engine import UnifiedRenameEngine
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class QtRenameEngine(QObject):
    """Qt-aware wrapper for UnifiedRenameEngine.

    This class wraps the pure Python UnifiedRenameEngine and adds Qt signals
    for UI updates. All business logic is delegated to the core engine.

    Signals:
        preview_updated(PreviewResult): Emitted after preview generation
        validation_updated(ValidationResult): Emitted after validation
        execution_completed(ExecutionResult): Emitted after rename, undo or redo
        history_changed(bool, bool): Undo and redo availability
        state_changed: Emitted after every state change
    """

    preview_updated = pyqtSignal(object)
    validation_updated = pyqtSignal(object)
    execution_completed = pyqtSignal(object)
    history_changed = pyqtSignal(bool, bool)
    state_changed = pyqtSignal()

    def __init__(self, engine: UnifiedRenameEngine | None = None) -> None:
        """Initialize Qt wrapper.

        Args:
            engine: Optional core engine instance. If None, creates new one.

        """
        super().__init__()
        self._engine = engine if engine is not None else UnifiedRenameEngine()
        logger.debug("[QtRenameEngine] Initialized with signal support", extra={"dev_only": True})

    @property
    def engine(self) -> UnifiedRenameEngine:
        return self._engine

    @property
    def session(self) -> WordSession:
        return self._engine.session

    def _emit_history(self) -> None:
        self.history_changed.emit(self._engine.can_undo(), self._engine.can_redo())

    def set_files(self, paths: Sequence[str]) -> None:
        self._engine.set_files(paths)
        self._emit_history()
        self.state_changed.emit()

    def generate_preview(
        self,
        method: str = DEFAULT_RENAME_METHOD,
        data: dict[str, Any] | None = None,
        metadata_cache: dict[str, Any] | None = None,
    ) -> PreviewResult:
        """Generate preview and emit signals."""
        result = self._engine.generate_preview(method, data, metadata_cache)
        self.preview_updated.emit(result)
        self.state_changed.emit()
        return result

    def validate_preview(
        self, preview_pairs: list[tuple[str, str]] | None = None
    ) -> ValidationResult:
        """Validate preview and emit signals."""
        result = self._engine.validate_preview(preview_pairs)
        self.validation_updated.emit(result)
        self.state_changed.emit()
        return result

    def execute_rename(self, new_names: list[str] | None = None) -> ExecutionResult:
        """Execute rename and emit signals."""
        result = self._engine.execute_rename(new_names)
        self.execution_completed.emit(result)
        self._emit_history()
        self.state_changed.emit()
        return result

    def undo(self) -> ExecutionResult | None:
        result = self._engine.undo()
        if result is not None:
            self.execution_completed.emit(result)
            self._emit_history()
            self.state_changed.emit()
        return result

    def redo(self) -> ExecutionResult | None:
        result = self._engine.redo()
        if result is not None:
            self.execution_completed.emit(result)
            self._emit_history()
            self.state_changed.emit()
        return result

    def can_undo(self) -> bool:
        return self._engine.can_undo()

    def can_redo(self) -> bool:
        return self._engine.can_redo()

    def get_current_state(self) -> RenameState:
        """Get current rename state."""
        return self._engine.get_current_state()
