"""Qt adapters wrapping the pure Python core."""

from namecraft.ui.adapters.qt_rename_engine import QtRenameEngine

__all__ = ["QtRenameEngine"]
