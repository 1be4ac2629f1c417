"""Application state package.

WordSession holds the word method selection and rules; FileHistory keeps
the undo/redo snapshots of the file list.
"""

from namecraft.app.state.history import FileHistory, HistoryEntry
from namecraft.app.state.word_session import WordSession

__all__ = ["FileHistory", "HistoryEntry", "WordSession"]
