"""
Module: test_history.py

Author: Michael Economou
Date: 2026-10-17

Tests for the undo/redo snapshot history of the file list.
"""

from namecraft.app.state import FileHistory, HistoryEntry


class TestFileHistory:
    """Test snapshot saving and stepping"""

    def test_first_save_is_initial_snapshot(self):
        history = FileHistory()
        assert history.save(["a"]) is True

        assert history.entries == [HistoryEntry(("a",), None)]
        assert history.index == 0
        assert not history.can_undo()
        assert not history.can_redo()

    def test_empty_first_save_is_ignored(self):
        history = FileHistory()
        assert history.save([]) is False
        assert history.current is None

    def test_undo_and_redo(self):
        history = FileHistory()
        history.save(["a"])
        history.save(["b"], "rename")

        assert history.can_undo()
        assert history.undo() == (["b"], ["a"])
        assert history.can_redo()
        assert history.redo() == (["a"], ["b"])
        assert history.current == HistoryEntry(("b",), "rename")

    def test_nothing_to_step(self):
        history = FileHistory()
        assert history.undo() is None
        assert history.redo() is None

    def test_identical_snapshot_is_skipped(self):
        history = FileHistory()
        history.save(["a"])
        history.save(["b"])
        assert history.save(["b"]) is False
        assert len(history.entries) == 2

    def test_save_after_undo_drops_redo_branch(self):
        history = FileHistory()
        history.save(["a"])
        history.save(["b"])
        history.undo()

        history.save(["c"])

        assert [entry.files for entry in history.entries] == [("a",), ("c",)]
        assert not history.can_redo()
        assert history.index == 1

    def test_limit_drops_oldest(self):
        history = FileHistory(limit=3)
        for name in ("a", "b", "c", "d"):
            history.save([name])

        assert [entry.files for entry in history.entries] == [("b",), ("c",), ("d",)]
        assert history.index == 2
        assert history.undo() == (["d"], ["c"])

    def test_clear(self):
        history = FileHistory()
        history.save(["a"])
        history.save(["b"])
        history.clear()

        assert history.entries == []
        assert history.index == -1
        assert not history.can_undo()
