"""
Module: test_unified_rename_engine.py

Author: Michael Economou
Date: 2026-10-17

Tests for the rename workflow: preview, validation, execution, undo and redo.
"""

import os

import pytest

from namecraft.core.exceptions import UnknownRenameMethodError
from namecraft.core.rename.data_classes import ExecutionItem, ExecutionResult
from namecraft.core.rename.execution_manager import CONFLICT_MESSAGE
from namecraft.core.rename.unified_rename_engine import UnifiedRenameEngine
from namecraft.core.word import EditAction, EditRule


def names_in(folder):
    return sorted(os.listdir(folder))


class TestPreview:
    """Test preview generation"""

    def test_pattern_preview(self, take_files):
        engine = UnifiedRenameEngine(take_files)
        preview = engine.generate_preview("pattern", {"pattern": "shot_{padnum3}"})

        assert preview.name_pairs == [
            ("A_001.mov", "shot_001.mov"),
            ("A_002.mov", "shot_002.mov"),
            ("B_999.mov", "shot_003.mov"),
        ]
        assert preview.has_changes
        assert preview.errors == []
        assert engine.get_current_state().method == "pattern"

    def test_preview_without_changes(self, take_files):
        preview = UnifiedRenameEngine(take_files).generate_preview("pattern", {})
        assert not preview.has_changes

    def test_unknown_method(self, take_files):
        engine = UnifiedRenameEngine(take_files)
        with pytest.raises(UnknownRenameMethodError, match="Unknown rename method: 'magic'"):
            engine.generate_preview("magic", {})

    def test_empty_batch(self):
        preview = UnifiedRenameEngine().generate_preview("pattern", {"pattern": "x"})
        assert preview.name_pairs == []
        assert not preview.has_changes

    def test_numbering_follows_sort_order(self, tmp_path):
        files = [str(tmp_path / "b.mov"), str(tmp_path / "a.mov")]
        engine = UnifiedRenameEngine(files)
        preview = engine.generate_preview("numbering", {"pattern": "{name}_{num}", "sort": "name"})
        assert preview.new_names == ["b_2.mov", "a_1.mov"]

    def test_failing_file_keeps_its_name(self, take_files):
        """A per-file error is reported and the batch continues"""
        engine = UnifiedRenameEngine(take_files)
        cache = {take_files[1]: {"width": "not a number"}}

        preview = engine.generate_preview("pattern", {"pattern": "{name}_{width}"}, cache)

        assert preview.new_names == ["A_001_0.mov", "A_002.mov", "B_999_0.mov"]
        assert len(preview.errors) == 1
        assert preview.errors[0].startswith("A_002.mov: ")

    def test_duplicate_paths_are_dropped(self, take_files):
        engine = UnifiedRenameEngine(take_files + take_files[:1])
        assert engine.file_paths == take_files


class TestValidation:
    """Test preview validation"""

    def test_duplicates_are_flagged(self, take_files):
        engine = UnifiedRenameEngine(take_files[:2])
        engine.generate_preview("pattern", {"pattern": "same"})
        result = engine.validate_preview()

        assert result.has_errors
        assert result.duplicates == {"same.mov"}
        assert result.duplicate_count == 1
        assert result.items[0].error_message == ""
        assert result.items[1].error_message == "Duplicate name in this batch"

    def test_invalid_names(self):
        engine = UnifiedRenameEngine()
        result = engine.validate_preview([("a.mov", "a<b.mov"), ("c.mov", "c.mov")])

        assert result.invalid_count == 1
        assert result.unchanged_count == 1
        assert not result.has_unchanged
        assert result.items[0].error_message == "Invalid characters: '<'"

    def test_nothing_previewed(self):
        result = UnifiedRenameEngine().validate_preview()
        assert result.items == []
        assert not result.has_errors


class TestExecution:
    """Test renames on disk"""

    def test_rename_and_summary(self, take_files, tmp_path):
        engine = UnifiedRenameEngine(take_files)
        result = engine.rename("pattern", {"pattern": "shot_{padnum3}"})

        assert names_in(tmp_path) == ["shot_001.mov", "shot_002.mov", "shot_003.mov"]
        assert result.renamed_count == 3
        assert engine.file_paths == [str(tmp_path / f"shot_00{i}.mov") for i in (1, 2, 3)]
        assert engine.summarize(result).message == "3 files renamed successfully"

    def test_unchanged_files_are_skipped(self, take_files):
        engine = UnifiedRenameEngine(take_files)
        result = engine.execute_rename(["A_001.mov", "A_002.mov", "B_999.mov"])

        assert result.skipped_count == 3
        assert result.success_count == 3
        assert result.renamed_count == 0
        assert not engine.can_undo()

    def test_conflict_with_file_outside_batch(self, take_files, tmp_path):
        (tmp_path / "taken.mov").write_text("x")
        engine = UnifiedRenameEngine(take_files[:2])

        result = engine.execute_rename(["taken.mov", "A_002.mov"])

        item = result.items[0]
        assert item.is_conflict
        assert item.error_message == CONFLICT_MESSAGE
        assert result.conflicts_count == 1
        assert os.path.exists(take_files[0])

        summary = engine.summarize(result)
        assert summary.message == "1 successful, 1 failed"
        assert summary.level == "warning"

    def test_invalid_target_is_not_renamed(self, take_files):
        engine = UnifiedRenameEngine(take_files[:1])
        result = engine.execute_rename(["bad<name.mov"])

        assert result.error_count == 1
        assert result.items[0].error_message == "Invalid characters: '<'"
        assert os.path.exists(take_files[0])

    def test_word_method(self, take_files, tmp_path):
        engine = UnifiedRenameEngine(take_files)
        engine.session.toggle_token(0, 2)
        engine.session.add_rule(EditRule(EditAction.PREFIX, "take"))

        engine.rename("word")

        assert names_in(tmp_path) == ["A_take001.mov", "A_take002.mov", "B_999.mov"]
        # Token positions of renamed files are stale
        assert engine.session.selected_tokens == []
        assert engine.session.files == engine.file_paths

    def test_set_files_resets_history(self, take_files):
        engine = UnifiedRenameEngine(take_files[:1])
        engine.rename("pattern", {"pattern": "x"})
        assert engine.can_undo()

        engine.set_files(take_files[1:])
        assert not engine.can_undo()


class TestUndoRedo:
    """Test stepping through executed renames"""

    def test_undo_and_redo(self, take_files, tmp_path):
        engine = UnifiedRenameEngine(take_files)
        engine.rename("pattern", {"pattern": "shot_{padnum3}"})

        result = engine.undo()

        assert result.renamed_count == 3
        assert names_in(tmp_path) == ["A_001.mov", "A_002.mov", "B_999.mov"]
        assert engine.file_paths == take_files
        assert engine.can_redo()

        engine.redo()

        assert names_in(tmp_path) == ["shot_001.mov", "shot_002.mov", "shot_003.mov"]
        assert not engine.can_redo()

    def test_nothing_to_undo(self, take_files):
        engine = UnifiedRenameEngine(take_files)
        assert engine.undo() is None
        assert engine.redo() is None

    def test_undo_after_file_vanished(self, take_files, tmp_path):
        engine = UnifiedRenameEngine(take_files[:2])
        engine.rename("pattern", {"pattern": "shot_{padnum3}"})
        os.remove(tmp_path / "shot_002.mov")

        result = engine.undo()

        assert result.error_count == 1
        assert engine.file_paths == [take_files[0], str(tmp_path / "shot_002.mov")]

    def test_multiple_steps(self, take_files, tmp_path):
        engine = UnifiedRenameEngine(take_files[:1])
        engine.rename("pattern", {"pattern": "one"})
        engine.rename("pattern", {"pattern": "two"})

        engine.undo()
        assert names_in(tmp_path) == ["A_002.mov", "B_999.mov", "one.mov"]
        engine.undo()
        assert names_in(tmp_path) == ["A_001.mov", "A_002.mov", "B_999.mov"]
        assert not engine.can_undo()


class TestResultData:
    """Test result counters"""

    def test_execution_counts(self):
        result = ExecutionResult(
            [
                ExecutionItem("/a", "/b", success=True),
                ExecutionItem("/c", "/c", success=True, skip_reason="unchanged"),
                ExecutionItem("/d", "/e", error_message="x", is_conflict=True),
            ]
        )
        assert (result.success_count, result.error_count, result.skipped_count) == (2, 1, 1)
        assert result.conflicts_count == 1
        assert result.renamed_count == 1
        assert result.to_dicts()[2] == {"success": False, "old_path": "/d", "error": "x"}
