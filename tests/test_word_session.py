"""
Module: test_word_session.py

Author: Michael Economou
Date: 2026-10-17

Tests for the word method session: selection, propagation, ranges,
apply-to-all patterns and previews.
"""

import logging

from namecraft.app.state import WordSession
from namecraft.core.word import EditAction, EditRule, SelectedToken, SelectionGroup

TAKES = ["/media/card/A_001.mov", "/media/card/A_002.mov", "/media/card/B_999.mov"]


def make_session(files=TAKES, similar=True):
    session = WordSession(files)
    session.apply_similar_pattern = similar
    return session


class TestToggleToken:
    """Test click selection"""

    def test_select_propagates_to_similar_files(self):
        session = make_session()
        added = session.toggle_token(0, 2)

        assert added == [SelectedToken(0, 2, "001"), SelectedToken(1, 2, "002")]
        assert session.selected_tokens == added
        assert session.last_selected == SelectedToken(0, 2, "001")

    def test_select_without_propagation(self):
        session = make_session(similar=False)
        assert session.toggle_token(0, 2) == [SelectedToken(0, 2, "001")]

    def test_second_click_deselects_only_that_token(self):
        session = make_session()
        session.toggle_token(0, 2)

        assert session.toggle_token(0, 2) == []
        assert session.selected_tokens == [SelectedToken(1, 2, "002")]

    def test_separator_is_ignored(self):
        session = make_session()
        assert session.toggle_token(0, 1) == []
        assert session.selected_tokens == []

    def test_out_of_range_is_ignored(self, caplog):
        session = make_session()
        with caplog.at_level(logging.WARNING):
            assert session.toggle_token(0, 99) == []
            assert session.toggle_token(5, 0) == []
        assert session.selected_tokens == []
        assert "out of range" in caplog.text

    def test_deselect_removes_covering_groups(self):
        session = make_session(["/x/my_long_name.txt"], similar=False)
        session.toggle_token(0, 0)
        session.select_range(0, 4)
        assert session.selection_groups == [SelectionGroup(0, 0, 4)]

        session.toggle_token(0, 2)
        assert session.selection_groups == []


class TestSelectRange:
    """Test shift-click range selection"""

    def test_range_selects_words_between(self):
        session = make_session(["/x/my_long_name.txt"], similar=False)
        session.toggle_token(0, 0)
        group = session.select_range(0, 4)

        assert group == SelectionGroup(0, 0, 4)
        assert [t.word_index for t in session.selected_tokens] == [0, 2, 4]

    def test_range_backwards(self):
        session = make_session(["/x/my_long_name.txt"], similar=False)
        session.toggle_token(0, 4)
        assert session.select_range(0, 0) == SelectionGroup(0, 0, 4)

    def test_range_needs_anchor_in_same_file(self):
        session = make_session(similar=False)
        assert session.select_range(0, 2) is None

        session.toggle_token(0, 2)
        assert session.select_range(1, 0) is None

    def test_same_range_is_stored_once(self):
        session = make_session(["/x/my_long_name.txt"], similar=False)
        session.toggle_token(0, 0)
        session.select_range(0, 4)
        session.select_range(0, 4)
        assert len(session.selection_groups) == 1

    def test_group_edit(self):
        session = make_session(["/x/my_long_name.txt"], similar=False)
        session.treat_selection_as_one = True
        session.toggle_token(0, 0)
        session.select_range(0, 4)
        session.add_rule(EditRule(EditAction.REPLACE, "short"))

        assert session.new_name_for(0) == "short.txt"


class TestApplyToAll:
    """Test word patterns built from the selection"""

    FILES = ["/x/A_001.mov", "/x/C_001.mov", "/x/D_002.mov"]

    def test_patterns_follow_selection(self):
        session = make_session(self.FILES, similar=False)
        session.toggle_token(0, 2)
        session.set_apply_to_all(True)

        assert [p.word for p in session.word_patterns] == ["001"]
        assert session.is_token_selected(1, 2)
        assert not session.is_token_selected(2, 2)

        session.toggle_token(2, 2)
        assert [p.word for p in session.word_patterns] == ["001", "002"]

    def test_preview_applies_everywhere(self):
        session = make_session(self.FILES, similar=False)
        session.toggle_token(0, 2)
        session.set_apply_to_all(True)
        session.add_rule(EditRule(EditAction.REPLACE, "N"))

        assert session.preview_names() == ["A_N.mov", "C_N.mov", "D_002.mov"]

    def test_disable_clears_patterns(self):
        session = make_session(self.FILES, similar=False)
        session.toggle_token(0, 2)
        session.set_apply_to_all(True)
        session.set_apply_to_all(False)

        assert session.word_patterns == []
        assert not session.is_token_selected(1, 2)


class TestRulesAndPreview:
    """Test rules, previews and option resets"""

    def test_preview_with_propagated_selection(self):
        session = make_session()
        session.toggle_token(0, 2)
        session.add_rule(EditRule(EditAction.PREFIX, "take"))

        assert session.preview_names() == ["A_take001.mov", "A_take002.mov", "B_999.mov"]

    def test_no_rules_keeps_names(self):
        session = make_session()
        session.toggle_token(0, 2)
        assert session.preview_names() == ["A_001.mov", "A_002.mov", "B_999.mov"]

    def test_remove_rule(self, caplog):
        session = make_session()
        session.set_rules([EditRule(EditAction.REMOVE), EditRule(EditAction.SUFFIX, "x")])
        session.remove_rule(0)
        assert session.rules == [EditRule(EditAction.SUFFIX, "x")]

        with caplog.at_level(logging.WARNING):
            session.remove_rule(5)
        assert len(session.rules) == 1
        assert "No rule at index 5" in caplog.text

    def test_new_name_for_unknown_file(self):
        assert make_session().new_name_for(10) == ""

    def test_reset_restores_defaults(self):
        session = make_session(similar=False)
        session.toggle_token(0, 2)
        session.add_rule(EditRule(EditAction.REMOVE))
        session.set_apply_to_all(True)
        session.treat_selection_as_one = True

        session.reset()

        assert session.selected_tokens == []
        assert session.rules == []
        assert session.apply_to_all is False
        assert session.apply_similar_pattern is True
        assert session.treat_selection_as_one is False
        assert session.files == TAKES


class TestFileChanges:
    """Test how file list changes affect the selection"""

    def test_set_files_clears_selection_but_keeps_rules(self):
        session = make_session()
        session.toggle_token(0, 2)
        session.add_rule(EditRule(EditAction.REMOVE))

        session.set_files(["/y/other.mov"])

        assert session.selected_tokens == []
        assert session.last_selected is None
        assert len(session.rules) == 1

    def test_renamed_files_drop_their_selection(self):
        session = make_session()
        session.toggle_token(0, 2)

        session.update_file_paths(
            ["/media/card/A_001.mov", "/media/card/A_take.mov", "/media/card/B_999.mov"]
        )

        assert session.selected_tokens == [SelectedToken(0, 2, "001")]
        assert session.last_selected == SelectedToken(0, 2, "001")

    def test_moved_files_keep_their_selection(self):
        session = make_session()
        session.toggle_token(0, 2)

        session.update_file_paths([path.replace("/card/", "/backup/") for path in TAKES])

        assert len(session.selected_tokens) == 2
        assert session.files[0] == "/media/backup/A_001.mov"

    def test_length_change_clears_selection(self):
        session = make_session()
        session.toggle_token(0, 2)
        session.update_file_paths(TAKES[:2])

        assert session.selected_tokens == []
        assert session.files == TAKES[:2]

    def test_tokens_for(self):
        session = make_session()
        assert [t.text for t in session.tokens_for(2)] == ["B", "_", "999", ".mov"]
        assert session.tokens_for(3) == []
        assert session.file_names == ["A_001.mov", "A_002.mov", "B_999.mov"]
