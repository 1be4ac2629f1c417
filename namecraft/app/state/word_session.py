"""Module: word_session.py.

Author: Michael Economou
Date: 2026-10-13

Word Session - state of the word rename method
This module keeps everything the word method needs between user actions:
the file list, the edit rules, the selected tokens and selection groups,
and the flags steering how the rules are applied.
Features:
- Click and shift-click token selection with group tracking
- Automatic selection of similar tokens in the other files
- Apply-to-all word patterns built from the selection
- Preview of the resulting names through the word engine
"""

import os
from collections.abc import Iterable, Sequence

from namecraft.core.word import (
    EditRule,
    SelectedToken,
    SelectionGroup,
    Token,
    WordPattern,
    apply_word_rules,
    create_word_pattern,
    find_similar_tokens,
    tokenize,
)
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class WordSession:
    """Selection, rules and options of the word rename method.

    Token positions are only meaningful for the current file list, so
    replacing the list clears the selection. Rules and options survive.
    """

    def __init__(self, files: Sequence[str] = ()) -> None:
        self.files: list[str] = list(files)
        self.rules: list[EditRule] = []
        self.selected_tokens: list[SelectedToken] = []
        self.word_patterns: list[WordPattern] = []
        self.selection_groups: list[SelectionGroup] = []
        self.last_selected: SelectedToken | None = None

        self.apply_to_all = False
        self.apply_similar_pattern = True
        self.use_similar_pattern_filter = False
        self.treat_selection_as_one = False

        logger.debug(
            "[WordSession] Initialized with %d files", len(self.files), extra={"dev_only": True}
        )

    # =====================================
    # Files
    # =====================================

    @property
    def file_names(self) -> list[str]:
        return [os.path.basename(path) for path in self.files]

    def set_files(self, files: Sequence[str]) -> None:
        """Replace the file list; the token selection is reset."""
        self.files = list(files)
        self.clear_selection()

    def update_file_paths(self, files: Sequence[str]) -> None:
        """Swap in new paths for the same files (after a rename), keeping the selection.

        The tokens of a renamed file no longer line up with the stored word
        indices, so selections on files whose name changed are dropped.
        """
        if len(files) != len(self.files):
            self.files = list(files)
            self.clear_selection()
            return

        changed = {
            index
            for index, (old, new) in enumerate(zip(self.files, files, strict=True))
            if os.path.basename(old) != os.path.basename(new)
        }
        self.files = list(files)
        if changed:
            self.selected_tokens = [t for t in self.selected_tokens if t.file_index not in changed]
            self.selection_groups = [
                g for g in self.selection_groups if g.file_index not in changed
            ]
            if self.last_selected is not None and self.last_selected.file_index in changed:
                self.last_selected = None

    def tokens_for(self, file_index: int) -> list[Token]:
        """Tokenization of the base name of the file at ``file_index``."""
        if not 0 <= file_index < len(self.files):
            return []
        return tokenize(os.path.basename(self.files[file_index]))

    # =====================================
    # Rules
    # =====================================

    def add_rule(self, rule: EditRule) -> None:
        self.rules.append(rule)

    def remove_rule(self, index: int) -> None:
        if 0 <= index < len(self.rules):
            del self.rules[index]
        else:
            logger.warning("[WordSession] No rule at index %d", index)

    def set_rules(self, rules: Iterable[EditRule]) -> None:
        self.rules = list(rules)

    # =====================================
    # Selection
    # =====================================

    def _selectable_token(self, file_index: int, word_index: int) -> Token | None:
        tokens = self.tokens_for(file_index)
        if not 0 <= word_index < len(tokens):
            logger.warning(
                "[WordSession] Ignoring selection of token %d in file %d (out of range)",
                word_index,
                file_index,
            )
            return None
        token = tokens[word_index]
        if token.is_separator:
            return None
        return token

    def _find_selected(self, file_index: int, word_index: int) -> int | None:
        for position, token in enumerate(self.selected_tokens):
            if token.file_index == file_index and token.word_index == word_index:
                return position
        return None

    def is_token_selected(self, file_index: int, word_index: int) -> bool:
        """Directly selected, or matched by a word pattern in apply-to-all mode."""
        if self._find_selected(file_index, word_index) is not None:
            return True
        if not (self.apply_to_all and self.word_patterns):
            return False
        tokens = self.tokens_for(file_index)
        if not 0 <= word_index < len(tokens):
            return False
        text = tokens[word_index].text
        return any(pattern.matches(text) for pattern in self.word_patterns)

    def toggle_token(self, file_index: int, word_index: int) -> list[SelectedToken]:
        """Click on a token: select it, or deselect it when already selected.

        Returns:
            The tokens added to the selection (similar tokens in other files
            included); empty when the token was deselected or ignored.

        """
        token = self._selectable_token(file_index, word_index)
        if token is None:
            return []

        position = self._find_selected(file_index, word_index)
        if position is not None:
            del self.selected_tokens[position]
            self.selection_groups = [
                group
                for group in self.selection_groups
                if not (group.file_index == file_index and group.contains(word_index))
            ]
            self._sync_word_patterns()
            return []

        selected = SelectedToken(file_index, word_index, token.text)
        added = [selected]
        self.selected_tokens.append(selected)

        if self.apply_similar_pattern:
            similar = find_similar_tokens(self.file_names, file_index, [selected])
            for candidate in similar:
                if self._find_selected(candidate.file_index, candidate.word_index) is None:
                    added.append(candidate.to_selected())
                    self.selected_tokens.append(candidate.to_selected())
            if len(added) > 1:
                logger.info(
                    "[WordSession] %d similar pattern word(s) selected in other files",
                    len(added) - 1,
                )

        self.last_selected = selected
        self._sync_word_patterns()
        return added

    def select_range(self, file_index: int, word_index: int) -> SelectionGroup | None:
        """Shift-click: select every token between the last selected token and this one.

        Only works inside the file of the last selection. Returns the group
        that covers the range, or None when no range could be selected.
        """
        anchor = self.last_selected
        if anchor is None or anchor.file_index != file_index:
            return None

        tokens = self.tokens_for(file_index)
        if not 0 <= word_index < len(tokens):
            logger.warning(
                "[WordSession] Ignoring range end %d in file %d (out of range)",
                word_index,
                file_index,
            )
            return None

        group = SelectionGroup.spanning(file_index, anchor.word_index, word_index)
        if group not in self.selection_groups:
            self.selection_groups.append(group)

        for index in range(group.start_index, group.end_index + 1):
            token = tokens[index]
            if token.is_separator or self._find_selected(file_index, index) is not None:
                continue
            self.selected_tokens.append(SelectedToken(file_index, index, token.text))

        logger.debug(
            "[WordSession] Selected %d word(s) as a range in file %d",
            group.end_index - group.start_index + 1,
            file_index,
            extra={"dev_only": True},
        )
        self._sync_word_patterns()
        return group

    def set_apply_to_all(self, enabled: bool) -> None:
        """Enabling builds one word pattern per distinct selected word; disabling clears them."""
        self.apply_to_all = enabled
        self._sync_word_patterns()

    def _sync_word_patterns(self) -> None:
        if not self.apply_to_all:
            self.word_patterns = []
            return

        words = dict.fromkeys(token.word for token in self.selected_tokens if token.word)
        self.word_patterns = [create_word_pattern(word) for word in words]

    def clear_selection(self) -> None:
        self.selected_tokens = []
        self.selection_groups = []
        self.word_patterns = []
        self.last_selected = None

    def reset(self) -> None:
        """Forget everything but the file list, and restore default options."""
        self.clear_selection()
        self.rules = []
        self.apply_to_all = False
        self.apply_similar_pattern = True
        self.use_similar_pattern_filter = False
        self.treat_selection_as_one = False

    # =====================================
    # Preview
    # =====================================

    def new_name_for(self, file_index: int) -> str:
        """New base name of the file at ``file_index`` under the current rules."""
        if not 0 <= file_index < len(self.files):
            return ""
        file_names = self.file_names
        return apply_word_rules(
            file_names[file_index],
            file_index,
            self.rules,
            self.selected_tokens,
            self.word_patterns,
            apply_to_all=self.apply_to_all,
            use_similar_pattern_filter=self.use_similar_pattern_filter,
            treat_group_as_one=self.treat_selection_as_one,
            selection_groups=self.selection_groups,
            all_file_names=file_names,
        )

    def preview_names(self) -> list[str]:
        return [self.new_name_for(index) for index in range(len(self.files))]
