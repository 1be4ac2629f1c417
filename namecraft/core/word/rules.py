"""namecraft.core.word.rules.

Apply word edit rules to a filename.

A filename is tokenized, the targeted tokens are edited in place on a
local copy, and the tokens are joined back together. Which tokens are
targeted depends on the mode, checked in this order:

1. similar-pattern gate: with "apply to all" and "similar patterns only",
   files whose shape differs too much from the file the selection was made
   in are returned unchanged;
2. grouped: contiguous selections are edited as one word;
3. apply to all: every token matching a stored word pattern;
4. selection: the tokens selected in this very file.

Author: Michael Economou
Date: 2026-10-12
"""

from collections.abc import Sequence

from namecraft.config import SIMILAR_PATTERN_THRESHOLD
from namecraft.core.word.data_classes import (
    EditAction,
    EditRule,
    SelectedToken,
    SelectionGroup,
    WordPattern,
)
from namecraft.core.word.similarity import filename_similarity
from namecraft.core.word.tokenizer import tokenize
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def create_word_pattern(word: str) -> WordPattern:
    """Create a literal matcher for ``word`` (metacharacters are escaped)."""
    return WordPattern(word)


def _passes_similarity_gate(
    file_name: str,
    file_index: int,
    selected_tokens: Sequence[SelectedToken],
    all_file_names: Sequence[str],
) -> bool:
    if not selected_tokens:
        return True

    reference_index = selected_tokens[0].file_index
    if reference_index == file_index:
        return True

    # Without the reference name the shape cannot be compared, so nothing is edited
    if not 0 <= reference_index < len(all_file_names):
        logger.warning(
            "[WordRules] Similar-pattern filter needs the batch names; '%s' left unchanged",
            file_name,
        )
        return False

    similarity = filename_similarity(file_name, all_file_names[reference_index])
    if similarity < SIMILAR_PATTERN_THRESHOLD:
        logger.debug(
            "[WordRules] Skipping '%s': similarity %.2f below %.2f",
            file_name,
            similarity,
            SIMILAR_PATTERN_THRESHOLD,
            extra={"dev_only": True},
        )
        return False
    return True


def _apply_to_group(words: list[str], group: SelectionGroup, rule: EditRule) -> None:
    last = len(words) - 1
    start = max(group.start_index, 0)
    end = min(group.end_index, last)
    if start > end:
        return

    if rule.action is EditAction.REPLACE:
        words[start] = rule.value
        for index in range(start + 1, end + 1):
            words[index] = ""
    elif rule.action is EditAction.REMOVE:
        for index in range(start, end + 1):
            words[index] = ""
    elif rule.action is EditAction.PREFIX:
        words[start] = rule.value + words[start]
    else:
        words[end] = words[end] + rule.value


def apply_word_rules(
    file_name: str,
    file_index: int,
    rules: Sequence[EditRule],
    selected_tokens: Sequence[SelectedToken],
    word_patterns: Sequence[WordPattern],
    apply_to_all: bool = False,
    use_similar_pattern_filter: bool = False,
    treat_group_as_one: bool = False,
    selection_groups: Sequence[SelectionGroup] = (),
    all_file_names: Sequence[str] = (),
) -> str:
    """Produce the new name of one file.

    Args:
        file_name: Current base name of the file.
        file_index: Position of the file in the batch.
        rules: Edit rules, applied in order.
        selected_tokens: Tokens the user selected, across all files.
        word_patterns: Literal matchers used in apply-to-all mode.
        apply_to_all: Edit matching tokens in every file.
        use_similar_pattern_filter: With ``apply_to_all``, skip files whose
            shape differs from the file of the first selected token.
        treat_group_as_one: Edit contiguous selections as one word.
        selection_groups: Contiguous selections, across all files.
        all_file_names: Base names of the batch, needed by the similarity gate.
            When the filter is on and the reference name is missing, files
            other than the reference file are returned unchanged.

    Returns:
        The new base name, or ``file_name`` when nothing applies.

    """
    if not rules or (not selected_tokens and not word_patterns):
        return file_name

    if (
        apply_to_all
        and use_similar_pattern_filter
        and not _passes_similarity_gate(file_name, file_index, selected_tokens, all_file_names)
    ):
        return file_name

    tokens = tokenize(file_name)
    words = [token.text for token in tokens]

    if treat_group_as_one:
        file_groups = [group for group in selection_groups if group.file_index == file_index]
        if file_groups:
            for group in file_groups:
                for rule in rules:
                    _apply_to_group(words, group, rule)
            return "".join(words)

    if apply_to_all:
        for rule in rules:
            for pattern in word_patterns:
                for index, token in enumerate(tokens):
                    if token.is_separator:
                        continue
                    if pattern.matches(words[index]):
                        words[index] = rule.apply_to(words[index])
        return "".join(words)

    file_tokens = [token for token in selected_tokens if token.file_index == file_index]
    if not file_tokens:
        return file_name

    for rule in rules:
        for token in file_tokens:
            if 0 <= token.word_index < len(words):
                words[token.word_index] = rule.apply_to(words[token.word_index])

    return "".join(words)
