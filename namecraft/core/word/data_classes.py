"""namecraft.core.word.data_classes.

Data classes for the word engine.

Tokens, selections, patterns and edit rules are plain immutable records.
The session layer (namecraft.app.state.word_session) owns the mutable
lists of these records and passes them into the engine on every call.

Author: Michael Economou
Date: 2026-10-12
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from namecraft.core.exceptions import InvalidRuleError


class TokenKind(Enum):
    """Kind of a token produced by the tokenizer."""

    WORD = "word"
    SEPARATOR = "separator"


class WordClass(Enum):
    """Character class of a single token, used for context comparison."""

    SEPARATOR = "separator"
    NUMERIC = "numeric"
    ALPHA = "alpha"
    ALPHANUMERIC_MIXED = "alphanumeric_mixed"
    OTHER = "other"


class EditAction(Enum):
    """Action of a word edit rule. Values are the serialized rule names."""

    REPLACE = "replace"
    REMOVE = "remove"
    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class Token:
    """One word fragment or one separator character of a filename."""

    text: str
    kind: TokenKind = TokenKind.WORD

    @property
    def is_separator(self) -> bool:
        return self.kind is TokenKind.SEPARATOR


@dataclass(frozen=True)
class SelectedToken:
    """A token the user picked, addressed by file and token position.

    Attributes:
        file_index: Position of the file in the current file list.
        word_index: Position of the token in that file's tokenization.
        word: Token text at selection time.

    """

    file_index: int
    word_index: int
    word: str

    @property
    def key(self) -> tuple[int, int]:
        return (self.file_index, self.word_index)


@dataclass(frozen=True)
class SimilarToken:
    """A token selected on the user's behalf because it resembles a selection.

    Attributes:
        file_index: File holding the token.
        word_index: Token position in that file.
        word: Token text.
        context_match_rate: Share of neighbouring token classes that matched
            the originating selection (1.0 when there was nothing to compare).

    """

    file_index: int
    word_index: int
    word: str
    context_match_rate: float

    @property
    def key(self) -> tuple[int, int]:
        return (self.file_index, self.word_index)

    def to_selected(self) -> SelectedToken:
        return SelectedToken(self.file_index, self.word_index, self.word)


@dataclass(frozen=True)
class SelectionGroup:
    """A contiguous token range of one file, edited as a single word.

    Invariant: ``start_index <= end_index``.
    """

    file_index: int
    start_index: int
    end_index: int

    def __post_init__(self) -> None:
        if self.start_index > self.end_index:
            raise ValueError(
                f"SelectionGroup start {self.start_index} is after end {self.end_index}"
            )

    @classmethod
    def spanning(cls, file_index: int, first: int, second: int) -> "SelectionGroup":
        """Build a group from two token indices given in any order."""
        return cls(file_index, min(first, second), max(first, second))

    def contains(self, word_index: int) -> bool:
        return self.start_index <= word_index <= self.end_index


@dataclass(frozen=True)
class WordPattern:
    """Literal token matcher used when edits apply to every file.

    The word is regex-escaped and must match a whole token, so user text
    containing metacharacters such as ``(`` or ``+`` is matched literally.
    """

    word: str

    @property
    def regex(self) -> str:
        return re.escape(self.word)

    def matches(self, text: str) -> bool:
        if not self.word:
            return False
        return re.fullmatch(self.regex, text) is not None


@dataclass(frozen=True)
class EditRule:
    """One word edit. Rules are applied in list order and compose."""

    action: EditAction
    value: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditRule":
        """Build a rule from its serialized form ``{"action": ..., "value": ...}``.

        Raises:
            InvalidRuleError: If the action is missing or unknown.

        """
        raw_action = data.get("action")
        try:
            action = EditAction(str(raw_action).strip().lower())
        except ValueError:
            raise InvalidRuleError(f"Unknown word rule action: {raw_action!r}") from None

        value = data.get("value") or ""
        return cls(action=action, value=str(value))

    def to_dict(self) -> dict[str, str]:
        return {"action": self.action.value, "value": self.value}

    def apply_to(self, text: str) -> str:
        """Return ``text`` transformed by this rule."""
        if self.action is EditAction.REPLACE:
            return self.value
        if self.action is EditAction.REMOVE:
            return ""
        if self.action is EditAction.PREFIX:
            return self.value + text
        return text + self.value
