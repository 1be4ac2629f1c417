"""Word engine: filename tokenization, shape similarity and word edit rules.

Author: Michael Economou
Date: 2026-10-12

Every function in this package is pure: callers pass all state in and get
new values back. Nothing here raises on unusual input; a name that cannot
be matched or edited comes back unchanged.
"""

from namecraft.core.word.data_classes import (
    EditAction,
    EditRule,
    SelectedToken,
    SelectionGroup,
    SimilarToken,
    Token,
    TokenKind,
    WordClass,
    WordPattern,
)
from namecraft.core.word.propagation import find_similar_tokens
from namecraft.core.word.rules import apply_word_rules, create_word_pattern
from namecraft.core.word.similarity import extract_pattern, pattern_similarity
from namecraft.core.word.tokenizer import classify_word, token_texts, tokenize

__all__ = [
    "EditAction",
    "EditRule",
    "SelectedToken",
    "SelectionGroup",
    "SimilarToken",
    "Token",
    "TokenKind",
    "WordClass",
    "WordPattern",
    "apply_word_rules",
    "classify_word",
    "create_word_pattern",
    "extract_pattern",
    "find_similar_tokens",
    "pattern_similarity",
    "token_texts",
    "tokenize",
]
