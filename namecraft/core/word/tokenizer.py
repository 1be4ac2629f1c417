"""namecraft.core.word.tokenizer.

Split filenames into word and separator tokens, and classify tokens.

Word boundaries fall on separators (``_``, ``-``, whitespace), on
camelCase humps and on every switch between digits and non-digits, so
``"A_0001C001_240715.mxf"`` becomes
``A | _ | 0001 | C | 001 | _ | 240715 | .mxf``. Joining the token texts
always gives back the original string.

Author: Michael Economou
Date: 2026-10-12
"""

import re

from namecraft.core.word.data_classes import Token, TokenKind, WordClass

# Character classes tracked while scanning
_SEPARATOR = "separator"
_UPPER = "upper"
_LOWER = "lower"
_DIGIT = "digit"
_OTHER = "other"

_SEPARATOR_TOKEN_RE = re.compile(r"[_\-\s]")
_NUMERIC_RE = re.compile(r"[0-9]+")
_ALPHA_RE = re.compile(r"[A-Za-z]+")
_ALPHANUMERIC_RE = re.compile(r"[A-Za-z0-9]+")


def is_separator_char(char: str) -> bool:
    return char in "_-" or char.isspace()


def _char_class(char: str) -> str:
    if "A" <= char <= "Z":
        return _UPPER
    if "a" <= char <= "z":
        return _LOWER
    if "0" <= char <= "9":
        return _DIGIT
    return _OTHER


def _is_boundary(previous: str | None, current: str) -> bool:
    if previous is None or previous == _SEPARATOR:
        return False
    if previous == _LOWER and current == _UPPER:
        return True
    if previous == _DIGIT and current in (_UPPER, _LOWER, _OTHER):
        return True
    return previous in (_UPPER, _LOWER, _OTHER) and current == _DIGIT


def tokenize(file_name: str) -> list[Token]:
    """Split a filename (with extension, without directories) into tokens.

    Args:
        file_name: Base name to split.

    Returns:
        Ordered tokens; separators are single-character SEPARATOR tokens.

    """
    tokens: list[Token] = []
    current: list[str] = []
    previous: str | None = None

    for char in file_name:
        if is_separator_char(char):
            if current:
                tokens.append(Token("".join(current)))
                current = []
            tokens.append(Token(char, TokenKind.SEPARATOR))
            previous = _SEPARATOR
            continue

        char_class = _char_class(char)
        if current and _is_boundary(previous, char_class):
            tokens.append(Token("".join(current)))
            current = []

        current.append(char)
        previous = char_class

    if current:
        tokens.append(Token("".join(current)))

    return tokens


def token_texts(file_name: str) -> list[str]:
    """Return only the token strings of ``tokenize(file_name)``."""
    return [token.text for token in tokenize(file_name)]


def classify_word(token: str) -> WordClass:
    """Classify a token by its characters.

    Checks run in order: a single separator character, digits only,
    ASCII letters only, ASCII letters and digits, anything else.
    """
    if _SEPARATOR_TOKEN_RE.fullmatch(token):
        return WordClass.SEPARATOR
    if _NUMERIC_RE.fullmatch(token):
        return WordClass.NUMERIC
    if _ALPHA_RE.fullmatch(token):
        return WordClass.ALPHA
    if _ALPHANUMERIC_RE.fullmatch(token):
        return WordClass.ALPHANUMERIC_MIXED
    return WordClass.OTHER
