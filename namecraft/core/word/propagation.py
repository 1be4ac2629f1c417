"""namecraft.core.word.propagation.

Extend a token selection to the other files of a batch.

When a user clicks the take number in ``A_001.mov``, the matching token in
``A_002.mov``, ``A_003.mov``... should be picked up too. A candidate token
qualifies when:

- it has the same shape: an optional letter prefix, a digit run of the
  same length and an optional letter suffix;
- it has the same lead-in text (the separators before it and the nearest
  preceding non-numeric word, e.g. ``A_``);
- at least half of its neighbouring token classes (two on each side) line
  up with the neighbours of the selected token.

Author: Michael Economou
Date: 2026-10-12
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from namecraft.config import CONTEXT_MATCH_THRESHOLD, CONTEXT_WINDOW
from namecraft.core.word.data_classes import SelectedToken, SimilarToken, WordClass
from namecraft.core.word.tokenizer import classify_word, token_texts
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_NUMERIC_RUN_RE = re.compile(r"([A-Za-z]*)([0-9]+)([A-Za-z]*)")


@dataclass(frozen=True)
class NumericRunShape:
    """Letter prefix, digit run and letter suffix of a numeric token."""

    prefix: str
    digits: str
    suffix: str

    @classmethod
    def parse(cls, text: str) -> "NumericRunShape | None":
        match = _NUMERIC_RUN_RE.fullmatch(text)
        if match is None:
            return None
        return cls(*match.groups())

    def same_shape(self, other: "NumericRunShape") -> bool:
        return (
            self.prefix == other.prefix
            and self.suffix == other.suffix
            and len(self.digits) == len(other.digits)
        )


@dataclass(frozen=True)
class TokenContext:
    """Word classes of the tokens around one token.

    ``before`` runs outward (nearest first), as does ``after``.
    """

    before: tuple[WordClass, ...]
    after: tuple[WordClass, ...]

    @classmethod
    def around(cls, texts: Sequence[str], index: int, window: int = CONTEXT_WINDOW):
        before = tuple(
            classify_word(texts[index - offset])
            for offset in range(1, window + 1)
            if index - offset >= 0
        )
        after = tuple(
            classify_word(texts[index + offset])
            for offset in range(1, window + 1)
            if index + offset < len(texts)
        )
        return cls(before, after)

    def match_rate(self, other: "TokenContext") -> float:
        """Share of positions where both contexts have the same class.

        Only offsets present on this context are compared; an offset the
        other context lacks counts as a mismatch. With nothing to compare
        the rate is 1.0.
        """
        compared = len(self.before) + len(self.after)
        if compared == 0:
            return 1.0

        matches = sum(
            1
            for offset, word_class in enumerate(self.before)
            if offset < len(other.before) and other.before[offset] is word_class
        )
        matches += sum(
            1
            for offset, word_class in enumerate(self.after)
            if offset < len(other.after) and other.after[offset] is word_class
        )
        return matches / compared


def lead_in(texts: Sequence[str], index: int) -> str:
    """Text leading into the token at ``index``.

    Collects the separators directly before the token and the nearest
    preceding word. A numeric preceding word is left out (dates and
    counters differ per file and are compared by class instead).
    """
    collected: list[str] = []
    position = index - 1

    while position >= 0 and classify_word(texts[position]) is WordClass.SEPARATOR:
        collected.append(texts[position])
        position -= 1

    if position >= 0 and classify_word(texts[position]) is not WordClass.NUMERIC:
        collected.append(texts[position])

    return "".join(reversed(collected))


def find_similar_tokens(
    file_names: Sequence[str],
    file_index: int,
    selected_tokens: Sequence[SelectedToken],
    enabled: bool = True,
) -> list[SimilarToken]:
    """Find tokens in other files that mirror the given selection.

    Args:
        file_names: Base names of every file in the batch, in list order.
        file_index: File the selection was made in; it is never searched.
        selected_tokens: Newly selected tokens of that file.
        enabled: When False nothing is searched.

    Returns:
        New tokens to select, without duplicates and without tokens that
        are already part of ``selected_tokens``.

    """
    if not enabled or not selected_tokens or not file_names:
        return []

    tokenized = [token_texts(name) for name in file_names]
    seen: set[tuple[int, int]] = {token.key for token in selected_tokens}
    results: list[SimilarToken] = []

    for selected in selected_tokens:
        source_index = selected.file_index
        if not 0 <= source_index < len(tokenized):
            continue
        source_texts = tokenized[source_index]
        if not 0 <= selected.word_index < len(source_texts):
            continue

        shape = NumericRunShape.parse(source_texts[selected.word_index])
        if shape is None:
            continue

        source_lead = lead_in(source_texts, selected.word_index) + shape.prefix
        source_context = TokenContext.around(source_texts, selected.word_index)

        for other_index, other_texts in enumerate(tokenized):
            if other_index in (file_index, source_index):
                continue

            for word_index, text in enumerate(other_texts):
                if (other_index, word_index) in seen:
                    continue

                candidate = NumericRunShape.parse(text)
                if candidate is None or not shape.same_shape(candidate):
                    continue
                if lead_in(other_texts, word_index) + candidate.prefix != source_lead:
                    continue

                rate = source_context.match_rate(TokenContext.around(other_texts, word_index))
                if rate < CONTEXT_MATCH_THRESHOLD:
                    continue

                seen.add((other_index, word_index))
                results.append(SimilarToken(other_index, word_index, text, rate))

    if results:
        logger.debug(
            "[WordPropagation] %d similar token(s) found for %d selection(s) in file %d",
            len(results),
            len(selected_tokens),
            file_index,
            extra={"dev_only": True},
        )

    return results
