"""namecraft.core.word.similarity.

Filename shape comparison.

A filename's shape (its pattern signature) is the name with every digit
run masked, e.g. ``shot_0012_take3.mov`` -> ``shot_####_take#.mov``. Two
signatures are compared by a weighted sum of:

- a structural score, one minus the normalized Levenshtein distance;
- a positional score, how closely the relative positions of the marker
  characters (``#``, ``_``, ``-``, ``.``) line up.

When marker counts differ, each position of the shorter list is matched
to its nearest neighbour in the longer one. The shorter list is picked by
length, not by argument order, so swapping the two names gives the same
score.

Author: Michael Economou
Date: 2026-10-12
"""

import re
from collections.abc import Sequence

from namecraft.config import (
    PATTERN_DIGIT_PLACEHOLDER,
    POSITIONAL_SIMILARITY_WEIGHT,
    STRUCTURAL_MARKER_CHARS,
    STRUCTURAL_SIMILARITY_WEIGHT,
)

_DIGIT_RUN_RE = re.compile(r"[0-9]+")


def extract_pattern(file_name: str) -> str:
    """Mask every ASCII digit run with placeholders of the same length."""
    return _DIGIT_RUN_RE.sub(
        lambda match: PATTERN_DIGIT_PLACEHOLDER * len(match.group()), file_name
    )


def levenshtein_distance(first: str, second: str) -> int:
    """Unit-cost edit distance between two strings.

    Rows follow ``second`` and columns follow ``first``.
    """
    matrix = [[0] * (len(first) + 1) for _ in range(len(second) + 1)]

    for j in range(len(first) + 1):
        matrix[0][j] = j
    for i in range(len(second) + 1):
        matrix[i][0] = i

    for i in range(1, len(second) + 1):
        for j in range(1, len(first) + 1):
            if second[i - 1] == first[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],  # substitution
                    matrix[i][j - 1],  # insertion
                    matrix[i - 1][j],  # deletion
                )

    return matrix[len(second)][len(first)]


def structural_similarity(first: str, second: str) -> float:
    """Return ``1 - distance / longest length``; two empty strings score 1.0."""
    max_length = max(len(first), len(second))
    if max_length == 0:
        return 1.0
    return 1.0 - levenshtein_distance(first, second) / max_length


def marker_positions(signature: str, marker: str) -> list[float]:
    """Positions of ``marker`` in ``signature``, divided by the signature length."""
    if not signature:
        return []
    length = len(signature)
    return [index / length for index, char in enumerate(signature) if char == marker]


def array_similarity(first: Sequence[float], second: Sequence[float]) -> float:
    """Compare two lists of normalized positions.

    Equal lengths are compared element by element. Otherwise every position
    of the shorter list is paired with the closest position of the longer
    list. Similarity is ``max(0, 1 - total_difference / len(shorter))``.
    """
    if len(first) == len(second):
        if not first:
            return 1.0
        total_diff = sum(abs(a - b) for a, b in zip(first, second, strict=True))
        return max(0.0, 1.0 - total_diff / len(first))

    shorter, longer = (first, second) if len(first) < len(second) else (second, first)
    if not shorter:
        return 0.0

    total_diff = sum(min(abs(position - other) for other in longer) for position in shorter)
    return max(0.0, 1.0 - total_diff / len(shorter))


def positional_similarity(first: str, second: str) -> float:
    """Weighted agreement of marker character positions; 0.0 with no markers."""
    weighted_sum = 0.0
    total_weight = 0

    for marker in STRUCTURAL_MARKER_CHARS:
        first_positions = marker_positions(first, marker)
        second_positions = marker_positions(second, marker)
        weight = max(len(first_positions), len(second_positions))
        if weight == 0:
            continue

        weighted_sum += array_similarity(first_positions, second_positions) * weight
        total_weight += weight

    if total_weight == 0:
        return 0.0
    return weighted_sum / total_weight


def pattern_similarity(first: str, second: str) -> float:
    """Similarity of two pattern signatures, in ``[0, 1]``.

    Two empty signatures are identical and score 1.0.
    """
    if not first and not second:
        return 1.0

    # Identical signatures score 1.0 even when they hold no marker character
    if first == second:
        return 1.0

    score = STRUCTURAL_SIMILARITY_WEIGHT * structural_similarity(
        first, second
    ) + POSITIONAL_SIMILARITY_WEIGHT * positional_similarity(first, second)
    return min(1.0, max(0.0, score))


def filename_similarity(first_name: str, second_name: str) -> float:
    """Shape similarity of two filenames (signatures are extracted first)."""
    return pattern_similarity(extract_pattern(first_name), extract_pattern(second_name))
