"""Module: namecraft.config.features

Author: Michael Economou
Date: 2026-10-12

Word engine thresholds, history limits and rename method defaults.
"""

# =====================================
# WORD ENGINE
# =====================================

# Minimum filename shape similarity for "apply to similar patterns only"
SIMILAR_PATTERN_THRESHOLD = 0.8

# Weights of the two similarity components (must sum to 1.0)
STRUCTURAL_SIMILARITY_WEIGHT = 0.7
POSITIONAL_SIMILARITY_WEIGHT = 0.3

# Characters whose positions describe a filename's layout
STRUCTURAL_MARKER_CHARS = ("#", "_", "-", ".")

# Placeholder written over every digit by the pattern extractor
PATTERN_DIGIT_PLACEHOLDER = "#"

# Neighbouring tokens compared on each side when propagating a selection
CONTEXT_WINDOW = 2

# Minimum share of matching neighbour classes for a propagated token
CONTEXT_MATCH_THRESHOLD = 0.5

# =====================================
# HISTORY
# =====================================

MAX_HISTORY = 50

# =====================================
# RENAME METHOD DEFAULTS
# =====================================

DEFAULT_RENAME_METHOD = "pattern"

RENAME_METHODS = ("pattern", "replace", "regex", "word", "numbering", "expression")

DEFAULT_PATTERN = "{name}"
DEFAULT_NUMBERING_PATTERN = "{name}_{num}"
DEFAULT_EXPRESSION = 'name + "_" + padnum(index + 1, 3) + "." + fileext'
DEFAULT_DATE_FORMAT = "YYYY-MM-DD"

# Limits for the expression method
EXPRESSION_MAX_TEXT_LENGTH = 1024
EXPRESSION_MAX_POWER_BITS = 4096

NUMBERING_SORT_METHODS = ("name", "date", "size", "random")
FILE_SORT_METHODS = ("name", "type", "date", "size")
