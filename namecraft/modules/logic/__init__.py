"""Pure business logic for the rename methods (Qt-free).

Author: Michael Economou
Date: 2026-10-14

Each rename method is a ``*Logic`` class with a static
``apply_from_data(data, file_item, index, ...)`` returning the new file
name and ``is_effective_data(data)`` telling whether the options would
change anything.
"""

from namecraft.modules.logic.expression_logic import ExpressionLogic
from namecraft.modules.logic.find_replace_logic import FindReplaceLogic
from namecraft.modules.logic.numbering_logic import NumberingLogic
from namecraft.modules.logic.pattern_logic import PatternLogic
from namecraft.modules.logic.regex_logic import RegexLogic
from namecraft.modules.logic.word_logic import WordLogic

__all__ = [
    "ExpressionLogic",
    "FindReplaceLogic",
    "NumberingLogic",
    "PatternLogic",
    "RegexLogic",
    "WordLogic",
]
