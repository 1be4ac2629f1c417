"""Pure word method logic (Qt-free).

Author: Michael Economou
Date: 2026-10-14

The word method edits tokens picked in a WordSession. The session holds
the selection and rules; this class only adapts it to the ``*Logic``
calling convention used by the preview manager.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from namecraft.app.state.word_session import WordSession
    from namecraft.models.file_item import FileItem


class WordLogic:
    """Word edits driven by a WordSession."""

    @staticmethod
    def apply_from_data(
        _data: dict[str, Any],
        file_item: "FileItem",
        index: int = 0,
        session: "WordSession | None" = None,
    ) -> str:
        if session is None:
            return file_item.filename
        return session.new_name_for(index) or file_item.filename

    @staticmethod
    def is_effective_data(_data: dict[str, Any], session: "WordSession | None" = None) -> bool:
        if session is None:
            return False
        return bool(session.rules) and bool(session.selected_tokens or session.word_patterns)
