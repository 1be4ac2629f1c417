"""Pure regular expression logic (Qt-free).

Author: Michael Economou
Date: 2026-10-14

Replace every match of a user supplied regular expression. Replacement
strings may reference groups the Python way (``\\1``, ``\\g<name>``) or
the ``$1`` / ``$&`` way most rename tools use.
"""

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from namecraft.models.file_item import FileItem

from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_DOLLAR_REFERENCE_RE = re.compile(r"\$(\$|&|\d{1,2})")


def translate_replacement(replacement: str) -> str:
    """Turn ``$1``, ``$&`` and ``$$`` into their Python template equivalents."""

    def convert(match: re.Match[str]) -> str:
        token = match.group(1)
        if token == "$":
            return "$"
        if token == "&":
            return r"\g<0>"
        return rf"\g<{int(token)}>"

    return _DOLLAR_REFERENCE_RE.sub(convert, replacement)


class RegexLogic:
    """Regular expression search and replace over the whole file name."""

    @staticmethod
    def apply_from_data(
        data: dict[str, Any],
        file_item: "FileItem",
        _index: int = 0,
        _metadata_cache: dict | None = None,
    ) -> str:
        """Apply ``data["pattern"]`` with ``data["replacement"]``.

        An empty pattern, an invalid pattern, or a replacement that refers
        to a missing group leaves the name unchanged.
        """
        filename = file_item.filename
        pattern = data.get("pattern", "")
        if not pattern:
            return filename

        replacement = translate_replacement(data.get("replacement", ""))
        try:
            return re.sub(pattern, replacement, filename)
        except (re.error, IndexError) as e:
            logger.warning("[RegexLogic] Invalid regex pattern '%s': %s", pattern, e)
            return filename

    @staticmethod
    def is_effective_data(data: dict[str, Any]) -> bool:
        pattern = data.get("pattern", "")
        if not pattern:
            return False
        try:
            re.compile(pattern)
        except re.error:
            return False
        return True
