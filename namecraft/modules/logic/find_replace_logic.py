"""Pure find/replace logic (Qt-free).

Author: Michael Economou
Date: 2026-10-14

Literal text replacement over the whole file name, extension included.
"""

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from namecraft.models.file_item import FileItem

from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class FindReplaceLogic:
    """Replace every occurrence of a literal text."""

    @staticmethod
    def apply_from_data(
        data: dict[str, Any],
        file_item: "FileItem",
        _index: int = 0,
        _metadata_cache: dict | None = None,
    ) -> str:
        """Replace all occurrences of ``data["find"]`` with ``data["replace"]``.

        Matching ignores case unless ``data["case_sensitive"]`` is set. An
        empty find text leaves the name unchanged.
        """
        filename = file_item.filename
        find = data.get("find", "")
        if not find:
            return filename

        replace = data.get("replace", "")
        flags = 0 if data.get("case_sensitive", False) else re.IGNORECASE
        result = re.sub(re.escape(find), lambda _match: replace, filename, flags=flags)

        logger.debug(
            "[FindReplaceLogic] '%s' -> '%s'", filename, result, extra={"dev_only": True}
        )
        return result

    @staticmethod
    def is_effective_data(data: dict[str, Any]) -> bool:
        return bool(data.get("find"))
