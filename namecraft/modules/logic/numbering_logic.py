"""Pure numbering logic (Qt-free).

Author: Michael Economou
Date: 2026-10-14

This module contains the logic for sequential numbering of file names.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from namecraft.models.file_item import FileItem

from namecraft.config import DEFAULT_NUMBERING_PATTERN
from namecraft.utils.filesystem.file_utils import split_file_name
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class NumberingLogic:
    """Sequential numbering without Qt dependencies."""

    @staticmethod
    def format_number(value: int, padding: int = 0) -> str:
        """Zero-pad ``value`` to ``padding`` digits (no padding when 0)."""
        if padding > 0:
            return f"{value:0{padding}d}"
        return str(value)

    @staticmethod
    def apply_from_data(
        data: dict[str, Any],
        file_item: "FileItem",
        index: int = 0,
        _metadata_cache: dict | None = None,
    ) -> str:
        """Build a numbered name from a template.

        Parameters
        ----------
        data : dict
            Configuration dictionary with keys:
                - 'pattern': str, template with {name}, {num} and {ext}
                - 'start': int, the first number
                - 'step': int, increment step
                - 'padding': int, number of digits (e.g. 3 -> 001)
        file_item : FileItem
            The file to rename.
        index : int, optional
            Numbering position of the file. The preview manager passes the
            position in the chosen sort order, not the list index.

        Returns
        -------
        str
            The new file name; the original extension is appended when the
            template result does not contain it.

        """
        base_name, extension = split_file_name(file_item.filename)

        pattern = data.get("pattern") or DEFAULT_NUMBERING_PATTERN
        start = int(data.get("start", 1))
        step = int(data.get("step", 1))
        padding = int(data.get("padding", 0))

        number = NumberingLogic.format_number(start + index * step, padding)
        result = (
            pattern.replace("{name}", base_name)
            .replace("{num}", number)
            .replace("{ext}", extension.lstrip("."))
        )

        if extension and extension not in result:
            result += extension

        logger.debug(
            "[NumberingLogic] index: %d, number: %s, result: %s",
            index,
            number,
            result,
            extra={"dev_only": True},
        )
        return result

    @staticmethod
    def is_effective_data(_data: dict[str, Any]) -> bool:
        """Numbering always produces a number, so it is always effective."""
        return True
