"""Pure pattern logic (Qt-free).

Author: Michael Economou
Date: 2026-10-14

Template based renaming. A template mixes literal text with variables:

    {name} {ext} {num} {padnum3} {date} {upper_name} {lower_name}
    {width} {height} {duration} {duration_fmt} {frames} {colorspace}
    {log} {codec} {bit_depth} {chroma_subsampling} {scan_type} {bitrate}
    {pixel_format} {is_image} {is_video}

and conditional blocks kept only when the file qualifies:

    {if_image:...} {if_video:...} {if_landscape:...} {if_portrait:...}

Unknown variables are left as they are.
"""

import re
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from namecraft.models.file_item import FileItem

from namecraft.config import DEFAULT_DATE_FORMAT, DEFAULT_PATTERN
from namecraft.models.media_info import MediaInfo, media_info_for
from namecraft.utils.date_formatter import format_date, format_time
from namecraft.utils.filesystem.file_utils import split_file_name
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_VARIABLE_RE = re.compile(r"\{(\w+)\}")
_CONDITIONAL_RE = re.compile(r"\{if_(image|video|landscape|portrait):(.*?)\}")


def _number_text(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


class PatternLogic:
    """Template renaming with name, counter, date and media variables."""

    @staticmethod
    def build_variables(
        base_name: str, extension: str, index: int, date_text: str, media: MediaInfo
    ) -> dict[str, str]:
        number = index + 1
        return {
            "name": base_name,
            "ext": extension.lstrip("."),
            "num": str(number),
            "padnum3": f"{number:03d}",
            "date": date_text,
            "upper_name": base_name.upper(),
            "lower_name": base_name.lower(),
            "width": str(media.width),
            "height": str(media.height),
            "duration": _number_text(media.duration),
            "duration_fmt": format_time(media.duration),
            "frames": str(media.frames),
            "colorspace": media.colorspace,
            "log": media.color_transfer,
            "codec": media.codec,
            "bit_depth": media.bit_depth,
            "chroma_subsampling": media.chroma_subsampling,
            "scan_type": media.scan_type,
            "bitrate": media.bitrate,
            "pixel_format": media.pixel_format,
            "is_image": "image" if media.is_image else "",
            "is_video": "video" if media.is_video else "",
        }

    @staticmethod
    def apply_from_data(
        data: dict[str, Any],
        file_item: "FileItem",
        index: int = 0,
        metadata_cache: dict | None = None,
    ) -> str:
        """Render ``data["pattern"]`` for one file.

        ``data["date_format"]`` controls ``{date}``; ``data["date"]`` may pin
        the date (a datetime), otherwise today is used. Media variables come
        from ``metadata_cache`` keyed by full path.
        """
        base_name, extension = split_file_name(file_item.filename)
        pattern = data.get("pattern") or DEFAULT_PATTERN

        date = data.get("date") or datetime.now()
        date_text = format_date(date, data.get("date_format") or DEFAULT_DATE_FORMAT)
        media = media_info_for(file_item.full_path, metadata_cache)

        variables = PatternLogic.build_variables(base_name, extension, index, date_text, media)
        result = _VARIABLE_RE.sub(
            lambda match: variables.get(match.group(1), match.group(0)), pattern
        )

        conditions = {
            "image": media.is_image,
            "video": media.is_video,
            "landscape": media.is_landscape,
            "portrait": media.is_portrait,
        }
        result = _CONDITIONAL_RE.sub(
            lambda match: match.group(2) if conditions[match.group(1)] else "", result
        )

        if extension and extension not in result:
            result += extension

        logger.debug(
            "[PatternLogic] '%s' with '%s' -> '%s'",
            file_item.filename,
            pattern,
            result,
            extra={"dev_only": True},
        )
        return result

    @staticmethod
    def is_effective_data(data: dict[str, Any]) -> bool:
        """A template other than the plain ``{name}`` changes something."""
        pattern = data.get("pattern") or DEFAULT_PATTERN
        return pattern.strip() not in ("{name}", "{name}.{ext}")
