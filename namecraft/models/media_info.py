"""Module: media_info.py

Author: Michael Economou
Date: 2026-10-12

Media information attached to a file by an external probe (ffprobe or an
image reader). namecraft never probes files itself: callers pass a mapping
of path -> MediaInfo, and files without an entry fall back to what the
extension tells.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from namecraft.config import IMAGE_EXTENSIONS, VIDEO_EXTENSIONS

UNKNOWN = "unknown"


def _extension_of(path: str) -> str:
    return os.path.splitext(path)[1].lstrip(".").lower()


def is_image_path(path: str) -> bool:
    return _extension_of(path) in IMAGE_EXTENSIONS


def is_video_path(path: str) -> bool:
    return _extension_of(path) in VIDEO_EXTENSIONS


@dataclass
class MediaInfo:
    """Probed properties of an image or video file."""

    width: int = 0
    height: int = 0
    duration: float = 0.0
    frames: int = 0
    colorspace: str = UNKNOWN
    color_transfer: str = UNKNOWN
    codec: str = UNKNOWN
    bit_depth: str = UNKNOWN
    chroma_subsampling: str = UNKNOWN
    scan_type: str = UNKNOWN
    bitrate: str = UNKNOWN
    pixel_format: str = UNKNOWN
    is_image: bool = False
    is_video: bool = False

    @property
    def is_landscape(self) -> bool:
        return self.width > self.height

    @property
    def is_portrait(self) -> bool:
        return self.height > self.width

    @classmethod
    def for_path(cls, path: str) -> "MediaInfo":
        """Extension-only information for a file that was not probed."""
        return cls(is_image=is_image_path(path), is_video=is_video_path(path))

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "") -> "MediaInfo":
        """Build from a probe result; missing or empty values keep their defaults."""
        info = cls.for_path(path) if path else cls()

        for name in ("width", "height", "frames"):
            value = data.get(name)
            if value:
                setattr(info, name, int(value))

        if data.get("duration"):
            info.duration = float(data["duration"])

        for name in (
            "colorspace",
            "color_transfer",
            "codec",
            "bit_depth",
            "chroma_subsampling",
            "scan_type",
            "bitrate",
            "pixel_format",
        ):
            value = data.get(name)
            if value not in (None, ""):
                setattr(info, name, str(value))

        if "is_image" in data:
            info.is_image = bool(data["is_image"])
        if "is_video" in data:
            info.is_video = bool(data["is_video"])

        return info


def media_info_for(path: str, metadata_cache: Mapping[str, Any] | None = None) -> MediaInfo:
    """Probed info for ``path`` from ``metadata_cache``, else the extension-only fallback.

    Cache values may be MediaInfo instances or raw probe dicts.
    """
    entry = metadata_cache.get(path) if metadata_cache else None
    if isinstance(entry, MediaInfo):
        return entry
    if isinstance(entry, Mapping):
        return MediaInfo.from_dict(dict(entry), path)
    return MediaInfo.for_path(path)
