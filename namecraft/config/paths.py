"""Module: namecraft.config.paths

Author: Michael Economou
Date: 2026-10-12

Filename validation rules and media extension sets.
"""

# =====================================
# FILENAME VALIDATION
# =====================================

# Regex pattern for Windows-safe names
ALLOWED_FILENAME_CHARS = r"^[^\\/:*?\"<>|]+$"

# Invalid filename characters for input filtering
INVALID_FILENAME_CHARS = '<>:"/\\|?*'

# Characters that shouldn't be at the end of filename (before extension)
INVALID_TRAILING_CHARS = " ."

# Device names Windows refuses as a base name, regardless of extension
RESERVED_FILENAMES = {
    "CON", "PRN", "AUX", "NUL",
    "COM1", "COM2", "COM3", "COM4", "COM5", "COM6", "COM7", "COM8", "COM9",
    "LPT1", "LPT2", "LPT3", "LPT4", "LPT5", "LPT6", "LPT7", "LPT8", "LPT9",
}

MAX_FILENAME_LENGTH = 255

# =====================================
# MEDIA EXTENSIONS
# =====================================

# Used when no probed metadata is available for a file
IMAGE_EXTENSIONS = {
    "jpg", "jpeg", "png", "gif", "bmp", "webp", "tif", "tiff", "exr", "dpx",
    "hdr", "avif", "heic", "tga", "svg", "psd",
}

VIDEO_EXTENSIONS = {
    "mp4", "mov", "avi", "mkv", "webm", "wmv", "flv", "m4v", "3gp", "mxf",
    "r3d", "braw", "ari", "arw", "sraw", "raw",
}

# =====================================
# USER CONFIG LOCATION
# =====================================

# Environment variables checked (in order) for the user config base directory
CONFIG_DIR_ENV_WINDOWS = "APPDATA"
CONFIG_DIR_ENV_POSIX = "XDG_CONFIG_HOME"
