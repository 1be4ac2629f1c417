"""
Module: filename_validator.py

Author: Michael Economou
Date: 2026-10-13

This module provides functions for validating and cleaning filenames according
to Windows standards, which are the strictest of the supported platforms.
Contains:
- is_valid_filename_char: Check if a character is valid for filenames
- clean_filename_text: Clean text by removing invalid characters
- clean_trailing_chars: Strip characters not allowed at the end of a name
- validate_filename: Validate a complete filename
- get_validation_error_message: Explain why a filename is invalid
"""

from namecraft.config import (
    INVALID_FILENAME_CHARS,
    INVALID_TRAILING_CHARS,
    MAX_FILENAME_LENGTH,
    RESERVED_FILENAMES,
)
from namecraft.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def is_valid_filename_char(char: str) -> bool:
    """
    Check if a character is valid for filenames

    Args:
        char: Single character to check

    Returns:
        bool: True if character is valid for filenames
    """
    return char not in INVALID_FILENAME_CHARS and ord(char) >= 32


def clean_filename_text(text: str) -> str:
    """
    Clean text by removing invalid filename characters

    Args:
        text: Input text to clean

    Returns:
        str: Cleaned text with invalid characters removed
    """
    cleaned = "".join(char for char in text if is_valid_filename_char(char))

    if cleaned != text:
        logger.debug(
            "[FilenameValidator] Cleaned text: '%s' -> '%s'",
            text,
            cleaned,
            extra={"dev_only": True},
        )
    return cleaned


def clean_trailing_chars(filename_part: str) -> str:
    """Remove trailing spaces and dots."""
    return filename_part.rstrip(INVALID_TRAILING_CHARS)


def is_reserved_name(filename: str) -> bool:
    """True for Windows device names, with or without an extension (``CON``, ``nul.txt``)."""
    stem = filename.split(".", 1)[0]
    return stem.strip().upper() in RESERVED_FILENAMES


def get_validation_error_message(filename: str) -> str:
    """
    Get a user-friendly error message for an invalid filename

    Args:
        filename: The filename to check

    Returns:
        str: Error message, or an empty string when the name is valid
    """
    if not filename or not filename.strip():
        return "Filename cannot be empty"

    invalid_chars = sorted({char for char in filename if not is_valid_filename_char(char)})
    if invalid_chars:
        char_list = "', '".join(invalid_chars)
        return f"Invalid characters: '{char_list}'"

    if filename in (".", ".."):
        return "Filename cannot be '.' or '..'"

    if filename != clean_trailing_chars(filename):
        return "Filename cannot end with spaces or dots"

    if is_reserved_name(filename):
        return f"'{filename}' is a reserved Windows filename"

    if len(filename) > MAX_FILENAME_LENGTH:
        return f"Filename is longer than {MAX_FILENAME_LENGTH} characters"

    return ""


def validate_filename(filename: str) -> tuple[bool, str]:
    """
    Validate a complete filename (base name and extension)

    Returns:
        Tuple[bool, str]: (is_valid, error_message)
    """
    message = get_validation_error_message(filename)
    if message:
        logger.debug(
            "[FilenameValidator] Invalid filename '%s': %s",
            filename,
            message,
            extra={"dev_only": True},
        )
        return False, message
    return True, ""
