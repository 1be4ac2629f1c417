"""
Module: test_filename_validator.py

Author: Michael Economou
Date: 2026-10-17

Tests for filename validation utilities
"""

import pytest

from namecraft.config import INVALID_FILENAME_CHARS, MAX_FILENAME_LENGTH
from namecraft.utils.naming.filename_validator import (
    clean_filename_text,
    clean_trailing_chars,
    get_validation_error_message,
    is_reserved_name,
    is_valid_filename_char,
    validate_filename,
)


class TestFilenameValidator:
    """Test suite for filename validation utilities"""

    def test_is_valid_filename_char(self):
        """Test character validation"""
        for char in "aZ1_- .":
            assert is_valid_filename_char(char) is True

        for char in INVALID_FILENAME_CHARS:
            assert is_valid_filename_char(char) is False

        assert is_valid_filename_char("\x01") is False

    def test_clean_filename_text(self):
        """Test text cleaning functionality"""
        assert clean_filename_text("hello_world") == "hello_world"
        assert clean_filename_text("hello<world>") == "helloworld"
        assert clean_filename_text("bad/file\\name") == "badfilename"

    def test_clean_trailing_chars(self):
        """Test trailing character removal"""
        assert clean_trailing_chars("filename") == "filename"
        assert clean_trailing_chars("filename . ") == "filename"
        assert clean_trailing_chars("file.name with spaces") == "file.name with spaces"

    def test_reserved_names(self):
        """Test Windows device names with and without extension"""
        assert is_reserved_name("CON")
        assert is_reserved_name("nul.txt")
        assert is_reserved_name("com1.tar.gz")
        assert not is_reserved_name("console.txt")

    @pytest.mark.parametrize(
        ("filename", "message"),
        [
            ("", "Filename cannot be empty"),
            ("   ", "Filename cannot be empty"),
            ("a<b", "Invalid characters: '<'"),
            ("a>b<c", "Invalid characters: '<', '>'"),
            (".", "Filename cannot be '.' or '..'"),
            ("..", "Filename cannot be '.' or '..'"),
            ("name.", "Filename cannot end with spaces or dots"),
            ("name ", "Filename cannot end with spaces or dots"),
            ("CON", "'CON' is a reserved Windows filename"),
            ("a" * (MAX_FILENAME_LENGTH + 1), "Filename is longer than 255 characters"),
        ],
    )
    def test_error_messages(self, filename, message):
        """Test error message for each kind of invalid name"""
        assert get_validation_error_message(filename) == message
        assert validate_filename(filename) == (False, message)

    def test_valid_names(self):
        """Test names that pass validation"""
        for name in ("clip.mov", "A_001 (copy).MOV", ".hidden", "a" * MAX_FILENAME_LENGTH):
            assert validate_filename(name) == (True, "")
            assert get_validation_error_message(name) == ""
