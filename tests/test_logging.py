"""
Module: test_logging.py

Author: Michael Economou
Date: 2026-10-17

Tests for the logger factory, helpers and file handlers.
"""

import logging

from namecraft.utils.logging.logger_factory import LoggerFactory, get_cached_logger
from namecraft.utils.logging.logger_file_helper import NameFilter, add_file_handler
from namecraft.utils.logging.logger_helper import DevOnlyFilter, safe_text


def _record(name="namecraft.test", **extra):
    record = logging.LogRecord(name, logging.DEBUG, __file__, 1, "message", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLoggerFactory:
    """Test cached logger lookup"""

    def test_same_name_same_logger(self):
        first = get_cached_logger("namecraft.test.factory")
        assert get_cached_logger("namecraft.test.factory") is first
        assert "namecraft.test.factory" in LoggerFactory.get_cached_names()

    def test_set_global_level(self):
        logger = get_cached_logger("namecraft.test.level")
        try:
            LoggerFactory.set_global_level(logging.ERROR)
            assert logger.level == logging.ERROR
        finally:
            LoggerFactory.set_global_level(logging.NOTSET)

    def test_logger_propagates_to_root(self, caplog):
        logger = get_cached_logger("namecraft.test.propagate")
        with caplog.at_level(logging.INFO):
            logger.info("[Test] hello %s", "world")
        assert "[Test] hello world" in caplog.text


class TestLoggerHelpers:
    """Test text and record filters"""

    def test_safe_text(self):
        assert safe_text("a → b … c") == "a -> b ... c"
        assert safe_text("plain") == "plain"

    def test_dev_only_filter(self):
        dev_filter = DevOnlyFilter()
        assert dev_filter.filter(_record()) is True
        assert dev_filter.filter(_record(dev_only=True)) is False

    def test_name_filter(self):
        name_filter = NameFilter("namecraft.cli")
        assert name_filter.filter(_record("namecraft.cli"))
        assert not name_filter.filter(_record("namecraft.core"))


class TestFileHandler:
    """Test rotating file handler setup"""

    def test_writes_to_file(self, tmp_path):
        log_path = tmp_path / "logs" / "namecraft.log"
        logger = logging.getLogger("namecraft.test.file_handler")
        logger.propagate = False
        logger.setLevel(logging.DEBUG)

        handler = add_file_handler(logger, str(log_path), level=logging.INFO)
        try:
            logger.debug("hidden")
            logger.info("written")
            handler.flush()
        finally:
            logger.removeHandler(handler)
            handler.close()

        content = log_path.read_text(encoding="utf-8")
        assert "written" in content
        assert "hidden" not in content
        assert "[INFO] namecraft.test.file_handler" in content
