"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-17

Global pytest configuration and fixtures for the namecraft test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
from datetime import datetime

# Qt must not try to open a display when the adapter tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from namecraft.models.file_item import FileItem


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip local-only tests on CI."""
    _ = session
    _ = config

    if "CI" in os.environ or "GITHUB_ACTIONS" in os.environ:
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")
        for item in items:
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture
def make_file_item():
    """Build a FileItem for a path that does not need to exist."""

    def _make(path: str, modified: datetime | None = None, size: int = 0) -> FileItem:
        extension = os.path.splitext(path)[1].lstrip(".").lower()
        return FileItem(path, extension, modified or datetime(2024, 7, 15, 10, 30), size)

    return _make


@pytest.fixture
def take_files(tmp_path):
    """Three camera clips on disk: two takes of scene A and one of scene B."""
    paths = []
    for name in ("A_001.mov", "A_002.mov", "B_999.mov"):
        path = tmp_path / name
        path.write_text(name)
        paths.append(str(path))
    return paths
