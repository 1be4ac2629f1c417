"""Rename workflow package: preview, validate, execute, undo/redo."""
