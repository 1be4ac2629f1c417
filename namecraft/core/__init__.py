"""Core layer: the word engine and the rename workflow (Qt-free)."""
