"""Data models shared across the rename workflow."""
