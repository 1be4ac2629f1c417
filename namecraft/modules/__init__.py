"""Rename methods of namecraft."""
