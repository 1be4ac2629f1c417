"""Naming/Rename utilities package.

Filename validation and the low-level rename helpers.
"""
