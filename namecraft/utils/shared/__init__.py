"""Shared utilities package.

Generic utilities like the JSON configuration manager.
"""
