"""Module: exceptions.py

Author: Michael Economou
Date: 2026-10-12

Exception types raised at the boundaries of the rename workflow.

The word engine itself never raises; these errors come from parsing user
input (rules, selections, method names) before it reaches the engine.
"""


class NamecraftError(Exception):
    """Base class for all namecraft errors."""


class InvalidRuleError(NamecraftError, ValueError):
    """A word edit rule has an unknown action or malformed payload."""


class UnknownRenameMethodError(NamecraftError, ValueError):
    """The requested rename method is not registered."""

    def __init__(self, method: str):
        super().__init__(f"Unknown rename method: {method!r}")
        self.method = method


class InvalidSelectionError(NamecraftError, ValueError):
    """A token selection does not point at a selectable token."""
