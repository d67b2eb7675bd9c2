"""Configuration errors raised before a walk starts."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Invalid user input detected while building a ``SearchConfig``."""


class InvalidPatternError(ConfigurationError):
    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid RegEx: {pattern!r} ({reason})")
        self.pattern = pattern
        self.reason = reason


class InvalidRootError(ConfigurationError):
    def __init__(self, root: str) -> None:
        super().__init__(f"Invalid directory path: {root}")
        self.root = root


__all__ = [
    "ConfigurationError",
    "InvalidPatternError",
    "InvalidRootError",
]
