"""Name matching and hidden-entry policy."""

from __future__ import annotations

import re

from .errors import InvalidPatternError
from .types import Entry

HIDDEN_MARKER = "."
MATCH_ALL = ".*"


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_MARKER)


def compile_pattern(text: str | None) -> re.Pattern[str]:
    """Compile ``text`` into a name pattern; ``None`` means match everything."""
    if text is None:
        text = MATCH_ALL
    try:
        return re.compile(text)
    except re.error as exc:
        raise InvalidPatternError(text, str(exc)) from exc


def _decodable(name: str) -> bool:
    # Undecodable bytes surface as lone surrogates (surrogateescape).
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def matches(entry: Entry, pattern: re.Pattern[str], include_hidden: bool) -> bool:
    """Return whether ``entry`` should be reported.

    Hidden entries are rejected first unless ``include_hidden`` is set. The
    pattern is then searched (unanchored) in the base name only.
    """
    if not include_hidden and is_hidden(entry.name):
        return False
    if not _decodable(entry.name):
        return False
    return pattern.search(entry.name) is not None


__all__ = [
    "HIDDEN_MARKER",
    "MATCH_ALL",
    "compile_pattern",
    "is_hidden",
    "matches",
]
