"""Run configuration and the walk → match → report loop."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidRootError
from .matcher import compile_pattern, matches
from .reporter import Reporter
from .types import Entry
from .walker import ErrorHandler, hidden_prune, walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchConfig:
    """Immutable settings for one search run."""

    root: Path
    pattern: re.Pattern[str]
    detail: bool = False
    json_output: bool = False
    show_hidden: bool = False


def resolve_positionals(
    first: str | None,
    second: str | None,
    path_option: str | None = None,
) -> tuple[str | None, str | None]:
    """Split positional arguments into ``(pattern_text, root_text)``.

    An explicit ``path_option`` always wins and leaves ``first`` as the
    pattern. Otherwise a lone positional that names an existing path is taken
    as the root with a match-all pattern.
    """
    if path_option is not None:
        return first, path_option
    if first is not None and second is None and Path(first).exists():
        return None, first
    return first, second


def build_search_config(
    pattern_text: str | None,
    root: str | Path | None,
    *,
    detail: bool = False,
    json_output: bool = False,
    show_hidden: bool = False,
) -> SearchConfig:
    """Validate inputs and build a ``SearchConfig``.

    Raises ``InvalidRootError`` for a missing root and ``InvalidPatternError``
    for a pattern that does not compile. ``root=None`` means the working
    directory.
    """
    if root is None:
        root_path = Path.cwd()
    else:
        root_path = Path(root)
        if not root_path.exists():
            raise InvalidRootError(str(root))
    pattern = compile_pattern(pattern_text)
    return SearchConfig(
        root=root_path.resolve(),
        pattern=pattern,
        detail=detail,
        json_output=json_output,
        show_hidden=show_hidden,
    )


def iter_matches(config: SearchConfig, on_error: ErrorHandler | None = None) -> Iterator[Entry]:
    """Lazily yield every entry under ``config.root`` that passes the matcher.

    A directory root is the search origin and is never itself a result; a
    file root is matched like any other entry.
    """
    prune = hidden_prune(config.show_hidden)
    for entry in walk(config.root, prune=prune, on_error=on_error):
        if entry.is_dir and entry.path == config.root:
            continue
        if matches(entry, config.pattern, config.show_hidden):
            yield entry


def run_search(config: SearchConfig, reporter: Reporter) -> int:
    """Walk ``config.root`` feeding matches to ``reporter``.

    Returns the number of reported entries. ``reporter.finish`` is called
    exactly once after the walk completes, also when nothing matched.
    """
    logger.debug("searching %s for %r (hidden=%s)", config.root, config.pattern.pattern, config.show_hidden)
    reported = 0
    for entry in iter_matches(config, on_error=reporter.diagnostic):
        if reporter.report(entry):
            reported += 1
    reporter.finish()
    logger.debug("reported %d entries under %s", reported, config.root)
    return reported


__all__ = [
    "SearchConfig",
    "build_search_config",
    "iter_matches",
    "resolve_positionals",
    "run_search",
]
