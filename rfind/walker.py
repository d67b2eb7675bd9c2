"""Lazy depth-first directory traversal with prune hooks."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from .matcher import is_hidden
from .types import Entry

logger = logging.getLogger(__name__)

PrunePredicate = Callable[[Entry], bool]
ErrorHandler = Callable[[Path, OSError], None]


def hidden_prune(show_hidden: bool) -> PrunePredicate:
    """Build a prune predicate that drops hidden entries unless ``show_hidden``."""

    def keep(entry: Entry) -> bool:
        return show_hidden or not is_hidden(entry.name)

    return keep


def _root_entry(root: Path) -> Entry:
    name = root.name or str(root)
    return Entry(path=root, name=name, is_dir=root.is_dir() and not root.is_symlink())


def _list_children(directory: Path, on_error: ErrorHandler | None) -> list[Entry]:
    """Scan ``directory`` into sorted child entries.

    Returns an empty list when the directory cannot be scanned; children whose
    type cannot be determined are skipped individually.
    """
    children: list[Entry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                child_path = Path(child.path)
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError as exc:
                    logger.debug("skipping %s: %s", child_path, exc)
                    if on_error is not None:
                        on_error(child_path, exc)
                    continue
                children.append(Entry(path=child_path, name=child.name, is_dir=is_dir))
    except OSError as exc:
        logger.debug("cannot scan %s: %s", directory, exc)
        if on_error is not None:
            on_error(directory, exc)
        return []

    children.sort(key=lambda item: item.name)
    return children


def walk(
    root: Path,
    prune: PrunePredicate | None = None,
    on_error: ErrorHandler | None = None,
) -> Iterator[Entry]:
    """Yield ``root`` and everything below it in depth-first pre-order.

    ``prune`` is consulted for every non-root entry before it is yielded or
    descended into; returning ``False`` drops the entry and its whole subtree.
    Symlinked directories are reported but never followed. Scan failures are
    passed to ``on_error`` and the walk moves on to the remaining tree.
    """
    root_entry = _root_entry(root)
    yield root_entry
    if not root_entry.is_dir:
        return

    stack: list[Iterator[Entry]] = [iter(_list_children(root, on_error))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        if prune is not None and not prune(entry):
            continue
        yield entry
        if entry.is_dir:
            stack.append(iter(_list_children(entry.path, on_error)))


__all__ = [
    "ErrorHandler",
    "PrunePredicate",
    "hidden_prune",
    "walk",
]
