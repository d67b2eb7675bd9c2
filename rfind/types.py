"""Value types passed between walker, matcher, and reporters."""

from __future__ import annotations

import os
import stat as stat_mode
from dataclasses import dataclass
from pathlib import Path
from typing import TypedDict


@dataclass(frozen=True)
class Entry:
    """One visited filesystem node."""

    path: Path
    name: str
    is_dir: bool


@dataclass(frozen=True)
class EntryDetail:
    """Stat-derived metadata for an entry.

    Timestamps are whole unix-epoch seconds clamped at zero. ``created`` is
    ``None`` when the platform does not report a birth time.
    """

    is_dir: bool
    size: int
    modified: int
    accessed: int
    created: int | None


class ResultRecord(TypedDict):
    filetype: str
    name: str
    path: str
    size: int
    modified: int
    accessed: int
    created: int | None


def _epoch_seconds(value: float) -> int:
    return max(0, int(value))


def read_entry_detail(entry: Entry) -> EntryDetail:
    """Stat ``entry.path`` (following symlinks) and return its detail.

    Raises ``OSError`` when the entry cannot be stat-ed, e.g. a broken symlink
    or a file removed after it was listed.
    """
    stat = os.stat(entry.path)
    birthtime = getattr(stat, "st_birthtime", None)
    return EntryDetail(
        is_dir=stat_mode.S_ISDIR(stat.st_mode),
        size=int(stat.st_size),
        modified=_epoch_seconds(stat.st_mtime),
        accessed=_epoch_seconds(stat.st_atime),
        created=_epoch_seconds(birthtime) if birthtime is not None else None,
    )


def result_record(entry: Entry, detail: EntryDetail) -> ResultRecord:
    """Project an entry plus its detail into the JSON record shape."""
    return {
        "filetype": "d" if detail.is_dir else "f",
        "name": entry.name,
        "path": str(entry.path),
        "size": detail.size,
        "modified": detail.modified,
        "accessed": detail.accessed,
        "created": detail.created,
    }


__all__ = [
    "Entry",
    "EntryDetail",
    "ResultRecord",
    "read_entry_detail",
    "result_record",
]
