"""Human-readable rendering helpers for text-mode detail blocks.

Sizes use decimal (SI) units, timestamps use RFC 2822 in UTC, and names are
escaped so control bytes in filenames cannot drive the terminal.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import format_datetime

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_SIZE_UNITS = ("kB", "MB", "GB", "TB", "PB", "EB")
SIZE_UNIT_STEP = 1000


def format_size(size_bytes: int) -> str:
    """Format a byte count using decimal units (``999 B``, ``1.2 MB``)."""
    if size_bytes < SIZE_UNIT_STEP:
        return f"{size_bytes} B"
    value = float(size_bytes)
    unit = _SIZE_UNITS[0]
    for unit in _SIZE_UNITS:
        value /= SIZE_UNIT_STEP
        if value < SIZE_UNIT_STEP:
            break
    return f"{value:.1f} {unit}"


def format_timestamp(seconds: int | None) -> str:
    """Render unix-epoch seconds as an RFC 2822 date in UTC."""
    if seconds is None:
        return "unavailable"
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return format_datetime(moment)


def display_text(source: str) -> str:
    """Return printable text for a filesystem string.

    Undecodable bytes (surrogate-escaped by ``os.fsdecode``) become U+FFFD and
    control bytes are escaped, so the result always encodes as UTF-8.
    """
    lossy = source.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return sanitize_terminal_text(lossy)


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


__all__ = [
    "display_text",
    "format_size",
    "format_timestamp",
    "sanitize_terminal_text",
]
