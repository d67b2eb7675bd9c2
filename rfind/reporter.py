"""Output assembly for matched entries.

``TextReporter`` streams one line (or a detail block) per entry as the walk
proceeds. ``JsonReporter`` accumulates paths or records and writes a single
JSON document from ``finish``. Both drop entries whose detail cannot be read.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, TextIO

from .formatting import display_text, format_size, format_timestamp
from .highlight import DEFAULT_STYLE, colorize_json
from .types import Entry, ResultRecord, read_entry_detail, result_record

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    def report(self, entry: Entry) -> bool: ...

    def diagnostic(self, path: Path, exc: OSError) -> None: ...

    def finish(self) -> None: ...


class TextReporter:
    """Immediate text output, optionally with a per-entry detail block."""

    def __init__(self, stream: TextIO, detail: bool, err_stream: TextIO | None = None) -> None:
        self.stream = stream
        self.detail = detail
        self.err_stream = err_stream if err_stream is not None else stream

    def report(self, entry: Entry) -> bool:
        display_path = display_text(str(entry.path))
        if not self.detail:
            self.stream.write(f"{display_path}\n")
            return True

        try:
            detail = read_entry_detail(entry)
        except OSError as exc:
            logger.debug("dropping %s: %s", entry.path, exc)
            return False
        lines = [
            "",
            display_path,
            f"\tFiletype: {'directory' if detail.is_dir else 'file'}",
            f"\tName: {display_text(entry.name)}",
            f"\tSize: {format_size(detail.size)}",
            f"\tModified: {format_timestamp(detail.modified)}",
            f"\tAccessed: {format_timestamp(detail.accessed)}",
            f"\tCreated: {format_timestamp(detail.created)}",
        ]
        self.stream.write("\n".join(lines) + "\n")
        return True

    def diagnostic(self, path: Path, exc: OSError) -> None:
        reason = exc.strerror or str(exc)
        self.err_stream.write(f"{display_text(str(path))}: {reason}\n")

    def finish(self) -> None:
        self.stream.flush()


class JsonReporter:
    """Accumulate results and emit them as one JSON array on ``finish``."""

    def __init__(
        self,
        stream: TextIO,
        detail: bool,
        colorize: bool = False,
        style: str = DEFAULT_STYLE,
    ) -> None:
        self.stream = stream
        self.detail = detail
        self.colorize = colorize
        self.style = style
        self.results: list[str | ResultRecord] = []
        self.finished = False

    def report(self, entry: Entry) -> bool:
        if not self.detail:
            self.results.append(str(entry.path))
            return True
        try:
            detail = read_entry_detail(entry)
        except OSError as exc:
            logger.debug("dropping %s: %s", entry.path, exc)
            return False
        self.results.append(result_record(entry, detail))
        return True

    def diagnostic(self, path: Path, exc: OSError) -> None:
        # Diagnostics would corrupt the JSON stream.
        return None

    def render(self) -> str:
        # Surrogate-escaped names are kept as \udcXX escapes rather than failing.
        document = json.dumps(self.results, separators=(",", ":"))
        if self.colorize:
            return colorize_json(document, self.style)
        return document

    def finish(self) -> None:
        if self.finished:
            return
        self.finished = True
        self.stream.write(self.render() + "\n")
        self.stream.flush()


def make_reporter(
    detail: bool,
    json_output: bool,
    stream: TextIO,
    err_stream: TextIO | None = None,
    colorize: bool = False,
    style: str = DEFAULT_STYLE,
) -> TextReporter | JsonReporter:
    """Pick the reporter for the text/JSON × plain/detail combination."""
    if json_output:
        return JsonReporter(stream, detail, colorize=colorize, style=style)
    return TextReporter(stream, detail, err_stream=err_stream)


__all__ = [
    "JsonReporter",
    "Reporter",
    "TextReporter",
    "make_reporter",
]
