"""Command-line front door for rfind.

Parses CLI options, merges persisted defaults, validates the pattern and root,
then runs a single search and writes results to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import __version__
from .config import load_no_color, load_show_hidden, load_style
from .errors import ConfigurationError
from .reporter import make_reporter
from .search import build_search_config, resolve_positionals, run_search


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rfind",
        description="Recursively search a directory tree for names matching a regular expression.",
    )
    parser.add_argument("pattern", nargs="?", default=None, help="Pattern to search for. Defaults to everything.")
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to start the search from. Defaults to current directory.",
    )
    parser.add_argument(
        "-p",
        "--path",
        dest="path_option",
        metavar="PATH",
        default=None,
        help="Explicit search root; the first positional is then always the pattern.",
    )
    parser.add_argument(
        "-d",
        "--detail",
        action="store_true",
        help="Include file type, name, size, and modified/accessed/created times.",
    )
    parser.add_argument("-j", "--json", action="store_true", help="Output results as one JSON array.")
    hidden = parser.add_mutually_exclusive_group()
    hidden.add_argument(
        "--hidden",
        dest="hidden",
        action="store_true",
        default=None,
        help="Search hidden files and directories.",
    )
    hidden.add_argument(
        "--no-hidden",
        dest="hidden",
        action="store_false",
        default=None,
        help="Skip hidden files and directories even if enabled in config.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable JSON colouring even on TTY.")
    parser.add_argument("--style", default=None, help="Pygments style name for JSON colouring.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log traversal details to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and run one search.

    Configuration errors (bad pattern, missing root) print the problem plus
    usage help and exit with status 2 before any traversal happens.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    pattern_text, root_text = resolve_positionals(args.pattern, args.path, args.path_option)
    show_hidden = load_show_hidden() if args.hidden is None else args.hidden

    try:
        config = build_search_config(
            pattern_text,
            root_text,
            detail=args.detail,
            json_output=args.json,
            show_hidden=show_hidden,
        )
    except ConfigurationError as exc:
        sys.stdout.write(f"{exc}\n\n")
        parser.print_help(sys.stdout)
        raise SystemExit(2) from exc

    stdout = sys.stdout
    colorize = args.json and not args.no_color and not load_no_color() and stdout.isatty()
    reporter = make_reporter(
        config.detail,
        config.json_output,
        stdout,
        err_stream=sys.stderr,
        colorize=colorize,
        style=args.style or load_style(),
    )
    run_search(config, reporter)


if __name__ == "__main__":
    main()
