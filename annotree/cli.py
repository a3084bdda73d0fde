"""Command-line front door for annotree.

Parses CLI options, validates the root path, and opens the output sink.
Then collects entries and renders them as an annotated tree.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from . import __version__
from .config import TreeOptions, color_enabled
from .errors import OutputSinkError, RootPathError
from .file_tree_model import collect_entries
from .render import RootStyle, write_tree
from .sink import open_output

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    """argparse type for depth limits."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="annotree",
        description="Print a directory tree with sizes and modification times.",
    )
    parser.add_argument("directory", nargs="?", default=".", help="Root directory to display (default: .).")
    parser.add_argument(
        "-d",
        "--depth",
        type=_non_negative_int,
        default=None,
        help="Maximum depth to traverse (default: unlimited).",
    )
    parser.add_argument("-a", "--all", action="store_true", help="Show hidden files.")
    parser.add_argument("-n", "--no-color", action="store_true", help="Disable colors.")
    parser.add_argument("-o", "--output", metavar="PATH", default=None, help="Write to a file instead of stdout.")
    parser.add_argument(
        "--root-connector",
        action="store_true",
        help="Draw the root with a connector and indent its children one extra level.",
    )
    parser.add_argument("--dirs-first", action="store_true", help="List directories before files.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries to stderr.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> TreeOptions:
    """Turn parsed arguments into :class:`TreeOptions`."""
    return TreeOptions(
        root=Path(args.directory),
        max_depth=args.depth,
        show_hidden=args.all,
        color=color_enabled(args.no_color),
        output=Path(args.output) if args.output is not None else None,
        root_style=RootStyle.CONNECTOR if args.root_connector else RootStyle.BARE,
        dirs_first=args.dirs_first,
    )


def configure_logging(verbose: bool) -> None:
    """Attach a stderr handler to the package logger (once)."""
    package_logger = logging.getLogger("annotree")
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("annotree: %(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def check_root(root: Path) -> None:
    """Raise :class:`RootPathError` when ``root`` cannot be shown."""
    if not os.path.lexists(root):
        raise RootPathError(f"Path not found: {root}")
    if root.is_dir() and not os.access(root, os.R_OK | os.X_OK):
        raise RootPathError(f"Cannot read directory: {root}")


def run(options: TreeOptions) -> int:
    """Render the tree described by ``options`` and return the row count."""
    check_root(options.root)
    with open_output(options.output) as sink:
        entries = collect_entries(
            options.root,
            show_hidden=options.show_hidden,
            max_depth=options.max_depth,
            dirs_first=options.dirs_first,
        )
        if not entries:
            raise RootPathError(f"Cannot read path: {options.root}")
        count = write_tree(entries, sink, options.palette, options.root_style)
    logger.debug("rendered %d entries from %s", count, options.root)
    return count


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used. Root
    and output failures exit with a message on stderr and status 1.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    options = options_from_args(args)
    try:
        run(options)
    except RootPathError as exc:
        raise SystemExit(str(exc)) from exc
    except OutputSinkError as exc:
        raise SystemExit(f"Cannot write output: {exc}") from exc


if __name__ == "__main__":
    main()
