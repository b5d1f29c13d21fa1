"""Command-line front door for dirtree.

Parses the root path and the file-inclusion flag, then writes the rendered
tree to stdout. Usage errors exit through argparse; an unusable root exits
with a readable message.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_log_level, log_level_value
from .logs import setup_logging
from .tree_model import RootAccessError, dir_tree

logger = logging.getLogger(__name__)

MAX_CLI_ARGS = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description="Print the directory tree below PATH using box-drawing connectors.",
    )
    parser.add_argument("path", help="Root directory to visualize.")
    parser.add_argument(
        "-f",
        "--files",
        dest="include_files",
        action="count",
        default=0,
        help="Include regular files (with sizes) alongside directories.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the requested root.

    ``argv`` defaults to ``sys.argv[1:]``; tests pass it explicitly. Only
    ``PATH`` and a single optional ``-f`` are accepted.
    """
    raw_args = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()
    args = parser.parse_args(raw_args)
    if len(raw_args) > MAX_CLI_ARGS or args.include_files > 1:
        parser.error("expected PATH and at most one -f")
    setup_logging(log_level_value(load_log_level()))

    root = Path(args.path)
    include_files = args.include_files == 1
    logger.debug("rendering %s (include_files=%s)", root, include_files)

    try:
        dir_tree(sys.stdout, root, include_files)
    except RootAccessError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
