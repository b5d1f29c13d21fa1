"""Depth-first emission of rendered entries and the end-to-end pipeline."""

from __future__ import annotations

import io
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from .collect import collect_entries
from .rendering import render_entries
from .resolve import resolve_hierarchy
from .types import Entry


def top_level_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Return depth-1 entries in their existing (resolved) order."""
    return [entry for entry in entries if entry.depth == 1]


def iter_fragments(entries: Iterable[Entry]) -> Iterator[str]:
    """Yield rendered fragments pre-order: each entry, then its whole subtree."""
    pending: list[Iterator[Entry]] = [iter(top_level_entries(entries))]
    while pending:
        node = next(pending[-1], None)
        if node is None:
            pending.pop()
            continue
        yield node.rendered
        pending.append(iter(node.children))


def print_tree(entries: Iterable[Entry], out: TextIO) -> None:
    """Write the concatenated fragments to ``out`` verbatim."""
    out.write("".join(iter_fragments(entries)))


def build_entries(root: Path, include_files: bool = False) -> list[Entry]:
    """Collect, resolve, and render the entries below ``root``."""
    entries = collect_entries(root, include_files)
    resolve_hierarchy(entries)
    render_entries(entries)
    return entries


def dir_tree(out: TextIO, root: Path, include_files: bool = False) -> None:
    """Render the tree below ``root`` into ``out``.

    Raises ``RootAccessError`` when ``root`` is missing or not a directory.
    """
    print_tree(build_entries(Path(root), include_files), out)


def render_tree(root: Path, include_files: bool = False) -> str:
    """Return the tree below ``root`` as a string."""
    buffer = io.StringIO()
    dir_tree(buffer, root, include_files)
    return buffer.getvalue()


__all__ = [
    "top_level_entries",
    "iter_fragments",
    "print_tree",
    "build_entries",
    "dir_tree",
    "render_tree",
]
