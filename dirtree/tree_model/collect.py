"""Collect walk records into flat ``Entry`` lists annotated with depth/parent."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from pathlib import Path

from .fs import WalkRecord, walk
from .types import Entry


class RootAccessError(OSError):
    """Raised when the traversal root is missing or is not a readable directory."""


def format_size(size: int, is_dir: bool) -> str:
    """Return the display suffix for an entry: ``""``, ``" (empty)"`` or ``" (<N>b)"``."""
    if is_dir:
        return ""
    if size > 0:
        return f" ({size}b)"
    return " (empty)"


def relative_parts(root: Path, path: Path) -> tuple[str, ...]:
    """Split ``path`` into segments relative to ``root``."""
    return path.relative_to(root).parts


def normalize_parent_path(parts: tuple[str, ...]) -> str:
    """Join the parent segments of ``parts`` with ``os.sep``, no outer separators."""
    return os.sep.join(parts[:-1]).strip(os.sep)


def entry_from_record(root: Path, record: WalkRecord) -> Entry:
    """Build an unlinked ``Entry`` for ``record`` below ``root``."""
    parts = relative_parts(root, record.path)
    return Entry(
        name=record.name,
        depth=len(parts),
        path=record.path,
        parent_path=normalize_parent_path(parts),
        size=format_size(record.size, record.is_dir),
        is_dir=record.is_dir,
    )


def collect_entries(
    root: Path,
    include_files: bool,
    walker: Callable[[Path], Iterable[WalkRecord]] = walk,
) -> list[Entry]:
    """Walk ``root`` and return one unlinked ``Entry`` per visited object.

    Directories are always collected, files only when ``include_files`` is
    set. Records that failed during the walk are dropped, as is any repeated
    path. The root itself is never an entry.
    """
    root = Path(root)
    if not root.exists():
        raise RootAccessError(f"Path not found: {root}")
    if not root.is_dir():
        raise RootAccessError(f"Not a directory: {root}")

    entries: list[Entry] = []
    seen: set[Path] = set()
    try:
        for record in walker(root):
            if record.error is not None:
                continue
            if not include_files and not record.is_dir:
                continue
            if record.path in seen:
                continue
            seen.add(record.path)
            entries.append(entry_from_record(root, record))
    except OSError as exc:
        raise RootAccessError(f"Cannot read directory {root}: {exc.strerror or exc}") from exc
    return entries


__all__ = [
    "RootAccessError",
    "format_size",
    "normalize_parent_path",
    "entry_from_record",
    "collect_entries",
]
