"""Hierarchy resolution over flat entry lists.

Three passes run in order over the same list:

1. sort by ``(depth, name)`` -- the canonical sibling order every later pass
   relies on;
2. link each directory to the entries whose ``parent_path`` is its own path;
3. link each entry to its previous/next sibling within its parent group.

Grouping goes through a ``parent_path -> entries`` index built once from the
sorted list, so each pass is linear in the number of entries.
"""

from __future__ import annotations

from collections import defaultdict

from .types import Entry, Neighbors


def sort_entries(entries: list[Entry]) -> list[Entry]:
    """Stable-sort ``entries`` in place by depth, then raw name."""
    entries.sort(key=lambda entry: (entry.depth, entry.name))
    return entries


def group_by_parent(entries: list[Entry]) -> dict[str, list[Entry]]:
    """Map each ``parent_path`` to its entries, preserving input order."""
    groups: dict[str, list[Entry]] = defaultdict(list)
    for entry in entries:
        groups[entry.parent_path].append(entry)
    return groups


def link_children(entries: list[Entry], groups: dict[str, list[Entry]] | None = None) -> list[Entry]:
    """Populate ``children`` on directories and ``parent`` on their children."""
    if groups is None:
        groups = group_by_parent(entries)
    for entry in entries:
        if not entry.is_dir:
            continue
        for child in groups.get(entry.own_path, ()):
            entry.children.append(child)
            child.parent = entry
    return entries


def link_neighbors(entries: list[Entry], groups: dict[str, list[Entry]] | None = None) -> list[Entry]:
    """Set ``neighbors`` on every entry from its sibling group."""
    if groups is None:
        groups = group_by_parent(entries)
    for siblings in groups.values():
        for idx, entry in enumerate(siblings):
            entry.neighbors = Neighbors(
                prev=siblings[idx - 1] if idx > 0 else None,
                next=siblings[idx + 1] if idx + 1 < len(siblings) else None,
            )
    return entries


def resolve_hierarchy(entries: list[Entry]) -> list[Entry]:
    """Sort ``entries`` and resolve parent/child and sibling links in place."""
    sort_entries(entries)
    groups = group_by_parent(entries)
    link_children(entries, groups)
    link_neighbors(entries, groups)
    return entries


__all__ = [
    "sort_entries",
    "group_by_parent",
    "link_children",
    "link_neighbors",
    "resolve_hierarchy",
]
