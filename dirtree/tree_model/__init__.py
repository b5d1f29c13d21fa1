"""Directory-tree model: walk, collect, resolve, render, print.

This package holds the whole rendering pipeline:
- walk records and the filesystem walk primitive
- flat ``Entry`` collection with depth/parent metadata
- parent/child and sibling resolution over the flat list
- box-drawing connectors and depth-first output
"""

from __future__ import annotations

from .types import Entry, Neighbors
from .fs import WalkRecord, list_directory_records, walk
from .collect import RootAccessError, collect_entries, entry_from_record, format_size, normalize_parent_path
from .resolve import group_by_parent, link_children, link_neighbors, resolve_hierarchy, sort_entries
from .rendering import BRANCH_CORNER, BRANCH_TEE, BLANK_UNIT, CONTINUATION_UNIT, indent_prefix, render_entries, render_entry
from .printer import build_entries, dir_tree, iter_fragments, print_tree, render_tree, top_level_entries

__all__ = [
    "Entry",
    "Neighbors",
    "WalkRecord",
    "list_directory_records",
    "walk",
    "RootAccessError",
    "collect_entries",
    "entry_from_record",
    "format_size",
    "normalize_parent_path",
    "sort_entries",
    "group_by_parent",
    "link_children",
    "link_neighbors",
    "resolve_hierarchy",
    "BRANCH_TEE",
    "BRANCH_CORNER",
    "CONTINUATION_UNIT",
    "BLANK_UNIT",
    "indent_prefix",
    "render_entry",
    "render_entries",
    "top_level_entries",
    "iter_fragments",
    "print_tree",
    "build_entries",
    "dir_tree",
    "render_tree",
]
