"""Box-drawing connectors for resolved entries."""

from __future__ import annotations

from collections.abc import Iterator

from .types import Entry

BRANCH_TEE = "├───"
BRANCH_CORNER = "└───"
CONTINUATION_UNIT = "│\t"
BLANK_UNIT = "\t"


def iter_ancestors(entry: Entry) -> Iterator[Entry]:
    """Yield ``entry``'s ancestors, nearest first."""
    node = entry.parent
    while node is not None:
        yield node
        node = node.parent


def branch_glyph(entry: Entry) -> str:
    return BRANCH_CORNER if entry.last else BRANCH_TEE


def indent_prefix(entry: Entry) -> str:
    """Continuation units for every ancestor level, furthest ancestor first.

    A bar continues under an ancestor only while that ancestor still has a
    following sibling.
    """
    units = [BLANK_UNIT if ancestor.last else CONTINUATION_UNIT for ancestor in iter_ancestors(entry)]
    return "".join(reversed(units))


def render_entry(entry: Entry) -> str:
    """Compute and store ``entry.rendered``."""
    entry.rendered = f"{indent_prefix(entry)}{branch_glyph(entry)}{entry.name}{entry.size}\n"
    return entry.rendered


def render_entries(entries: list[Entry]) -> list[Entry]:
    for entry in entries:
        render_entry(entry)
    return entries


__all__ = [
    "BRANCH_TEE",
    "BRANCH_CORNER",
    "CONTINUATION_UNIT",
    "BLANK_UNIT",
    "iter_ancestors",
    "branch_glyph",
    "indent_prefix",
    "render_entry",
    "render_entries",
]
