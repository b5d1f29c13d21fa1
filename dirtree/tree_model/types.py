"""Entry datatypes shared by the collect/resolve/render/print passes."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Neighbors:
    """Immediately preceding/following sibling in canonical order."""

    prev: "Entry | None" = None
    next: "Entry | None" = None


@dataclass(eq=False)
class Entry:
    """One collected filesystem object plus the relationships resolved over it.

    Entries are created by the collector and mutated in place by the resolver
    and renderer. ``children`` and ``parent`` form a cycle; the entry list
    returned by the collector is the only owner callers need to keep.
    """

    name: str
    depth: int
    path: Path
    parent_path: str
    size: str
    is_dir: bool
    children: list["Entry"] = field(default_factory=list)
    parent: "Entry | None" = field(default=None, repr=False)
    neighbors: Neighbors = field(default_factory=Neighbors, repr=False)
    rendered: str = ""

    @property
    def own_path(self) -> str:
        """Root-relative path that this entry's children carry as ``parent_path``."""
        return (self.parent_path + os.sep + self.name).strip(os.sep)

    @property
    def last(self) -> bool:
        """True when no sibling follows this entry."""
        return self.neighbors.next is None


__all__ = [
    "Entry",
    "Neighbors",
]
