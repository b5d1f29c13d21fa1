"""Filesystem walk primitive feeding the entry collector.

Yields one record per object below a root, depth-first, without following
symlinks. Failures are reported on the record instead of raised so callers
can skip the object (and whatever lies beneath it).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkRecord:
    """One object observed during the walk."""

    path: Path
    name: str
    size: int
    is_dir: bool
    error: OSError | None = None


def list_directory_records(directory: Path) -> tuple[list[WalkRecord], OSError | None]:
    """Stat every direct child of ``directory``.

    Returns ``(records, scan_error)``. ``scan_error`` is set when the directory
    itself cannot be listed; per-child stat failures are carried on the
    individual records.
    """
    records: list[WalkRecord] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                child_path = Path(child.path)
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                    size = 0 if is_dir else int(child.stat(follow_symlinks=False).st_size)
                except OSError as exc:
                    records.append(WalkRecord(path=child_path, name=child.name, size=0, is_dir=False, error=exc))
                    continue
                records.append(WalkRecord(path=child_path, name=child.name, size=size, is_dir=is_dir))
    except OSError as exc:
        return [], exc
    return records, None


def walk(root: Path) -> Iterator[WalkRecord]:
    """Walk everything below ``root``, excluding ``root`` itself.

    Raises ``OSError`` when ``root`` cannot be listed; everything deeper is
    best-effort and reported through ``WalkRecord.error``. Pending listings
    are kept on an explicit stack, so nesting depth is not bounded by the
    interpreter recursion limit.
    """
    records, scan_error = list_directory_records(Path(root))
    if scan_error is not None:
        raise scan_error

    pending: list[Iterator[WalkRecord]] = [iter(records)]
    while pending:
        record = next(pending[-1], None)
        if record is None:
            pending.pop()
            continue
        if record.error is not None:
            logger.debug("skipping %s: %s", record.path, record.error)
            yield record
            continue
        if not record.is_dir:
            yield record
            continue

        children, scan_error = list_directory_records(record.path)
        if scan_error is not None:
            logger.debug("skipping unreadable directory %s: %s", record.path, scan_error)
            yield WalkRecord(path=record.path, name=record.name, size=0, is_dir=True, error=scan_error)
            continue
        yield record
        pending.append(iter(children))


__all__ = [
    "WalkRecord",
    "list_directory_records",
    "walk",
]
