"""Scan, filter, sort, truncate and time-stamp one directory's children."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from pathlib import Path

from ..errors import DirectoryScanError, TimestampError
from ..timefmt import format_times
from .classify import classify_entry
from .types import EntryKind, FileEntry

logger = logging.getLogger(__name__)

CONCISE_KINDS = frozenset({EntryKind.REGULAR, EntryKind.DIRECTORY})
FULL_KINDS = frozenset(EntryKind)


@dataclass(frozen=True)
class VisibilityPolicy:
    """Which entries survive filtering.

    The concise set keeps non-hidden regular files and directories; the full
    set keeps everything, symlinks and hidden entries included.
    """

    show_hidden: bool = False

    @property
    def kinds(self) -> frozenset[EntryKind]:
        return FULL_KINDS if self.show_hidden else CONCISE_KINDS

    def allows(self, entry: FileEntry) -> bool:
        if entry.is_hidden and not self.show_hidden:
            return False
        return entry.kind in self.kinds


def scan_directory(directory: Path) -> tuple[list[FileEntry], int]:
    """Classify every immediate child of ``directory``.

    Returns ``(entries, skipped)`` in enumeration order. Children whose
    metadata cannot be read are skipped and counted. Raises
    ``DirectoryScanError`` when the directory itself cannot be scanned.
    """
    entries: list[FileEntry] = []
    skipped = 0
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    entries.append(classify_entry(child))
                except OSError as exc:
                    skipped += 1
                    logger.info("skipping %s: %s", child.path, exc)
    except OSError as exc:
        raise DirectoryScanError(directory, exc) from exc
    logger.debug("scanned %s: %d entries, %d skipped", directory, len(entries), skipped)
    return entries, skipped


def sort_newest_first(entries: list[FileEntry]) -> list[FileEntry]:
    """Sort by modification time, newest first.

    The sort is stable, so entries with equal mtimes keep directory
    enumeration order, which is platform dependent.
    """
    return sorted(entries, key=lambda entry: entry.mtime_ns, reverse=True)


def with_times(entry: FileEntry, now: datetime) -> FileEntry:
    absolute, relative = format_times(now, entry.mtime_ns)
    return replace(entry, absolute_time=absolute, relative_time=relative)


def list_recent(
    directory: Path,
    requested_count: int,
    show_hidden: bool,
    now: datetime | None = None,
) -> list[FileEntry]:
    """Return up to ``requested_count`` most recently modified children.

    ``now`` is the single reference instant for relative phrases; it is taken
    once here when omitted. Entries whose times cannot be formatted are
    dropped and the next-newest entry takes their place.
    """
    if requested_count < 0:
        raise ValueError(f"requested_count must be >= 0, got {requested_count}")
    if now is None:
        now = datetime.now(timezone.utc)

    entries, _skipped = scan_directory(directory)
    if requested_count == 0:
        return []

    policy = VisibilityPolicy(show_hidden=show_hidden)
    visible = [entry for entry in entries if policy.allows(entry)]

    listed: list[FileEntry] = []
    for entry in sort_newest_first(visible):
        try:
            listed.append(with_times(entry, now))
        except TimestampError as exc:
            logger.info("skipping %s: %s", entry.path, exc)
            continue
        if len(listed) >= requested_count:
            break
    return listed


__all__ = [
    "CONCISE_KINDS",
    "FULL_KINDS",
    "VisibilityPolicy",
    "scan_directory",
    "sort_newest_first",
    "with_times",
    "list_recent",
]
