"""Domain datatypes for classified directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Structural filesystem type, read without following symlinks."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class EntryCategory(Enum):
    """First-match classification: hidden, then directory, then symlink."""

    HIDDEN = "hidden"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    REGULAR = "regular"


@dataclass(frozen=True)
class FileEntry:
    """One directory member plus its formatted modification times.

    ``absolute_time`` and ``relative_time`` stay empty until the listing
    pipeline formats them against the run's ``now`` snapshot.
    """

    name: str
    path: Path
    mtime_ns: int
    kind: EntryKind
    is_hidden: bool = False
    absolute_time: str = ""
    relative_time: str = ""

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def category(self) -> EntryCategory:
        if self.is_hidden:
            return EntryCategory.HIDDEN
        if self.kind is EntryKind.DIRECTORY:
            return EntryCategory.DIRECTORY
        if self.kind is EntryKind.SYMLINK:
            return EntryCategory.SYMLINK
        return EntryCategory.REGULAR


__all__ = [
    "EntryKind",
    "EntryCategory",
    "FileEntry",
]
