"""Turn raw ``os.DirEntry`` objects into classified ``FileEntry`` values."""

from __future__ import annotations

import os
from pathlib import Path

from .types import EntryKind, FileEntry


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` is a dot-prefixed (hidden) name."""
    return name.startswith(".")


def entry_kind(entry: os.DirEntry) -> EntryKind:
    """Return the kind of ``entry``.

    Symlinks to directories count as directories; other symlinks, dangling
    ones included, are ``SYMLINK``.
    """
    if entry.is_dir():
        return EntryKind.DIRECTORY
    if entry.is_symlink():
        return EntryKind.SYMLINK
    return EntryKind.REGULAR


def entry_mtime_ns(entry: os.DirEntry) -> int:
    """Return modification time in ns, following symlinks to their target.

    Stat failures, dangling symlinks included, propagate as ``OSError``.
    """
    return int(entry.stat(follow_symlinks=True).st_mtime_ns)


def classify_entry(entry: os.DirEntry) -> FileEntry:
    """Build a ``FileEntry`` for one directory child.

    Raises ``OSError`` when type bits or modification time cannot be read,
    e.g. when the entry vanished between enumeration and stat.
    """
    kind = entry_kind(entry)
    mtime_ns = entry_mtime_ns(entry)
    return FileEntry(
        name=entry.name,
        path=Path(entry.path),
        mtime_ns=mtime_ns,
        kind=kind,
        is_hidden=is_hidden_name(entry.name),
    )


__all__ = [
    "is_hidden_name",
    "entry_kind",
    "entry_mtime_ns",
    "classify_entry",
]
