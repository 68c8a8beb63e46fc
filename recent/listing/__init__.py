"""Domain model and pipeline for recently modified directory entries.

This package contains the non-UI listing core:
- entry datatypes with structural kind and hidden flag
- per-entry classification from ``os.DirEntry``
- visibility filtering, newest-first sorting and truncation
"""

from __future__ import annotations

from .types import EntryCategory, EntryKind, FileEntry
from .classify import classify_entry, entry_kind, entry_mtime_ns, is_hidden_name
from .pipeline import (
    CONCISE_KINDS,
    FULL_KINDS,
    VisibilityPolicy,
    list_recent,
    scan_directory,
    sort_newest_first,
    with_times,
)

__all__ = [
    "EntryCategory",
    "EntryKind",
    "FileEntry",
    "classify_entry",
    "entry_kind",
    "entry_mtime_ns",
    "is_hidden_name",
    "CONCISE_KINDS",
    "FULL_KINDS",
    "VisibilityPolicy",
    "list_recent",
    "scan_directory",
    "sort_newest_first",
    "with_times",
]
