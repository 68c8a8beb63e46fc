"""Error types raised by the listing core.

``DirectoryScanError`` is fatal for a run; ``TimestampError`` only costs the
entry it was raised for. The CLI turns any ``RecentError`` into exit code 1.
"""

from __future__ import annotations

from pathlib import Path


class RecentError(Exception):
    """Base class for errors reported to the user."""


class DirectoryScanError(RecentError):
    """Target directory could not be opened or enumerated."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        self.directory = directory
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot read directory {directory}: {reason}")


class TimestampError(RecentError, ValueError):
    """Modification time cannot be converted or compared against ``now``."""


__all__ = [
    "RecentError",
    "DirectoryScanError",
    "TimestampError",
]
