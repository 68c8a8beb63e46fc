"""Absolute and relative ("5 minutes ago") modification-time strings.

Both strings are derived from one ``now`` snapshot supplied by the caller so
phrases stay consistent across a listing. Relative phrases follow the
moment.js style thresholds.
"""

from __future__ import annotations

from datetime import datetime, timezone

from .errors import TimestampError

ABSOLUTE_TIME_FORMAT = "%H:%M:%S %d-%b-%Y"
NS_PER_SECOND = 1_000_000_000

_MINUTE = 60.0
_HOUR = 60.0 * _MINUTE
_DAY = 24.0 * _HOUR
_DAYS_PER_MONTH = 30.436875
_DAYS_PER_YEAR = 365.2425


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def relative_phrase(seconds: float) -> str:
    """Return a "time ago" phrase for an elapsed duration in seconds.

    Negative durations (modified in the future) read as ``"just now"``.
    """
    if seconds < 0:
        return "just now"
    if seconds < 45:
        return "a few seconds ago"
    if seconds < 90:
        return "a minute ago"
    if seconds < 45 * _MINUTE:
        return _plural(_round_half_up(seconds / _MINUTE), "minute")
    if seconds < 90 * _MINUTE:
        return "an hour ago"
    if seconds < 22 * _HOUR:
        return _plural(_round_half_up(seconds / _HOUR), "hour")
    if seconds < 36 * _HOUR:
        return "a day ago"

    days = seconds / _DAY
    if days < 26:
        return _plural(_round_half_up(days), "day")
    if days < 46:
        return "a month ago"
    if days < 320:
        return _plural(_round_half_up(days / _DAYS_PER_MONTH), "month")
    if days < 548:
        return "a year ago"
    return _plural(_round_half_up(days / _DAYS_PER_YEAR), "year")


def modified_datetime(mtime_ns: int) -> datetime:
    """Convert ``st_mtime_ns`` into an aware UTC datetime.

    Raises ``TimestampError`` for values the platform cannot represent.
    """
    try:
        return datetime.fromtimestamp(mtime_ns / NS_PER_SECOND, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise TimestampError(f"unrepresentable modification time {mtime_ns}ns: {exc}") from exc


def format_absolute(modified: datetime) -> str:
    """Render ``modified`` as ``HH:MM:SS DD-Mon-YYYY`` in the local timezone."""
    return modified.astimezone().strftime(ABSOLUTE_TIME_FORMAT)


def format_times(now: datetime, mtime_ns: int) -> tuple[str, str]:
    """Return ``(absolute_string, relative_string)`` for one modification time."""
    if now.tzinfo is None:
        raise TimestampError("reference time must be timezone-aware")
    modified = modified_datetime(mtime_ns)
    try:
        absolute = format_absolute(modified)
    except (OverflowError, OSError, ValueError) as exc:
        raise TimestampError(f"cannot localize modification time {mtime_ns}ns: {exc}") from exc
    elapsed = (now - modified).total_seconds()
    return absolute, relative_phrase(elapsed)


__all__ = [
    "ABSOLUTE_TIME_FORMAT",
    "relative_phrase",
    "modified_datetime",
    "format_absolute",
    "format_times",
]
