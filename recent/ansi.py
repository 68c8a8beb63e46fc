"""ANSI styling constants and display-width measurement.

Padding is computed in terminal cells rather than code points so wide
characters and combining marks keep the table columns aligned.
"""

from __future__ import annotations

import re
import unicodedata

from .names import graphemes

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")

BOLD = "\033[1m"
BLUE = "\033[34m"
RESET = "\033[0m"


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks and zero-width joiners consume no columns, and East Asian
    wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch) or ch in {"\u200d", "\ufe0f"}:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def cluster_display_width(cluster: str) -> int:
    """Return width of one grapheme cluster: its widest character.

    An emoji ZWJ sequence draws as one glyph, so its parts do not add up.
    """
    return max((char_display_width(ch) for ch in cluster), default=0)


def display_width(text: str) -> int:
    """Return visible width of ``text``, ignoring escape sequences."""
    return sum(cluster_display_width(cluster) for cluster in graphemes(strip_ansi(text)))


def pad_right(text: str, width: int) -> str:
    """Left-align ``text`` in a field of ``width`` display columns.

    Text already at or beyond ``width`` is returned unchanged.
    """
    return text + " " * max(0, width - display_width(text))


def styled(text: str, style: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{style}{text}{RESET}"


__all__ = [
    "ANSI_ESCAPE_RE",
    "BOLD",
    "BLUE",
    "RESET",
    "char_display_width",
    "cluster_display_width",
    "display_width",
    "pad_right",
    "styled",
    "strip_ansi",
]
