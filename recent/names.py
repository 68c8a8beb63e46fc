"""Grapheme-aware name abbreviation for the name column."""

from __future__ import annotations

import regex

ELLIPSIS = "..."
_GRAPHEME_RE = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split ``text`` into user-perceived character clusters."""
    return _GRAPHEME_RE.findall(text)


def grapheme_count(text: str) -> int:
    return len(graphemes(text))


def abbreviate(name: str, max_width: int) -> str:
    """Shorten ``name`` to its head and tail clusters joined by ``...``.

    Names with at most ``max_width`` clusters are returned unchanged. Longer
    names keep ``max_width // 2`` clusters on each side, so odd widths drop one
    cluster. File extensions get no special treatment.
    """
    clusters = graphemes(name)
    if len(clusters) <= max_width:
        return name
    half = max(0, max_width // 2)
    head = "".join(clusters[:half])
    tail = "".join(clusters[len(clusters) - half :])
    return f"{head}{ELLIPSIS}{tail}"


__all__ = [
    "ELLIPSIS",
    "graphemes",
    "grapheme_count",
    "abbreviate",
]
