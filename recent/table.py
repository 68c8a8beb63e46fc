"""Render listed entries as an aligned, terminal-width-aware table.

Column widths are proportional to the terminal width with per-column floors.
Escape sequences are only emitted for interactive output.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .ansi import BLUE, BOLD, pad_right, styled
from .listing.types import FileEntry
from .names import abbreviate

DEFAULT_WIDTH = 80
COLUMN_GAP = "  "
TOTAL_SPACING = 2 * len(COLUMN_GAP)

NAME_MIN_WIDTH = 20
MODIFIED_MIN_WIDTH = 15
RELATIVE_MIN_WIDTH = 10

HEADER_LABELS = ("Name", "Modified Time", "Relative Time")


@dataclass(frozen=True)
class ColumnWidths:
    name: int
    modified: int
    relative: int


def compute_column_widths(terminal_width: int | None) -> ColumnWidths:
    """Split ``terminal_width`` 50/30/20 between columns, honoring floors.

    ``None`` falls back to ``DEFAULT_WIDTH``.
    """
    width = DEFAULT_WIDTH if terminal_width is None else terminal_width
    available = max(0, width - TOTAL_SPACING)
    name = (available * 5) // 10
    modified = (available * 3) // 10
    relative = available - name - modified
    return ColumnWidths(
        name=max(name, NAME_MIN_WIDTH),
        modified=max(modified, MODIFIED_MIN_WIDTH),
        relative=max(relative, RELATIVE_MIN_WIDTH),
    )


def _row(cells: tuple[str, str, str], widths: ColumnWidths) -> str:
    name, modified, relative = cells
    return COLUMN_GAP.join(
        (
            pad_right(name, widths.name),
            pad_right(modified, widths.modified),
            pad_right(relative, widths.relative),
        )
    )


def render_header(widths: ColumnWidths, is_interactive: bool) -> str:
    return styled(_row(HEADER_LABELS, widths), BOLD, is_interactive) + "\n"


def render_row(entry: FileEntry, widths: ColumnWidths, is_interactive: bool) -> str:
    """Render one entry row; directory names are blue on a terminal."""
    name_cell = pad_right(abbreviate(entry.name, widths.name), widths.name)
    name_cell = styled(name_cell, BLUE, is_interactive and entry.is_dir)
    return COLUMN_GAP.join(
        (
            name_cell,
            pad_right(entry.absolute_time, widths.modified),
            pad_right(entry.relative_time, widths.relative),
        )
    ) + "\n"


def render_table(
    entries: Iterable[FileEntry],
    terminal_width: int | None,
    is_interactive: bool,
) -> str:
    """Return header plus one line per entry, each newline-terminated."""
    widths = compute_column_widths(terminal_width)
    out = [render_header(widths, is_interactive)]
    out.extend(render_row(entry, widths, is_interactive) for entry in entries)
    return "".join(out)


__all__ = [
    "DEFAULT_WIDTH",
    "NAME_MIN_WIDTH",
    "MODIFIED_MIN_WIDTH",
    "RELATIVE_MIN_WIDTH",
    "HEADER_LABELS",
    "ColumnWidths",
    "compute_column_widths",
    "render_header",
    "render_row",
    "render_table",
]
