"""Terminal collaborators: size, interactivity and the external pager.

These are the only environment-dependent pieces of the program. Each is a
small function that tests can replace with a stub or a mock.
"""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
from typing import Callable, TextIO

DEFAULT_TERMINAL_SIZE = (80, 24)
DEFAULT_PAGER = "less -R"


def terminal_size(
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
) -> tuple[int, int]:
    """Return ``(columns, lines)``, falling back to 80x24 when unknown."""
    size = get_terminal_size(DEFAULT_TERMINAL_SIZE)
    columns = size.columns if size.columns > 0 else DEFAULT_TERMINAL_SIZE[0]
    lines = size.lines if size.lines > 0 else DEFAULT_TERMINAL_SIZE[1]
    return columns, lines


def is_interactive(stream: TextIO) -> bool:
    """Return whether ``stream`` is attached to a terminal device."""
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        return False


def should_page(line_count: int, terminal_height: int) -> bool:
    """Return whether ``line_count`` rendered lines overflow the screen."""
    return line_count > terminal_height


def resolve_pager_command(configured: str | None = None) -> list[str]:
    """Return the pager argv: configured command, then ``$PAGER``, then less."""
    for candidate in (configured, os.environ.get("PAGER"), DEFAULT_PAGER):
        if candidate is None:
            continue
        cmd = shlex.split(candidate)
        if cmd:
            return cmd
    return shlex.split(DEFAULT_PAGER)


def launch_pager(text: str, command: list[str]) -> str | None:
    """Pipe ``text`` into ``command`` and wait for the pager to exit.

    Returns an error message string instead of raising when the pager cannot
    be started, so the caller can print directly instead.
    """
    try:
        subprocess.run(command, input=text, encoding="utf-8", check=False)
    except OSError as exc:
        return f"Failed to launch pager {command[0]!r}: {exc}"
    return None


__all__ = [
    "DEFAULT_TERMINAL_SIZE",
    "DEFAULT_PAGER",
    "terminal_size",
    "is_interactive",
    "should_page",
    "resolve_pager_command",
    "launch_pager",
]
