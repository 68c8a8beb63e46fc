"""Command-line front door for recent.

Parses CLI options, resolves the target directory, and runs the listing.
Then renders the table to stdout or through a pager when it overflows.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__, config
from .errors import RecentError
from .listing import list_recent
from .table import render_table
from .terminal import is_interactive, launch_pager, resolve_pager_command, should_page, terminal_size

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recent",
        description="List the most recently modified entries of a directory.",
    )
    parser.add_argument("directory", nargs="?", default=".", help="Path to directory. Defaults to '.'.")
    parser.add_argument(
        "-n",
        "--num-files",
        type=_non_negative_int,
        default=None,
        help=f"Number of entries to display (default: {config.DEFAULT_NUM_FILES}).",
    )
    parser.add_argument("-s", "--show-hidden", action="store_true", help="Show hidden entries and symlinks.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--nopager", action="store_true", help="Print output directly without paging.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Report skipped entries on stderr; repeat for debug output.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by ``-v`` count."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def resolve_directory(raw: str) -> Path:
    """Expand ``~`` and require an existing directory.

    Unknown ``~user`` homes and unsearchable parents exit like a missing path.
    """
    try:
        path = Path(raw).expanduser()
        exists = path.exists()
        is_dir = exists and path.is_dir()
    except (OSError, RuntimeError) as exc:
        raise SystemExit(f"Error: Cannot access {raw}: {exc}") from exc
    if not exists:
        raise SystemExit(f"Error: Path not found: {path}")
    if not is_dir:
        raise SystemExit(f"Error: Not a directory: {path}")
    return path


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the recent-entries table.

    Flags override values from the user config file. Unrecoverable failures
    exit with status 1 and an ``Error:`` message on stderr.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    directory = resolve_directory(args.directory)
    num_files = args.num_files if args.num_files is not None else config.load_num_files()
    show_hidden = args.show_hidden or config.load_show_hidden()
    no_color = args.no_color or config.load_no_color()

    width, height = terminal_size()
    interactive = is_interactive(sys.stdout)

    try:
        entries = list_recent(directory, num_files, show_hidden)
    except RecentError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    text = render_table(entries, width, interactive and not no_color)
    line_count = len(entries) + 1
    if interactive and not args.nopager and should_page(line_count, height):
        error = launch_pager(text, resolve_pager_command(config.load_pager()))
        if error is None:
            return
        logger.warning("%s", error)
    sys.stdout.write(text)


if __name__ == "__main__":
    main()
