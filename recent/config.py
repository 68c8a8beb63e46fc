"""User JSON config helpers.

Holds default entry count, hidden-file preference, color and pager choice.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "recent"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_NUM_FILES = 10


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_num_files() -> int:
    """Return the default number of entries to display.

    Booleans, negatives and non-integers fall back to ``DEFAULT_NUM_FILES``.
    """
    value = load_config().get("num_files")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_NUM_FILES
    return value


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference."""
    return _load_bool("show_hidden")


def load_no_color() -> bool:
    return _load_bool("no_color")


def load_pager() -> str | None:
    """Return configured pager command, or ``None`` when unset or blank."""
    value = load_config().get("pager")
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_NUM_FILES",
    "load_config",
    "load_num_files",
    "load_show_hidden",
    "load_no_color",
    "load_pager",
]
