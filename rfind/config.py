"""Persistent JSON config helpers.

Stores default search preferences: hidden-entry search, JSON highlight style,
and colour opt-out. All access is defensive: malformed or missing config falls
back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

from .highlight import DEFAULT_STYLE

APP_NAME = "rfind"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
NO_COLOR_ENV_VARS = ("RFIND_NO_COLOR", "NO_COLOR")


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


def load_show_hidden() -> bool:
    """Return persisted hidden-entry search default.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    return _load_bool("show_hidden")


def load_style() -> str:
    """Return the persisted Pygments style name for JSON highlighting."""
    value = load_config().get("style")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return DEFAULT_STYLE


def load_no_color() -> bool:
    """Return whether colour is disabled by config or environment."""
    if any(os.environ.get(name) for name in NO_COLOR_ENV_VARS):
        return True
    return _load_bool("no_color")


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "load_no_color",
    "load_show_hidden",
    "load_style",
]
