"""Persistent JSON config helpers.

Stores default listing flags and the preferred color theme.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirlist"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_FLAG_KEYS = ("show_all", "long_format", "human_readable", "no_color")


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


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON.

    Returns ``False`` instead of raising when the file cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        return False
    return True


def load_default_flags() -> dict[str, bool]:
    """Return persisted default flags.

    Only keys in ``DEFAULT_FLAG_KEYS`` holding explicit booleans are kept.
    """
    config = load_config()
    flags: dict[str, bool] = {}
    for key in DEFAULT_FLAG_KEYS:
        value = config.get(key)
        if isinstance(value, bool):
            flags[key] = value
    return flags


def save_default_flags(flags: dict[str, bool]) -> bool:
    """Merge known boolean ``flags`` into the persisted config."""
    config = load_config()
    for key in DEFAULT_FLAG_KEYS:
        if key in flags:
            config[key] = bool(flags[key])
    return save_config(config)


def load_theme_name() -> str | None:
    """Load persisted theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> bool:
    """Persist selected theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return False
    config = load_config()
    config["theme"] = stripped
    return save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_FLAG_KEYS",
    "load_config",
    "save_config",
    "load_default_flags",
    "save_default_flags",
    "load_theme_name",
    "save_theme_name",
]
