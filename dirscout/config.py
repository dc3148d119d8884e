"""Persistent JSON config helpers.

Stores default finder and watcher settings plus the marker directory.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirscout"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

FINDER_LIST_KEYS = ("names", "not_names", "paths", "not_paths", "exclude", "dirs")
FINDER_BOOL_KEYS = (
    "ignore_vcs",
    "ignore_dot_files",
    "ignore_dot_dirs",
    "recursive",
    "follow_links",
    "skip_unreadable_dirs",
)
FINDER_MODES = ("all", "files", "dirs")
WATCHER_LIST_KEYS = ("names", "not_names", "exclude", "watch")
WATCHER_BOOL_KEYS = ("ignore_dot_dirs", "ignore_dot_files", "follow_links", "sorted_listing")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _string_list(value: object) -> list[str] | None:
    """Accept a list of non-empty strings or one comma-separated string."""
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",")]
        return [item for item in items if item]
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, str) and item]


def _section(
    name: str,
    list_keys: tuple[str, ...],
    bool_keys: tuple[str, ...],
) -> dict[str, object]:
    """Read one config section keeping only well-typed known keys."""
    raw = load_config().get(name)
    if not isinstance(raw, dict):
        return {}

    section: dict[str, object] = {}
    for key in list_keys:
        items = _string_list(raw.get(key))
        if items:
            section[key] = items
    for key in bool_keys:
        value = raw.get(key)
        if isinstance(value, bool):
            section[key] = value
    return section


def load_finder_config() -> dict[str, object]:
    """Return sanitized defaults for ``FileFinder.from_mapping``."""
    section = _section("finder", FINDER_LIST_KEYS, FINDER_BOOL_KEYS)
    raw = load_config().get("finder")
    if isinstance(raw, dict) and raw.get("mode") in FINDER_MODES:
        section["mode"] = raw["mode"]
    return section


def load_watcher_config() -> dict[str, object]:
    """Return sanitized defaults for ``ModifyWatcher.from_mapping``."""
    section = _section("watcher", WATCHER_LIST_KEYS, WATCHER_BOOL_KEYS)
    raw = load_config().get("watcher")
    if isinstance(raw, dict) and isinstance(raw.get("algorithm"), str) and raw["algorithm"]:
        section["algorithm"] = raw["algorithm"]
    return section


def marker_dir() -> Path:
    """Return the directory for derived marker files.

    Uses the configured ``marker_dir`` when it is a non-empty string, else the
    OS temp directory.
    """
    value = load_config().get("marker_dir")
    if isinstance(value, str) and value.strip():
        return Path(value.strip()).expanduser()
    return Path(tempfile.gettempdir())


def save_marker_dir(path: Path | str) -> None:
    """Persist the directory used for derived marker files."""
    config = load_config()
    config["marker_dir"] = str(path)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_finder_config",
    "load_watcher_config",
    "marker_dir",
    "save_marker_dir",
]
