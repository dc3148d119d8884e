"""Watcher settings plus the transient results of the last fingerprint run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_NOT_NAMES: tuple[str, ...] = (r"^\.gitignore$", r"^LICENSE(\.txt)?$")
DEFAULT_ALGORITHM = "md5"


@dataclass
class WatcherState:
    """Configuration and last-run results owned by one ``ModifyWatcher``.

    ``names`` and ``not_names`` are regular expressions searched in each file
    name. ``exclude_dirs`` holds exact directory names.
    """

    watch_dirs: list[Path] = field(default_factory=list)
    marker_path: Path | None = None
    names: list[str] = field(default_factory=list)
    not_names: list[str] = field(default_factory=lambda: list(DEFAULT_NOT_NAMES))
    exclude_dirs: list[str] = field(default_factory=list)
    ignore_dot_dirs: bool = True
    ignore_dot_files: bool = True
    follow_symlinks: bool = False
    sorted_listing: bool = False
    algorithm: str = DEFAULT_ALGORITHM
    aggregate_hash: str = ""
    file_count: int = 0


__all__ = ["DEFAULT_ALGORITHM", "DEFAULT_NOT_NAMES", "WatcherState"]
