"""Directory change detection across runs via a persisted content fingerprint.

Usage::

    watcher = ModifyWatcher().watch(project_dir).extensions("py")
    if watcher.is_changed():
        rebuild()

``is_changed`` always recomputes and overwrites the marker, so after an edit
only the first call reports the change; the next call compares against the
value just written. The very first call (no marker yet) never reports a
change. A watcher is not thread-safe.
"""

from __future__ import annotations

import hashlib
import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path

from ..config import load_watcher_config, marker_dir
from ..errors import ConfigurationError
from .collect import collect_fingerprint
from .marker import default_marker_path, read_marker, write_marker
from .state import WatcherState

logger = logging.getLogger(__name__)


def _as_list(values: str | Path | Iterable[str | Path]) -> list[str]:
    if isinstance(values, (str, Path)):
        return [str(values)]
    return [str(value) for value in values]


class ModifyWatcher:
    """Reports whether watched files changed since the previous check."""

    def __init__(self, marker_path: Path | str | None = None) -> None:
        self._state = WatcherState(marker_path=Path(marker_path) if marker_path else None)

    @classmethod
    def from_mapping(cls, config: Mapping[str, object]) -> ModifyWatcher:
        """Build a watcher from keys ``watch``, ``names``, ``not_names``,
        ``exclude``, ``algorithm`` and the boolean switches."""
        watcher = cls()
        list_setters = {
            "watch": watcher.watch,
            "names": watcher.name,
            "not_names": watcher.not_name,
            "exclude": watcher.exclude,
        }
        bool_setters = {
            "ignore_dot_dirs": watcher.ignore_dot_dirs,
            "ignore_dot_files": watcher.ignore_dot_files,
            "follow_links": watcher.follow_links,
            "sorted_listing": watcher.sorted_listing,
        }
        for key, value in config.items():
            if key in list_setters and isinstance(value, (str, list, tuple)) and value:
                list_setters[key](value)
            elif key in bool_setters and isinstance(value, bool):
                bool_setters[key](value)
            elif key == "algorithm" and isinstance(value, str) and value:
                watcher.algorithm(value)
        return watcher

    @classmethod
    def from_config(cls) -> ModifyWatcher:
        """Build a watcher seeded with the persisted ``watcher`` config section."""
        return cls.from_mapping(load_watcher_config())

    def set_marker_path(self, marker_path: Path | str) -> ModifyWatcher:
        """Store the fingerprint in ``marker_path`` instead of a derived location."""
        self._state.marker_path = Path(marker_path)
        return self

    def watch(self, dirs: str | Path | Iterable[str | Path]) -> ModifyWatcher:
        """Add directories to watch; existing ones are kept."""
        self._state.watch_dirs.extend(Path(item) for item in _as_list(dirs))
        return self

    watch_dir = watch

    def name(self, patterns: str | Iterable[str]) -> ModifyWatcher:
        """Only hash files whose name matches one of these regexes."""
        self._state.names.extend(_as_list(patterns))
        return self

    def extensions(self, *extensions: str) -> ModifyWatcher:
        """Only hash files with one of these extensions (``"py"`` or ``".py"``)."""
        return self.name(rf"\.{re.escape(ext.lstrip('.'))}$" for ext in extensions)

    def not_name(self, patterns: str | Iterable[str]) -> ModifyWatcher:
        """Skip files whose name matches one of these regexes."""
        self._state.not_names.extend(_as_list(patterns))
        return self

    def exclude(self, dir_names: str | Iterable[str]) -> ModifyWatcher:
        """Skip directories with exactly these names."""
        self._state.exclude_dirs.extend(_as_list(dir_names))
        return self

    def ignore_dot_dirs(self, ignore: bool = True) -> ModifyWatcher:
        """Skip directories whose name starts with a dot."""
        self._state.ignore_dot_dirs = bool(ignore)
        return self

    def ignore_dot_files(self, ignore: bool = True) -> ModifyWatcher:
        """Skip files whose name starts with a dot."""
        self._state.ignore_dot_files = bool(ignore)
        return self

    def follow_links(self, follow: bool = True) -> ModifyWatcher:
        """Descend into symlinked directories."""
        self._state.follow_symlinks = bool(follow)
        return self

    def sorted_listing(self, enabled: bool = True) -> ModifyWatcher:
        """Hash directory entries in name order instead of enumeration order."""
        self._state.sorted_listing = bool(enabled)
        return self

    def algorithm(self, name: str) -> ModifyWatcher:
        """Select the ``hashlib`` algorithm used for file and aggregate digests."""
        try:
            hashlib.new(name)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"unsupported hash algorithm: {name!r}") from exc
        self._state.algorithm = name
        return self

    @property
    def marker_path(self) -> Path:
        """Marker location; derived from the current watch dirs unless set explicitly."""
        if self._state.marker_path is not None:
            return self._state.marker_path
        return default_marker_path(self._state.watch_dirs, marker_dir())

    @property
    def watch_dirs(self) -> list[Path]:
        """Copy of the watched directories in insertion order."""
        return list(self._state.watch_dirs)

    @property
    def aggregate_hash(self) -> str:
        """Digest from the last run, or an empty string before any run."""
        return self._state.aggregate_hash

    @property
    def file_count(self) -> int:
        """Number of files hashed by the last run."""
        return self._state.file_count

    def read_marker(self) -> str | None:
        """Return the persisted digest, or ``None`` when there is no baseline."""
        return read_marker(self.marker_path)

    def compute_fingerprint(self) -> str:
        """Recompute the aggregate hash, persist it, and return it."""
        self._require_watch_dirs()
        digest, file_count = collect_fingerprint(self._state)
        self._state.aggregate_hash = digest
        self._state.file_count = file_count
        write_marker(self.marker_path, digest)
        return digest

    calc_md5_hash = compute_fingerprint

    def is_changed(self) -> bool:
        """Return whether the fingerprint differs from the persisted baseline."""
        self._require_watch_dirs()
        marker_path = self.marker_path
        previous = read_marker(marker_path)
        current = self.compute_fingerprint()
        if previous is None:
            logger.info("no baseline at %s; recorded %s", marker_path, current)
            return False
        changed = previous != current
        if changed:
            logger.info("watched files changed (%d file(s) hashed)", self._state.file_count)
        return changed

    is_modified = is_changed

    def _require_watch_dirs(self) -> None:
        if not self._state.watch_dirs:
            raise ConfigurationError("call watch() with at least one directory before computing a fingerprint")


__all__ = ["ModifyWatcher"]
