"""Content-fingerprint change detection for directory trees.

This package contains:
- watcher settings and last-run state
- marker-file persistence for the previous fingerprint
- the recursive digest-of-digests collector
- the fluent ``ModifyWatcher`` front end
"""

from __future__ import annotations

from .state import DEFAULT_NOT_NAMES, WatcherState
from .marker import default_marker_path, read_marker, write_marker
from .collect import FingerprintCollector, collect_fingerprint
from .watcher import ModifyWatcher

__all__ = [
    "DEFAULT_NOT_NAMES",
    "WatcherState",
    "default_marker_path",
    "read_marker",
    "write_marker",
    "FingerprintCollector",
    "collect_fingerprint",
    "ModifyWatcher",
]
