"""Recursive content fingerprint over watched directories.

The aggregate is the digest of every accepted file's hex digest, fed in walk
order (a digest of digests, not a Merkle tree). Unless ``sorted_listing`` is
set, walk order is the raw directory enumeration order, so two trees with the
same files are only guaranteed to hash alike when enumerated alike. The same
unmodified tree always hashes the same.
"""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path

from ..errors import NotFoundError, TraversalError
from ..fs import file_digest
from ..matching import search_any
from .state import WatcherState

logger = logging.getLogger(__name__)


class FingerprintCollector:
    """Accumulates per-file digests for one fingerprint run."""

    def __init__(self, state: WatcherState) -> None:
        self.state = state
        self.accumulator = hashlib.new(state.algorithm)
        self.file_count = 0

    def collect(self) -> str:
        """Walk every watch dir and return the aggregate hex digest."""
        for directory in self.state.watch_dirs:
            if not directory.is_dir():
                raise NotFoundError(f"watched directory does not exist: {directory}", directory)
            self._collect_dir(directory)
        return self.accumulator.hexdigest()

    def accepts_file(self, name: str) -> bool:
        """Return whether a file name passes the dot/exclude/include rules."""
        state = self.state
        if state.ignore_dot_files and name.startswith("."):
            return False
        if search_any(name, state.not_names):
            return False
        if state.names:
            return search_any(name, state.names)
        return True

    def _accepts_dir(self, name: str) -> bool:
        if self.state.ignore_dot_dirs and name.startswith("."):
            return False
        return name not in self.state.exclude_dirs

    def _list(self, directory: Path) -> list[os.DirEntry[str]]:
        try:
            with os.scandir(directory) as entries:
                listing = list(entries)
        except OSError as exc:
            raise TraversalError(f"cannot open watched directory {directory}: {exc.strerror or exc}", directory) from exc
        if self.state.sorted_listing:
            listing.sort(key=lambda entry: entry.name)
        return listing

    def _collect_dir(self, directory: Path) -> None:
        for entry in self._list(directory):
            if entry.is_dir():
                # symlinked directories are only entered when following links
                if entry.is_symlink() and not self.state.follow_symlinks:
                    continue
                if self._accepts_dir(entry.name):
                    self._collect_dir(Path(entry.path))
                continue
            if not entry.is_file():
                continue
            if not self.accepts_file(entry.name):
                continue

            self.accumulator.update(file_digest(entry.path, self.state.algorithm).encode("ascii"))
            self.file_count += 1


def collect_fingerprint(state: WatcherState) -> tuple[str, int]:
    """Return ``(aggregate_hash, file_count)`` for the watched directories."""
    collector = FingerprintCollector(state)
    digest = collector.collect()
    logger.debug("fingerprint %s over %d file(s)", digest, collector.file_count)
    return digest, collector.file_count


__all__ = ["FingerprintCollector", "collect_fingerprint"]
