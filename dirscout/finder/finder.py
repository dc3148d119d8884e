"""Fluent, lazily evaluated file finder.

Usage::

    finder = FileFinder.create().files().name("*.py").not_path("build").in_dir(root)
    for entry in finder:
        ...

Every setter returns the finder. Iterating takes a snapshot of the settings,
so each ``for`` loop is an independent single-pass walk whose cost equals the
first one; nothing is cached between iterations. A finder is not thread-safe.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from pathlib import Path

from ..config import load_finder_config
from ..errors import ConfigurationError, NotFoundError
from .stages import apply_filters
from .types import DOT_PATTERN, VCS_PATTERNS, EntryFilter, FileEntry, FinderConfig, FinderMode, FinderSnapshot
from .walk import walk_directory

logger = logging.getLogger(__name__)

_MODE_ALIASES = {
    "all": FinderMode.ALL,
    "files": FinderMode.FILES_ONLY,
    "dirs": FinderMode.DIRS_ONLY,
}


def split_patterns(patterns: str | Iterable[str]) -> list[str]:
    """Split a comma-separated string, or copy an iterable, dropping blanks."""
    if isinstance(patterns, (str, Path)):
        items = str(patterns).split(",")
    else:
        items = [str(item) for item in patterns]
    return [item.strip() for item in items if item.strip()]


class FileFinder:
    """Builds and runs a filtered walk over one or more root directories."""

    def __init__(self) -> None:
        self._config = FinderConfig()
        self._initialized = False
        self._vcs_added = False

    @classmethod
    def create(cls) -> FileFinder:
        return cls()

    @classmethod
    def from_mapping(cls, config: Mapping[str, object]) -> FileFinder:
        """Build a finder from a plain mapping such as a loaded config section.

        Recognized keys: ``names``, ``not_names``, ``paths``, ``not_paths``,
        ``exclude``/``excludes``, ``dirs``/``in``, ``mode`` (``all``/``files``/
        ``dirs``) and the boolean switches. Unknown keys are ignored.
        """
        finder = cls()
        list_setters: dict[str, Callable[[str | Iterable[str]], FileFinder]] = {
            "names": finder.add_names,
            "not_names": finder.not_names,
            "paths": finder.add_paths,
            "not_paths": finder.not_paths,
            "exclude": finder.exclude,
            "excludes": finder.exclude,
            "dirs": finder.in_dir,
            "in": finder.in_dir,
        }
        bool_setters: dict[str, Callable[[bool], FileFinder]] = {
            "ignore_vcs": finder.ignore_vcs,
            "ignore_dot_files": finder.ignore_dot_files,
            "ignore_dot_dirs": finder.ignore_dot_dirs,
            "recursive": finder.recursive,
            "follow_links": finder.follow_links,
            "skip_unreadable_dirs": finder.skip_unreadable_dirs,
        }
        for key, value in config.items():
            if key in list_setters and isinstance(value, (str, list, tuple)) and value:
                list_setters[key](value)
            elif key in bool_setters and isinstance(value, bool):
                bool_setters[key](value)
            elif key == "mode" and isinstance(value, str) and value in _MODE_ALIASES:
                finder._config.mode = _MODE_ALIASES[value]
        return finder

    @classmethod
    def from_config(cls) -> FileFinder:
        """Build a finder seeded with the persisted ``finder`` config section."""
        return cls.from_mapping(load_finder_config())

    # -- mode -------------------------------------------------------------

    def files(self) -> FileFinder:
        """Yield files only."""
        self._config.mode = FinderMode.FILES_ONLY
        return self

    only_files = files

    def dirs(self) -> FileFinder:
        """Yield directories only."""
        self._config.mode = FinderMode.DIRS_ONLY
        return self

    directories = dirs
    only_dirs = dirs

    def all_types(self) -> FileFinder:
        """Yield both files and directories."""
        self._config.mode = FinderMode.ALL
        return self

    # -- name / path patterns ---------------------------------------------

    def name(self, pattern: str) -> FileFinder:
        """Include entries whose base name matches ``pattern`` (e.g. ``*.py``)."""
        return self.add_names(pattern)

    def add_names(self, patterns: str | Iterable[str]) -> FileFinder:
        """Include base names matching any of these globs."""
        self._config.names.extend(split_patterns(patterns))
        return self

    def not_name(self, pattern: str) -> FileFinder:
        """Exclude entries whose base name matches ``pattern``."""
        self._config.not_names.append(pattern)
        return self

    def not_names(self, patterns: str | Iterable[str]) -> FileFinder:
        """Exclude base names matching any of these globs."""
        self._config.not_names.extend(split_patterns(patterns))
        return self

    add_not_names = not_names

    def path(self, pattern: str) -> FileFinder:
        """Include entries whose relative path matches a glob or contains a word."""
        self._config.paths.append(pattern)
        return self

    def add_paths(self, patterns: str | Iterable[str]) -> FileFinder:
        """Include relative paths matching any of these patterns."""
        self._config.paths.extend(split_patterns(patterns))
        return self

    def not_path(self, pattern: str) -> FileFinder:
        """Exclude entries whose relative path matches ``pattern``."""
        return self.not_paths(pattern)

    def not_paths(self, patterns: str | Iterable[str]) -> FileFinder:
        """Exclude relative paths, e.g. ``["vendor", "node_modules", "bin/"]``."""
        self._config.not_paths.extend(split_patterns(patterns))
        return self

    add_not_paths = not_paths

    def exclude(self, dir_names: str | Iterable[str]) -> FileFinder:
        """Prune descent into directories whose name matches any pattern."""
        self._config.exclude_dirs.extend(split_patterns(dir_names))
        return self

    # -- switches ---------------------------------------------------------

    def ignore_vcs(self, ignore: bool) -> FileFinder:
        """Prune version-control directories such as ``.git`` and ``.svn``."""
        self._config.ignore_vcs = bool(ignore)
        return self

    def ignore_dot_files(self, ignore: bool = True) -> FileFinder:
        """Drop entries whose name starts with a dot."""
        self._config.ignore_dot_files = bool(ignore)
        return self

    def ignore_dot_dirs(self, ignore: bool = True) -> FileFinder:
        """Prune descent into directories whose name starts with a dot."""
        self._config.ignore_dot_dirs = bool(ignore)
        return self

    def skip_unreadable_dirs(self, skip: bool = True) -> FileFinder:
        """Skip directories that cannot be listed instead of raising ``TraversalError``."""
        self._config.skip_unreadable_dirs = bool(skip)
        return self

    ignore_unreadable_dirs = skip_unreadable_dirs

    def follow_links(self, follow: bool = True) -> FileFinder:
        """Descend into symlinked directories."""
        self._config.follow_symlinks = bool(follow)
        return self

    def not_follow_links(self) -> FileFinder:
        return self.follow_links(False)

    def is_follow_links(self) -> bool:
        return self._config.follow_symlinks

    def recursive(self, recursive: bool) -> FileFinder:
        """Walk whole subtrees, or only the direct children of each root."""
        self._config.recursive = bool(recursive)
        return self

    def not_recursive(self) -> FileFinder:
        return self.recursive(False)

    def filter(self, callback: EntryFilter) -> FileFinder:
        """Add a predicate; an entry survives only if every predicate is true."""
        self._config.filters.append(callback)
        return self

    # -- sources ----------------------------------------------------------

    def in_dir(self, dirs: str | Path | Iterable[str | Path]) -> FileFinder:
        """Append root directories; scan order follows insertion order."""
        if isinstance(dirs, Path):
            self._config.roots.append(dirs)
        else:
            self._config.roots.extend(Path(item) for item in split_patterns(dirs))
        return self

    def append(self, entries: FileFinder | Iterable[FileEntry | Path | str]) -> FileFinder:
        """Append extra entries after every root's results.

        Another ``FileFinder`` is re-run on each iteration. Any other iterable
        is materialized now; plain paths become ``FileEntry`` values.
        """
        if isinstance(entries, FileFinder):
            self._config.iterators.append(entries)
        elif isinstance(entries, (str, bytes)) or not isinstance(entries, Iterable):
            raise TypeError(f"append() needs a FileFinder or an iterable of entries, got {type(entries).__name__}")
        else:
            self._config.iterators.append(
                tuple(item if isinstance(item, FileEntry) else FileEntry.from_path(item) for item in entries)
            )
        return self

    # -- running ----------------------------------------------------------

    def _initialize(self) -> None:
        if self._initialized:
            return
        config = self._config
        if not config.roots and not config.iterators:
            raise ConfigurationError("call in_dir() or append() before iterating over a FileFinder")

        if config.ignore_vcs and not self._vcs_added:
            config.exclude_dirs.extend(VCS_PATTERNS)
            self._vcs_added = True
        if config.ignore_dot_dirs:
            config.exclude_dirs.append(DOT_PATTERN)
        if config.ignore_dot_files:
            config.not_names.append(DOT_PATTERN)
        self._initialized = True

    def _find_in_directory(self, root: Path, snapshot: FinderSnapshot) -> Iterator[FileEntry]:
        entries = walk_directory(
            root,
            recursive=snapshot.recursive,
            follow_symlinks=snapshot.follow_symlinks,
            skip_unreadable_dirs=snapshot.skip_unreadable_dirs,
            exclude_dirs=snapshot.exclude_dirs,
        )
        return apply_filters(entries, snapshot)

    def __iter__(self) -> Iterator[FileEntry]:
        self._initialize()
        snapshot = self._config.snapshot()
        for root in snapshot.roots:
            if not root.is_dir():
                raise NotFoundError(f"finder root directory does not exist: {root}", root)

        logger.debug(
            "finding %s entries under %d root(s)",
            snapshot.mode.description,
            len(snapshot.roots),
        )
        sources: list[Iterable[FileEntry]] = [self._find_in_directory(root, snapshot) for root in snapshot.roots]
        sources.extend(snapshot.iterators)
        return itertools.chain.from_iterable(sources)

    def all(self) -> Iterator[FileEntry]:
        """Return a fresh lazy iterator over matching entries."""
        return iter(self)

    def count(self) -> int:
        """Drain a fresh iteration and count its entries."""
        return sum(1 for _entry in self)

    def each(self, callback: Callable[[FileEntry], object]) -> None:
        """Call ``callback`` for every entry; the first exception stops the walk."""
        for entry in self:
            callback(entry)

    for_each = each

    def get_info(self) -> dict[str, object]:
        """Return the effective settings, initializing the finder if needed."""
        self._initialize()
        config = self._config
        return {
            "mode": config.mode.description,
            "dirs": [str(root) for root in config.roots],
            "names": list(config.names),
            "not_names": list(config.not_names),
            "paths": list(config.paths),
            "not_paths": list(config.not_paths),
            "excludes": list(config.exclude_dirs),
            "recursive": config.recursive,
            "follow_links": config.follow_symlinks,
            "skip_unreadable_dirs": config.skip_unreadable_dirs,
            "filters": len(config.filters),
            "iterators": len(config.iterators),
        }


__all__ = ["FileFinder", "split_patterns"]
