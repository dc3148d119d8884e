"""Datatypes for finder configuration, snapshots, and produced entries."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

VCS_PATTERNS: tuple[str, ...] = (
    ".svn",
    "_svn",
    "CVS",
    "_darcs",
    ".arch-params",
    ".monotone",
    ".bzr",
    ".git",
    ".hg",
)
DOT_PATTERN = ".*"


class FinderMode(Enum):
    """Which entry kinds a traversal yields."""

    ALL = "ALL"
    FILES_ONLY = "FILE"
    DIRS_ONLY = "DIR"

    @property
    def description(self) -> str:
        return self.value


@dataclass(frozen=True)
class FileEntry:
    """One filesystem entry observed during a traversal."""

    path: Path
    name: str
    is_dir: bool
    relative_path: str
    is_symlink: bool = False
    root: Path | None = None

    @classmethod
    def from_path(cls, path: Path | str) -> FileEntry:
        """Build an entry for a path that was not produced by a walk."""
        path = Path(path).absolute()
        return cls(
            path=path,
            name=path.name,
            is_dir=path.is_dir(),
            relative_path=path.name,
            is_symlink=path.is_symlink(),
        )

    @property
    def is_file(self) -> bool:
        return not self.is_dir

    def __fspath__(self) -> str:
        return os.fspath(self.path)


EntryFilter = Callable[[FileEntry], bool]


@dataclass
class FinderConfig:
    """Mutable builder state owned by one ``FileFinder``."""

    mode: FinderMode = FinderMode.ALL
    roots: list[Path] = field(default_factory=list)
    names: list[str] = field(default_factory=list)
    not_names: list[str] = field(default_factory=list)
    paths: list[str] = field(default_factory=list)
    not_paths: list[str] = field(default_factory=list)
    exclude_dirs: list[str] = field(default_factory=list)
    ignore_vcs: bool = True
    ignore_dot_files: bool = True
    ignore_dot_dirs: bool = False
    recursive: bool = True
    follow_symlinks: bool = False
    skip_unreadable_dirs: bool = True
    filters: list[EntryFilter] = field(default_factory=list)
    iterators: list[Iterable[FileEntry]] = field(default_factory=list)

    def snapshot(self) -> FinderSnapshot:
        """Freeze the current settings for one iteration session."""
        return FinderSnapshot(
            mode=self.mode,
            roots=tuple(self.roots),
            names=tuple(self.names),
            not_names=tuple(self.not_names),
            paths=tuple(self.paths),
            not_paths=tuple(self.not_paths),
            exclude_dirs=tuple(self.exclude_dirs),
            recursive=self.recursive,
            follow_symlinks=self.follow_symlinks,
            skip_unreadable_dirs=self.skip_unreadable_dirs,
            filters=tuple(self.filters),
            iterators=tuple(self.iterators),
        )


@dataclass(frozen=True)
class FinderSnapshot:
    """Immutable copy of ``FinderConfig`` taken when iteration starts.

    Implicit VCS/dot patterns are already merged into ``exclude_dirs`` and
    ``not_names`` by the time a snapshot is taken.
    """

    mode: FinderMode
    roots: tuple[Path, ...]
    names: tuple[str, ...]
    not_names: tuple[str, ...]
    paths: tuple[str, ...]
    not_paths: tuple[str, ...]
    exclude_dirs: tuple[str, ...]
    recursive: bool
    follow_symlinks: bool
    skip_unreadable_dirs: bool
    filters: tuple[EntryFilter, ...]
    iterators: tuple[Iterable[FileEntry], ...]


__all__ = [
    "DOT_PATTERN",
    "EntryFilter",
    "FileEntry",
    "FinderConfig",
    "FinderMode",
    "FinderSnapshot",
    "VCS_PATTERNS",
]
