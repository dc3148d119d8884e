"""Composable filter stages applied to a lazy entry stream.

Each stage has the shape ``(entries, ...) -> entries`` and short-circuits on
the first failing predicate. ``apply_filters`` wires them in the fixed order
mode, name, user filters, path, skipping stages with nothing to do.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..matching import PathMatcher
from .types import EntryFilter, FileEntry, FinderMode, FinderSnapshot


def filter_mode(entries: Iterable[FileEntry], mode: FinderMode) -> Iterator[FileEntry]:
    """Drop files in ``DIRS_ONLY`` mode and directories in ``FILES_ONLY`` mode."""
    for entry in entries:
        if mode is FinderMode.DIRS_ONLY and not entry.is_dir:
            continue
        if mode is FinderMode.FILES_ONLY and entry.is_dir:
            continue
        yield entry


def filter_names(entries: Iterable[FileEntry], matcher: PathMatcher) -> Iterator[FileEntry]:
    """Keep entries whose base name passes ``matcher``."""
    return (entry for entry in entries if matcher.accepts(entry.name))


def filter_callbacks(entries: Iterable[FileEntry], filters: tuple[EntryFilter, ...]) -> Iterator[FileEntry]:
    """Keep entries accepted by every callback, called in registration order."""
    for entry in entries:
        if all(callback(entry) for callback in filters):
            yield entry


def filter_paths(entries: Iterable[FileEntry], matcher: PathMatcher) -> Iterator[FileEntry]:
    """Keep entries whose relative path passes ``matcher``."""
    return (entry for entry in entries if matcher.accepts(entry.relative_path))


def apply_filters(entries: Iterable[FileEntry], snapshot: FinderSnapshot) -> Iterator[FileEntry]:
    """Layer every configured stage over ``entries``."""
    stream: Iterable[FileEntry] = entries
    if snapshot.mode is not FinderMode.ALL:
        stream = filter_mode(stream, snapshot.mode)

    name_matcher = PathMatcher.for_names(snapshot.names, snapshot.not_names)
    if not name_matcher.is_noop:
        stream = filter_names(stream, name_matcher)

    if snapshot.filters:
        stream = filter_callbacks(stream, snapshot.filters)

    path_matcher = PathMatcher.for_paths(snapshot.paths, snapshot.not_paths)
    if not path_matcher.is_noop:
        stream = filter_paths(stream, path_matcher)
    return iter(stream)


__all__ = [
    "apply_filters",
    "filter_callbacks",
    "filter_mode",
    "filter_names",
    "filter_paths",
]
