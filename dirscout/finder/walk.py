"""Lazy depth-first directory walk producing ``FileEntry`` values.

Each directory is listed in full inside ``os.scandir``'s context manager and
the handle is closed before any child is yielded, so a paused or abandoned
generator never pins directory descriptors.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..errors import TraversalError
from ..matching import is_exclude
from .types import FileEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Child:
    """Directory listing row captured while the scandir handle is open."""

    name: str
    path: Path
    is_dir: bool
    is_symlink: bool


def _dir_identity(path: Path) -> tuple[int, int] | None:
    try:
        st = path.stat()
    except OSError:
        return None
    return (st.st_dev, st.st_ino)


def list_children(directory: Path) -> list[_Child]:
    """List ``directory`` sorted by name; raises ``OSError`` when unreadable."""
    children: list[_Child] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                is_symlink = entry.is_symlink()
            except OSError:
                is_symlink = False
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False
            children.append(
                _Child(
                    name=entry.name,
                    path=Path(entry.path),
                    is_dir=is_dir,
                    is_symlink=is_symlink,
                )
            )
    children.sort(key=lambda child: child.name)
    return children


def walk_directory(
    root: Path,
    *,
    recursive: bool = True,
    follow_symlinks: bool = False,
    skip_unreadable_dirs: bool = True,
    exclude_dirs: tuple[str, ...] = (),
) -> Iterator[FileEntry]:
    """Yield entries under ``root`` self-first.

    A directory whose name matches ``exclude_dirs`` is still yielded but never
    descended. Symlinks are leaves unless ``follow_symlinks`` is set; a followed
    link never re-enters a directory already on the current descent path.
    """
    root = Path(root).absolute()
    ancestors: set[tuple[int, int]] = set()
    root_identity = _dir_identity(root)
    if root_identity is not None:
        ancestors.add(root_identity)
    yield from _walk(root, root, "", recursive, follow_symlinks, skip_unreadable_dirs, exclude_dirs, ancestors)


def _walk(
    root: Path,
    directory: Path,
    prefix: str,
    recursive: bool,
    follow_symlinks: bool,
    skip_unreadable_dirs: bool,
    exclude_dirs: tuple[str, ...],
    ancestors: set[tuple[int, int]],
) -> Iterator[FileEntry]:
    try:
        children = list_children(directory)
    except OSError as exc:
        if skip_unreadable_dirs:
            logger.debug("skipping unreadable directory %s: %s", directory, exc)
            return
        raise TraversalError(f"cannot open directory {directory}: {exc.strerror or exc}", directory) from exc

    for child in children:
        relative_path = f"{prefix}/{child.name}" if prefix else child.name
        yield FileEntry(
            path=child.path,
            name=child.name,
            is_dir=child.is_dir,
            relative_path=relative_path,
            is_symlink=child.is_symlink,
            root=root,
        )

        if not (recursive and child.is_dir):
            continue
        if child.is_symlink and not follow_symlinks:
            continue
        if is_exclude(child.name, exclude_dirs):
            continue

        identity = _dir_identity(child.path)
        if identity is not None and identity in ancestors:
            logger.debug("not re-entering %s: directory cycle", child.path)
            continue
        if identity is not None:
            ancestors.add(identity)
        try:
            yield from _walk(
                root,
                child.path,
                relative_path,
                recursive,
                follow_symlinks,
                skip_unreadable_dirs,
                exclude_dirs,
                ancestors,
            )
        finally:
            if identity is not None:
                ancestors.discard(identity)


__all__ = ["list_children", "walk_directory"]
