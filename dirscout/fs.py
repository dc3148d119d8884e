"""Thin file and directory I/O wrappers.

Every helper converts ``OSError`` into the ``dirscout.errors`` kinds with the
offending path attached. Directory listings are read inside ``with`` blocks so
handles never outlive the call that opened them.
"""

from __future__ import annotations

import hashlib
import logging
import os
import shutil
from collections.abc import Callable
from pathlib import Path

from .errors import FileReadError, FileWriteError, NotFoundError

logger = logging.getLogger(__name__)

DIGEST_CHUNK_SIZE = 1 << 16
DEFAULT_DIGEST_ALGORITHM = "md5"


def read_all(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole text file."""
    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise NotFoundError(f"file does not exist: {path}", path) from exc
    except OSError as exc:
        raise FileReadError(f"cannot read file {path}: {exc.strerror or exc}", path) from exc


def write_all(path: str | Path, contents: str | bytes, encoding: str = "utf-8") -> int:
    """Write ``contents`` to ``path``, creating parent directories first.

    Returns the number of characters or bytes written.
    """
    path = Path(path)
    mkdir(path.parent)
    try:
        if isinstance(contents, bytes):
            return path.write_bytes(contents)
        return path.write_text(contents, encoding=encoding)
    except OSError as exc:
        raise FileWriteError(f"cannot write file {path}: {exc.strerror or exc}", path) from exc


def mkdir(path: str | Path, mode: int = 0o775) -> Path:
    """Create ``path`` and any missing parents; existing directories are fine."""
    path = Path(path)
    try:
        path.mkdir(mode=mode, parents=True, exist_ok=True)
    except OSError as exc:
        raise FileWriteError(f"cannot create directory {path}: {exc.strerror or exc}", path) from exc
    return path


def copy_file(source: str | Path, destination: str | Path) -> Path:
    """Copy one file, creating the destination's parent directory."""
    source = Path(source)
    destination = Path(destination)
    if not source.is_file():
        raise NotFoundError(f"copy source file does not exist: {source}", source)
    mkdir(destination.parent)
    try:
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise FileWriteError(f"cannot copy {source} to {destination}: {exc.strerror or exc}", destination) from exc
    return destination


def delete_file(path: str | Path) -> bool:
    """Remove a file; returns ``False`` when it was already absent."""
    path = Path(path)
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise FileWriteError(f"cannot delete file {path}: {exc.strerror or exc}", path) from exc
    return True


def delete_dir(path: str | Path, delete_self: bool = True) -> bool:
    """Remove a directory's contents and, unless ``delete_self`` is false, itself."""
    path = Path(path)
    if path.is_file():
        return delete_file(path)
    if not path.is_dir():
        return False
    try:
        if delete_self:
            shutil.rmtree(path)
            return True
        for child in _list_dir(path):
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
    except OSError as exc:
        raise FileWriteError(f"cannot delete directory {path}: {exc.strerror or exc}", path) from exc
    return True


def is_empty_dir(path: str | Path) -> bool:
    path = Path(path)
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except FileNotFoundError as exc:
        raise NotFoundError(f"directory does not exist: {path}", path) from exc
    except OSError as exc:
        raise FileReadError(f"cannot open directory {path}: {exc.strerror or exc}", path) from exc


def file_digest(path: str | Path, algorithm: str = DEFAULT_DIGEST_ALGORITHM) -> str:
    """Return the hex digest of a file's contents, streamed in chunks."""
    path = Path(path)
    digest = hashlib.new(algorithm)
    try:
        with path.open("rb") as handle:
            for chunk in iter(lambda: handle.read(DIGEST_CHUNK_SIZE), b""):
                digest.update(chunk)
    except FileNotFoundError as exc:
        raise NotFoundError(f"file does not exist: {path}", path) from exc
    except OSError as exc:
        raise FileReadError(f"cannot read file {path}: {exc.strerror or exc}", path) from exc
    return digest.hexdigest()


def _list_dir(directory: Path) -> list[Path]:
    with os.scandir(directory) as entries:
        return sorted((Path(entry.path) for entry in entries), key=lambda item: item.name)


def copy_dir(
    source: str | Path,
    destination: str | Path,
    *,
    skip_exist: bool = True,
    filter_fn: Callable[[Path], bool] | None = None,
    before_fn: Callable[[Path, Path], bool] | None = None,
    after_fn: Callable[[Path], None] | None = None,
) -> Path:
    """Recursively copy ``source`` into ``destination``, hidden files included.

    ``filter_fn(old)`` and ``before_fn(old, new)`` may return ``False`` to skip
    one file. ``after_fn(new)`` runs after each copied file. Existing targets
    are left alone while ``skip_exist`` is set.
    """
    source = Path(source)
    destination = Path(destination)
    if not source.is_dir():
        raise NotFoundError(f"copy source directory does not exist: {source}", source)
    _copy_tree(source, destination, skip_exist, filter_fn, before_fn, after_fn)
    return destination


def _copy_tree(
    source: Path,
    destination: Path,
    skip_exist: bool,
    filter_fn: Callable[[Path], bool] | None,
    before_fn: Callable[[Path, Path], bool] | None,
    after_fn: Callable[[Path], None] | None,
) -> None:
    mkdir(destination)
    try:
        children = _list_dir(source)
    except OSError as exc:
        raise FileReadError(f"cannot open directory {source}: {exc.strerror or exc}", source) from exc

    for old in children:
        new = destination / old.name
        if old.is_dir():
            _copy_tree(old, new, skip_exist, filter_fn, before_fn, after_fn)
            continue
        if filter_fn is not None and not filter_fn(old):
            continue
        if before_fn is not None and not before_fn(old, new):
            continue
        if skip_exist and new.exists():
            logger.debug("copy_dir: keeping existing %s", new)
            continue
        copy_file(old, new)
        if after_fn is not None:
            after_fn(new)


__all__ = [
    "DEFAULT_DIGEST_ALGORITHM",
    "copy_dir",
    "copy_file",
    "delete_dir",
    "delete_file",
    "file_digest",
    "is_empty_dir",
    "mkdir",
    "read_all",
    "write_all",
]
