"""Pure path-string helpers shared by the finder, watcher, and tree builder."""

from __future__ import annotations

import os
import re
from pathlib import Path

_WINDOWS_ABS_RE = re.compile(r"^[a-z]:[/\\].+", re.IGNORECASE)


def is_abs_path(path: str | Path) -> bool:
    """Return whether ``path`` is POSIX-absolute or a Windows drive path."""
    text = str(path)
    if not text:
        return False
    return text.startswith("/") or _WINDOWS_ABS_RE.match(text) is not None


def is_relative(path: str | Path) -> bool:
    return not is_abs_path(path)


def path_format(path: str | Path) -> str:
    """Normalize separators to ``/`` and guarantee one trailing slash."""
    text = str(path).strip().replace("\\", "/")
    return text if text.endswith("/") else text + "/"


def _clean_segment(segment: str) -> str:
    if segment in (".", "./"):
        return ""
    if segment.startswith("./"):
        segment = segment[2:]
    return segment.strip("/\\ ")


def join_path(base: str | Path, *sub_paths: str | Path) -> str:
    """Join ``sub_paths`` onto ``base`` with ``os.sep``.

    ``.``/``./`` segments and surrounding separators are dropped, so
    ``join_path("/a/", "./b", "/c/")`` is ``/a/b/c`` on POSIX.
    """
    base_text = str(base)
    if base_text.endswith("/") and len(base_text) > 1:
        base_text = base_text[:-1]

    segments = [cleaned for cleaned in (_clean_segment(str(sub)) for sub in sub_paths) if cleaned]
    if not segments:
        return base_text
    if not base_text:
        return os.sep.join(segments)
    if base_text == "/":
        return "/" + os.sep.join(segments)
    return base_text + os.sep + os.sep.join(segments)


def expand_path(path: str | Path) -> Path:
    """Expand a leading ``~`` to the user's home directory."""
    return Path(os.path.expanduser(str(path)))


def real_path(path: str | Path) -> Path:
    """Return the absolute, symlink-resolved form of ``path``."""
    return expand_path(path).resolve()


__all__ = [
    "expand_path",
    "is_abs_path",
    "is_relative",
    "join_path",
    "path_format",
    "real_path",
]
