"""Marker-file persistence for the last computed fingerprint.

The marker holds exactly one hex digest and is overwritten wholesale. Reading
is forgiving (no marker means no baseline); writing is not.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Iterable
from pathlib import Path

from ..errors import MarkerWriteError

logger = logging.getLogger(__name__)

MARKER_SUFFIX = ".id"


def default_marker_path(watch_dirs: Iterable[Path], directory: Path) -> Path:
    """Derive a stable marker location from the JSON list of watch dirs."""
    serialized = json.dumps([str(path) for path in watch_dirs])
    name = hashlib.md5(serialized.encode("utf-8")).hexdigest()
    return directory / f"{name}{MARKER_SUFFIX}"


def read_marker(path: Path) -> str | None:
    """Return the stored digest, or ``None`` when absent, unreadable, or empty."""
    try:
        value = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return None
    except OSError as exc:
        logger.warning("cannot read marker %s, treating as no baseline: %s", path, exc)
        return None
    return value or None


def write_marker(path: Path, digest: str) -> None:
    """Overwrite ``path`` with ``digest``; failures raise ``MarkerWriteError``."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(digest, encoding="utf-8")
    except OSError as exc:
        raise MarkerWriteError(f"cannot write marker file {path}: {exc.strerror or exc}", path) from exc


__all__ = ["MARKER_SUFFIX", "default_marker_path", "read_marker", "write_marker"]
