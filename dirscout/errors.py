"""Exception taxonomy for finder, watcher, and file helpers.

Low-level ``OSError`` values are wrapped into these kinds with the offending
path attached, and chained via ``raise ... from`` so the OS detail survives.
"""

from __future__ import annotations

from pathlib import Path


class FileSystemError(RuntimeError):
    """Base class for every error raised by ``dirscout``."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigurationError(FileSystemError):
    """Finder or watcher used before its minimum configuration was set."""


class NotFoundError(FileSystemError, FileNotFoundError):
    """A configured root, watch directory, or source path does not exist."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class TraversalError(FileSystemError):
    """A directory could not be listed during a walk."""


class FileReadError(FileSystemError):
    """A file could not be read."""


class FileWriteError(FileSystemError):
    """A file or directory could not be written."""


class MarkerWriteError(FileWriteError):
    """The watcher marker file could not be persisted."""


__all__ = [
    "FileSystemError",
    "ConfigurationError",
    "NotFoundError",
    "TraversalError",
    "FileReadError",
    "FileWriteError",
    "MarkerWriteError",
]
