"""Public package surface for dirscout.

Exports the fluent ``FileFinder``, the fingerprinting ``ModifyWatcher``, the
``FileTreeBuilder`` and the error taxonomy. Path and file helpers live in
``dirscout.paths`` and ``dirscout.fs``.
"""

from __future__ import annotations

import logging

from .errors import (
    ConfigurationError,
    FileReadError,
    FileSystemError,
    FileWriteError,
    MarkerWriteError,
    NotFoundError,
    TraversalError,
)
from .finder import FileEntry, FileFinder, FinderMode
from .tree_builder import FileTreeBuilder
from .watcher import ModifyWatcher

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "FileEntry",
    "FileFinder",
    "FileReadError",
    "FileSystemError",
    "FileTreeBuilder",
    "FileWriteError",
    "FinderMode",
    "MarkerWriteError",
    "ModifyWatcher",
    "NotFoundError",
    "TraversalError",
]
