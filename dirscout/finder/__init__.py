"""Composable, lazy file finder.

This package contains the traversal engine:
- entry/config/snapshot datatypes
- the self-first directory walk with pruning and symlink control
- filter stages layered over the walk
- the fluent ``FileFinder`` builder
"""

from __future__ import annotations

from .types import VCS_PATTERNS, FileEntry, FinderConfig, FinderMode, FinderSnapshot
from .walk import walk_directory
from .stages import apply_filters, filter_callbacks, filter_mode, filter_names, filter_paths
from .finder import FileFinder, split_patterns

__all__ = [
    "VCS_PATTERNS",
    "FileEntry",
    "FinderConfig",
    "FinderMode",
    "FinderSnapshot",
    "walk_directory",
    "apply_filters",
    "filter_callbacks",
    "filter_mode",
    "filter_names",
    "filter_paths",
    "FileFinder",
    "split_patterns",
]
