"""Glob-style include/exclude predicates for names and relative paths.

Name patterns are shell globs (or exact names). Path patterns are globs only
when they carry glob syntax or a literal dot; bare words such as ``vendor`` or
``build/`` are substring tests against the relative path. All glob matching is
case-sensitive on every platform.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from fnmatch import fnmatchcase

MATCH_ALL_PATTERNS = frozenset({"*", "**/*"})
PATH_GLOB_MARKERS = ("*", "?", "[", ".")

Matcher = Callable[[str, str], bool]


def match_name(name: str, pattern: str) -> bool:
    """Return whether a base name matches one glob ``pattern``."""
    if pattern in MATCH_ALL_PATTERNS or pattern == name:
        return True
    return fnmatchcase(name, pattern)


def match_path(path: str, pattern: str) -> bool:
    """Return whether ``path`` matches a glob pattern or contains a bare word."""
    if pattern in MATCH_ALL_PATTERNS:
        return True
    if any(marker in pattern for marker in PATH_GLOB_MARKERS):
        return fnmatchcase(path, pattern)
    return pattern in path


def is_include(candidate: str, patterns: Iterable[str], matcher: Matcher = match_name) -> bool:
    """Return ``True`` when ``patterns`` is empty or any pattern matches."""
    patterns = tuple(patterns)
    if not patterns:
        return True
    return any(matcher(candidate, pattern) for pattern in patterns)


def is_exclude(candidate: str, patterns: Iterable[str], matcher: Matcher = match_name) -> bool:
    """Return ``True`` when any pattern matches; an empty set excludes nothing."""
    return any(matcher(candidate, pattern) for pattern in patterns)


def search_any(name: str, regexes: Iterable[str]) -> bool:
    """Return whether any regular expression is found in ``name``."""
    return any(re.search(regex, name) for regex in regexes)


@dataclass(frozen=True)
class PathMatcher:
    """Include/exclude pattern pair evaluated with one matching rule.

    Exclusion wins over inclusion; an empty include set accepts everything
    that was not excluded.
    """

    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    matcher: Matcher = match_name

    @classmethod
    def for_names(cls, include: Iterable[str] = (), exclude: Iterable[str] = ()) -> PathMatcher:
        return cls(tuple(include), tuple(exclude), match_name)

    @classmethod
    def for_paths(cls, include: Iterable[str] = (), exclude: Iterable[str] = ()) -> PathMatcher:
        return cls(tuple(include), tuple(exclude), match_path)

    @property
    def is_noop(self) -> bool:
        return not self.include and not self.exclude

    def accepts(self, candidate: str) -> bool:
        if is_exclude(candidate, self.exclude, self.matcher):
            return False
        return is_include(candidate, self.include, self.matcher)


__all__ = [
    "MATCH_ALL_PATTERNS",
    "PathMatcher",
    "is_exclude",
    "is_include",
    "match_name",
    "match_path",
    "search_any",
]
