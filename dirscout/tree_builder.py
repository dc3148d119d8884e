"""Fluent generator for small directory trees.

Usage::

    builder = FileTreeBuilder().workdir(target).set_tpl_dir(templates)
    builder.dir("src", lambda sub: sub.file("__init__.py").tpl_file("main.py.tpl", "main.py"))
    builder.dir_files("docs", "index.md", "usage.md")

``dir``/``into`` callbacks receive a copy whose workdir is the sub-directory;
the parent builder keeps its own workdir. With ``dry_run`` set, actions are
only reported.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from copy import copy as shallow_copy
from pathlib import Path

from . import fs
from .matching import is_exclude, is_include
from .paths import is_relative, join_path

logger = logging.getLogger(__name__)

_TEMPLATE_VAR_RE = re.compile(r"\{\{\s*([A-Za-z_][\w.]*)\s*\}\}")


def render_template(text: str, variables: Mapping[str, object]) -> str:
    """Replace ``{{ name }}`` placeholders; unknown names are left untouched."""

    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in variables:
            return match.group(0)
        return str(variables[key])

    return _TEMPLATE_VAR_RE.sub(replace, text)


class FileTreeBuilder:
    """Creates directories and files relative to a moving working directory."""

    def __init__(self, workdir: Path | str = "", *, dry_run: bool = False, show_msg: bool = False) -> None:
        self.dry_run = dry_run
        self.show_msg = show_msg
        self.tpl_dir = ""
        self.tpl_vars: dict[str, object] = {}
        self._workdir = ""
        self._base_dir = ""
        self._prev_dir = ""
        if workdir:
            self.set_workdir(workdir)

    # -- settings ---------------------------------------------------------

    def workdir(self, path: Path | str) -> FileTreeBuilder:
        return self.set_workdir(path)

    def set_workdir(self, path: Path | str) -> FileTreeBuilder:
        self._workdir = str(path)
        if not self._base_dir:
            self._base_dir = self._workdir
        return self

    def get_workdir(self) -> str:
        return self._workdir

    @property
    def base_dir(self) -> str:
        """The first workdir ever set; never changed by descending."""
        return self._base_dir

    def set_dry_run(self, dry_run: bool) -> FileTreeBuilder:
        self.dry_run = bool(dry_run)
        return self

    def set_show_msg(self, show_msg: bool) -> FileTreeBuilder:
        self.show_msg = bool(show_msg)
        return self

    def set_tpl_dir(self, tpl_dir: Path | str) -> FileTreeBuilder:
        self.tpl_dir = str(tpl_dir)
        return self

    def set_tpl_vars(self, tpl_vars: Mapping[str, object]) -> FileTreeBuilder:
        self.tpl_vars = dict(tpl_vars)
        return self

    def get_realpath(self, path: Path | str) -> str:
        """Resolve ``path`` against the workdir unless it is absolute."""
        text = str(path)
        if text and is_relative(text):
            return join_path(self._workdir, text)
        return text

    # -- actions ----------------------------------------------------------

    def _report(self, message: str, *args: object) -> None:
        if not self.show_msg:
            return
        if self.dry_run:
            message = "[DRY-RUN] " + message
        logger.info(message, *args)

    def file(self, name: Path | str, contents: str = "") -> FileTreeBuilder:
        """Create one file (parents included) relative to the workdir."""
        _require(name, "file name")
        file_path = self.get_realpath(name)
        self._report("create file: %s", file_path)
        if not self.dry_run:
            fs.write_all(file_path, contents)
        return self

    def files(self, names: Iterable[Path | str], contents: str = "") -> FileTreeBuilder:
        for name in names:
            self.file(name, contents)
        return self

    def dir(self, name: Path | str, into_fn: Callable[[FileTreeBuilder], object] | None = None) -> FileTreeBuilder:
        """Create a directory and optionally populate it through ``into_fn``."""
        _require(name, "dir name")
        dir_path = self.get_realpath(name)
        if not self.dry_run:
            fs.mkdir(dir_path)

        if into_fn is None:
            self._report("make dir: %s", dir_path)
            return self

        self._report("make dir: %s, with into func", dir_path)
        into_fn(self._descend(dir_path))
        return self

    def dirs(self, *names: Path | str) -> FileTreeBuilder:
        for name in names:
            self.dir(name)
        return self

    def into(self, name: Path | str, into_fn: Callable[[FileTreeBuilder], object]) -> FileTreeBuilder:
        """Run ``into_fn`` on a copy rooted at an existing sub-directory."""
        _require(name, "dir name")
        dir_path = self.get_realpath(name)
        self._report("into dir %s, with func", dir_path)
        into_fn(self._descend(dir_path))
        return self

    def dir_files(self, name: Path | str, *files: Path | str) -> FileTreeBuilder:
        """Create a directory holding the given empty files."""
        return self.dir(name, lambda sub: sub.files(files))

    def copy(
        self,
        source: Path | str,
        destination: Path | str,
        after_fn: Callable[[str], object] | None = None,
    ) -> FileTreeBuilder:
        """Copy one file; ``destination`` is relative to the workdir."""
        dst_path = self.get_realpath(destination)
        self._report("copy file %s to %s", source, dst_path)
        if not self.dry_run:
            fs.copy_file(source, dst_path)
        if after_fn is not None:
            after_fn(dst_path)
        return self

    def copy_dir(
        self,
        source: Path | str,
        destination: Path | str,
        *,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
        after_fn: Callable[[Path], object] | None = None,
    ) -> FileTreeBuilder:
        """Copy a directory tree, filtering file paths by glob patterns.

        A non-empty ``include`` wins over ``exclude``.
        """
        include = tuple(include)
        exclude = tuple(exclude)
        dst_path = self.get_realpath(destination)
        self._report("copy dir %s to %s", source, dst_path)
        if self.dry_run:
            return self

        def before_copy(old: Path, _new: Path) -> bool:
            if include:
                return is_include(str(old), include)
            return not is_exclude(str(old), exclude)

        fs.copy_dir(source, dst_path, before_fn=before_copy, after_fn=after_fn)
        return self

    def tpl_file(
        self,
        tpl_file: Path | str,
        dst_file: Path | str = "",
        tpl_vars: Mapping[str, object] | None = None,
    ) -> FileTreeBuilder:
        """Render a template (relative to ``tpl_dir``) into the workdir."""
        _require(tpl_file, "template file")
        dst_path = self.get_realpath(dst_file or tpl_file)
        tpl_path = str(tpl_file)
        if is_relative(tpl_path):
            tpl_path = join_path(self.tpl_dir, tpl_path)

        self._report("render file: %s", tpl_path)
        variables = {**self.tpl_vars, **(tpl_vars or {})}
        content = render_template(fs.read_all(tpl_path), variables)
        if not self.dry_run:
            fs.write_all(dst_path, content)
        return self

    def tpl_files(
        self,
        tpl_to_dst: Mapping[str, str] | Iterable[str],
        tpl_vars: Mapping[str, object] | None = None,
    ) -> FileTreeBuilder:
        """Render several templates; a plain list renders each to the same name."""
        if isinstance(tpl_to_dst, Mapping):
            pairs = [(tpl or dst, dst) for tpl, dst in tpl_to_dst.items()]
        else:
            pairs = [(name, name) for name in tpl_to_dst]
        for tpl, dst in pairs:
            self.tpl_file(tpl, dst, tpl_vars)
        return self

    def back_prev(self) -> FileTreeBuilder:
        """Return to the workdir used before the last descent."""
        if self._prev_dir:
            self._workdir = self._prev_dir
            self._prev_dir = ""
        return self

    def _descend(self, dir_path: str) -> FileTreeBuilder:
        child = shallow_copy(self)
        child.tpl_vars = dict(self.tpl_vars)
        child._prev_dir = self._workdir
        child._workdir = dir_path
        return child


def _require(value: Path | str, label: str) -> None:
    if not str(value).strip():
        raise ValueError(f"{label} must not be blank")


__all__ = ["FileTreeBuilder", "render_template"]
