"""Tests for the fingerprint collector and marker helpers."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirscout.errors import TraversalError
from dirscout.watcher.collect import FingerprintCollector, collect_fingerprint
from dirscout.watcher.marker import read_marker, write_marker
from dirscout.watcher.state import WatcherState


class FingerprintCollectorTests(unittest.TestCase):
    def test_accepts_file_applies_dot_exclude_and_include_rules(self) -> None:
        collector = FingerprintCollector(WatcherState(names=[r"\.py$"], not_names=[r"^test_"]))

        self.assertTrue(collector.accepts_file("app.py"))
        self.assertFalse(collector.accepts_file("test_app.py"))
        self.assertFalse(collector.accepts_file("notes.md"))
        self.assertFalse(collector.accepts_file(".hidden.py"))

    def test_default_not_names_skip_license_and_gitignore(self) -> None:
        collector = FingerprintCollector(WatcherState(ignore_dot_files=False))

        self.assertFalse(collector.accepts_file(".gitignore"))
        self.assertFalse(collector.accepts_file("LICENSE"))
        self.assertFalse(collector.accepts_file("LICENSE.txt"))
        self.assertTrue(collector.accepts_file("LICENSE.md"))

    def test_symlinked_directory_is_entered_only_when_following(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base = Path(tmp)
            project = base / "project"
            outside = base / "outside"
            project.mkdir()
            outside.mkdir()
            (outside / "x.txt").write_text("x", encoding="utf-8")
            os.symlink(outside, project / "link")

            _digest, unfollowed = collect_fingerprint(WatcherState(watch_dirs=[project]))
            _digest, followed = collect_fingerprint(WatcherState(watch_dirs=[project], follow_symlinks=True))

        self.assertEqual((unfollowed, followed), (0, 1))

    def test_unreadable_subdirectory_raises_traversal_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            project = Path(tmp)
            locked = project / "locked"
            locked.mkdir()
            real_scandir = os.scandir

            def fake_scandir(path):
                if Path(path) == locked:
                    raise PermissionError(13, "Permission denied", str(path))
                return real_scandir(path)

            with mock.patch("dirscout.watcher.collect.os.scandir", side_effect=fake_scandir):
                with self.assertRaises(TraversalError) as ctx:
                    collect_fingerprint(WatcherState(watch_dirs=[project]))

        self.assertEqual(ctx.exception.path, locked)


class MarkerTests(unittest.TestCase):
    def test_write_then_read_marker(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "deep" / "m.id"

            self.assertIsNone(read_marker(path))
            write_marker(path, "abc123")

            self.assertEqual(read_marker(path), "abc123")

    def test_empty_marker_means_no_baseline(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "m.id"
            path.write_text("", encoding="utf-8")

            self.assertIsNone(read_marker(path))


if __name__ == "__main__":
    unittest.main()
