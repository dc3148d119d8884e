"""Tests for path-string helpers."""

from __future__ import annotations

import os
import unittest
from pathlib import Path

from dirscout.paths import expand_path, is_abs_path, is_relative, join_path, path_format, real_path


class PathHelperTests(unittest.TestCase):
    def test_is_abs_path_accepts_posix_and_windows_drive_paths(self) -> None:
        self.assertTrue(is_abs_path("/var/log"))
        self.assertTrue(is_abs_path("C:\\Users\\me"))
        self.assertTrue(is_abs_path("d:/work"))
        self.assertFalse(is_abs_path("relative/dir"))
        self.assertFalse(is_abs_path(""))
        self.assertTrue(is_relative("./here"))

    def test_path_format_normalizes_separators_and_trailing_slash(self) -> None:
        self.assertEqual(path_format("a\\b\\c"), "a/b/c/")
        self.assertEqual(path_format(" /tmp/dir/ "), "/tmp/dir/")

    def test_join_path_drops_dot_segments_and_separators(self) -> None:
        self.assertEqual(join_path("/a/", "./b", "/c/"), os.sep.join(["/a", "b", "c"]))
        self.assertEqual(join_path("/a", ".", ""), "/a")
        self.assertEqual(join_path("", "b", "c"), os.sep.join(["b", "c"]))
        self.assertEqual(join_path("/", "etc"), "/etc")

    def test_expand_and_real_path(self) -> None:
        self.assertEqual(expand_path("~/x"), Path.home() / "x")
        self.assertTrue(real_path(".").is_absolute())


if __name__ == "__main__":
    unittest.main()
