"""Tests for file and directory I/O wrappers."""

from __future__ import annotations

import hashlib
import tempfile
import unittest
from pathlib import Path

from dirscout.errors import FileSystemError, NotFoundError
from dirscout.fs import (
    copy_dir,
    copy_file,
    delete_dir,
    delete_file,
    file_digest,
    is_empty_dir,
    read_all,
    write_all,
)


class ReadWriteTests(unittest.TestCase):
    def test_write_all_creates_parent_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "a" / "b" / "note.txt"

            written = write_all(target, "hello")

            self.assertEqual(written, 5)
            self.assertEqual(read_all(target), "hello")

    def test_read_all_missing_file_raises_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.txt"

            with self.assertRaises(NotFoundError) as ctx:
                read_all(missing)

            self.assertEqual(ctx.exception.path, missing)
            self.assertIsInstance(ctx.exception, FileNotFoundError)
            self.assertIsInstance(ctx.exception, FileSystemError)

    def test_copy_file_requires_source(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            with self.assertRaises(NotFoundError):
                copy_file(root / "nope", root / "dst")

            (root / "src.txt").write_text("x", encoding="utf-8")
            copied = copy_file(root / "src.txt", root / "out" / "dst.txt")
            self.assertEqual(copied.read_text(encoding="utf-8"), "x")

    def test_file_digest_streams_contents(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.bin"
            path.write_bytes(b"Hello, World!")

            self.assertEqual(file_digest(path), hashlib.md5(b"Hello, World!").hexdigest())
            self.assertEqual(
                file_digest(path, "sha256"),
                "dffd6021bb2bd5b0af676290809ec3a53191dd81c7f70a4b28688a362182986f",
            )
            with self.assertRaises(NotFoundError):
                file_digest(Path(tmp) / "missing.bin")


class DirectoryHelperTests(unittest.TestCase):
    def _make_source(self, root: Path) -> Path:
        source = root / "src"
        (source / "nested").mkdir(parents=True)
        (source / "a.txt").write_text("a", encoding="utf-8")
        (source / ".hidden").write_text("h", encoding="utf-8")
        (source / "nested" / "b.log").write_text("b", encoding="utf-8")
        return source

    def test_copy_dir_copies_hidden_files_and_runs_hooks(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            source = self._make_source(root)
            copied: list[str] = []

            copy_dir(source, root / "dst", after_fn=lambda new: copied.append(new.name))

            self.assertTrue((root / "dst" / ".hidden").is_file())
            self.assertEqual((root / "dst" / "nested" / "b.log").read_text(encoding="utf-8"), "b")
            self.assertEqual(sorted(copied), [".hidden", "a.txt", "b.log"])

    def test_copy_dir_filters_and_skips_existing_targets(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            source = self._make_source(root)
            destination = root / "dst"
            destination.mkdir()
            (destination / "a.txt").write_text("keep", encoding="utf-8")

            copy_dir(source, destination, filter_fn=lambda old: old.suffix != ".log")

            self.assertEqual((destination / "a.txt").read_text(encoding="utf-8"), "keep")
            self.assertFalse((destination / "nested" / "b.log").exists())

            copy_dir(source, destination, skip_exist=False, before_fn=lambda old, new: old.name == "a.txt")
            self.assertEqual((destination / "a.txt").read_text(encoding="utf-8"), "a")
            self.assertFalse((destination / "nested" / "b.log").exists())

    def test_copy_dir_missing_source_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(NotFoundError):
                copy_dir(Path(tmp) / "nope", Path(tmp) / "dst")

    def test_delete_dir_can_keep_the_directory_itself(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            source = self._make_source(Path(tmp))

            self.assertTrue(delete_dir(source, delete_self=False))
            self.assertTrue(source.is_dir())
            self.assertTrue(is_empty_dir(source))

            self.assertTrue(delete_dir(source))
            self.assertFalse(source.exists())
            self.assertFalse(delete_dir(source))

    def test_delete_file_reports_absence(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "x.txt"
            path.write_text("x", encoding="utf-8")

            self.assertTrue(delete_file(path))
            self.assertFalse(delete_file(path))

    def test_is_empty_dir_missing_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(NotFoundError):
                is_empty_dir(Path(tmp) / "nope")


if __name__ == "__main__":
    unittest.main()
