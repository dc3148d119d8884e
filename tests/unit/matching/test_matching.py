"""Tests for name/path pattern predicates."""

from __future__ import annotations

import unittest

from dirscout.matching import PathMatcher, is_exclude, is_include, match_name, match_path, search_any


class MatchNameTests(unittest.TestCase):
    def test_glob_exact_and_match_all_patterns(self) -> None:
        self.assertTrue(match_name("a.php", "*.php"))
        self.assertTrue(match_name("some.php", "some.php"))
        self.assertTrue(match_name("anything", "*"))
        self.assertTrue(match_name("anything", "**/*"))
        self.assertTrue(match_name("a1.txt", "a?.txt"))
        self.assertTrue(match_name("b.txt", "[ab].txt"))
        self.assertFalse(match_name("c.txt", "[ab].txt"))
        self.assertFalse(match_name("a.txt", "*.php"))

    def test_name_globs_are_case_sensitive(self) -> None:
        self.assertFalse(match_name("README.MD", "*.md"))
        self.assertTrue(match_name("README.md", "*.md"))

    def test_dot_pattern_matches_hidden_names_only(self) -> None:
        self.assertTrue(match_name(".gitkeep", ".*"))
        self.assertFalse(match_name("gitkeep", ".*"))


class MatchPathTests(unittest.TestCase):
    def test_bare_words_are_substring_tests(self) -> None:
        self.assertTrue(match_path("sub/c.php", "sub"))
        self.assertTrue(match_path("src/vendor/lib.py", "vendor"))
        self.assertTrue(match_path("bin/tool", "bin/"))
        self.assertFalse(match_path("src/lib.py", "vendor"))

    def test_patterns_with_glob_syntax_or_dots_are_globs(self) -> None:
        self.assertTrue(match_path("sub/c.php", "*.php"))
        self.assertTrue(match_path("sub/deep/c.php", "sub/*"))
        self.assertFalse(match_path("sub/c.php", "c.php"))
        self.assertTrue(match_path("c.php", "c.php"))
        self.assertTrue(match_path("a/b", "**/*"))


class PatternSetTests(unittest.TestCase):
    def test_empty_include_accepts_and_empty_exclude_rejects_nothing(self) -> None:
        self.assertTrue(is_include("x.txt", []))
        self.assertFalse(is_exclude("x.txt", []))

    def test_include_and_exclude_sets_use_any_semantics(self) -> None:
        self.assertTrue(is_include("x.txt", ["*.py", "*.txt"]))
        self.assertFalse(is_include("x.md", ["*.py", "*.txt"]))
        self.assertTrue(is_exclude("sub/x.txt", ["tmp", "sub"], match_path))

    def test_path_matcher_exclusion_wins(self) -> None:
        matcher = PathMatcher.for_names(include=["*.py"], exclude=["test_*"])

        self.assertTrue(matcher.accepts("main.py"))
        self.assertFalse(matcher.accepts("test_main.py"))
        self.assertFalse(matcher.accepts("main.txt"))
        self.assertTrue(PathMatcher().is_noop)
        self.assertFalse(matcher.is_noop)

    def test_search_any_finds_regex_in_name(self) -> None:
        self.assertTrue(search_any("x.tmp", [r"\.tmp$"]))
        self.assertFalse(search_any("x.tmp.txt", [r"\.tmp$"]))
        self.assertFalse(search_any("x.tmp", []))


if __name__ == "__main__":
    unittest.main()
