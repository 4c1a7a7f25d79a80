"""Tests for search-pattern compilation and the search filter."""

from __future__ import annotations

import unittest

from lazyh5.errors import LazyH5Error, PatternError
from lazyh5.search import SearchFilter, SearchMatcher, compile_pattern


class SearchMatcherTests(unittest.TestCase):
    def test_regex_search_semantics(self) -> None:
        matcher = compile_pattern("det.*r")
        self.assertTrue(matcher.matches("detector"))
        self.assertTrue(matcher("my_detector_1"))
        self.assertFalse(matcher.matches("sample"))

    def test_empty_pattern_matches_nothing(self) -> None:
        matcher = compile_pattern("")
        self.assertFalse(matcher.matches(""))
        self.assertFalse(matcher.matches("anything"))
        self.assertIsNone(matcher.span("anything"))

    def test_case_sensitivity(self) -> None:
        self.assertFalse(compile_pattern("DATA").matches("data"))
        self.assertTrue(compile_pattern("DATA", ignore_case=True).matches("data"))

    def test_invalid_pattern_raises_pattern_error(self) -> None:
        with self.assertRaises(PatternError) as ctx:
            SearchMatcher("data[")
        self.assertEqual(ctx.exception.pattern, "data[")
        self.assertIsInstance(ctx.exception, LazyH5Error)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_span_skips_empty_matches(self) -> None:
        self.assertEqual(compile_pattern("tor").span("detector"), (5, 8))
        self.assertIsNone(compile_pattern("x*").span("abc"))


class SearchFilterTests(unittest.TestCase):
    def test_set_and_clear(self) -> None:
        search = SearchFilter()
        self.assertFalse(search.active)
        search.set_search("B")
        self.assertTrue(search.active)
        self.assertEqual(search.pattern, "B")
        search.set_search(None)
        self.assertFalse(search.active)
        self.assertIsNone(search.pattern)

    def test_rejected_pattern_keeps_previous_state(self) -> None:
        search = SearchFilter()
        search.set_search("ent")
        previous = search.matcher
        with self.assertRaises(PatternError):
            search.set_search("ent(")
        self.assertIs(search.matcher, previous)
        self.assertEqual(search.pattern, "ent")

    def test_rejected_pattern_keeps_search_inactive(self) -> None:
        search = SearchFilter()
        with self.assertRaises(PatternError):
            search.set_search("*")
        self.assertFalse(search.active)

    def test_ignore_case_applies_to_compiled_patterns(self) -> None:
        search = SearchFilter(ignore_case=True)
        search.set_search("ENTRY")
        self.assertTrue(search.matcher.matches("entry"))


if __name__ == "__main__":
    unittest.main()
