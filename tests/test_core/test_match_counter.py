# tests/test_core/test_match_counter.py
"""MatchCounter Tests
=====================

Unit tests for `smartedit.core.MatchCounter.count`.

Verifies that:
- ``total`` does not depend on the cursor position.
- ``current_ordinal`` counts matches starting at or before the cursor and
  never decreases as the cursor moves right.
- Overlapping literal occurrences are each counted.
- Whole-word and regex rules match those of `locate`.
- Empty and malformed patterns count as zero instead of failing.
"""

from smartedit.core.MatchCounter import count
from smartedit.core.SearchTypes import MatchCount


def test_ordinal_relative_to_cursor(literal) -> None:
    q = literal("abc")
    assert count("abcabc", q, -1) == MatchCount(2, 0)
    assert count("abcabc", q, 0) == MatchCount(2, 1)
    assert count("abcabc", q, 2) == MatchCount(2, 1)
    assert count("abcabc", q, 3) == MatchCount(2, 2)


def test_total_invariant_and_ordinal_monotonic(literal) -> None:
    text = "one fish two fish red fish blue fish"
    q = literal("fish")
    results = [count(text, q, cursor) for cursor in range(-1, len(text) + 2)]

    assert {r.total for r in results} == {4}
    ordinals = [r.current_ordinal for r in results]
    assert ordinals == sorted(ordinals)
    assert ordinals[0] == 0
    assert ordinals[-1] == 4


def test_overlapping_literal_matches_are_counted(literal) -> None:
    assert count("aaaa", literal("aa"), 10) == MatchCount(3, 3)
    assert count("aaaa", literal("aa"), 1) == MatchCount(3, 2)


def test_overlapping_whole_word_matches_are_counted(literal) -> None:
    """Both "a a" occurrences in "a a a" stand alone, though they share a letter."""
    assert count("a a a", literal("a a", whole_word=True), 10).total == 2


def test_whole_word_count(literal) -> None:
    """Only the standalone words are counted; 'concat' is skipped."""
    assert count("cat concat cat", literal("cat", whole_word=True), 20) == MatchCount(2, 2)
    assert count("cat concat cat", literal("cat"), 20) == MatchCount(3, 3)


def test_case_rules(literal) -> None:
    assert count("Cat cat CAT", literal("cat"), 0).total == 3
    assert count("Cat cat CAT", literal("cat", case_sensitive=True), 0).total == 1


def test_regex_count(regex) -> None:
    assert count("a1 b22 c333", regex(r"\d+"), 4) == MatchCount(3, 2)


def test_regex_whole_word_count(regex) -> None:
    assert count("cat concat cat", regex("cat", whole_word=True), 100).total == 2


def test_empty_and_invalid_patterns_count_zero(literal, regex) -> None:
    assert count("abc", literal(""), 0) == MatchCount(0, 0)
    assert count("abc", regex("[unclosed"), 0) == MatchCount(0, 0)
    assert count("", literal("a"), 0) == MatchCount(0, 0)
