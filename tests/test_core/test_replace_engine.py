# tests/test_core/test_replace_engine.py
"""ReplaceEngine Tests
======================

Unit tests for `replace_one` and `replace_all`.

This suite checks:

1. **Single replacement**
   - Mode-specific validation of the selection (contains / equals / regex).
   - Regex back-references expanded against the selection only.
   - The returned selection spans the inserted text.

2. **Bulk replacement**
   - Exact replacement counts, including replacements that do not change the
     text length.
   - Whole-word boundaries judged against the text as rewritten so far.

3. **Failures**
   - EMPTY_QUERY, INVALID_PATTERN and NO_MATCH are returned, never raised.
"""

from smartedit.core.ReplaceEngine import replace_all, replace_one
from smartedit.core.SearchTypes import FailureKind, ReplaceResult


# --- replace_one ---

def test_replace_one_literal(literal) -> None:
    result = replace_one("hello world", 6, 5, literal("world"), "there")
    assert result == ReplaceResult("hello there", 6, 5)


def test_replace_one_literal_selection_only_needs_to_contain_pattern(literal) -> None:
    """Without whole-word, the whole selection is replaced if it contains the pattern."""
    result = replace_one("hello world", 0, 11, literal("lo w"), "X")
    assert result == ReplaceResult("X", 0, 1)


def test_replace_one_whole_word_requires_exact_selection(literal) -> None:
    result = replace_one("hello world", 0, 11, literal("world", whole_word=True), "X")
    assert result.kind is FailureKind.NO_MATCH


def test_replace_one_whole_word_ignores_case(literal) -> None:
    result = replace_one("Hello there", 0, 5, literal("hello", whole_word=True), "Bye")
    assert result == ReplaceResult("Bye there", 0, 3)


def test_replace_one_case_sensitive_mismatch(literal) -> None:
    result = replace_one("Hello there", 0, 5, literal("hello", case_sensitive=True), "Bye")
    assert result.kind is FailureKind.NO_MATCH


def test_replace_one_regex_back_references(regex) -> None:
    """Groups come from the selection, and the new selection covers the expansion."""
    text = "name: John Smith"
    result = replace_one(text, 6, 10, regex(r"(\w+) (\w+)"), r"\2, \1")
    assert result == ReplaceResult("name: Smith, John", 6, 11)


def test_replace_one_regex_must_match_selection(regex) -> None:
    result = replace_one("abc 123", 0, 3, regex(r"\d+"), "N")
    assert result.kind is FailureKind.NO_MATCH


def test_replace_one_bad_template(regex) -> None:
    result = replace_one("abc", 0, 3, regex(r"(\w+)"), r"\2")
    assert result.kind is FailureKind.INVALID_PATTERN


def test_replace_one_requires_selection(literal) -> None:
    assert replace_one("abc", 0, 0, literal("a"), "x").kind is FailureKind.NO_MATCH
    assert replace_one("abc", 2, 5, literal("c"), "x").kind is FailureKind.NO_MATCH


def test_replace_one_empty_query(literal) -> None:
    assert replace_one("abc", 0, 1, literal(""), "x").kind is FailureKind.EMPTY_QUERY


# --- replace_all ---

def test_replace_all_literal(literal) -> None:
    assert replace_all("a.b.c", literal("."), "-") == ("a-b-c", 2)


def test_replace_all_counts_same_length_replacements(literal) -> None:
    """A replacement with no net length change is still counted exactly."""
    assert replace_all("cat cat cat", literal("cat"), "dog") == ("dog dog dog", 3)


def test_replace_all_non_overlapping(literal) -> None:
    assert replace_all("aaaa", literal("aa"), "b") == ("bb", 2)


def test_replace_all_does_not_rescan_inserted_text(literal) -> None:
    assert replace_all("aaa", literal("a"), "aa") == ("aaaaaa", 3)


def test_replace_all_case_insensitive(literal) -> None:
    assert replace_all("Cat cAT cat", literal("cat"), "dog") == ("dog dog dog", 3)


def test_replace_all_no_match_returns_text_unchanged(literal) -> None:
    assert replace_all("abc", literal("z"), "y") == ("abc", 0)


def test_replace_all_whole_word(literal) -> None:
    result = replace_all("cat concatenate cat", literal("cat", whole_word=True), "dog")
    assert result == ("dog concatenate dog", 2)


def test_replace_all_whole_word_uses_rewritten_left_neighbour(literal) -> None:
    """After '-a' becomes '-', the next '-a' is preceded by '-' rather than 'a'."""
    assert replace_all("-a-a", literal("-a", whole_word=True), "-") == ("--", 2)


def test_replace_all_regex(regex) -> None:
    result = replace_all("2024-01-05 and 1999-12-31", regex(r"(\d+)-(\d+)-(\d+)"), r"\3/\2/\1")
    assert result == ("05/01/2024 and 31/12/1999", 2)


def test_replace_all_regex_whole_word(regex) -> None:
    assert replace_all("cat concat cat", regex("cat", whole_word=True), "dog") == ("dog concat dog", 2)


def test_replace_all_failures(literal, regex) -> None:
    assert replace_all("abc", literal(""), "x").kind is FailureKind.EMPTY_QUERY
    assert replace_all("abc", regex("a("), "x").kind is FailureKind.INVALID_PATTERN
