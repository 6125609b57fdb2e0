# smartedit/core/SearchTypes.py
"""SearchTypes Module for SmartEdit
=================================
Value types and shared helpers used by the search, count and replace engines.

Every type here is an immutable snapshot created for a single call. None of
them keeps a reference to the editor buffer.

Types:
------
- SearchQuery: pattern plus the case / whole-word / regex switches.
- MatchResult: start and length of one located match.
- MatchCount: total number of matches and the ordinal relative to a cursor.
- ReplaceResult: text after a single replacement and the new selection.
- Failure / FailureKind: explicit failure values returned instead of raising.

Helpers:
--------
- fold_case(): length-preserving ordinal case folding.
- is_whole_word(): the word-boundary rule shared by all engines.
- compile_query(): compiles a regex query or returns an INVALID_PATTERN failure.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Union


logger = logging.getLogger("smartedit")
TRACE_LOGGER = logging.getLogger("smartedit.trace")


class FailureKind(Enum):
    """Reasons a core operation can fail without raising."""

    EMPTY_QUERY = "empty_query"
    INVALID_PATTERN = "invalid_pattern"
    NO_MATCH = "no_match"
    NOT_FOUND = "not_found"


_DEFAULT_MESSAGES = {
    FailureKind.EMPTY_QUERY: "Enter text to search for",
    FailureKind.INVALID_PATTERN: "Invalid regular expression",
    FailureKind.NO_MATCH: "Selected text does not match the search",
    FailureKind.NOT_FOUND: "No match found",
}


@dataclass(frozen=True)
class Failure:
    """A distinguished failure value.

    Failures are falsy, so callers can write ``if not result:`` to branch on
    any failure, or compare ``result.kind`` for a specific one.
    """

    kind: FailureKind
    message: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", _DEFAULT_MESSAGES[self.kind])

    def __bool__(self) -> bool:
        return False


EMPTY_QUERY = Failure(FailureKind.EMPTY_QUERY)
NO_MATCH = Failure(FailureKind.NO_MATCH)
NOT_FOUND = Failure(FailureKind.NOT_FOUND)


@dataclass(frozen=True)
class SearchQuery:
    """What to search for and how.

    Attributes:
        pattern (str): Literal text or regular expression. Must be non-empty.
        case_sensitive (bool): Ordinal comparison when True, case-folded otherwise.
        whole_word (bool): Accept only matches not touching an alphanumeric
            character on either side. Applies to regex mode as well.
        use_regex (bool): Treat ``pattern`` as a Python regular expression.
    """

    pattern: str
    case_sensitive: bool = False
    whole_word: bool = False
    use_regex: bool = False

    @classmethod
    def from_config(cls, pattern: str, config: Optional[dict[str, Any]] = None, **overrides: Any) -> "SearchQuery":
        """Builds a query whose switches default to the ``[search]`` config section."""
        search_cfg = (config or {}).get("search", {})
        options = {
            "case_sensitive": bool(search_cfg.get("case_sensitive", False)),
            "whole_word": bool(search_cfg.get("whole_word", False)),
            "use_regex": bool(search_cfg.get("use_regex", False)),
        }
        options.update({k: bool(v) for k, v in overrides.items() if v is not None})
        return cls(pattern=pattern, **options)

    @property
    def is_empty(self) -> bool:
        return not self.pattern


@dataclass(frozen=True)
class MatchResult:
    """Location of one match inside the searched text; ``start`` is always below the text length."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def __bool__(self) -> bool:
        # A zero-length regex match is still a match.
        return True


@dataclass(frozen=True)
class MatchCount:
    """Total matches and the 1-based ordinal of the last match at or before a cursor."""

    total: int = 0
    current_ordinal: int = 0


@dataclass(frozen=True)
class ReplaceResult:
    """New text after a single replacement, with the selection over the inserted text."""

    text: str
    selection_start: int
    selection_length: int

    def __bool__(self) -> bool:
        return True


LocateOutcome = Union[MatchResult, Failure]
ReplaceOutcome = Union[ReplaceResult, Failure]


# ==================== Helpers ====================

def fold_case(value: str) -> str:
    """Upper-cases each character whose upper-case form is a single character.

    Characters like ``ß`` (which upper-case to two characters) are left as-is,
    so the folded string always has the same length as ``value`` and indices
    found in it are valid in the original.
    """
    return "".join(_fold_char(ch) for ch in value)


def _fold_char(ch: str) -> str:
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def is_word_char(ch: str) -> bool:
    return ch.isalnum()


def is_whole_word(text: str, start: int, length: int) -> bool:
    """True if ``text[start:start+length]`` is not glued to an alphanumeric neighbour."""
    if start > 0 and is_word_char(text[start - 1]):
        return False
    end = start + length
    if end < len(text) and is_word_char(text[end]):
        return False
    return True


def compile_query(query: SearchQuery) -> Union[re.Pattern, Failure]:
    """Compiles a regex-mode query.

    Returns:
        re.Pattern on success, or a Failure(INVALID_PATTERN) carrying the
        ``re.error`` text.
    """
    flags = 0 if query.case_sensitive else re.IGNORECASE
    try:
        return re.compile(query.pattern, flags)
    except re.error as e:
        logger.warning(f"Invalid regular expression {query.pattern!r}: {e}")
        return Failure(FailureKind.INVALID_PATTERN, f"Invalid regular expression: {e}")


def prepare_literal(text: str, query: SearchQuery) -> tuple[str, str]:
    """Returns (haystack, needle) for a literal scan.

    Both sides are case-folded once when the query is case-insensitive; the
    folding preserves length, so indices found in the haystack are valid in
    ``text``.
    """
    if query.case_sensitive:
        return text, query.pattern
    return fold_case(text), fold_case(query.pattern)


def iter_regex_matches(
    regex: re.Pattern, text: str, whole_word: bool, endpos: Optional[int] = None
) -> Iterator[re.Match]:
    """Yields non-overlapping regex matches inside ``text[:endpos]``, left to right.

    With ``whole_word`` a rejected candidate moves the scan one position past
    its start, so a later (possibly overlapping) candidate can still qualify.
    Neighbours for the boundary rule are read from the full ``text``.
    """
    if endpos is None:
        endpos = len(text)
    if not whole_word:
        yield from regex.finditer(text, 0, endpos)
        return

    pos = 0
    while pos <= endpos:
        match = regex.search(text, pos, endpos)
        if match is None:
            return
        if is_whole_word(text, match.start(), match.end() - match.start()):
            yield match
            # Same empty-match stepping as re.finditer
            pos = match.end() if match.end() > match.start() else match.end() + 1
        else:
            pos = match.start() + 1


def iter_literal_matches(text: str, query: SearchQuery) -> Iterator[int]:
    """Yields start indices of every literal match, left to right.

    Every position is tried, so overlapping occurrences are all reported
    ("aa" occurs three times in "aaaa").
    """
    haystack, needle = prepare_literal(text, query)
    length = len(needle)
    index = haystack.find(needle)
    while index != -1:
        if not query.whole_word or is_whole_word(text, index, length):
            yield index
        index = haystack.find(needle, index + 1)


def literal_equals(left: str, right: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return left == right
    return len(left) == len(right) and fold_case(left) == fold_case(right)


def trace(operation: str, **details: Any) -> None:
    """Records one core call on the ``smartedit.trace`` logger (disabled unless SMARTEDIT_TRACE is set)."""
    if TRACE_LOGGER.isEnabledFor(logging.DEBUG):
        TRACE_LOGGER.debug("%s %s", operation, " ".join(f"{k}={v!r}" for k, v in details.items()))
