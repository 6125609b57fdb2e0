# smartedit/core/MatchLocator.py
"""MatchLocator Module for SmartEdit
==================================
Finds the next or previous occurrence of a query inside a text snapshot.

The scan is bounded: `locate` never wraps around on its own. When it reaches
the end (or the beginning) of the text without a match it returns the
``NOT_FOUND`` failure, and the caller decides whether to retry from the
opposite boundary (see `FindController`).

Matching rules:
---------------
- Literal mode compares ordinally, optionally case-folded.
- Regex mode compiles the pattern with ``re``; ``re.IGNORECASE`` is used when
  the query is not case sensitive. A malformed pattern yields INVALID_PATTERN.
- Whole-word mode accepts a candidate only if neither neighbour is
  alphanumeric. A rejected candidate resumes the scan one position further in
  the search direction. The rule applies in regex mode too.
- A forward search returns the first match starting at or after
  ``from_index``. A backward search returns the last match lying entirely
  within ``text[:from_index + 1]``.
"""

import logging
import re

from smartedit.core.SearchTypes import (
    EMPTY_QUERY,
    NOT_FOUND,
    Failure,
    LocateOutcome,
    MatchResult,
    SearchQuery,
    compile_query,
    is_whole_word,
    iter_regex_matches,
    prepare_literal,
    trace,
)


logger = logging.getLogger("smartedit")


def locate(text: str, query: SearchQuery, from_index: int, forward: bool = True) -> LocateOutcome:
    """Locates one occurrence of ``query`` relative to ``from_index``.

    Args:
        text (str): Snapshot of the buffer content.
        query (SearchQuery): What to look for.
        from_index (int): Forward: first index a match may start at.
            Backward: last index a match may cover.
        forward (bool): Search direction.

    Returns:
        MatchResult on success; Failure with kind EMPTY_QUERY, INVALID_PATTERN
        or NOT_FOUND otherwise.
    """
    trace("locate", pattern=query.pattern, from_index=from_index, forward=forward)
    if query.is_empty:
        return EMPTY_QUERY

    if forward:
        if from_index >= len(text):
            return NOT_FOUND
        from_index = max(from_index, 0)
    else:
        if from_index < 0 or not text:
            return NOT_FOUND
        from_index = min(from_index, len(text) - 1)

    if query.use_regex:
        regex = compile_query(query)
        if isinstance(regex, Failure):
            return regex
        result = _locate_regex(text, regex, query.whole_word, from_index, forward)
    else:
        result = _locate_literal(text, query, from_index, forward)

    if result is None:
        logger.debug(f"locate: no match for {query.pattern!r} from {from_index} (forward={forward})")
        return NOT_FOUND
    return result


def _locate_literal(text: str, query: SearchQuery, from_index: int, forward: bool):
    haystack, needle = prepare_literal(text, query)
    length = len(needle)

    if forward:
        index = haystack.find(needle, from_index)
        while index != -1:
            if not query.whole_word or is_whole_word(text, index, length):
                return MatchResult(index, length)
            index = haystack.find(needle, index + 1)
        return None

    # The candidate must end at or before from_index.
    index = haystack.rfind(needle, 0, from_index + 1)
    while index != -1:
        if not query.whole_word or is_whole_word(text, index, length):
            return MatchResult(index, length)
        if index == 0:
            break
        # Same as searching backward again from index - 1: the next
        # candidate must end before the rejected one starts.
        index = haystack.rfind(needle, 0, index)
    return None


def _locate_regex(text: str, regex: re.Pattern, whole_word: bool, from_index: int, forward: bool):
    # Matches start inside the text; an empty match at len(text) is not reported.
    if forward:
        pos = from_index
        while pos < len(text):
            match = regex.search(text, pos)
            if match is None or match.start() >= len(text):
                return None
            if not whole_word or is_whole_word(text, match.start(), match.end() - match.start()):
                return MatchResult(match.start(), match.end() - match.start())
            pos = match.start() + 1
        return None

    last = None
    for match in iter_regex_matches(regex, text, whole_word, endpos=from_index + 1):
        if match.start() < len(text):
            last = match
    if last is None:
        return None
    return MatchResult(last.start(), last.end() - last.start())
