# smartedit/core/ReplaceEngine.py
"""ReplaceEngine Module for SmartEdit
===================================
Single and bulk replacement over a text snapshot.

Neither function touches the live buffer: both return the new text and leave
it to the caller to apply it (and to record undo history, if any).

Functions:
----------
- replace_one(): replaces the caller's current selection after checking that
  it still satisfies the query. In regex mode the replacement template is
  expanded against the selection only, so back-references such as ``\\1`` or
  ``\\g<name>`` refer to groups captured inside the selection.
- replace_all(): replaces every accepted match and reports an exact count.
"""

import logging
import re
from typing import Iterable, Union

from smartedit.core.SearchTypes import (
    EMPTY_QUERY,
    Failure,
    FailureKind,
    ReplaceOutcome,
    ReplaceResult,
    SearchQuery,
    compile_query,
    is_whole_word,
    is_word_char,
    iter_regex_matches,
    literal_equals,
    prepare_literal,
    trace,
)


logger = logging.getLogger("smartedit")


def replace_one(
    text: str,
    selection_start: int,
    selection_length: int,
    query: SearchQuery,
    replacement: str,
) -> ReplaceOutcome:
    """Replaces the selected range if it matches ``query``.

    Validation rules:
        - Regex mode: the selection must contain a match.
        - Literal + whole word: the selection must equal the pattern.
        - Literal: the selection must contain the pattern.

    Returns:
        ReplaceResult with the new text and a selection spanning the inserted
        text, or a Failure (EMPTY_QUERY, INVALID_PATTERN, NO_MATCH).
    """
    trace("replace_one", pattern=query.pattern, start=selection_start, length=selection_length)
    if query.is_empty:
        return EMPTY_QUERY
    if selection_length <= 0:
        return Failure(FailureKind.NO_MATCH, "Find a match before replacing")
    if selection_start < 0 or selection_start + selection_length > len(text):
        logger.warning(
            f"replace_one: selection ({selection_start}, {selection_length}) outside text of length {len(text)}"
        )
        return Failure(FailureKind.NO_MATCH)

    selected = text[selection_start:selection_start + selection_length]

    if query.use_regex:
        regex = compile_query(query)
        if isinstance(regex, Failure):
            return regex
        matches = [
            m for m in regex.finditer(selected)
            if not query.whole_word
            or is_whole_word(text, selection_start + m.start(), m.end() - m.start())
        ]
        if not matches:
            return Failure(FailureKind.NO_MATCH)
        inserted = _substitute(selected, matches, replacement)
        if isinstance(inserted, Failure):
            return inserted
    else:
        haystack, needle = prepare_literal(selected, query)
        if query.whole_word:
            is_match = literal_equals(selected, query.pattern, query.case_sensitive)
        else:
            is_match = needle in haystack
        if not is_match:
            return Failure(FailureKind.NO_MATCH)
        inserted = replacement

    new_text = text[:selection_start] + inserted + text[selection_start + selection_length:]
    logger.debug(f"replace_one: replaced {selected!r} at {selection_start} with {inserted!r}")
    return ReplaceResult(new_text, selection_start, len(inserted))


def replace_all(text: str, query: SearchQuery, replacement: str) -> Union[tuple[str, int], Failure]:
    """Replaces every accepted match of ``query`` in ``text``.

    Returns:
        (new_text, count) where ``count`` is the exact number of replacements,
        or a Failure (EMPTY_QUERY, INVALID_PATTERN). On a failure nothing is
        replaced.
    """
    trace("replace_all", pattern=query.pattern, replacement=replacement)
    if query.is_empty:
        return EMPTY_QUERY

    if query.use_regex:
        regex = compile_query(query)
        if isinstance(regex, Failure):
            return regex
        matches = list(iter_regex_matches(regex, text, query.whole_word))
        if not matches:
            return text, 0
        new_text = _substitute(text, matches, replacement)
        if isinstance(new_text, Failure):
            return new_text
        replaced = len(matches)
    else:
        new_text, replaced = _replace_literal(text, query, replacement)

    logger.info(f"replace_all: {replaced} replacement(s) of {query.pattern!r}")
    return new_text, replaced


def _substitute(source: str, matches: Iterable[re.Match], template: str) -> Union[str, Failure]:
    """Expands ``template`` for each match and splices the results into ``source``."""
    pieces: list[str] = []
    last = 0
    try:
        for match in matches:
            pieces.append(source[last:match.start()])
            pieces.append(match.expand(template))
            last = match.end()
    except (re.error, IndexError) as e:
        logger.warning(f"Invalid replacement template {template!r}: {e}")
        return Failure(FailureKind.INVALID_PATTERN, f"Invalid replacement: {e}")
    pieces.append(source[last:])
    return "".join(pieces)


def _replace_literal(text: str, query: SearchQuery, replacement: str) -> tuple[str, int]:
    """Left-to-right literal replacement.

    In whole-word mode the left neighbour of a candidate is taken from the
    text as rewritten so far, so a candidate directly after an inserted
    replacement is judged against the replacement's last character.
    """
    haystack, needle = prepare_literal(text, query)
    step = len(needle)
    pieces: list[str] = []
    tail = ""  # last character of the output built so far
    last = 0
    replaced = 0

    index = haystack.find(needle)
    while index != -1:
        if query.whole_word:
            left = text[index - 1] if index > last else tail
            right_pos = index + step
            accepted = not (left and is_word_char(left)) and not (
                right_pos < len(text) and is_word_char(text[right_pos])
            )
            if not accepted:
                index = haystack.find(needle, index + 1)
                continue

        segment = text[last:index] + replacement
        pieces.append(segment)
        if segment:
            tail = segment[-1]
        last = index + step
        replaced += 1
        index = haystack.find(needle, last)

    if not replaced:
        return text, 0
    pieces.append(text[last:])
    return "".join(pieces), replaced
