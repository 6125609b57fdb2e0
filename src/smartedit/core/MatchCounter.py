# smartedit/core/MatchCounter.py
"""Counts matches of a query and the ordinal of the match at or before a cursor.

Used for "match 3/17" style status text. Counting never fails: an empty or
malformed pattern simply counts as zero matches.
"""

import logging

from smartedit.core.SearchTypes import (
    Failure,
    MatchCount,
    SearchQuery,
    compile_query,
    iter_literal_matches,
    iter_regex_matches,
    trace,
)


logger = logging.getLogger("smartedit")


def count(text: str, query: SearchQuery, reference_index: int) -> MatchCount:
    """Counts accepted matches of ``query`` in ``text``.

    Args:
        text (str): Snapshot of the buffer content.
        query (SearchQuery): Same rules as `locate`.
        reference_index (int): Cursor position; every match starting at or
            before it advances ``current_ordinal``.

    Returns:
        MatchCount: ``total`` does not depend on ``reference_index``;
        ``current_ordinal`` is 0 when no match starts at or before it.
    """
    trace("count", pattern=query.pattern, reference_index=reference_index)
    if query.is_empty or not text:
        return MatchCount(0, 0)

    if query.use_regex:
        regex = compile_query(query)
        if isinstance(regex, Failure):
            logger.debug(f"count: treating invalid pattern {query.pattern!r} as zero matches")
            return MatchCount(0, 0)
        starts = (m.start() for m in iter_regex_matches(regex, text, query.whole_word))
    else:
        starts = iter_literal_matches(text, query)

    total = 0
    current = 0
    for start in starts:
        total += 1
        if start <= reference_index:
            current = total
    return MatchCount(total, current)
