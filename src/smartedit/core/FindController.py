# smartedit/core/FindController.py
"""FindController Module for SmartEdit
====================================
This module provides the `FindController` class, the stateful side of the
find/replace feature. The search, count and replace engines are pure
functions; the controller is the caller that owns the policy around them:
where a search starts from, whether it wraps around, which text ends up
selected, and what the status bar says afterwards.

Key Features:
-------------
- Find next / previous relative to the buffer's current selection.
- Wraparound: when a bounded search reports NOT_FOUND the controller retries
  once from the opposite boundary of the text (configurable).
- "match N/M" status text computed with `count`.
- Replace of the current selection followed by an automatic find-next.
- Replace-all with an exact replacement count.

Intended Usage:
---------------
The controller works against any buffer object that exposes ``text``,
``selection_start``, ``selection_length``, ``select(start, length)`` and
``set_text(text)``. The editing surface stays the single owner of the text;
the controller only reads snapshots and writes back whole results.
"""

import logging
from typing import Any, Optional, Protocol

from smartedit.core.MatchCounter import count
from smartedit.core.MatchLocator import locate
from smartedit.core.ReplaceEngine import replace_all, replace_one
from smartedit.core.SearchTypes import (
    Failure,
    FailureKind,
    MatchCount,
    MatchResult,
    SearchQuery,
)


class EditorBuffer(Protocol):
    """The subset of an editing surface the controller needs."""

    text: str
    selection_start: int
    selection_length: int

    def select(self, start: int, length: int) -> None: ...

    def set_text(self, text: str) -> None: ...


class TextBuffer:
    """Plain in-memory `EditorBuffer`, for the command line and for tests."""

    def __init__(self, text: str = "", selection_start: int = 0, selection_length: int = 0):
        self.text = text
        self.selection_start = 0
        self.selection_length = 0
        self.select(selection_start, selection_length)

    def select(self, start: int, length: int) -> None:
        start = min(max(start, 0), len(self.text))
        self.selection_start = start
        self.selection_length = min(max(length, 0), len(self.text) - start)

    def set_text(self, text: str) -> None:
        self.text = text
        self.select(self.selection_start, self.selection_length)

    @property
    def selected_text(self) -> str:
        return self.text[self.selection_start:self.selection_start + self.selection_length]


## ==================== FindController Class ====================
class FindController:
    """Class FindController
    ========================
    Drives find / replace against one editor buffer.

    Attributes:
        buffer (EditorBuffer): The buffer being searched.
        pattern (str): Current search text.
        case_sensitive (bool), whole_word (bool), use_regex (bool): Query switches.
        wrap_around (bool): Retry from the opposite boundary when a search runs off the end.
        status_message (str): Last user-facing status text.
        status_ok (bool): Whether the last operation succeeded.
        last_count (MatchCount): Result of the last match count.
        last_failure (Failure | None): Why the last operation failed, if it did.

    Methods:
        query() -> SearchQuery:
            Builds the query from the current switches.
        find(forward: bool = True) -> bool:
            Selects the next (or previous) match. Returns True if one was found.
        replace(replacement: str) -> bool:
            Replaces the current selection if it matches, then finds the next match.
        replace_all(replacement: str) -> int:
            Replaces every match in the buffer; returns the number replaced.
    """

    def __init__(self, buffer: EditorBuffer, config: Optional[dict[str, Any]] = None):
        """Initializes the controller for ``buffer``.

        The switches default to the ``[search]`` config section, and the
        pattern is seeded from the buffer's current selection, if any.
        """
        self.buffer = buffer
        search_cfg = (config or {}).get("search", {})
        self.case_sensitive: bool = bool(search_cfg.get("case_sensitive", False))
        self.whole_word: bool = bool(search_cfg.get("whole_word", False))
        self.use_regex: bool = bool(search_cfg.get("use_regex", False))
        self.wrap_around: bool = bool(search_cfg.get("wrap_around", True))

        self.pattern: str = self._selected_text()
        self.status_message: str = ""
        self.status_ok: bool = True
        self.last_count: MatchCount = MatchCount()
        self.last_failure: Optional[Failure] = None

    def query(self) -> SearchQuery:
        return SearchQuery(
            pattern=self.pattern,
            case_sensitive=self.case_sensitive,
            whole_word=self.whole_word,
            use_regex=self.use_regex,
        )

    # --- Find ---
    def find(self, forward: bool = True) -> bool:
        """Selects the next match after the selection (or the previous one before it)."""
        query = self.query()
        if query.is_empty:
            return self._fail(Failure(FailureKind.EMPTY_QUERY))

        text = self.buffer.text
        if forward:
            start = self.buffer.selection_start + self.buffer.selection_length
        else:
            start = self.buffer.selection_start - 1
        if start < 0:
            start = len(text) - 1
        if start >= len(text):
            start = 0

        result = locate(text, query, start, forward)
        wrapped = False
        if isinstance(result, Failure) and result.kind is FailureKind.NOT_FOUND and self.wrap_around:
            logging.debug(f"FindController: reached {'end' if forward else 'start'} of text, wrapping")
            result = locate(text, query, 0 if forward else len(text) - 1, forward)
            wrapped = True

        if isinstance(result, Failure):
            if result.kind is FailureKind.NOT_FOUND:
                if self.wrap_around:
                    return self._fail(Failure(FailureKind.NOT_FOUND, f"'{self.pattern}' not found"))
                edge = "end" if forward else "start"
                return self._fail(Failure(FailureKind.NOT_FOUND, f"Reached the {edge} of the document"))
            return self._fail(result)

        self._select(result)
        self.last_count = count(text, query, result.start)
        prefix = f"Continued from the {'start' if forward else 'end'}" if wrapped else "Found match"
        self._set_status(f"{prefix} ({self.last_count.current_ordinal}/{self.last_count.total})", True)
        return True

    # --- Replace ---
    def replace(self, replacement: str) -> bool:
        """Replaces the current selection if it still matches, then moves to the next match."""
        result = replace_one(
            self.buffer.text,
            self.buffer.selection_start,
            self.buffer.selection_length,
            self.query(),
            replacement or "",
        )
        if isinstance(result, Failure):
            return self._fail(result)

        self.buffer.set_text(result.text)
        self.buffer.select(result.selection_start, result.selection_length)
        logging.debug(f"FindController: replaced selection, now at {result.selection_start}")
        self.find(forward=True)
        # find() overwrote the status; keep the replace outcome visible.
        self._set_status(f"Replaced current match. {self.status_message}".strip(), True)
        return True

    def replace_all(self, replacement: str) -> int:
        """Replaces every match in the buffer. Returns the number of replacements."""
        outcome = replace_all(self.buffer.text, self.query(), replacement or "")
        if isinstance(outcome, Failure):
            self._fail(outcome)
            return 0

        new_text, replaced = outcome
        if replaced:
            self.buffer.set_text(new_text)
            self.buffer.select(0, 0)
        self.last_count = MatchCount()
        self._set_status(f"Replaced {replaced} occurrence(s)", replaced > 0)
        return replaced

    # --- Helpers ---
    def _selected_text(self) -> str:
        start = getattr(self.buffer, "selection_start", 0)
        length = getattr(self.buffer, "selection_length", 0)
        if length <= 0:
            return ""
        return self.buffer.text[start:start + length]

    def _select(self, match: MatchResult) -> None:
        self.buffer.select(match.start, match.length)

    def _set_status(self, message: str, ok: bool) -> None:
        self.status_message = message
        self.status_ok = ok
        if ok:
            self.last_failure = None

    def _fail(self, failure: Failure) -> bool:
        self._set_status(failure.message, False)
        self.last_failure = failure
        logging.debug(f"FindController: {failure.kind.value}: {failure.message}")
        return False
