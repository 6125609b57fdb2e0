# smartedit/core/LineDiff.py
"""LineDiff Module for SmartEdit
==============================
Line-aligned comparison of two text snapshots.

The comparison is positional: line ``i`` of the left text is compared with
line ``i`` of the right text. It is not a longest-common-subsequence diff, so
an inserted line shows up as a run of modified lines after it. Equal lines
produce no entry but still count for line numbering.

Classification of a differing pair:
    - ADDED: the left line is empty (or missing).
    - REMOVED: the right line is empty (or missing).
    - MODIFIED: both lines have content.

Functions:
----------
- normalize_newlines(): maps ``\\r\\n``, ``\\r`` and ``\\n`` to ``\\n``.
- split_lines(): normalizes and splits; an empty text is a single empty line.
- diff_lines(): the list of `DiffLine` entries for differing lines.
- compare_texts(): `CompareReport` with line counts and per-kind totals.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from smartedit.core.SearchTypes import trace


logger = logging.getLogger("smartedit")


class DiffKind(Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"

    @property
    def marker(self) -> str:
        """One-character prefix used when printing a difference."""
        return {"added": "+", "removed": "-", "modified": "~"}[self.value]


@dataclass(frozen=True)
class DiffLine:
    """One differing line pair. ``line_number`` is 1-based."""

    line_number: int
    left_content: str
    right_content: str
    kind: DiffKind


def normalize_newlines(text: Optional[str]) -> str:
    if not text:
        return ""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: Optional[str]) -> list[str]:
    return normalize_newlines(text).split("\n")


def classify(left_line: str, right_line: str) -> DiffKind:
    if not left_line:
        return DiffKind.ADDED
    if not right_line:
        return DiffKind.REMOVED
    return DiffKind.MODIFIED


def diff_lines(left_text: Optional[str], right_text: Optional[str]) -> list[DiffLine]:
    """Compares two texts line by line.

    Args:
        left_text: Original text. ``None`` counts as empty.
        right_text: Changed text. ``None`` counts as empty.

    Returns:
        list[DiffLine]: Differing lines in ascending line order. Empty when
        the texts are equal after newline normalization.
    """
    left_lines = split_lines(left_text)
    right_lines = split_lines(right_text)
    trace("diff_lines", left_lines=len(left_lines), right_lines=len(right_lines))

    differences: list[DiffLine] = []
    for i in range(max(len(left_lines), len(right_lines))):
        left_line = left_lines[i] if i < len(left_lines) else ""
        right_line = right_lines[i] if i < len(right_lines) else ""
        if left_line == right_line:
            continue
        differences.append(DiffLine(i + 1, left_line, right_line, classify(left_line, right_line)))

    logger.debug(f"diff_lines: {len(differences)} difference(s)")
    return differences


@dataclass(frozen=True)
class CompareReport:
    """Result of comparing two texts, ready for a status bar or a renderer."""

    differences: list[DiffLine] = field(default_factory=list)
    left_line_count: int = 0
    right_line_count: int = 0

    def _count(self, kind: DiffKind) -> int:
        return sum(1 for d in self.differences if d.kind is kind)

    @property
    def added(self) -> int:
        return self._count(DiffKind.ADDED)

    @property
    def removed(self) -> int:
        return self._count(DiffKind.REMOVED)

    @property
    def modified(self) -> int:
        return self._count(DiffKind.MODIFIED)

    @property
    def identical(self) -> bool:
        return not self.differences

    def for_line(self, line_number: int) -> Optional[DiffLine]:
        for diff in self.differences:
            if diff.line_number == line_number:
                return diff
        return None

    def summary(self) -> str:
        if self.identical:
            return f"Texts are identical (left {self.left_line_count} | right {self.right_line_count} lines)"
        return (
            f"Comparison finished: {len(self.differences)} difference(s) "
            f"({self.added} added, {self.removed} removed, {self.modified} modified); "
            f"lines: left {self.left_line_count} | right {self.right_line_count}"
        )


def compare_texts(left_text: Optional[str], right_text: Optional[str]) -> CompareReport:
    """Runs `diff_lines` and bundles the result with both line counts."""
    return CompareReport(
        differences=diff_lines(left_text, right_text),
        left_line_count=len(split_lines(left_text)),
        right_line_count=len(split_lines(right_text)),
    )
