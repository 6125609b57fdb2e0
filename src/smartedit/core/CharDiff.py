# smartedit/core/CharDiff.py
"""Character-level comparison of a modified line pair.

The comparison is position-aligned, not an edit-distance alignment: index
``i`` of one line is compared with index ``i`` of the other. A single
inserted or deleted character therefore marks every following position as
different. This is enough for highlighting inside one line and is kept
deliberately simple.
"""

from smartedit.core.LineDiff import DiffKind, DiffLine


def diff_chars(line1: str, line2: str) -> set[int]:
    """Indices in ``line1`` whose character differs from the same index in ``line2``.

    Positions past the end of ``line2`` always differ. Positions past the end
    of ``line1`` are never reported, because they do not exist in ``line1``.
    """
    differences: set[int] = set()
    for i in range(max(len(line1), len(line2))):
        char1 = line1[i] if i < len(line1) else None
        char2 = line2[i] if i < len(line2) else None
        if char1 != char2 and i < len(line1):
            differences.add(i)
    return differences


def highlight_spans(line: str, other: str) -> list[tuple[int, int]]:
    """Collapses `diff_chars` into sorted, half-open ``(start, end)`` runs."""
    spans: list[tuple[int, int]] = []
    for index in sorted(diff_chars(line, other)):
        if spans and spans[-1][1] == index:
            spans[-1] = (spans[-1][0], index + 1)
        else:
            spans.append((index, index + 1))
    return spans


def line_spans(diff: DiffLine, left: bool = True) -> list[tuple[int, int]]:
    """Spans a renderer should highlight on one side of ``diff``.

    Added and removed lines are highlighted as a whole; only modified lines
    get character-level spans.
    """
    current, other = (diff.left_content, diff.right_content) if left else (diff.right_content, diff.left_content)
    if diff.kind is not DiffKind.MODIFIED:
        return [(0, len(current))] if current else []
    return highlight_spans(current, other)
