# smartedit/ui/ConsoleOutput.py
"""Terminal rendering of search results and comparison reports.

The engines only return positions; this module turns them into text for a
terminal. Diff output uses a unified-diff-like layout so it can be colorized
with the Pygments ``DiffLexer``:

    @@ line 3 (modified) @@
    -the quick brown fox
     ^^^^
    +a   quick brown fox

Marker lines are padded with terminal display widths (wcwidth), so markers
stay under the right glyph when a line holds wide CJK characters.
"""

import logging
from typing import IO, Optional

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import DiffLexer

from smartedit.core.CharDiff import diff_chars
from smartedit.core.LineDiff import CompareReport, DiffKind, DiffLine, split_lines
from smartedit.core.SearchTypes import MatchCount, MatchResult
from smartedit.utils.utils import get_char_width, get_string_width


logger = logging.getLogger("smartedit")


def should_use_color(mode: str, stream: Optional[IO] = None) -> bool:
    """Resolves a ``color`` setting (auto / always / never) for ``stream``."""
    mode = (mode or "auto").lower()
    if mode == "always":
        return True
    if mode == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize_diff(text: str) -> str:
    """Colors diff-formatted ``text`` with Pygments for an ANSI terminal."""
    try:
        return highlight(text, DiffLexer(), TerminalFormatter())
    except Exception as e:
        logger.warning(f"Diff colorizing failed, printing plain text: {e}")
        return text


def marker_line(line: str, positions: set[int], marker: str = "^") -> str:
    """A line with ``marker`` under each index in ``positions``, padded by display width."""
    cells: list[str] = []
    for i, ch in enumerate(line):
        width = max(get_char_width(ch), 1)
        cells.append((marker if i in positions else " ") * width)
    return "".join(cells).rstrip()


def locate_line(text: str, index: int) -> tuple[int, int, str]:
    """Maps a character offset to (1-based line, 1-based column, line content)."""
    lines = split_lines(text[:index])
    line_number = len(lines)
    column = len(lines[-1]) + 1
    full_line = split_lines(text)[line_number - 1]
    return line_number, column, full_line


def format_match(text: str, match: MatchResult, label: str = "", marker: str = "^") -> str:
    """``label:line:col: content`` followed by a marker line under the match."""
    line_number, column, content = locate_line(text, match.start)
    prefix = f"{label}:{line_number}:{column}: " if label else f"{line_number}:{column}: "
    start = column - 1
    end = min(start + max(match.length, 1), len(content))
    under = marker_line(content, set(range(start, end)), marker)
    return f"{prefix}{content}\n{' ' * get_string_width(prefix)}{under}"


def format_count(match_count: MatchCount, pattern: str) -> str:
    if not match_count.total:
        return f"'{pattern}' not found"
    return f"{match_count.total} match(es) for '{pattern}'; at cursor: {match_count.current_ordinal}/{match_count.total}"


def format_diff_line(diff: DiffLine, char_level: bool = True, marker: str = "^") -> list[str]:
    lines = [f"@@ line {diff.line_number} ({diff.kind.value}) @@"]
    if diff.kind is not DiffKind.ADDED:
        lines.append(f"-{diff.left_content}")
        if char_level and diff.kind is DiffKind.MODIFIED:
            under = marker_line(diff.left_content, diff_chars(diff.left_content, diff.right_content), marker)
            if under:
                lines.append(f" {under}")
    if diff.kind is not DiffKind.REMOVED:
        lines.append(f"+{diff.right_content}")
        if char_level and diff.kind is DiffKind.MODIFIED:
            under = marker_line(diff.right_content, diff_chars(diff.right_content, diff.left_content), marker)
            if under:
                lines.append(f" {under}")
    return lines


def format_report(
    report: CompareReport,
    left_label: str = "left",
    right_label: str = "right",
    char_level: bool = True,
    marker: str = "^",
) -> str:
    """Full textual report: header, one block per difference, summary line."""
    out = [f"--- {left_label}", f"+++ {right_label}"]
    for diff in report.differences:
        out.extend(format_diff_line(diff, char_level, marker))
    out.append(f"= {report.summary()}")
    return "\n".join(out) + "\n"
