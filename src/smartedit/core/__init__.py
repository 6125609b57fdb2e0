# src/smartedit/core/__init__.py
"""Public facade for smartedit.core: re-export the engines from CamelCase modules.

Keeps one-concern-per-file module names (MatchLocator.py, LineDiff.py, ...),
but provides flat imports for convenience and stability.
"""

# Re-export classes/symbols from CamelCase modules
from .CharDiff import diff_chars, highlight_spans, line_spans  # noqa: F401
from .FindController import FindController  # noqa: F401
from .LineDiff import CompareReport, DiffKind, DiffLine, compare_texts, diff_lines  # noqa: F401
from .MatchCounter import count  # noqa: F401
from .MatchLocator import locate  # noqa: F401
from .ReplaceEngine import replace_all, replace_one  # noqa: F401
from .SearchTypes import (  # noqa: F401
    Failure,
    FailureKind,
    MatchCount,
    MatchResult,
    ReplaceResult,
    SearchQuery,
)


__all__ = [
    "CompareReport",
    "DiffKind",
    "DiffLine",
    "Failure",
    "FailureKind",
    "FindController",
    "MatchCount",
    "MatchResult",
    "ReplaceResult",
    "SearchQuery",
    "compare_texts",
    "count",
    "diff_chars",
    "diff_lines",
    "highlight_spans",
    "line_spans",
    "locate",
    "replace_all",
    "replace_one",
]
