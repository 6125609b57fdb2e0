# smartedit/ui/CommandLine.py
"""
SmartEdit command line
======================

Runs the search, replace and compare engines on files from a shell:

  smartedit find notes.txt "todo" --whole-word
  smartedit count notes.txt "t.do" --regex --cursor 120
  smartedit replace notes.txt "colour" "color" --in-place
  smartedit diff old.txt new.txt --color always

Exit codes follow grep/diff conventions: 0 on a match (or identical texts),
1 when nothing matched (or the texts differ), 2 on usage, pattern or file
errors.
"""

import argparse
import logging
import sys
from typing import Any, Optional

from smartedit.core.FindController import FindController, TextBuffer
from smartedit.core.LineDiff import compare_texts
from smartedit.core.MatchCounter import count
from smartedit.core.MatchLocator import locate
from smartedit.core.ReplaceEngine import replace_all
from smartedit.core.SearchTypes import Failure, FailureKind, MatchResult, SearchQuery
from smartedit.ui.ConsoleOutput import (
    colorize_diff,
    format_count,
    format_match,
    format_report,
    should_use_color,
)
from smartedit.utils.logging_config import setup_logging
from smartedit.utils.utils import load_config, read_text_file, write_text_file

logger = logging.getLogger("smartedit")

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2
EXIT_INTERNAL = 1  # unexpected failure; shares the "no result" code


def _add_query_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", "--case-sensitive", action="store_true", default=None, help="match case")
    parser.add_argument("-w", "--whole-word", action="store_true", default=None, help="match whole words only")
    parser.add_argument("-r", "--regex", action="store_true", default=None, help="treat PATTERN as a regular expression")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smartedit", description="Search, replace and compare text files.")
    parser.add_argument("--config", help="TOML config file (default: ~/.config/smartedit/config.toml)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_find = sub.add_parser("find", help="locate the next (or previous) match")
    p_find.add_argument("file")
    p_find.add_argument("pattern")
    p_find.add_argument("--from", dest="from_index", type=int, default=0, help="cursor offset to search from")
    p_find.add_argument("--backward", action="store_true", help="search towards the start of the file")
    p_find.add_argument("--no-wrap", action="store_true", help="do not continue from the other end")
    p_find.add_argument("--all", action="store_true", help="list every match")
    _add_query_flags(p_find)

    p_count = sub.add_parser("count", help="count matches")
    p_count.add_argument("file")
    p_count.add_argument("pattern")
    p_count.add_argument("--cursor", type=int, default=0, help="cursor offset for the current-match ordinal")
    _add_query_flags(p_count)

    p_replace = sub.add_parser("replace", help="replace every match")
    p_replace.add_argument("file")
    p_replace.add_argument("pattern")
    p_replace.add_argument("replacement")
    p_replace.add_argument("--in-place", action="store_true", help="write the result back to FILE")
    _add_query_flags(p_replace)

    p_diff = sub.add_parser("diff", help="compare two files line by line")
    p_diff.add_argument("left")
    p_diff.add_argument("right")
    p_diff.add_argument("--color", choices=["auto", "always", "never"], default=None)
    p_diff.add_argument("--no-chars", action="store_true", help="skip character-level markers")

    return parser


def _query(args: argparse.Namespace, config: dict[str, Any]) -> SearchQuery:
    return SearchQuery.from_config(
        args.pattern,
        config,
        case_sensitive=args.case_sensitive,
        whole_word=args.whole_word,
        use_regex=args.regex,
    )


def _report_failure(failure: Failure) -> int:
    print(failure.message, file=sys.stderr)
    if failure.kind in (FailureKind.EMPTY_QUERY, FailureKind.INVALID_PATTERN):
        return EXIT_ERROR
    return EXIT_NO_MATCH


def cmd_find(args: argparse.Namespace, config: dict[str, Any]) -> int:
    text = read_text_file(args.file)
    query = _query(args, config)
    marker = config.get("compare", {}).get("marker", "^")

    if args.all:
        found = 0
        position = 0
        while True:
            result = locate(text, query, position, forward=True)
            if isinstance(result, Failure):
                if result.kind is not FailureKind.NOT_FOUND:
                    return _report_failure(result)
                break
            print(format_match(text, result, args.file, marker))
            found += 1
            position = result.end if result.length else result.end + 1
        print(format_count(count(text, query, len(text)), query.pattern), file=sys.stderr)
        return EXIT_OK if found else EXIT_NO_MATCH

    buffer = TextBuffer(text, args.from_index, 0)
    controller = FindController(buffer, config)
    controller.pattern = query.pattern
    controller.case_sensitive = query.case_sensitive
    controller.whole_word = query.whole_word
    controller.use_regex = query.use_regex
    if args.no_wrap:
        controller.wrap_around = False

    if not controller.find(forward=not args.backward):
        return _report_failure(controller.last_failure)

    match = MatchResult(buffer.selection_start, buffer.selection_length)
    print(format_match(text, match, args.file, marker))
    print(controller.status_message, file=sys.stderr)
    return EXIT_OK


def cmd_count(args: argparse.Namespace, config: dict[str, Any]) -> int:
    text = read_text_file(args.file)
    query = _query(args, config)
    if query.is_empty:
        return _report_failure(Failure(FailureKind.EMPTY_QUERY))
    result = count(text, query, args.cursor)
    print(format_count(result, query.pattern))
    return EXIT_OK if result.total else EXIT_NO_MATCH


def cmd_replace(args: argparse.Namespace, config: dict[str, Any]) -> int:
    text = read_text_file(args.file)
    outcome = replace_all(text, _query(args, config), args.replacement)
    if isinstance(outcome, Failure):
        return _report_failure(outcome)

    new_text, replaced = outcome
    if args.in_place:
        if replaced:
            write_text_file(args.file, new_text)
    else:
        sys.stdout.write(new_text)
    print(f"Replaced {replaced} occurrence(s)", file=sys.stderr)
    return EXIT_OK if replaced else EXIT_NO_MATCH


def cmd_diff(args: argparse.Namespace, config: dict[str, Any]) -> int:
    compare_cfg = config.get("compare", {})
    report = compare_texts(read_text_file(args.left), read_text_file(args.right))
    output = format_report(
        report,
        args.left,
        args.right,
        char_level=bool(compare_cfg.get("char_level", True)) and not args.no_chars,
        marker=compare_cfg.get("marker", "^"),
    )
    if should_use_color(args.color or compare_cfg.get("color", "auto"), sys.stdout):
        output = colorize_diff(output)
    sys.stdout.write(output)
    return EXIT_OK if report.identical else EXIT_NO_MATCH


COMMANDS = {
    "find": cmd_find,
    "count": cmd_count,
    "replace": cmd_replace,
    "diff": cmd_diff,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Parses ``argv``, loads config and logging, and runs one command."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(config)
    except Exception as e:
        print(f"FATAL: Could not initialize configuration or logging system: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.debug(f"Running command '{args.command}'")
    try:
        return COMMANDS[args.command](args, config)
    except OSError as e:
        print(f"smartedit: {e}", file=sys.stderr)
        logger.error(f"File error in '{args.command}': {e}")
        return EXIT_ERROR
    except Exception:
        logger.critical("Unhandled exception while running '%s'.", args.command, exc_info=True)
        return EXIT_INTERNAL


def start() -> None:
    """Console-script entry point."""
    sys.exit(main())
