# tests/ui/test_command_line.py
"""Command Line Tests
=====================

End-to-end tests for `smartedit.ui.CommandLine.main`.

Each test writes small files into ``tmp_path``, runs one subcommand with a
quiet config (logs under ``tmp_path``, no console logging, no color) and
checks stdout and the grep/diff style exit code:

- 0: match found, or texts identical.
- 1: nothing matched, or texts differ.
- 2: bad pattern or unreadable file.
"""

from pathlib import Path

import pytest

from smartedit.ui import CommandLine
from smartedit.ui.CommandLine import EXIT_ERROR, EXIT_INTERNAL, EXIT_NO_MATCH, EXIT_OK, build_parser, main


@pytest.fixture
def run(quiet_config_file: Path, tmp_path: Path, monkeypatch):
    """Runs ``smartedit --config <quiet> *argv`` from inside ``tmp_path``."""
    monkeypatch.chdir(tmp_path)

    def _run(*argv: str) -> int:
        return main(["--config", str(quiet_config_file), *argv])

    return _run


def _write(tmp_path: Path, name: str, content: str) -> str:
    path = tmp_path / name
    path.write_bytes(content.encode("utf-8"))
    return str(path)


def test_parser_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_query_flags_default_to_none() -> None:
    args = build_parser().parse_args(["count", "f.txt", "x"])
    assert (args.case_sensitive, args.whole_word, args.regex) == (None, None, None)
    args = build_parser().parse_args(["count", "f.txt", "x", "-c", "-w", "-r"])
    assert (args.case_sensitive, args.whole_word, args.regex) == (True, True, True)


def test_diff_identical_files(run, tmp_path, capsys) -> None:
    left = _write(tmp_path, "a.txt", "x\ny\n")
    right = _write(tmp_path, "b.txt", "x\r\ny\r\n")

    assert run("diff", left, right) == EXIT_OK
    out = capsys.readouterr().out
    assert "Texts are identical" in out
    assert "\x1b[" not in out


def test_diff_different_files(run, tmp_path, capsys) -> None:
    left = _write(tmp_path, "a.txt", "a\nb")
    right = _write(tmp_path, "b.txt", "a\nc")

    assert run("diff", left, right) == EXIT_NO_MATCH
    out = capsys.readouterr().out
    assert "@@ line 2 (modified) @@" in out
    assert "-b\n ^\n+c\n ^\n" in out


def test_diff_forced_color(run, tmp_path, capsys) -> None:
    left = _write(tmp_path, "a.txt", "a")
    right = _write(tmp_path, "b.txt", "b")

    assert run("diff", left, right, "--color", "always") == EXIT_NO_MATCH
    assert "\x1b[" in capsys.readouterr().out


def test_find_prints_location(run, tmp_path, capsys) -> None:
    path = _write(tmp_path, "notes.txt", "one two one")

    assert run("find", path, "two") == EXIT_OK
    captured = capsys.readouterr()
    assert f"{path}:1:5: one two one" in captured.out
    assert "Found match (1/1)" in captured.err


def test_find_all_lists_every_match(run, tmp_path, capsys) -> None:
    path = _write(tmp_path, "notes.txt", "one\ntwo\none")

    assert run("find", path, "ONE", "--all") == EXIT_OK
    out = capsys.readouterr().out
    assert f"{path}:1:1: one" in out
    assert f"{path}:3:1: one" in out


def test_find_case_sensitive_miss(run, tmp_path, capsys) -> None:
    path = _write(tmp_path, "notes.txt", "one two")

    assert run("find", path, "ONE", "-c") == EXIT_NO_MATCH
    assert "not found" in capsys.readouterr().err


def test_find_invalid_regex(run, tmp_path, capsys) -> None:
    path = _write(tmp_path, "notes.txt", "abc")

    assert run("find", path, "(", "--regex") == EXIT_ERROR
    assert capsys.readouterr().err.strip()


def test_count_reports_ordinal(run, tmp_path, capsys) -> None:
    path = _write(tmp_path, "notes.txt", "one two one")

    assert run("count", path, "one", "--cursor", "5") == EXIT_OK
    assert capsys.readouterr().out.strip() == "2 match(es) for 'one'; at cursor: 1/2"


def test_replace_to_stdout_leaves_file(run, tmp_path, capsys) -> None:
    path = _write(tmp_path, "notes.txt", "colour colours")

    assert run("replace", path, "colour", "color", "-w") == EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == "color colours"
    assert "Replaced 1 occurrence(s)" in captured.err
    assert Path(path).read_text(encoding="utf-8") == "colour colours"


def test_replace_in_place_keeps_line_endings(run, tmp_path) -> None:
    path = _write(tmp_path, "notes.txt", "a-1\r\nb-2\r\n")

    assert run("replace", path, r"(\w)-(\d)", r"\2:\1", "-r", "--in-place") == EXIT_OK
    assert Path(path).read_bytes() == b"1:a\r\n2:b\r\n"


def test_replace_nothing_found(run, tmp_path) -> None:
    path = _write(tmp_path, "notes.txt", "abc")
    assert run("replace", path, "zzz", "y") == EXIT_NO_MATCH


def test_missing_file_is_an_error(run, tmp_path, capsys) -> None:
    assert run("count", str(tmp_path / "absent.txt"), "x") == EXIT_ERROR
    assert "absent.txt" in capsys.readouterr().err


def test_unexpected_error_is_logged_not_raised(run, tmp_path, monkeypatch) -> None:
    def _boom(args, config):
        raise RuntimeError("boom")

    monkeypatch.setitem(CommandLine.COMMANDS, "count", _boom)
    path = _write(tmp_path, "notes.txt", "abc")

    assert run("count", path, "a") == EXIT_INTERNAL
    assert "boom" in (tmp_path / "logs" / "smartedit.log").read_text(encoding="utf-8")
