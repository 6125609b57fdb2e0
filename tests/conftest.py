"""Pytest configuration with shared fixtures for the SmartEdit tests.

Tooling: pytest
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable

import pytest

from smartedit.core.FindController import TextBuffer
from smartedit.core.SearchTypes import SearchQuery
from smartedit.utils.utils import DEFAULT_CONFIG


@pytest.fixture
def default_config() -> dict[str, Any]:
    """Provide a private copy of the built-in configuration.

    Returns:
        dict[str, Any]: Deep copy of `DEFAULT_CONFIG`, safe to mutate.
    """
    return copy.deepcopy(DEFAULT_CONFIG)


@pytest.fixture
def make_buffer() -> Callable[..., TextBuffer]:
    """Factory for in-memory editor buffers.

    Returns:
        Callable: ``make_buffer(text, selection_start=0, selection_length=0)``.
    """

    def _make(text: str, selection_start: int = 0, selection_length: int = 0) -> TextBuffer:
        return TextBuffer(text, selection_start, selection_length)

    return _make


@pytest.fixture
def literal() -> Callable[..., SearchQuery]:
    """Shortcut for building literal (non-regex) queries."""

    def _make(pattern: str, **switches: bool) -> SearchQuery:
        return SearchQuery(pattern, **switches)

    return _make


@pytest.fixture
def regex() -> Callable[..., SearchQuery]:
    """Shortcut for building regular-expression queries."""

    def _make(pattern: str, **switches: bool) -> SearchQuery:
        return SearchQuery(pattern, use_regex=True, **switches)

    return _make


@pytest.fixture
def quiet_config_file(tmp_path: Path) -> Path:
    """Write a config file that keeps log output away from stderr and the cwd.

    Returns:
        Path: Path of the TOML file inside ``tmp_path``.
    """
    path = tmp_path / "config.toml"
    log_file = (tmp_path / "logs" / "smartedit.log").as_posix()
    path.write_text(
        "[logging]\n"
        f'log_file = "{log_file}"\n'
        "log_to_console = false\n"
        "[compare]\n"
        'color = "never"\n',
        encoding="utf-8",
    )
    return path
