# smartedit/utils/utils.py
"""
smartedit.utils.utils.py
========================

This module provides the configuration and text-measurement utilities for
SmartEdit.

Key functionalities include:
- Automatic User Configuration: creates `~/.config/smartedit/config.toml`
  from the bundled template on first run.
- Robust Configuration Loading: loads a hardcoded, built-in default
  configuration, then recursively merges user settings from a TOML file.
- Display Width: terminal column width of text (wide CJK glyphs count as two
  cells), used to line up character-diff markers.
- Helper Utilities: deep-merging dictionaries and reading text files for the
  command line.

The application is always runnable, even if user configuration files are
missing or corrupted, by falling back to the embedded defaults.
"""

import logging
import shutil
import sys
import unicodedata
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml
from wcwidth import wcswidth, wcwidth

logger = logging.getLogger("smartedit")

USER_CONFIG_DIR = Path.home() / ".config" / "smartedit"

# Hardcoded representation of the bundled `config.toml`; the ultimate fallback.
DEFAULT_CONFIG: Dict[str, Any] = {
    "search": {
        "case_sensitive": False,
        "whole_word": False,
        "use_regex": False,
        "wrap_around": True,
    },
    "compare": {
        "color": "auto",  # auto | always | never
        "char_level": True,
        "marker": "^",
    },
    "logging": {
        "log_file": "smartedit.log",
        "file_level": "DEBUG",
        "console_level": "WARNING",
        "log_to_console": True,
        "separate_error_log": False,
    },
}


# --- Helper Functions ---

def get_project_root() -> Path:
    """Determines the project's root directory for finding template files."""
    if getattr(sys, 'frozen', False) and hasattr(sys, '_MEIPASS'):
        return Path(sys._MEIPASS)
    else:
        return Path(__file__).resolve().parents[3]


def ensure_user_config_exists(config_dir: Optional[Path] = None) -> None:
    """Copies the bundled `config.toml` into the user config directory if missing."""
    try:
        config_dir = config_dir or USER_CONFIG_DIR
        user_config_path = config_dir / "config.toml"
        config_dir.mkdir(parents=True, exist_ok=True)

        if not user_config_path.exists():
            source_config_path = get_project_root() / "config.toml"
            if source_config_path.exists():
                shutil.copy(source_config_path, user_config_path)
                logger.info(f"Created user config template at: {user_config_path}")
    except Exception as e:
        logger.error(f"Could not create user configuration file: {e}", exc_info=True)


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Loads and merges configurations, ensuring the application can always run.

    Args:
        config_path: Explicit TOML file to merge over the defaults. When
            omitted, `~/.config/smartedit/config.toml` is used (and created
            from the template on first run).
    """
    final_config = deep_merge({}, DEFAULT_CONFIG)
    logger.debug("Loaded embedded default configuration.")

    if config_path is None:
        ensure_user_config_exists()
        user_config_path = USER_CONFIG_DIR / "config.toml"
    else:
        user_config_path = Path(config_path).expanduser()

    if user_config_path.is_file():
        try:
            user_config = toml.load(user_config_path)
            final_config = deep_merge(final_config, user_config)
            logger.info(f"Successfully loaded and merged user config from {user_config_path}")
        except Exception as e:
            logger.error(f"Could not parse user config '{user_config_path}': {e}. Using defaults.")
    elif config_path is not None:
        logger.warning(f"Config file '{user_config_path}' not found. Using defaults.")

    return final_config


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges the `override` dictionary into the `base` dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def get_char_width(char: str) -> int:
    """Display width of one character.

    Control and combining characters occupy no cell; characters whose width
    wcwidth cannot determine count as one cell.
    """
    if not isinstance(char, str) or len(char) != 1:
        return 1
    if unicodedata.category(char) in ("Cc", "Cf") and char != "\t":
        return 0
    if unicodedata.combining(char):
        return 0
    width = wcwidth(char)
    return width if width >= 0 else 1


def get_string_width(text: str) -> int:
    """Display width of a string, summing per-character widths when wcswidth gives up."""
    width = wcswidth(text)
    if width != -1:
        return width
    return sum(get_char_width(ch) for ch in text)


def read_text_file(path: Union[str, Path]) -> str:
    """Reads a file as UTF-8, replacing undecodable bytes.

    Newlines are kept as-is (``newline=""``) so the engines see the real
    ``\\r\\n`` / ``\\r`` line endings.
    """
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def write_text_file(path: Union[str, Path], text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
