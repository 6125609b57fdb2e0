# smartedit/utils/logging_config.py
"""smartedit.utils.logging_config
===============================

Logging configuration for SmartEdit. It defines the global logger objects and
a single setup function, `setup_logging`, which configures application-wide
handlers and log levels from a configuration dictionary.

Features:
    - Rotating file logging for general application events (smartedit.log).
    - Optional console logging to stderr with configurable log level.
    - Optional separate error log file (error.log) for ERROR and CRITICAL events.
    - Optional call tracing (trace.log) of every search/replace/diff call,
      enabled via the SMARTEDIT_TRACE environment variable.
    - Automatic creation of log directories, with fallback to the system temp
      directory on failure.
    - Safe reconfiguration: clears existing handlers to avoid duplicate logs
      when called multiple times.
    - Never raises; errors are reported to stderr and logging continues with
      best effort.

Usage:
    >>> from smartedit.utils import logging_config
    >>> logging_config.setup_logging({"logging": {"console_level": "INFO"}})

Globals:
    logger: Main application logger ("smartedit").
    TRACE_LOGGER: Logger for per-call engine traces ("smartedit.trace").
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from typing import Any, Optional


# ======================== Global loggers ========================
# Created at import-time but unconfigured until ``setup_logging()`` runs.
logger = logging.getLogger("smartedit")  # main application logger
TRACE_LOGGER = logging.getLogger("smartedit.trace")  # per-call engine trace

TRACE_ENV_VAR = "SMARTEDIT_TRACE"


def _ensure_log_dir(filename: str, fallback_name: str) -> str:
    """Creates the directory of ``filename``; returns a temp-dir path if that fails."""
    log_dir = os.path.dirname(filename)
    if log_dir and not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir)
        except OSError as e_mkdir:
            print(f"Error creating log directory '{log_dir}': {e_mkdir}", file=sys.stderr)
            filename = os.path.join(tempfile.gettempdir(), fallback_name)
            print(f"Logging to temporary file: '{filename}'", file=sys.stderr)
    return filename


def setup_logging(config: Optional[dict[str, Any]] = None) -> None:
    """Configures application-wide logging handlers and log levels.

    Up to four independent handlers are set up:

    1. File handler – rotating smartedit.log capturing everything from
       the configured `file_level` (default DEBUG) upward.
    2. Console handler – optional `stderr` output whose threshold is
       `console_level` (default WARNING).
    3. Error-file handler – optional rotating error.log that stores
       only ERROR and CRITICAL events.
    4. Trace handler – optional rotating trace.log enabled when the
       environment variable ``SMARTEDIT_TRACE`` is ``1/true/yes``;
       attached to the ``smartedit.trace`` logger.

    Args:
        config (dict | None): Application configuration. Only the
            ``["logging"]`` section is consulted; recognised keys are
            ``log_file``, ``file_level``, ``console_level``,
            ``log_to_console`` and ``separate_error_log``.

    Side Effects:
        - Creates directories for log files if they don’t exist.
        - Replaces all handlers on the root logger.
        - Configures ``smartedit.trace`` to not propagate.
    """
    if config is None:
        config = {}
    logging_config = config.get("logging", {})

    log_filename = _ensure_log_dir(logging_config.get("log_file", "smartedit.log"), "smartedit.log")
    log_file_level_str = str(logging_config.get("file_level", "DEBUG")).upper()
    log_file_level = getattr(logging, log_file_level_str, logging.DEBUG)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-15s - %(message)s (%(filename)s:%(lineno)d)"
    )
    file_handler = None
    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(log_file_level)
    except Exception as e_fh:
        print(
            f"Error setting up file logger for '{log_filename}': {e_fh}. File logging may be impaired.",
            file=sys.stderr,
        )

    # Console Handler
    console_handler = None
    if logging_config.get("log_to_console", True):
        console_level_str = str(logging_config.get("console_level", "WARNING")).upper()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s"))
        console_handler.setLevel(getattr(logging, console_level_str, logging.WARNING))

    # Optional Separate Error Log File
    error_file_handler = None
    if logging_config.get("separate_error_log", False):
        error_log_filename = _ensure_log_dir(
            os.path.join(os.path.dirname(log_filename), "error.log"), "smartedit-error.log"
        )
        try:
            error_file_handler = logging.handlers.RotatingFileHandler(
                error_log_filename, maxBytes=1 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            error_file_handler.setFormatter(file_formatter)
            error_file_handler.setLevel(logging.ERROR)
        except Exception as e_efh:
            print(f"Error setting up separate error log '{error_log_filename}': {e_efh}.", file=sys.stderr)

    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear existing root handlers to avoid duplicates

    for handler in (file_handler, console_handler, error_file_handler):
        if handler:
            root_logger.addHandler(handler)

    root_logger.setLevel(log_file_level)

    # Trace Logger
    trace_logger = logging.getLogger("smartedit.trace")
    trace_logger.propagate = False
    trace_logger.setLevel(logging.DEBUG)
    trace_logger.handlers = []

    if os.environ.get(TRACE_ENV_VAR, "").lower() in {"1", "true", "yes"}:
        try:
            trace_filename = _ensure_log_dir(
                os.path.join(os.path.dirname(log_filename), "trace.log"), "smartedit-trace.log"
            )
            trace_handler = logging.handlers.RotatingFileHandler(
                trace_filename, maxBytes=1 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            trace_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
            trace_logger.addHandler(trace_handler)
            trace_logger.disabled = False
            logging.info("Call tracing enabled, logging to '%s'.", trace_filename)
        except Exception as e_trace:
            logging.error(f"Failed to set up trace logging: {e_trace}", exc_info=True)
            trace_logger.disabled = True
    else:
        trace_logger.addHandler(logging.NullHandler())
        trace_logger.disabled = True
        logging.debug("Call tracing is disabled.")

    logging.info(
        "Logging setup complete. Root logger level: %s.",
        logging.getLevelName(root_logger.level),
    )
    if file_handler:
        logging.info(f"File logging to '{log_filename}' at level: {logging.getLevelName(file_handler.level)}.")
    if console_handler:
        logging.info(f"Console logging to stderr at level: {logging.getLevelName(console_handler.level)}.")
    if error_file_handler:
        logging.info("Error logging to 'error.log' at level: ERROR.")
