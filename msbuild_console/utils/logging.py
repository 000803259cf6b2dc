"""Diagnostics logging for the console processors.

Everything logs under the ``msbuild_console`` logger tree and never to stdout,
which carries the passed-through build output.
"""

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "msbuild_console"

_loggers: dict[str, logging.Logger] = {}
_initialized = False


def setup_logging(
    level: str = "INFO",
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    log_file: Path | None = None,
    rich_console: bool = True,
) -> None:
    """
    Install the stderr handler (and optional file handler) on the package logger.

    Called by the CLI once settings are known; a later call replaces the
    handlers, so a --verbose run can switch the tree to DEBUG to see the
    per-line [SUMMARY] and [ANNOTATE] records.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Format string for log messages
        log_file: Optional file path for logging
        rich_console: Render records with a rich handler instead of plain text
    """
    global _initialized

    root_logger = logging.getLogger(ROOT_LOGGER)
    # The file handler records DEBUG whatever the console level is.
    root_logger.setLevel(logging.DEBUG if log_file else getattr(logging, level.upper()))

    # Clear existing handlers
    root_logger.handlers.clear()

    if rich_console:
        console = Console(stderr=True)
        console_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(log_format))
    console_handler.setLevel(getattr(logging, level.upper()))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(log_format))
        root_logger.addHandler(file_handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a module, nested under the package logger.

    Module-level loggers are created at import time, before the CLI has read
    its settings, so the first call installs the default INFO handler.

    Args:
        name: Logger name (usually __name__)
    """
    if not _initialized:
        setup_logging()

    if name not in _loggers:
        if name.startswith(ROOT_LOGGER):
            logger = logging.getLogger(name)
        else:
            logger = logging.getLogger(f"{ROOT_LOGGER}.{name}")
        _loggers[name] = logger

    return _loggers[name]
