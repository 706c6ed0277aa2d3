"""Logging setup using Rich with console + optional file handlers.

Console shows every message at or above the console level.
The optional rotating log file keeps WARNING and ERROR messages with full context,
which is what build servers usually want to archive.
"""
from __future__ import annotations

import atexit
import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ['console', 'get_logger', 'setup_logging']

# --- Shared Rich console instance ---
console: Console = Console(stderr=True)

# --- Handler names for idempotency ---
_CONSOLE_HANDLER = 'rich_console_handler'
_FILE_HANDLER = 'file_handler'

# --- Default levels ---
DEFAULT_CONSOLE_LEVEL = logging.INFO
DEFAULT_FILE_LEVEL = logging.WARNING

# --- Module-level flag to register atexit only once ---
_atexit_registered = False  # pylint: disable=invalid-name


def setup_logging(  # pylint: disable=too-many-arguments  # noqa: PLR0913
    console_level: int = DEFAULT_CONSOLE_LEVEL,
    file_level: int = DEFAULT_FILE_LEVEL,
    log_file: Path | str | None = None,
    max_bytes: int = 10_000_000,  # 10 MB
    backup_count: int = 5,
    *,
    rich_tracebacks: bool = True,
    show_path: bool = False,
    show_time: bool = True,
) -> None:
    """Configure root logging with Rich console + rotating file handler (idempotent).

    Calling it again updates the console level, and adds the file handler if a
    `log_file` is given and none is attached yet.

    Parameters:
        console_level (int): log level for console
        file_level (int): log level for file (WARNING+ recommended)
        log_file (Path | str | None): path to log file, `None` disables file logging
        max_bytes (int): max file size before rotation
        backup_count (int): number of rotated files to keep
        rich_tracebacks (bool): enable/disable rich tracebacks on console
        show_path (bool): show file path in `RichHandler` output
        show_time (bool): show timestamps in `RichHandler` output
    """
    global _atexit_registered  # pylint: disable=global-statement  # noqa: PLW0603

    root = logging.getLogger()

    # --- Console handler (Rich) ---
    console_handler = next((h for h in root.handlers if h.name == _CONSOLE_HANDLER), None)
    if console_handler is None:
        console_handler = RichHandler(
            console=console,
            show_time=show_time,
            show_path=show_path,
            markup=False,
            rich_tracebacks=rich_tracebacks,
        )
        console_handler.name = _CONSOLE_HANDLER
        root.addHandler(console_handler)
    console_handler.setLevel(console_level)

    # --- Rotating file handler (WARNING+) ---
    if log_file is not None and not any(h.name == _FILE_HANDLER for h in root.handlers):
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8',
        )
        file_handler.name = _FILE_HANDLER
        file_handler.setLevel(file_level)

        file_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(levelname)s - %(pathname)s:%(lineno)d - %(name)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M',
            ),
        )
        root.addHandler(file_handler)

    # --- Root logger must be permissive ---
    root.setLevel(min(console_level, file_level, logging.DEBUG))

    # --- Redirect Python warnings to logging ---
    logging.captureWarnings(capture=True)

    # --- Ensure logs flush on exit ---
    if not _atexit_registered:
        atexit.register(logging.shutdown)
        _atexit_registered = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger for `name`.

    Handlers are attached to the root logger by `setup_logging()`, which the
    command line entry point calls once; library use only propagates records.

    Parameters:
        name (str | None): the logger name (default: root logger)

    Returns:
        logging.Logger: the logger
    """
    return logging.getLogger(name)
