"""
Summary: Build the shared ``songinfo`` logger with a Rich console and a rotating file log.
Why: Resolvers log structured events once; handlers decide how each sink renders them.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from songinfo.config.paths import default_log_file

from .handlers import SongPathRichHandler

LOGGER_NAME: Final[str] = "songinfo"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    handler = SongPathRichHandler(console=Console(force_terminal=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        target,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the library logger.

    Calling it again replaces the previous handlers, so a log file chosen in
    the config file takes over from the default one.

    Args:
        log_file: Rotating log destination; console only when None.
        console_level: Threshold for the Rich console.
        file_level: Threshold for the log file.

    Returns:
        logging.Logger: The ``songinfo`` logger.
    """
    library_logger = logging.getLogger(LOGGER_NAME)
    library_logger.setLevel(logging.DEBUG)

    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
        handler.close()

    library_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        library_logger.addHandler(_file_handler(log_file, file_level))
    return library_logger


logger: Final[logging.Logger] = setup_logger(log_file=DEFAULT_LOG_FILE)


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
