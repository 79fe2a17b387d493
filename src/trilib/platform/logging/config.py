"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the shared "trilib" logger with a rich console handler and an optional rotating log file.
Why: The CLI only knows the log file location after the configuration is loaded.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from trilib.config.paths import default_log_file
from trilib.platform.filesystem import ensure_parent_directory

from .handlers import CheckEventRichHandler


LOGGER_NAME: Final[str] = "trilib"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()
_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    _ = ensure_parent_directory(target)
    handler = logging.handlers.RotatingFileHandler(
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
    """(Re)configure the application logger.

    Handlers from an earlier call are closed and replaced, so the CLI can call
    this again once it knows the configured log file.

    Args:
        log_file: Rotating log file; ``None`` keeps logging on the console only.
        console_level: Threshold for the stderr console handler.
        file_level: Threshold for the file handler.
    """

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)

    console_handler = CheckEventRichHandler(console=Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    app_logger.addHandler(console_handler)

    if log_file is not None:
        app_logger.addHandler(_file_handler(log_file, file_level))

    return app_logger


# Console only until the CLI attaches the configured log file.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]
