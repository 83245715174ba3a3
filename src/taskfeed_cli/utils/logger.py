"""Application-wide logger writing to platformdirs user_log_dir.

The file handler always records DEBUG and above. ``enable_console_logging``
adds a rich handler on stderr for ``--verbose`` runs.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler

_APP_NAME = "taskfeed_cli"
_LOG_FILE = "taskfeed.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or a named child of it.

    The root application logger is initialised on first call.
    """
    global _logger
    if _logger is None:
        _logger = _build_logger()
    if name:
        return _logger.getChild(name)
    return _logger


def _build_logger() -> logging.Logger:
    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Only a file handler counts; test runners may attach their own handlers.
    if any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers):
        return logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger


def enable_console_logging(level: int = logging.INFO) -> None:
    """Mirror log records to stderr through rich (idempotent)."""
    logger = get_logger()
    for existing in logger.handlers:
        if isinstance(existing, RichHandler):
            existing.setLevel(level)
            return

    handler = RichHandler(
        console=Console(stderr=True), show_path=False, rich_tracebacks=False
    )
    handler.setLevel(level)
    logger.addHandler(handler)
