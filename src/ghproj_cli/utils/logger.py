"""Application-wide logger writing to platformdirs user_log_dir.

Records are tagged with the command being run, so a shared log file can be
read per invocation::

    2026-10-16T09:12:01 INFO     [ghproj_cli] [template] command started: template
"""

from __future__ import annotations

import logging
import logging.handlers
from contextvars import ContextVar, Token
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "ghproj_cli"
_LOG_FILE = "ghproj.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] [%(command)s] %(message)s"

_current_command: ContextVar[str] = ContextVar("ghproj_command", default="-")

_logger: logging.Logger | None = None


class CommandContextFilter(logging.Filter):
    """Stamp each record with the name of the running command."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.command = _current_command.get()
        return True


def set_command(name: str) -> Token:
    """Mark *name* as the running command; pass the token to ``reset_command``."""
    return _current_command.set(name)


def reset_command(token: Token) -> None:
    _current_command.reset(token)


def log_file_path() -> Path:
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _make_handler(path: Path) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    handler.addFilter(CommandContextFilter())
    return handler


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call."""
    global _logger
    if _logger is not None:
        return _logger

    path = log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # A handler left from an earlier log directory is replaced, not reused
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) != path:
            logger.removeHandler(handler)
            handler.close()
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        logger.addHandler(_make_handler(path))

    _logger = logger
    return _logger
