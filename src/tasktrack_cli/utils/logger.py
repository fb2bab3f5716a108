"""File logging for tasktrack.

Nothing is logged to the terminal: the console belongs to command output.
Records go to a rotating ``tasktrack.log`` under the platform log directory;
``TASKTRACK_LOG_LEVEL`` (e.g. ``DEBUG``) lowers or raises the threshold.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_LOGGER_NAME = "tasktrack_cli"
LOG_LEVEL_ENV = "TASKTRACK_LOG_LEVEL"
LOG_FILE_NAME = "tasktrack.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_DEFAULT_LEVEL = logging.INFO

_logger: logging.Logger | None = None


def get_log_file() -> Path:
    """Location of the active log file."""
    return Path(user_log_dir(APP_LOGGER_NAME)) / LOG_FILE_NAME


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else _DEFAULT_LEVEL
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def get_logger() -> logging.Logger:
    """Return the ``tasktrack_cli`` logger, attaching the file handler once.

    Module loggers (``logging.getLogger(__name__)``) inside the package are
    children of this logger and end up in the same file.
    """
    global _logger
    if _logger is not None:
        return _logger

    log_file = get_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_file,
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

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(_level_from_env())
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
