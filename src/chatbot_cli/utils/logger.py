"""Application-wide logging to a rotating file under platformdirs user_log_dir.

Modules log through ``logging.getLogger(__name__)``; every such logger is a
child of ``chatbot_cli``, which :func:`get_logger` configures on first use.
Nothing is written to the console: that belongs to the presenters.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_LOGGER = "chatbot_cli"
LOG_FILE = "chatbot.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
MAX_LOG_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 3

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Where the application log lives on this platform."""
    return Path(user_log_dir(APP_LOGGER)) / LOG_FILE


def _file_handler(path: Path) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Return the ``chatbot_cli`` logger, attaching the file handler on first call."""
    global _logger
    if _logger is None:
        logger = logging.getLogger(APP_LOGGER)
        if not logger.handlers:
            logger.addHandler(_file_handler(log_file_path()))
        logger.setLevel(logging.INFO)
        logger.propagate = False
        _logger = logger
    return _logger


def configure_level(level_name: str) -> logging.Logger:
    """Apply a level name such as ``"DEBUG"``; unknown names are ignored."""
    logger = get_logger()
    level = logging.getLevelName(level_name.upper())
    if isinstance(level, int):
        logger.setLevel(level)
    return logger
