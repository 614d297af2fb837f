"""Logging setup for textcut.

The ``textcut`` logger is isolated (no propagation) and avoids duplicate
handlers across repeated initializations. Library modules log through child
loggers (``textcut.truncate.markup`` and so on) and inherit its handler.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from textcut.config import LogLevel

LOGGER_NAME = "textcut"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logger(
    log_level: LogLevel | str = LogLevel.INFO,
    *,
    log_path: Path | str | None = None,
) -> logging.Logger:
    """Configure and return the package logger.

    With ``log_path`` records go to that file, otherwise to stderr. Subsequent
    calls only adjust the level.
    """

    logger = logging.getLogger(LOGGER_NAME)

    level_value = _to_logging_level(log_level)
    logger.setLevel(level_value)
    logger.propagate = False

    handler = package_handler(logger)
    if handler is None:
        if log_path is not None:
            path = Path(log_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(path, encoding="utf-8")
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    handler.setLevel(level_value)
    return logger


def package_handler(logger: logging.Logger | None = None) -> logging.Handler | None:
    """Return the handler installed by :func:`configure_logger`, if any.

    Handlers attached by other code (test harnesses, host applications) are
    ignored.
    """

    if logger is None:
        logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        if handler.get_name() == LOGGER_NAME:
            return handler
    return None


def _to_logging_level(value: LogLevel | str) -> int:
    mapping = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
    }
    if isinstance(value, LogLevel):
        return mapping[value]
    if isinstance(value, str):
        try:
            return mapping[LogLevel(value.strip().lower())]
        except ValueError:
            return logging.WARNING
    return logging.WARNING


__all__ = ["configure_logger", "package_handler", "LOGGER_NAME", "_to_logging_level"]
