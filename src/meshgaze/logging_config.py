"""Logging setup. The terminal belongs to the TUI, so records go to a file."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(log_file: str = "", level: str | int = logging.INFO) -> logging.Logger:
    """Configure the ``meshgaze`` package logger once.

    Without a log file the logger gets a NullHandler and stays silent.
    """
    logger = logging.getLogger("meshgaze")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        if log_file:
            handler: logging.Handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
        else:
            handler = logging.NullHandler()
        handler.setLevel(level)
        logger.addHandler(handler)
        logger.propagate = False

    return logger
