"""Logging configuration for the command line tools.

Library modules only call :func:`logging.getLogger`; handlers are attached
here, once, by the entry points.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "invoicedoc"
LOG_FILENAME = "invoicedoc.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(log_dir: Path, *, level: int = logging.INFO) -> logging.Logger:
    """Attach a rotating file handler under ``log_dir`` to the package logger."""

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_dir / LOG_FILENAME,
            maxBytes=1_000_000,
            backupCount=5,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False

    logging.captureWarnings(True)
    return logger


__all__ = ["LOGGER_NAME", "LOG_FORMAT", "configure_logging"]
