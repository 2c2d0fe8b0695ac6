"""Logging configuration helpers for the JFrog CLI plugin."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

_LOGGER_NAME = "jfrog"
LOG_LEVEL_ENV = "JFROG_CLI_LOG_LEVEL"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _close_handlers(logger: logging.Logger) -> None:
    """Detach and close all handlers currently bound to the logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def resolve_log_level(*, verbose: bool) -> int:
    """Return the effective level from the verbose flag or ``JFROG_CLI_LOG_LEVEL``."""
    if verbose:
        return logging.DEBUG
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return _LEVELS.get(raw, logging.INFO)


def configure_logging(*, verbose: bool, log_file: Path | None = None) -> logging.Logger:
    """Configure plugin logging and return the logger.

    Logging is reconfigured on every CLI invocation. Records go to stderr unless
    a log file is given, in which case the file is truncated so each run has an
    isolated log history.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    _close_handlers(logger)

    level = resolve_log_level(verbose=verbose)
    logger.setLevel(level)
    logger.propagate = False
    handler: logging.Handler
    if log_file is None:
        handler = logging.StreamHandler(sys.stderr)
    else:
        log_path = log_file.expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    """Return the plugin logger (configured or with null handler)."""
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger
