"""Logging setup driven by the ``log_config`` section of the CLI config."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TextIO

PACKAGE_LOGGER = "blockstack_cli"

# npm-style level names used in config files, plus the stdlib spellings
_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "verbose": logging.DEBUG,
    "debug": logging.DEBUG,
    "silly": logging.DEBUG,
    "critical": logging.CRITICAL,
}


def resolve_level(name: object, default: int = logging.WARNING) -> int:
    if isinstance(name, str):
        return _LEVELS.get(name.strip().lower(), default)
    return default


def configure_logging(
    log_config: Mapping[str, Any] | None,
    *,
    debug: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    ``debug`` (the ``-d`` flag) forces DEBUG regardless of the configured
    level. A missing or non-object ``log_config`` falls back to defaults.
    Calling this again replaces the previous handler.
    """
    if not isinstance(log_config, Mapping):
        log_config = {}
    level = logging.DEBUG if debug else resolve_level(log_config.get("level"))

    fmt = "%(levelname)s %(name)s: %(message)s"
    if log_config.get("timestamp", False):
        fmt = "%(asctime)s " + fmt

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
