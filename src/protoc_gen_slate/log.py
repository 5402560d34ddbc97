"""Logging for the plugin and the CLI.

protoc reads the plugin response from stdout, so every record goes to
stderr (and optionally to a file). Debug output is switched on with the
``DEBUG`` environment variable, the way protoc plugins usually expose it.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping

ROOT_LOGGER = "protoc_gen_slate"
DEBUG_ENV = "DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}
_CONSOLE_FORMAT = "[protoc-gen-slate] %(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``protoc_gen_slate.<name>`` (or the root package logger)."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def debug_requested(environ: Mapping[str, str] | None = None) -> bool:
    """Whether ``DEBUG`` in *environ* (default: the process environment) is truthy."""
    env = os.environ if environ is None else environ
    return env.get(DEBUG_ENV, "").strip().lower() in _TRUTHY


def configure_logging(
    *,
    verbose: bool | None = None,
    log_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> logging.Logger:
    """Attach a stderr handler (and an optional file handler) to the package logger.

    *verbose* ``None`` defers to :func:`debug_requested`. Calling this again
    replaces the handlers installed by the previous call.
    """
    if verbose is None:
        verbose = debug_requested(environ)
    level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    handlers[0].setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        handlers[1].setFormatter(logging.Formatter(_FILE_FORMAT))
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "debug_requested", "get_logger"]
