"""Tests for logging configuration."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from protoc_gen_slate.log import configure_logging, debug_requested, get_logger


def test_debug_requested_reads_debug_variable() -> None:
    assert debug_requested({"DEBUG": "1"})
    assert debug_requested({"DEBUG": " True "})
    assert not debug_requested({"DEBUG": "0"})
    assert not debug_requested({})


def test_configure_logging_defers_to_environment() -> None:
    logger = configure_logging(environ={"DEBUG": "yes"})
    assert logger.level == logging.DEBUG
    logger = configure_logging(environ={})
    assert logger.level == logging.INFO
    logger = configure_logging(verbose=True, environ={})
    assert logger.level == logging.DEBUG


def test_console_output_goes_to_stderr(tmp_path: Path) -> None:
    log_file = tmp_path / "slate.log"
    logger = configure_logging(verbose=False, log_file=log_file)

    assert len(logger.handlers) == 2
    assert logger.handlers[0].stream is sys.stderr  # type: ignore[attr-defined]
    assert not logger.propagate

    get_logger("index").info("wrote index")
    for handler in logger.handlers:
        handler.flush()
    assert "protoc_gen_slate.index: wrote index" in log_file.read_text()

    configure_logging(verbose=False)
    assert len(logger.handlers) == 1
