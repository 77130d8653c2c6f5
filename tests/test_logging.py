"""Tests for codeguide logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from codeguide.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger("scanner").name == "codeguide.scanner"
    assert get_logger().name == "codeguide"


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(verbose=True, log_file=tmp_path / "codeguide.log")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    get_logger("test").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "codeguide.test: hello" in (tmp_path / "codeguide.log").read_text(encoding="utf-8")

    logger = configure_logging()
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_configure_logging_creates_log_directory(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "check.log"

    configure_logging(log_file=log_file)
    get_logger("cli").info("checked")

    assert log_file.read_text(encoding="utf-8").endswith("INFO codeguide.cli: checked\n")
    configure_logging()
