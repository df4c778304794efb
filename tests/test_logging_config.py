"""Tests for logger setup."""

import logging
import uuid

import pytest

from guestbook.app.core.logging_config import setup_logging


@pytest.fixture
def isolated_logger():
    """A fresh logger that no other test touches."""
    logger = logging.getLogger(f"guestbook.tests.{uuid.uuid4().hex}")
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.mark.unit
def test_configures_stdout_and_file(isolated_logger: logging.Logger, tmp_path) -> None:
    logfile = tmp_path / "guestbook.log"
    assert setup_logging("debug", str(logfile), logger=isolated_logger) is True
    assert isolated_logger.level == logging.DEBUG
    assert len(isolated_logger.handlers) == 2
    assert logging.getLogger("uvicorn.access").propagate is True

    isolated_logger.info("hello file")
    isolated_logger.handlers[1].flush()
    assert "[INFO]" in logfile.read_text(encoding="utf-8")


@pytest.mark.unit
def test_second_call_is_a_no_op(isolated_logger: logging.Logger) -> None:
    assert setup_logging("INFO", logger=isolated_logger) is True
    assert setup_logging("DEBUG", logger=isolated_logger) is False
    assert len(isolated_logger.handlers) == 1
    assert isolated_logger.level == logging.INFO


@pytest.mark.unit
def test_unknown_level_falls_back_to_info(isolated_logger: logging.Logger) -> None:
    setup_logging("chatty", logger=isolated_logger)
    assert isolated_logger.level == logging.INFO
