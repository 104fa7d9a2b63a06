"""Tests for the console logging policy."""

import logging

import pytest
from rich.logging import RichHandler

from moqui_agents.core.config import Settings
from moqui_agents.utils.logging import LIBRARY_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_library_levels():
    saved = {name: logging.getLogger(name).level for name in LIBRARY_LOGGERS}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def console_handler(logger):
    return next(h for h in logger.handlers if isinstance(h, RichHandler))


def test_serving_stdio_is_silent_by_default():
    logger = setup_logging("moqui_agents_test", serving_stdio=True, config=Settings())

    assert logger.level == logging.INFO
    assert console_handler(logger).level == logging.CRITICAL
    for name in LIBRARY_LOGGERS:
        assert logging.getLogger(name).level == logging.CRITICAL


def test_explicit_level_reaches_console():
    logger = setup_logging("moqui_agents_test", serving_stdio=True, config=Settings(log_level="warning"))

    assert console_handler(logger).level == logging.WARNING
    assert logging.getLogger("fastmcp").level == logging.WARNING


def test_debug_mode_reaches_console():
    logger = setup_logging("moqui_agents_test", serving_stdio=True, config=Settings(debug=True))
    assert console_handler(logger).level == logging.DEBUG


def test_commands_log_at_info():
    logger = setup_logging("moqui_agents_test", config=Settings())
    assert console_handler(logger).level == logging.INFO


def test_log_file_keeps_info_while_serving(tmp_path):
    log_file = tmp_path / "logs" / "server.log"
    logger = setup_logging("moqui_agents_test", serving_stdio=True, config=Settings(log_file=log_file))

    logger.info("read failed")
    for handler in logger.handlers:
        handler.flush()

    assert "read failed" in log_file.read_text()
