"""Tests for application logging setup."""

import logging
import logging.handlers

import chatbot_cli.utils.logger as logger_mod
from chatbot_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    SUCCESS,
    get_exit_code_name,
)


def test_get_logger_writes_to_log_dir(isolated_dirs):
    logger = logger_mod.get_logger()
    logger.info("hello from the test")
    for handler in logger.handlers:
        handler.flush()

    log_file = isolated_dirs / "logs" / logger_mod.LOG_FILE
    assert "hello from the test" in log_file.read_text(encoding="utf-8")
    assert logger.propagate is False


def test_get_logger_is_singleton():
    first = logger_mod.get_logger()
    second = logger_mod.get_logger()
    assert first is second
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0], logging.handlers.RotatingFileHandler)


def test_module_loggers_are_children():
    logger_mod.get_logger()
    child = logging.getLogger("chatbot_cli.services.session")
    assert child.parent is logging.getLogger(logger_mod.APP_LOGGER)


def test_configure_level():
    assert logger_mod.configure_level("debug").level == logging.DEBUG
    # Unknown names leave the level alone.
    assert logger_mod.configure_level("chatty").level == logging.DEBUG


def test_exit_code_names():
    assert get_exit_code_name(SUCCESS) == "SUCCESS"
    assert get_exit_code_name(ERROR_GENERAL) == "ERROR_GENERAL"
    assert get_exit_code_name(ERROR_INVALID_ARGS) == "ERROR_INVALID_ARGS"
    assert get_exit_code_name(42) == "UNKNOWN(42)"
