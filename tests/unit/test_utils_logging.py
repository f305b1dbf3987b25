"""Tests for utils logging functionality."""

import io
import logging

import logging_config
from sandwich_guard.utils import get_logger


def test_get_logger_basic():
    """Test basic get_logger functionality."""
    logger = get_logger(__name__)
    assert isinstance(logger, logging.Logger)
    assert logger.name == __name__


def test_get_logger_with_level():
    logger = get_logger(__name__ + ".test1", level=logging.DEBUG)
    assert logger.level == logging.DEBUG


def test_get_logger_with_extra():
    """Extra context yields a LoggerAdapter carrying the fields."""
    logger = get_logger(__name__ + ".test2", extra={"bundle": "0xabc"})

    assert isinstance(logger, logging.LoggerAdapter)
    assert logger.extra == {"extra_bundle": "0xabc"}


def test_get_logger_structured_format():
    logger_name = __name__ + ".test3"
    logger = get_logger(logger_name, level=logging.INFO)

    captured_output = io.StringIO()
    original_stream = logger.handlers[0].stream
    logger.handlers[0].stream = captured_output
    try:
        logger.info("Test message")
    finally:
        logger.handlers[0].stream = original_stream

    log_output = captured_output.getvalue()
    assert "INFO" in log_output
    assert logger_name in log_output
    assert "Test message" in log_output
    assert "|" in log_output


def test_get_logger_no_duplicate_handlers():
    logger_name = __name__ + ".test4"

    logger1 = get_logger(logger_name)
    handler_count = len(logger1.handlers)
    logger2 = get_logger(logger_name)

    assert logger1 is logger2
    assert len(logger2.handlers) == handler_count


def test_get_logger_existing_logger_with_handlers():
    """Test behavior when logger already has handlers."""
    logger_name = __name__ + ".test5"

    existing_logger = logging.getLogger(logger_name)
    existing_handler = logging.StreamHandler()
    existing_logger.addHandler(existing_handler)

    new_logger = get_logger(logger_name)
    assert len(new_logger.handlers) == 1
    assert new_logger.handlers[0] is existing_handler


def test_logging_config_setup_accepts_level_names():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        logging_config.setup(level="warning")
        assert root.level == logging.WARNING
        assert logging.getLogger("sandwich_guard.detector").level == logging.WARNING
        assert logging.getLogger("dex.registry").level == logging.WARNING
        assert logging.getLogger("sandwich_guard.detector").handlers == []

        logging_config.setup_debug()
        assert logging.getLogger("dex.registry").level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        for name in ("dex.registry", "sandwich_guard.detector", "sandwich_guard.aggregator"):
            logging.getLogger(name).setLevel(logging.INFO)
        logging.getLogger("sandwich_guard").setLevel(logging.NOTSET)
        logging.getLogger("__main__").setLevel(logging.NOTSET)
