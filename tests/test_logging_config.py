"""Tests for logging configuration module."""

import logging
import os
from unittest.mock import patch

import pytest

from cloudinary_metadata.utils.logging_config import (
    _loggers_configured,
    enable_debug_logging,
    get_log_level,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Reset logging state before each test."""
    _loggers_configured.clear()
    yield
    _loggers_configured.clear()


def test_get_log_level():
    """Test log level detection from environment."""
    with patch.dict(os.environ, {}, clear=True):
        assert get_log_level() == logging.INFO

    with patch.dict(os.environ, {"DEBUG": "true"}, clear=True):
        assert get_log_level() == logging.DEBUG

    with patch.dict(os.environ, {"LOG_LEVEL": "ERROR", "DEBUG": "true"}, clear=True):
        assert get_log_level() == logging.ERROR

    with patch.dict(os.environ, {"LOG_LEVEL": "bogus"}, clear=True):
        assert get_log_level() == logging.INFO


def test_setup_logging():
    """Test basic logger setup."""
    logger = setup_logging("test_metadata_logger", level=logging.DEBUG)

    assert logger.name == "test_metadata_logger"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    """Test that a logger is configured only once."""
    first = setup_logging("test_metadata_once")
    second = setup_logging("test_metadata_once")

    assert first is second
    assert len(second.handlers) == 1


def test_setup_logging_without_console():
    """Test that console=False leaves propagation to the root logger."""
    logger = setup_logging("test_metadata_quiet", console=False)

    assert logger.handlers == []
    assert logger.propagate is True


def test_get_logger():
    """Test get_logger configures on first use."""
    logger = get_logger("test_metadata_get")

    assert "test_metadata_get" in _loggers_configured
    assert get_logger("test_metadata_get") is logger


def test_enable_debug_logging():
    """Test switching configured loggers to DEBUG."""
    logger = setup_logging("test_metadata_debug", level=logging.WARNING)

    enable_debug_logging()

    assert logger.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in logger.handlers)
