"""Tests for logging utilities."""

import logging
from io import StringIO

import pytest

from socnet.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging(level=logging.WARNING)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "socnet.test_module"


def test_get_logger_keeps_package_prefix():
    """Test that module names already under socnet are not prefixed twice."""
    assert get_logger("socnet.graphs.traversal").name == "socnet.graphs.traversal"
    assert get_logger().name == "socnet"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("ERROR")
    assert logger.level == logging.ERROR


def test_configure_logging():
    """Test configure_logging function."""
    stream = StringIO()
    logger = get_logger("test_module")
    configure_logging(level=logging.DEBUG, stream=stream)

    logger.debug("Debug message")

    output = stream.getvalue()
    assert "[DEBUG] socnet.test_module: Debug message" in output


def test_algorithm_logs_at_debug(friends_graph):
    """Test that traversal rounds are logged once DEBUG is enabled."""
    from socnet.graphs import shortest_path_distances

    stream = StringIO()
    get_logger("socnet.graphs.traversal")
    configure_logging(level=logging.DEBUG, stream=stream)

    shortest_path_distances(friends_graph, 1)

    output = stream.getvalue()
    assert "round 1 discovered 3 node(s)" in output
    assert "reached 9 of 9 node(s)" in output


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False
