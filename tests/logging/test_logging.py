"""Tests for package-wide logging setup."""

import logging
from io import StringIO

import pytest

from puzzlegraph.logging import (
    DEFAULT_FORMAT,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    reset_logging()
    yield
    reset_logging()


def _capture(logger: logging.Logger) -> StringIO:
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    return capture


def test_debug_toggles():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("puzzlegraph.test")
    capture = _capture(logger)

    logger.info("info-1")
    logger.debug("debug-1")
    assert "info-1" in capture.getvalue()
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()


def test_children_follow_global_level():
    first = get_logger("puzzlegraph.graph.maze")
    assert first.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert first.getEffectiveLevel() == logging.WARNING
    assert get_logger("puzzlegraph.cli").getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent():
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    setup_root_logger(level=logging.DEBUG)
    package_logger = logging.getLogger("puzzlegraph")
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO


def test_custom_format_and_handler():
    capture = StringIO()
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(format_string=fmt, handler=logging.StreamHandler(capture))

    get_logger("puzzlegraph.test.format").info("hello")
    assert "LEVEL:INFO|NAME:puzzlegraph.test.format|MSG:hello" in capture.getvalue()


def test_default_format_has_timestamp_and_name():
    assert "%(asctime)s" in DEFAULT_FORMAT
    assert "%(name)s" in DEFAULT_FORMAT


def test_contraction_debug_message_is_captured(caplog, chain5):
    from puzzlegraph.algorithms.contract import contract

    caplog.set_level(logging.DEBUG, logger="puzzlegraph.algorithms.contract")
    contract(chain5)
    assert any(
        r.levelno == logging.DEBUG and "Contracted 5 nodes to 2" in r.getMessage()
        for r in caplog.records
    )
