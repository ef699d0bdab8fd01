"""Tests for logging helpers."""

import io
import logging

import pytest

from promptstyle.logger import PACKAGE_LOGGER, get_logger, setup_logger
from promptstyle.render_config import RenderConfig


@pytest.fixture
def package_logger():
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def _stream_handlers(logger):
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


def test_package_logger_is_silent_by_default(package_logger):
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_setup_logger_console_only(package_logger):
    logger = setup_logger()
    assert logger is package_logger
    assert logger.level == logging.WARNING
    assert len(_stream_handlers(logger)) == 1


def test_verbose_shows_shared_theme_construction(package_logger, fresh_static_refs):
    buf = io.StringIO()
    setup_logger(verbose=True, stream=buf)
    RenderConfig.default_static_ref()
    assert "Built shared default render config" in buf.getvalue()


def test_setup_logger_reconfigures_without_duplicates(package_logger):
    setup_logger()
    logger = setup_logger(verbose=True)
    assert len(_stream_handlers(logger)) == 1
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_get_logger_does_not_configure():
    logger = get_logger("promptstyle.themes")
    assert logger is logging.getLogger("promptstyle.themes")
    assert logger.handlers == []
