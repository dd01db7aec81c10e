"""Tests for the shared logging setup."""

import logging

from utils.logging import get_logger, setup_logging


def test_setup_logging_applies_level_after_handlers_exist():
    root = logging.getLogger()
    original = root.level
    get_logger("scoping.registry")
    handlers = list(root.handlers)
    try:
        setup_logging("DEBUG")
        assert root.level == logging.DEBUG
        setup_logging("warning")
        assert root.level == logging.WARNING
        assert root.handlers == handlers
    finally:
        root.setLevel(original)


def test_get_logger_returns_named_logger():
    assert get_logger("scoping.session").name == "scoping.session"
