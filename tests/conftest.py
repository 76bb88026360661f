"""Shared fixtures."""

import logging

import pytest

from mac_normalizer import functions
from mac_normalizer.config import set_strict_errors


@pytest.fixture(autouse=True)
def reset_error_state():
    """Process-wide strict flag and errstr slot must not leak between tests."""
    set_strict_errors(False)
    functions._errstr = None
    yield
    set_strict_errors(False)
    functions._errstr = None


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
