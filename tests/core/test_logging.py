"""Tests for the package logger.

This module tests:
- Logger names under the texrand namespace
- The NullHandler default and non-stacking configure_logging
- Log records emitted by the library
"""

from __future__ import annotations

import logging

import pytest

from core.logging import LOGGER_NAME, configure_logging, get_logger
from generators.park_miller import ParkMillerGenerator
from permutation.knuth import random_permutation


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


# =============================================================================
# Tests for the package logger
# =============================================================================


def test_get_logger_namespace() -> None:
    assert get_logger().name == LOGGER_NAME
    assert get_logger("generators.registry").name == f"{LOGGER_NAME}.generators.registry"


def test_package_logger_has_null_handler() -> None:
    handlers = logging.getLogger(LOGGER_NAME).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_configure_logging_does_not_stack(restore_package_logger: logging.Logger) -> None:
    configure_logging("debug")
    configure_logging(logging.INFO)
    streams = [
        h for h in restore_package_logger.handlers if type(h) is logging.StreamHandler
    ]
    assert len(streams) == 1
    assert restore_package_logger.level == logging.INFO


# =============================================================================
# Tests for log records from the library
# =============================================================================


def test_rejected_permutation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        with pytest.raises(ValueError):
            random_permutation(ParkMillerGenerator(), -2)
    assert "negative permutation length" in caplog.text
