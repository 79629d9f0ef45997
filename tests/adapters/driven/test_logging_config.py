"""Tests for console logging setup."""

import logging
from collections.abc import Iterator

import pytest

from src.adapters.driven.logging.logging_config import configure_logs

__all__ = []


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Restore root handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_configure_logs_sets_levels(restore_root_logger: logging.Logger) -> None:
    """Root at INFO, frameworks at WARNING, application at DEBUG."""
    configure_logs()

    assert restore_root_logger.level == logging.INFO
    assert logging.getLogger("aiohttp").level == logging.WARNING
    assert logging.getLogger("asyncio").level == logging.WARNING
    assert logging.getLogger("src").level == logging.DEBUG


def test_configure_logs_is_idempotent(restore_root_logger: logging.Logger) -> None:
    """Calling configure_logs twice should add a single console handler."""
    configure_logs()
    configure_logs(level=logging.WARNING)

    named = [h for h in restore_root_logger.handlers if h.get_name() == "src-console"]
    assert len(named) == 1
    assert restore_root_logger.level == logging.WARNING
