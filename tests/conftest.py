"""Shared pytest fixtures and configuration for the format-number test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests drive ``main(argv)`` directly and read output via ``capsys``.
* Tests must not depend on OS state or on Rich being installed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo logging configuration made by ``main()`` between tests."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    logging.getLogger("format_number").setLevel(logging.NOTSET)
