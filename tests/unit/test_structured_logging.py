"""Tests for structured logging context."""

from uuid import uuid4

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.lovgol.core.logging import (
    bind_admin_context,
    bind_request_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Route structlog output into a CapturingLogger for the test."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def _log_once(capturing_logger) -> dict:
    structlog.get_logger().info("test message")
    entries = capturing_logger.calls
    assert len(entries) == 1
    return entries[0].kwargs


def test_request_id_is_bound(capturing_logger):
    bind_request_context("req-123")
    assert _log_once(capturing_logger)["request_id"] == "req-123"


def test_missing_request_id_is_not_bound(capturing_logger):
    bind_request_context(None)
    assert "request_id" not in _log_once(capturing_logger)


def test_admin_context(capturing_logger):
    admin_id = uuid4()
    bind_admin_context(admin_id, "ops")

    fields = _log_once(capturing_logger)
    assert fields["admin_id"] == str(admin_id)
    assert fields["admin_username"] == "ops"


def test_admin_context_without_username(capturing_logger):
    bind_admin_context(uuid4())
    assert "admin_username" not in _log_once(capturing_logger)


def test_context_accumulates_then_clears(capturing_logger):
    admin_id = uuid4()
    bind_request_context("req-1")
    bind_admin_context(admin_id)

    fields = _log_once(capturing_logger)
    assert fields["request_id"] == "req-1"
    assert fields["admin_id"] == str(admin_id)

    clear_request_context()
    structlog.get_logger().info("after clear")
    cleared = capturing_logger.calls[-1].kwargs
    assert "request_id" not in cleared
    assert "admin_id" not in cleared
