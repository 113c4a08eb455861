"""Pytest configuration for unit tests."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def _isolated_log_context():
    """Keep structlog context variables from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
