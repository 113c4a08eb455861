"""Unit tests for structured logging configuration."""

import json

import structlog

from signupflow.core.config import Settings
from signupflow.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)


def _json_settings(**overrides) -> Settings:
    overrides = {"environment": "testing", "log_format": "json", **overrides}
    return Settings(_env_file=None, **overrides)


def test_json_output_goes_to_stderr(capsys):
    configure_logging(_json_settings())

    get_logger(__name__).info("Signup endpoint responded", status_code=201)

    captured = capsys.readouterr()
    assert captured.out == ""
    entry = json.loads(captured.err.strip().splitlines()[-1])
    assert entry["message"] == "Signup endpoint responded"
    assert entry["status_code"] == 201
    assert entry["level"] == "info"
    assert entry["logger"] == "signupflow"
    assert entry["correlation_id"].startswith("cid_")
    assert "timestamp" in entry


def test_level_filtering(capsys):
    configure_logging(_json_settings(log_level="WARNING"))

    logger = get_logger(__name__)
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_logging_context_binds_and_unbinds(capsys):
    configure_logging(_json_settings())
    logger = get_logger(__name__)

    with LoggingContext(submission_id="sub_123"):
        logger.info("inside")
    logger.info("outside")

    lines = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
    assert lines[0]["submission_id"] == "sub_123"
    assert "submission_id" not in lines[1]


def test_bound_correlation_id_is_kept(capsys):
    configure_logging(_json_settings())

    bind_correlation_id("cid_fixed")
    try:
        get_logger().info("correlated")
    finally:
        clear_context()

    entry = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert entry["correlation_id"] == "cid_fixed"
    assert structlog.contextvars.get_contextvars() == {}


def test_console_format(capsys):
    configure_logging(_json_settings(log_format="console"))

    get_logger().info("console message")

    assert "console message" in capsys.readouterr().err
