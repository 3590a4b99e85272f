"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from kindiary.core.logger import JSONFormatter, RequestIdFilter, configure_logging


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("DEBUG")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
    finally:
        configure_logging(logging.getLevelName(previous))


def test_json_formatter_includes_whitelisted_extras() -> None:
    record = logging.LogRecord("kindiary.test", logging.INFO, __file__, 1, "hello %s", ("x",), None)
    record.token_error = "expired_token"
    record.password = "must-not-appear"
    RequestIdFilter().filter(record)

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "hello x"
    assert payload["level"] == "INFO"
    assert payload["token_error"] == "expired_token"
    assert payload["request_id"] is None
    assert "password" not in payload
