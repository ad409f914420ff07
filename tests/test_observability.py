"""Tests for logging setup."""

import json
import logging

from user_service.observability import JSONFormatter, setup_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("user_service.test", logging.INFO, __file__, 1, "User created", None, None)
    record.user_id = 7

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "user_service.test"
    assert payload["message"] == "User created"
    assert payload["user_id"] == 7
    assert "exception" not in payload


def test_setup_logging_sets_level_and_formatter():
    previous_handlers, previous_level = logging.root.handlers[:], logging.root.level
    try:
        setup_logging("warning", "json")
        assert logging.root.level == logging.WARNING
        assert isinstance(logging.root.handlers[-1].formatter, JSONFormatter)
    finally:
        logging.root.handlers = previous_handlers
        logging.root.setLevel(previous_level)
