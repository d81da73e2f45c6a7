"""Tests for the JSON log formatter."""

import json
import logging

from caesarapi.log import JsonFormatter, configure_logging


def _record(msg, **extra):
    record = logging.LogRecord("caesarapi.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_shape(self):
        line = JsonFormatter().format(_record("Request completed", method="GET", status=200))
        payload = json.loads(line)
        assert payload["level"] == "info"
        assert payload["message"] == "Request completed"
        assert payload["method"] == "GET"
        assert payload["status"] == 200
        assert payload["timestamp"].endswith("+00:00")

    def test_standard_attributes_are_not_leaked(self):
        payload = json.loads(JsonFormatter().format(_record("hi")))
        assert set(payload) == {"level", "timestamp", "message"}


class TestConfigureLogging:
    def test_does_not_stack_handlers(self):
        logger = logging.getLogger("caesarapi")
        saved = (logger.level, list(logger.handlers), logger.propagate)
        try:
            configure_logging("DEBUG")
            configure_logging("DEBUG")
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0].formatter, JsonFormatter)
        finally:
            logger.setLevel(saved[0])
            logger.handlers[:] = saved[1]
            logger.propagate = saved[2]
