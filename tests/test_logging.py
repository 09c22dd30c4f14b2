"""Tests for log formatting."""

from __future__ import annotations

import json
import logging

from fxmonitor.core.logging import (
    StructuredFormatter,
    TextFormatter,
    get_logger,
    request_id_var,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "fxmonitor.test", logging.INFO, __file__, 10, "Alert created", (), None
    )
    record.__dict__.update(extra)
    return record


class TestStructuredFormatter:
    def test_json_with_extras(self):
        payload = json.loads(StructuredFormatter().format(_record(alert_id="abc", pair_id="EURUSD")))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "fxmonitor.test"
        assert payload["message"] == "Alert created"
        assert payload["alert_id"] == "abc"
        assert payload["pair_id"] == "EURUSD"

    def test_includes_request_id(self):
        token = request_id_var.set("req-42")
        try:
            payload = json.loads(StructuredFormatter().format(_record()))
        finally:
            request_id_var.reset(token)

        assert payload["request_id"] == "req-42"


class TestTextFormatter:
    def test_appends_extras(self):
        line = TextFormatter().format(_record(rate=1.1))

        assert "INFO" in line
        assert "fxmonitor.test: Alert created" in line
        assert line.endswith("rate=1.1")


def test_logger_namespace():
    assert get_logger("services.alerts").name == "fxmonitor.services.alerts"
