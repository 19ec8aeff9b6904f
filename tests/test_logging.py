"""Tests for the structured logging stack."""

from __future__ import annotations

import json
import logging

from application.services.connectivity import ReportLogger
from core.logging.context import context, get_context
from core.logging.formatter import ConsoleFormatter, JSONFormatter
from core.logging.levels import LogLevel, register_levels, to_level
from core.logging.logger import get_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("connectivity", logging.INFO, __file__, 1, "CONN_TOPIC", None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


ROWS = [{"Result Key": "HTTP Request To Hub Without Proxy",
         "Result Value": {"statusCode": None, "errorMessage": "Request Timed Out", "result": "Failed"}}]


class TestLevels:
    def test_custom_levels(self) -> None:
        register_levels()
        assert logging.getLevelName(int(LogLevel.SUCCESS)) == "SUCCESS"
        assert to_level("trace") == 5
        assert to_level("warning") == logging.WARNING
        assert to_level("nonsense") == logging.INFO


class TestContext:
    def test_scoped(self) -> None:
        with context(correlation_id="abc"):
            assert get_context()["correlation_id"] == "abc"
        assert "correlation_id" not in get_context()

    def test_none_values_are_dropped(self) -> None:
        with context(correlation_id="abc", topic=None) as fields:
            assert fields["correlation_id"] == "abc"
            assert "topic" not in get_context()


class TestFormatters:
    def test_json_includes_report(self) -> None:
        line = JSONFormatter().format(_record(correlation_id="abc", report=ROWS, meta={}))
        payload = json.loads(line)
        assert payload["message"] == "CONN_TOPIC"
        assert payload["correlation_id"] == "abc"
        assert payload["report"] == ROWS

    def test_console_lists_rows(self) -> None:
        text = ConsoleFormatter().format(_record(correlation_id="abc", report=ROWS))
        assert "uuid=abc" in text

    def test_execution_time_rendered(self) -> None:
        assert "t=12ms" in ConsoleFormatter().format(_record(execution_time_ms=12))
        assert json.loads(JSONFormatter().format(_record(execution_time_ms=12)))["execution_time_ms"] == 12
        assert "HTTP Request To Hub Without Proxy: Failed (error=Request Timed Out)" in text


class TestReportLogger:
    def test_single_record_with_payload(self, caplog) -> None:
        reporter = ReportLogger(get_logger("tests.report", service="connectivity"))
        with caplog.at_level(logging.INFO, logger="tests.report"):
            reporter.info("CONN_TOPIC", ROWS, "abc")
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.getMessage() == "CONN_TOPIC"
        assert record.correlation_id == "abc"
        assert record.report == ROWS
        assert record.meta == {}
        assert record.service == "connectivity"
