"""Tests for the domain entities."""

from __future__ import annotations

import pytest

from domain.entities import CheckOutcome, ConnectivityReport, ProxyConfig
from domain.enums import CheckResult, Transport


class TestCheckOutcome:
    def test_response_in_success_set_passes(self) -> None:
        o = CheckOutcome.from_response("hub", 200, {200}, b"ok")
        assert o.result == CheckResult.PASSED
        assert o.status_code == 200
        assert o.error_message is None
        assert o.data == "ok"

    def test_response_outside_success_set_fails_without_error(self) -> None:
        o = CheckOutcome.from_response("rails", 200, {301, 302})
        assert o.result == CheckResult.FAILED
        assert o.status_code == 200
        assert o.error_message is None

    def test_error_has_no_status(self) -> None:
        o = CheckOutcome.from_error("hub", "ConnectError: refused")
        assert o.result == CheckResult.FAILED
        assert o.status_code is None
        assert o.error_message == "ConnectError: refused"

    def test_invalid_utf8_body_is_replaced(self) -> None:
        o = CheckOutcome.from_response("hub", 200, {200}, b"\xff")
        assert o.data == "�"

    def test_to_dict(self) -> None:
        assert CheckOutcome.from_response("hub", 200, {200}).to_dict() == {
            "data": "",
            "statusCode": 200,
            "errorMessage": None,
            "description": "hub",
            "result": "Passed",
        }

    def test_frozen(self) -> None:
        o = CheckOutcome.from_error("hub", "boom")
        with pytest.raises(AttributeError):
            o.status_code = 200  # type: ignore[misc]


class TestConnectivityReport:
    def test_passed_and_failed(self) -> None:
        ok = CheckOutcome.from_response("a", 200, {200})
        bad = CheckOutcome.from_error("b", "boom")
        report = ConnectivityReport(topic="t", correlation_id="u", outcomes=(ok, bad))
        assert not report.passed
        assert report.failed == [bad]
        assert [d["description"] for d in report.as_dicts()] == ["a", "b"]


class TestEnumsAndProxy:
    def test_transport_ports(self) -> None:
        assert Transport.HTTP.default_port == 80
        assert Transport.HTTPS.default_port == 443

    def test_proxy_credentials(self) -> None:
        assert ProxyConfig("p", 1, "u", "pw").has_credentials
        assert not ProxyConfig("p", 1, "u").has_credentials
