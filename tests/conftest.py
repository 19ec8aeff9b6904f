"""Shared test fixtures."""

from __future__ import annotations

from typing import Dict

import pytest

from application.services.connectivity import (
    CheckRegistry,
    ConnectivityChecker,
    ReportLogger,
    RequestExecutor,
)
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import ProxyConfig
from tests.helpers import HUB_URL, RAILS_URL, Route, routed_transport


class RecordingReportLogger(ReportLogger):
    def __init__(self, logger: StructuredLogger) -> None:
        super().__init__(logger)
        self.calls: list[tuple[str, list, str]] = []

    def info(self, topic: str, rows: list, correlation_id: str) -> None:
        self.calls.append((topic, rows, correlation_id))
        super().info(topic, rows, correlation_id)


@pytest.fixture
def logger() -> StructuredLogger:
    return get_logger("tests.connectivity", service="test")


@pytest.fixture
def proxy() -> ProxyConfig:
    return ProxyConfig(host="proxy.test", port=3128, username="alice", password="s3cret")


@pytest.fixture
def registry() -> CheckRegistry:
    return CheckRegistry(HUB_URL, RAILS_URL)


@pytest.fixture
def proxy_registry(proxy: ProxyConfig) -> CheckRegistry:
    return CheckRegistry(HUB_URL, RAILS_URL, proxy=proxy)


@pytest.fixture
def report_logger(logger: StructuredLogger) -> RecordingReportLogger:
    return RecordingReportLogger(logger)


@pytest.fixture
def make_checker(logger: StructuredLogger, report_logger: RecordingReportLogger):
    """Build a ConnectivityChecker whose executor talks to a MockTransport."""

    def _make(registry: CheckRegistry, routes: Dict[Route, int | Exception], timeout_ms: int = 2000):
        executor = RequestExecutor(timeout_ms, logger, transport=routed_transport(routes))
        return ConnectivityChecker(registry, executor, report_logger, logger)

    return _make
