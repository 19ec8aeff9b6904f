from __future__ import annotations

import asyncio
from typing import Callable, Optional

from core.logging.context import context
from core.logging.logger import StructuredLogger
from domain.entities import CheckDefinition, CheckOutcome, ConnectivityReport

from .check_registry import CheckRegistry
from .report import ReportLogger, report_rows
from .request_executor import RequestExecutor
from .utils import is_valid_callback

CompletionCallback = Callable[[], None]


class ConnectivityChecker:
    """Fires every applicable check concurrently and reports them together."""

    def __init__(
        self,
        registry: CheckRegistry,
        executor: RequestExecutor,
        report_logger: ReportLogger,
        logger: StructuredLogger,
    ) -> None:
        self.registry = registry
        self.executor = executor
        self.report_logger = report_logger
        self.logger = logger

    async def fire_checks(
        self,
        topic: str,
        correlation_id: str,
        on_complete: Optional[CompletionCallback] = None,
    ) -> ConnectivityReport:
        """Run all checks and log the merged report.

        Outcomes are gathered in registry order whatever order the requests
        finish in. ``on_complete`` runs once, after the report is logged.
        """
        checks = self.registry.decide()
        with context(correlation_id=correlation_id):
            self.logger.info(lambda: f"connectivity-checks-start count={len(checks)}")
            outcomes = await asyncio.gather(*(self._run(check) for check in checks))
            report = ConnectivityReport(topic=topic, correlation_id=correlation_id, outcomes=tuple(outcomes))
            self.report_logger.info(topic, report_rows(report), correlation_id)
            self.logger.info(lambda: f"connectivity-checks-done failed={len(report.failed)}")
        if is_valid_callback(on_complete):
            on_complete()
        return report

    async def _run(self, check: CheckDefinition) -> CheckOutcome:
        descriptor = self.registry.build_request(check)
        return await self.executor.execute(descriptor, check.transport, check.description, check.success_codes)
