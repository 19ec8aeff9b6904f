from __future__ import annotations

from typing import Any, Dict, List

from core.logging.logger import StructuredLogger
from domain.entities import ConnectivityReport

from .utils import beautify_object

RESULT_KEY = "Result Key"
RESULT_VALUE = "Result Value"


def report_rows(report: ConnectivityReport) -> List[Dict[str, Any]]:
    return beautify_object(report.as_dicts(), RESULT_KEY, RESULT_VALUE)


class ReportLogger:
    """Writes one structured record per connectivity run."""

    def __init__(self, logger: StructuredLogger, meta: Dict[str, Any] | None = None) -> None:
        self.logger = logger
        self.meta = dict(meta or {})

    def info(self, topic: str, rows: List[Dict[str, Any]], correlation_id: str) -> None:
        self.logger.info(
            topic,
            extra={"correlation_id": correlation_id, "report": rows, "meta": dict(self.meta)},
        )
