from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, List

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# Attributes the report logger attaches to a record through ``extra``.
_PAYLOAD_FIELDS = ("correlation_id", "report", "meta")


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "module": record.module,
        "function": record.funcName,
        "line_number": record.lineno,
        "process_id": record.process,
    }


def _record_payload(record: logging.LogRecord) -> Dict[str, Any]:
    return {name: getattr(record, name) for name in _PAYLOAD_FIELDS if hasattr(record, name)}


def _report_lines(rows: List[Dict[str, Any]]) -> List[str]:
    lines = []
    for row in rows:
        key = row.get("Result Key", "-")
        value = row.get("Result Value") or {}
        if isinstance(value, dict):
            status = value.get("statusCode")
            error = value.get("errorMessage")
            detail = f"status={status}" if status is not None else f"error={error}"
            lines.append(f"    {key}: {value.get('result')} ({detail})")
        else:
            lines.append(f"    {key}: {value}")
    return lines


class ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        try:
            md = _record_metadata(record)
            ctx = get_context()
            lvl = record.levelname
            color = _LEVEL_COLORS.get(lvl, "")
            parts = [
                md["timestamp"],
                lvl,
                md["service"] or "-",
                f"{md['module']}:{md['function']}:{md['line_number']}",
                record.getMessage(),
            ]
            correlation_id = getattr(record, "correlation_id", None)
            if correlation_id is not None:
                parts.append(f"uuid={correlation_id}")
            exec_ms = getattr(record, "execution_time_ms", None)
            if exec_ms is not None:
                parts.append(f"t={exec_ms}ms")
            if ctx:
                parts.append(f"{ctx}")
            line = " | ".join(parts)
            report = getattr(record, "report", None)
            if isinstance(report, list) and report:
                line = "\n".join([line] + _report_lines(report))
            if record.exc_info:
                line = f"{line}\n{self.formatException(record.exc_info)}"
            return f"{color}{line}{_RESET}"
        except Exception:
            try:
                return record.getMessage()
            except Exception:
                return "<log format error>"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        try:
            payload: Dict[str, Any] = _record_metadata(record)
            payload["message"] = record.getMessage()
            payload.update(_record_payload(record))
            ctx = get_context()
            if ctx:
                payload["context"] = ctx
            exec_ms = getattr(record, "execution_time_ms", None)
            if exec_ms is not None:
                payload["execution_time_ms"] = exec_ms
            if record.exc_info:
                try:
                    payload["exception"] = self.formatException(record.exc_info)
                except Exception:
                    payload["exception"] = "unavailable"
            return json.dumps(payload, default=str, separators=(",", ":"))
        except Exception:
            return json.dumps({"message": "log format error"}, separators=(",", ":"))
