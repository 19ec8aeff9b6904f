from .check_registry import DIRECT_CHECKS, PROXY_CHECKS, CheckRegistry
from .orchestrator import ConnectivityChecker
from .report import ReportLogger, report_rows
from .request_builder import build_direct_request, build_proxied_request, parse_target_url
from .request_executor import TIMED_OUT, RequestExecutor

__all__ = [
    "DIRECT_CHECKS",
    "PROXY_CHECKS",
    "CheckRegistry",
    "ConnectivityChecker",
    "ReportLogger",
    "report_rows",
    "build_direct_request",
    "build_proxied_request",
    "parse_target_url",
    "TIMED_OUT",
    "RequestExecutor",
]
