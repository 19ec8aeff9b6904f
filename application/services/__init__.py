"""Application services root exports."""
from .connectivity import CheckRegistry, ConnectivityChecker, ReportLogger, RequestExecutor

__all__ = [
    "CheckRegistry",
    "ConnectivityChecker",
    "ReportLogger",
    "RequestExecutor",
]
