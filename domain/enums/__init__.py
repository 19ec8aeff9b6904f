"""Domain enumerations."""
from .check_result import CheckResult
from .proxy_mode import ProxyMode
from .target import Target
from .transport import Transport

__all__ = [
    'CheckResult',
    'ProxyMode',
    'Target',
    'Transport',
]
