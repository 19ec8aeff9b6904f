"""Domain layer - connectivity check entities, enums and errors."""
from .entities import CheckDefinition, CheckOutcome, ConnectivityReport, ProxyConfig, RequestDescriptor
from .enums import CheckResult, ProxyMode, Target, Transport
from .errors import ConnectivityConfigError, InvalidTargetURL, ProxyConfigError

__all__ = [
    # Entities
    'CheckDefinition',
    'CheckOutcome',
    'ConnectivityReport',
    'ProxyConfig',
    'RequestDescriptor',
    # Enums
    'CheckResult',
    'ProxyMode',
    'Target',
    'Transport',
    # Errors
    'ConnectivityConfigError',
    'InvalidTargetURL',
    'ProxyConfigError',
]
