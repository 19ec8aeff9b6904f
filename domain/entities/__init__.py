"""Domain entities."""
from .proxy_config import ProxyConfig
from .request_descriptor import RequestDescriptor
from .check_definition import CheckDefinition
from .check_outcome import CheckOutcome
from .connectivity_report import ConnectivityReport

__all__ = [
    'ProxyConfig',
    'RequestDescriptor',
    'CheckDefinition',
    'CheckOutcome',
    'ConnectivityReport',
]
