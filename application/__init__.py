"""Application layer - connectivity check services."""
from .services import ConnectivityChecker

__all__ = [
    'ConnectivityChecker',
]
