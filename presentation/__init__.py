"""Presentation layer - User interfaces."""
from .cli import ConnectivityCommand

__all__ = [
    "ConnectivityCommand",
]
