"""Presentation CLI exports."""
from .connectivity_command import ConnectivityCommand, build_parser, run

__all__ = [
    "ConnectivityCommand",
    "build_parser",
    "run",
]
