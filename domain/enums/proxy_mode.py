"""Proxy routing mode for a check."""
from enum import Enum


class ProxyMode(Enum):
    DIRECT = "direct"
    PROXIED = "proxied"
