"""Fully specified outbound request."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """What to send and where to connect.

    ``host``/``port`` are the socket endpoint. For proxied requests that is the
    proxy itself and ``path`` holds the absolute target URL.
    """

    host: str
    port: int
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    method: str = "GET"

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def is_absolute_form(self) -> bool:
        return not self.path.startswith("/")
