"""Forward proxy settings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ProxyConfig:
    """Forward HTTP proxy the proxied checks are routed through."""

    host: str
    port: int
    username: Optional[str] = None
    password: Optional[str] = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)
