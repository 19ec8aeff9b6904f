"""Static description of one connectivity check."""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from ..enums import ProxyMode, Target, Transport


@dataclass(frozen=True, slots=True)
class CheckDefinition:
    name: str
    target: Target
    transport: Transport
    proxy_mode: ProxyMode
    description: str
    success_codes: FrozenSet[int]
