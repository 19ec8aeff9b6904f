from __future__ import annotations

import contextvars
from typing import Any, Dict

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("connectivity_log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


class context:
    """Scoped log fields, e.g. ``with context(correlation_id=uuid): ...``."""

    def __init__(self, **values: Any) -> None:
        self._values = {k: v for k, v in values.items() if v is not None}
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        merged = {**_context.get(), **self._values}
        self._token = _context.set(merged)
        return merged

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False
