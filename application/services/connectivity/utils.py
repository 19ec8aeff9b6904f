from __future__ import annotations

import base64
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from domain.entities import ProxyConfig


def proxy_auth_to_base64(proxy: ProxyConfig) -> str:
    """Return the ``Proxy-Authorization`` value for basic proxy auth."""
    token = base64.b64encode(f"{proxy.username}:{proxy.password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def is_valid_callback(callback: Optional[Callable[..., Any]]) -> bool:
    return callback is not None and callable(callback)


def beautify_object(
    items: Sequence[Mapping[str, Any]],
    key_placeholder: str,
    value_placeholder: str,
    *,
    key_field: str = "description",
) -> List[Dict[str, Any]]:
    """Turn outcome dicts into two-column rows keyed by ``key_field``.

    Each row is ``{key_placeholder: item[key_field], value_placeholder: rest}``
    and rows keep the order of ``items``.
    """
    rows: List[Dict[str, Any]] = []
    for item in items:
        value = {k: v for k, v in item.items() if k != key_field}
        rows.append({key_placeholder: item.get(key_field), value_placeholder: value})
    return rows
