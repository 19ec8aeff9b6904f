"""Helpers shared by the connectivity tests."""

from __future__ import annotations

import asyncio
from typing import Dict, Tuple

import httpx

HUB_URL = "http://hub.test/wd/hub/status"
RAILS_URL = "http://rails.test"

Route = Tuple[str, str]  # (scheme, host)


def routed_transport(routes: Dict[Route, int | Exception], seen: list | None = None) -> httpx.MockTransport:
    """MockTransport answering by (scheme, host); exceptions are raised as-is."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        answer = routes[(request.url.scheme, request.url.host)]
        if isinstance(answer, Exception):
            raise answer
        return httpx.Response(answer, content=f"status {answer}".encode())

    return httpx.MockTransport(handler)


def run(coro):
    return asyncio.run(coro)


ALL_UP: Dict[Route, int] = {
    ("http", "hub.test"): 200,
    ("http", "rails.test"): 301,
    ("https", "hub.test"): 200,
    ("https", "rails.test"): 301,
}
