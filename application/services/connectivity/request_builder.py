"""Request descriptors for direct and proxied checks."""
from __future__ import annotations

from typing import Callable, NamedTuple
from urllib.parse import urlsplit

from domain.entities import ProxyConfig, RequestDescriptor
from domain.enums import Transport
from domain.errors import InvalidTargetURL

from .utils import proxy_auth_to_base64

PROXY_AUTHORIZATION = "Proxy-Authorization"

RequestBuilder = Callable[[str, Transport], RequestDescriptor]


class ParsedURL(NamedTuple):
    href: str
    hostname: str
    port: int | None
    path: str


def parse_target_url(url: str) -> ParsedURL:
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise InvalidTargetURL(f"cannot parse target URL {url!r}: {e}") from e
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise InvalidTargetURL(f"target URL must be absolute http(s): {url!r}")
    path = parts.path or "/"
    if parts.query:
        path = f"{path}?{parts.query}"
    return ParsedURL(href=url, hostname=parts.hostname, port=port, path=path)


def build_direct_request(url: str, transport: Transport) -> RequestDescriptor:
    parsed = parse_target_url(url)
    return RequestDescriptor(
        host=parsed.hostname,
        port=parsed.port or transport.default_port,
        path=parsed.path,
    )


def build_proxied_request(url: str, transport: Transport, proxy: ProxyConfig) -> RequestDescriptor:
    """Route ``url`` through ``proxy`` using an absolute-form request target."""
    parsed = parse_target_url(url)
    headers = {}
    if proxy.has_credentials:
        headers[PROXY_AUTHORIZATION] = proxy_auth_to_base64(proxy)
    return RequestDescriptor(host=proxy.host, port=proxy.port, path=parsed.href, headers=headers)


def proxied_builder(proxy: ProxyConfig) -> RequestBuilder:
    def _build(url: str, transport: Transport) -> RequestDescriptor:
        return build_proxied_request(url, transport, proxy)
    return _build
