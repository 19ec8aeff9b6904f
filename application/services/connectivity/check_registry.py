from __future__ import annotations

from typing import Dict, Optional, Tuple

from domain.entities import CheckDefinition, ProxyConfig, RequestDescriptor
from domain.enums import ProxyMode, Target, Transport

from .request_builder import RequestBuilder, build_direct_request, parse_target_url, proxied_builder


def _check(
    name: str,
    target: Target,
    transport: Transport,
    mode: ProxyMode,
    description: str,
    *codes: int,
) -> CheckDefinition:
    return CheckDefinition(
        name=name,
        target=target,
        transport=transport,
        proxy_mode=mode,
        description=description,
        success_codes=frozenset(codes),
    )


DIRECT_CHECKS: Tuple[CheckDefinition, ...] = (
    _check("http_to_hub_without_proxy", Target.HUB, Transport.HTTP, ProxyMode.DIRECT,
           "HTTP Request To Hub Without Proxy", 200),
    _check("http_to_rails_without_proxy", Target.RAILS, Transport.HTTP, ProxyMode.DIRECT,
           "HTTP Request To Rails Without Proxy", 200, 301),
    _check("https_to_hub_without_proxy", Target.HUB, Transport.HTTPS, ProxyMode.DIRECT,
           "HTTPS Request To Hub Without Proxy", 200),
    _check("https_to_rails_without_proxy", Target.RAILS, Transport.HTTPS, ProxyMode.DIRECT,
           "HTTPS Request to Rails Without Proxy", 301, 302),
)

# HTTPS through the proxy would need CONNECT tunneling and is not checked.
PROXY_CHECKS: Tuple[CheckDefinition, ...] = (
    _check("http_to_hub_with_proxy", Target.HUB, Transport.HTTP, ProxyMode.PROXIED,
           "HTTP Request To Hub With Proxy", 200),
    _check("http_to_rails_with_proxy", Target.RAILS, Transport.HTTP, ProxyMode.PROXIED,
           "HTTP Request To Rails With Proxy", 301),
)


class CheckRegistry:
    """Decides once which checks apply and how their requests are built.

    Proxy checks are included only if a proxy is configured when :meth:`decide`
    first runs. Later calls return the same tuple.
    """

    def __init__(self, hub_url: str, rails_url: str, proxy: Optional[ProxyConfig] = None) -> None:
        self._urls: Dict[Target, str] = {Target.HUB: hub_url, Target.RAILS: rails_url}
        self._proxy = proxy
        self._decided = False
        self._checks: Tuple[CheckDefinition, ...] = ()
        self._builders: Dict[ProxyMode, RequestBuilder] = {}

    @property
    def decided(self) -> bool:
        return self._decided

    @property
    def checks(self) -> Tuple[CheckDefinition, ...]:
        return self._checks

    def decide(self) -> Tuple[CheckDefinition, ...]:
        if self._decided:
            return self._checks
        for url in self._urls.values():
            parse_target_url(url)
        checks = DIRECT_CHECKS
        builders: Dict[ProxyMode, RequestBuilder] = {ProxyMode.DIRECT: build_direct_request}
        if self._proxy is not None:
            checks = checks + PROXY_CHECKS
            builders[ProxyMode.PROXIED] = proxied_builder(self._proxy)
        self._checks = checks
        self._builders = builders
        self._decided = True
        return self._checks

    def url_for(self, target: Target) -> str:
        return self._urls[target]

    def build_request(self, check: CheckDefinition) -> RequestDescriptor:
        self.decide()
        return self._builders[check.proxy_mode](self.url_for(check.target), check.transport)
