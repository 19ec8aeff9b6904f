from __future__ import annotations

import asyncio
import time
from typing import Iterable, Optional

import httpx

from core.logging.logger import StructuredLogger
from domain.entities import CheckOutcome, RequestDescriptor
from domain.enums import Transport

TIMED_OUT = "Request Timed Out"


class RequestExecutor:
    """Fires one request per descriptor and classifies the response.

    Every call opens its own client, so nothing is pooled between checks.
    Redirects are never followed: a 301/302 is itself the expected answer for
    some checks.
    """

    def __init__(
        self,
        timeout_ms: int,
        logger: StructuredLogger,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout_ms = timeout_ms
        self.logger = logger
        self._transport = transport

    async def execute(
        self,
        descriptor: RequestDescriptor,
        transport: Transport,
        description: str,
        success_codes: Iterable[int],
    ) -> CheckOutcome:
        """Return exactly one outcome; transport failures are reported, not raised."""
        codes = frozenset(success_codes)
        url = self.target_url(descriptor, transport)
        extra = {"check": description, "host": descriptor.host, "port": descriptor.port}
        self.logger.debug(lambda: "connectivity-request-start", extra=extra)
        start = time.perf_counter()
        try:
            status, body = await asyncio.wait_for(
                self._exchange(descriptor, url),
                timeout=self.timeout_ms / 1000.0,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            self.logger.error(lambda: "connectivity-request-timeout", extra={**extra, "execution_time_ms": self._elapsed_ms(start)})
            return CheckOutcome.from_error(description, TIMED_OUT)
        except Exception as e:
            message = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
            self.logger.error(
                lambda: "connectivity-request-error",
                extra={**extra, "execution_time_ms": self._elapsed_ms(start), "error": message},
            )
            return CheckOutcome.from_error(description, message)

        outcome = CheckOutcome.from_response(description, status, codes, body)
        log = self.logger.success if outcome.passed else self.logger.warning
        log(
            lambda: "connectivity-request-ok" if outcome.passed else "connectivity-request-unexpected-status",
            extra={**extra, "execution_time_ms": self._elapsed_ms(start), "status": status},
        )
        return outcome

    async def _exchange(self, descriptor: RequestDescriptor, url: str) -> tuple[int, bytes]:
        async with self._client(descriptor) as client:
            async with client.stream(descriptor.method, url, headers=dict(descriptor.headers)) as response:
                chunks = [chunk async for chunk in response.aiter_bytes()]
                return response.status_code, b"".join(chunks)

    def _client(self, descriptor: RequestDescriptor) -> httpx.AsyncClient:
        timeout = self.timeout_ms / 1000.0
        if self._transport is not None:
            return httpx.AsyncClient(transport=self._transport, timeout=timeout, follow_redirects=False)
        proxy = None
        if descriptor.is_absolute_form:
            # Proxy-Authorization already travels in the request headers.
            proxy = httpx.Proxy(f"http://{self._netloc(descriptor.host, descriptor.port)}")
        return httpx.AsyncClient(
            proxy=proxy,
            timeout=timeout,
            follow_redirects=False,
            trust_env=False,
        )

    @classmethod
    def target_url(cls, descriptor: RequestDescriptor, transport: Transport) -> str:
        if descriptor.is_absolute_form:
            return descriptor.path
        return f"{transport.scheme}://{cls._netloc(descriptor.host, descriptor.port)}{descriptor.path}"

    @staticmethod
    def _netloc(host: str, port: int) -> str:
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"{host}:{port}"

    @staticmethod
    def _elapsed_ms(start: float) -> int:
        return int((time.perf_counter() - start) * 1000.0)
