"""Async HTTP client with retries and client-side rate limiting."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter
from httpx_retries import Retry, RetryTransport

from bridgetx.config.http_resilience import RateLimit, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import QueryParamTypes

__all__ = [
    "RateLimit",
    "ResilienceConfig",
    "ResilientClient",
    "RetryPolicy",
    "build_retry",
]

log = getLogger(__name__)


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=tuple(policy.allowed_methods),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
        backoff_jitter=policy.backoff_jitter,
    )


def _build_async_client(
    config: ResilienceConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    retrying = RetryTransport(transport=transport, retry=build_retry(config.retry))
    headers = dict(config.default_headers) if config.default_headers else None
    if config.base_url is None:
        return httpx.AsyncClient(
            timeout=config.timeout_seconds,
            headers=headers,
            transport=retrying,
        )
    return httpx.AsyncClient(
        base_url=config.base_url,
        timeout=config.timeout_seconds,
        headers=headers,
        transport=retrying,
    )


class ResilientClient:
    """Read-only HTTP client; one instance per ``async with`` block.

    ``transport`` replaces the network transport underneath the retry layer.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter: AsyncLimiter | None = None
        if config.ratelimit is not None:
            self._limiter = AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
        self._client = _build_async_client(config, transport)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, *, params: QueryParamTypes | None = None) -> httpx.Response:
        if self._limiter is None:
            return await self._get(url, params)
        async with self._limiter:
            return await self._get(url, params)

    async def _get(self, url: str, params: QueryParamTypes | None) -> httpx.Response:
        log.debug("[%s] GET %s params=%s", self.config.name, url, params)
        response = await self._client.get(url, params=params)
        log.debug("[%s] %s %s", self.config.name, response.status_code, response.url)
        return response
