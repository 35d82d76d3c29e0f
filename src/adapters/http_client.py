"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and the redirect policy in one place.
- Makes testing easy: an `httpx.MockTransport` can be injected.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from core.config import AppSettings
from core.domain.models import PostRequest, RequestDescriptor
from core.errors import TransportError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the CLI defaults.

    `User-Agent` is the only default request header.
    """

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        max_redirects=settings.max_redirects,
        verify=settings.verify_tls,
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    )


class HttpxTransport:
    """Performs exactly one exchange per `send`. No retries."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def _build(self, client: httpx.AsyncClient, request: RequestDescriptor) -> httpx.Request:
        if isinstance(request, PostRequest):
            return client.build_request(request.method.value, request.url, json=request.body)
        return client.build_request(request.method.value, request.url)

    @asynccontextmanager
    async def send(self, request: RequestDescriptor) -> AsyncIterator[httpx.Response]:
        method = request.method.value
        async with build_async_client(self._settings, transport=self._transport) as client:
            http_request = self._build(client, request)
            logger.debug("Sending %s %s headers=%s", method, request.url, dict(http_request.headers))
            try:
                response = await client.send(http_request, stream=True)
            except httpx.HTTPError as exc:
                raise TransportError(
                    f"{method} {request.url} failed: {str(exc) or exc.__class__.__name__}",
                    method=method,
                    url=request.url,
                ) from exc

            logger.debug("Received %s %s", response.status_code, response.http_version)
            try:
                yield response
            finally:
                await response.aclose()
