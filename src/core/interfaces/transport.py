"""HTTP transport contract.

Why Protocol:
- Structural contract (duck typing) with no inheritance.
- Lets the CLI run against `HttpxTransport` or a test double interchangeably.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol, runtime_checkable

import httpx

from core.domain.models import RequestDescriptor


@runtime_checkable
class HttpTransport(Protocol):
    """Minimal contract for performing one HTTP exchange.

    Design rules:
    - `send` is an async context manager: the response body is a stream that
      stays open while the caller renders it and is closed on exit.
    - Transport failures surface as `core.errors.TransportError`.
    """

    def send(self, request: RequestDescriptor) -> AbstractAsyncContextManager[httpx.Response]:
        """Send `request` and yield the streamed response."""

        ...
