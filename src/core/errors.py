"""Error taxonomy.

Every failure of a run is one of these. The CLI catches `HttpeekError` at the
top level, prints the message and exits non-zero; nothing is downgraded into
partial output.
"""

from __future__ import annotations


class HttpeekError(Exception):
    """Base class for all errors raised by httpeek."""


class ArgumentError(HttpeekError, ValueError):
    """Malformed URL or `key=value` token. Raised before any network activity."""


class TransportError(HttpeekError):
    """Failure during the HTTP exchange (DNS, connection, TLS, protocol)."""

    def __init__(self, message: str, *, method: str, url: str) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class RenderError(HttpeekError):
    """Unparseable `Content-Type` or a body that could not be read."""
