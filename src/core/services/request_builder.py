"""Request construction.

Turns raw command arguments (a URL string, optional `key=value` tokens) into a
validated `RequestDescriptor`. Everything here is pure: no I/O, and every
failure is an `ArgumentError` raised before the network is touched.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import httpx

from core.domain.models import GetRequest, HttpMethod, PostRequest, RequestDescriptor, UrlKeyValue
from core.errors import ArgumentError

logger = logging.getLogger(__name__)


def parse_url(value: str) -> str:
    """Validate that `value` is an absolute URL and return it unchanged."""

    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise ArgumentError(f"invalid url {value!r}: {exc}") from exc
    if not url.is_absolute_url:
        raise ArgumentError(f"invalid url {value!r}: scheme and host are required")
    return value


def parse_key_value(token: str) -> UrlKeyValue:
    """Split `token` on `=` discarding empty fragments; exactly two must remain.

    `a=b` -> ("a", "b"); `a=b=c`, `=b` and `noequals` are rejected.
    """

    parts = [part for part in token.split("=") if part]
    if len(parts) != 2:
        raise ArgumentError(f"parse url param error: {token}")
    return UrlKeyValue(key=parts[0], value=parts[1])


def build_post_body(pairs: Iterable[UrlKeyValue]) -> dict[str, str]:
    """Fold pairs into a JSON object body. Later duplicate keys win."""

    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


def build_request(
    method: HttpMethod,
    url: str,
    params: Sequence[UrlKeyValue | str] = (),
) -> RequestDescriptor:
    method = HttpMethod(method)
    url = parse_url(url)
    pairs = [p if isinstance(p, UrlKeyValue) else parse_key_value(p) for p in params]

    if method is HttpMethod.GET:
        if pairs:
            raise ArgumentError("GET requests do not take body parameters")
        request: RequestDescriptor = GetRequest(url=url)
    else:
        request = PostRequest(url=url, body=build_post_body(pairs))

    logger.debug("Built request: %r", request)
    return request
