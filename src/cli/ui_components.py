"""Response rendering (Rich).

Why separate from the commands:
- Keeps command wiring apart from presentation details.
- Every function takes the `Console` it writes to, so tests can capture output.

Output order is fixed: status line, headers, body. The body is dispatched on
the `Content-Type` header.
"""

from __future__ import annotations

import json

import httpx
from pyreqwest.http import Mime
from rich.console import Console
from rich.text import Text

from adapters.syntax_highlighter import SyntaxHighlighter, get_highlighter
from core.errors import RenderError

STYLE_RESET = "\x1b[0m"

APPLICATION_JSON = Mime.parse("application/json")


def debug_quote(value: str) -> str:
    """Quoted, escaped form of `value` (`ok` -> `"ok"`, newlines as `\\n`)."""

    return json.dumps(value, ensure_ascii=False)


def _print_plain(console: Console, value: str | Text) -> None:
    # No markup, emoji or auto-highlighting: response text is printed as-is.
    console.print(value, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _write_raw(console: Console, text: str) -> None:
    # Bypasses Text, which would expand tabs and drop control characters.
    console.file.write(text + "\n")
    console.file.flush()


def print_status_line(console: Console, response: httpx.Response) -> None:
    status = f"{response.status_code} {response.reason_phrase}".rstrip()
    _print_plain(console, Text.assemble(f"{response.http_version} ", (status, "red")))
    console.line()


def print_headers(console: Console, response: httpx.Response) -> None:
    for name, value in response.headers.multi_items():
        _print_plain(console, Text.assemble((name, "green"), ": ", debug_quote(value)))


def content_type(response: httpx.Response) -> Mime | None:
    """Parsed `Content-Type`, `None` when absent. Malformed values are fatal."""

    raw = response.headers.get("content-type")
    if raw is None:
        return None
    try:
        return Mime.parse(raw)
    except ValueError as exc:
        raise RenderError(f"invalid Content-Type header {raw!r}: {exc}") from exc


async def read_text(response: httpx.Response) -> str:
    """Read the whole body once and decode it."""

    try:
        await response.aread()
        return response.text
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError, LookupError) as exc:
        raise RenderError(f"failed to read response body: {exc}") from exc


def print_highlighted(console: Console, text: str, highlighter: SyntaxHighlighter | None = None) -> None:
    highlighter = highlighter or get_highlighter()
    for line in highlighter.highlight_lines(text):
        _print_plain(console, line)
    console.out(STYLE_RESET, highlight=False)


async def print_body(
    console: Console,
    response: httpx.Response,
    *,
    highlighter: SyntaxHighlighter | None = None,
) -> None:
    mime = content_type(response)
    text = await read_text(response)

    if mime is None:
        _write_raw(console, text)
    elif mime == APPLICATION_JSON:
        print_highlighted(console, text, highlighter)
    else:
        _print_plain(console, debug_quote(text))


async def render_response(
    console: Console,
    response: httpx.Response,
    *,
    highlighter: SyntaxHighlighter | None = None,
) -> None:
    """Print status line, headers and body of `response`."""

    print_status_line(console, response)
    print_headers(console, response)
    await print_body(console, response, highlighter=highlighter)
