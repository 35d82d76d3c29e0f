"""httpeek command line.

`get` and `post` each perform exactly one request-response cycle:
arguments -> `RequestDescriptor` -> `HttpTransport.send` -> `render_response`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Annotated, Callable, Optional

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from adapters.http_client import HttpxTransport
from cli.ui_components import render_response
from core.config import PROGRAM_NAME, AppSettings, __version__, configure_logging
from core.domain.models import HttpMethod, RequestDescriptor, UrlKeyValue
from core.errors import ArgumentError, HttpeekError
from core.interfaces.transport import HttpTransport
from core.services.request_builder import build_request, parse_key_value, parse_url

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=PROGRAM_NAME,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="httpie-style HTTP client: one request, pretty-printed response.",
)

_console = Console()
_err_console = Console(stderr=True)


@dataclass
class CliState:
    """Per-invocation state shared by the callback and the subcommands.

    `transport` is the httpx transport handed to the client; tests pass an
    `httpx.MockTransport` through `CliRunner.invoke(..., obj=CliState(...))`.
    """

    settings: AppSettings | None = None
    transport: httpx.AsyncBaseTransport | None = None
    console: Console = field(default_factory=lambda: _console)
    err_console: Console = field(default_factory=lambda: _err_console)
    debug: bool = False

    def build_transport(self) -> HttpTransport:
        return HttpxTransport(self.settings or AppSettings(), transport=self.transport)


def _as_bad_parameter(parser: Callable[[str], object]) -> Callable[[str], object]:
    def convert(value: str) -> object:
        try:
            return parser(value)
        except ArgumentError as exc:
            raise typer.BadParameter(str(exc)) from exc

    return convert


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROGRAM_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    debug: Annotated[bool, typer.Option("--debug", "-d", help="Print debug info on stderr.")] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    state = ctx.obj if isinstance(ctx.obj, CliState) else CliState()
    state.debug = debug
    ctx.obj = state
    configure_logging(debug=debug, console=state.err_console)


async def _exchange(state: CliState, request: RequestDescriptor) -> None:
    transport = state.build_transport()
    async with transport.send(request) as response:
        await render_response(state.console, response)


def _run(ctx: typer.Context, request: RequestDescriptor) -> None:
    state: CliState = ctx.obj
    try:
        asyncio.run(_exchange(state, request))
    except HttpeekError as exc:
        logger.debug("Run failed", exc_info=exc)
        state.err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc


@app.command()
def get(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(parser=_as_bad_parameter(parse_url), help="Absolute URL.")],
) -> None:
    """fire a http get request for you"""

    try:
        request = build_request(HttpMethod.GET, url)
    except ArgumentError as exc:
        raise typer.BadParameter(str(exc), param_hint="URL") from exc
    _run(ctx, request)


@app.command()
def post(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(parser=_as_bad_parameter(parse_url), help="Absolute URL.")],
    body: Annotated[
        Optional[list[UrlKeyValue]],
        typer.Argument(
            parser=_as_bad_parameter(parse_key_value),
            help="Body fields as key=value, sent as a JSON object.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """fire a http post request for you"""

    try:
        request = build_request(HttpMethod.POST, url, body or [])
    except ArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _run(ctx, request)


def run() -> None:
    app()
