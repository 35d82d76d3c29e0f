from collections.abc import Callable
from io import StringIO

import httpx
import pytest
from rich.console import Console

from core.config import AppSettings

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """`MockTransport` that keeps every request it handled."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def console_file() -> StringIO:
    return StringIO()


@pytest.fixture
def console(console_file: StringIO) -> Console:
    return Console(file=console_file, force_terminal=True, color_system="truecolor", width=120)


@pytest.fixture
def plain_console(console_file: StringIO) -> Console:
    return Console(file=console_file, force_terminal=False, color_system=None, width=120)


@pytest.fixture
def make_transport() -> Callable[[Handler], RecordingTransport]:
    return RecordingTransport
