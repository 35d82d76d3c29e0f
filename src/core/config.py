"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets the HTTP adapter read its transport defaults consistently.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from rich.logging import RichHandler

__version__ = "0.1.0"

PROGRAM_NAME = "httpeek"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / PROGRAM_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / PROGRAM_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / PROGRAM_NAME
    return Path.home() / ".config" / PROGRAM_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Only transport defaults live here; requests themselves are always built
    from command-line arguments.
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTPEEK_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    user_agent: str = Field(
        default=f"{PROGRAM_NAME}/{__version__}",
        min_length=1,
        description="User-Agent header attached to every request.",
    )
    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow 3xx redirects.",
    )
    max_redirects: int = Field(
        default=10,
        ge=0,
        le=50,
        description="Maximum redirects followed for one request.",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verify server TLS certificates.",
    )


def configure_logging(*, debug: bool = False, console: Console | None = None) -> None:
    """Route log records to stderr through Rich. stdout is reserved for the response."""

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=debug,
        rich_tracebacks=debug,
    )
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # httpcore is noisy at DEBUG; keep it one level above ours.
    logging.getLogger("httpcore").setLevel(logging.INFO if debug else logging.WARNING)
