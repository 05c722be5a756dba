from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

import pydantic
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..client import ScalrClient
from ..config import ClientConfig, ConfigStore
from ..errors import ConfigurationError, HttpError, ScalrError

console = Console()

LOG_FORMAT = "%(message)s"


def configure_logging(level: str) -> None:
    """Route ``scalrx`` log records through a single :class:`RichHandler`."""

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}")
    package_logger = logging.getLogger("scalrx")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    handler = RichHandler(show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric)


def _render_http_error(exc: HttpError) -> None:
    console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
    details = getattr(exc, "details", None)
    if details:
        snippet = details
        if isinstance(details, dict):
            snippet = json.dumps(details, indent=2)
        console.print(str(snippet), markup=False)


CommandParams = ParamSpec("CommandParams")
CommandReturn = TypeVar("CommandReturn")


def handle_cli_errors(
    func: Callable[CommandParams, CommandReturn],
) -> Callable[CommandParams, CommandReturn]:
    @wraps(func)
    def wrapper(*args: CommandParams.args, **kwargs: CommandParams.kwargs) -> CommandReturn:
        try:
            return func(*args, **kwargs)
        except typer.BadParameter:
            raise
        except typer.Exit:
            raise
        except HttpError as exc:
            _render_http_error(exc)
            raise typer.Exit(1) from None
        except ConfigurationError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            console.print(
                "Export SCALR_TOKEN or run `scalrx profile set NAME --token ...` to store credentials."
            )
            raise typer.Exit(1) from None
        except ScalrError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise typer.Exit(1) from None
        except pydantic.ValidationError as exc:
            console.print(
                f"[red]Error:[/red] Invalid input: {escape(str(exc))}", highlight=False
            )
            raise typer.Exit(1) from None
        except Exception as exc:
            if os.getenv("SCALRX_DEBUG"):
                raise
            console.print(f"[red]Error:[/red] Unexpected failure: {escape(str(exc))}")
            console.print("Set SCALRX_DEBUG=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


def resolve_client_config(ctx: typer.Context, *, store: ConfigStore | None = None) -> ClientConfig:
    """Build the connection settings for the current invocation.

    The token comes from ``SCALR_TOKEN`` when exported, otherwise from the
    selected (or default) profile. Blank fields fall back to the client
    defaults.
    """

    ctx_obj = cast(dict[str, Any], ctx.ensure_object(dict))
    profile_name = ctx_obj.get("profile")
    profile = (store or ConfigStore()).get_profile(profile_name)
    if profile_name and profile is None:
        raise typer.BadParameter(f"Profile '{profile_name}' not found")
    config = profile.to_client_config() if profile else ClientConfig()
    env_token = os.getenv("SCALR_TOKEN")
    if env_token:
        config.token = env_token
    env_address = os.getenv("SCALR_ADDRESS")
    if env_address and not config.address:
        config.address = env_address
    return config


def build_client(ctx: typer.Context) -> ScalrClient:
    ctx_obj = cast(dict[str, Any], ctx.ensure_object(dict))
    client = ctx_obj.get("client")
    if client is None:
        client = ScalrClient(resolve_client_config(ctx))
        ctx_obj["client"] = client
        ctx.call_on_close(client.close)
    return cast(ScalrClient, client)


__all__ = [
    "build_client",
    "configure_logging",
    "console",
    "handle_cli_errors",
    "resolve_client_config",
]
