"""Commands for inspecting and mutating stored scalrx profiles."""

from __future__ import annotations

import typer
from rich import print

from ..config import ConfigStore, Profile
from .common import handle_cli_errors

app = typer.Typer(help="Profiles & configuration")

MASK_PLACEHOLDER = "<hidden>"


def _parse_headers(values: list[str] | None) -> dict[str, str]:
    headers: dict[str, str] = {}
    for raw in values or []:
        key, sep, value = raw.partition(":")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Header must look like 'Name: value', got {raw!r}")
        headers[key.strip()] = value.strip()
    return headers


@app.command("set")
@handle_cli_errors
def profile_set(
    name: str = typer.Argument(..., help="Profile name"),
    address: str | None = typer.Option(None, "--address", help="Service URL"),
    token: str | None = typer.Option(None, "--token", help="API token"),
    headers: list[str] | None = typer.Option(
        None, "--header", help="Extra header as 'Name: value' (repeatable)"
    ),
    set_default: bool = typer.Option(False, "--default", help="Make this the default profile"),
) -> None:
    """Create or update a profile; omitted options keep their stored values."""

    store = ConfigStore()
    profile = store.load().profiles.get(name) or Profile(name=name)
    if address is not None:
        profile.address = address
    if token is not None:
        profile.token = token
    if headers:
        profile.headers = _parse_headers(headers)
    cfg = store.add_or_update_profile(profile, set_default=set_default)
    suffix = " (default)" if cfg.default_profile == name else ""
    print(f"[green]Saved profile[/green] {name}{suffix}")


@app.command("list")
@handle_cli_errors
def profile_list() -> None:
    """Show all saved profiles, highlighting the default profile."""

    cfg = ConfigStore().load()
    for name in sorted(cfg.profiles):
        star = "*" if cfg.default_profile == name else " "
        print(f"{star} {name}")


@app.command("show")
@handle_cli_errors
def profile_show(name: str = typer.Argument(..., help="Profile name")) -> None:
    """Display a stored profile with its token masked."""

    profile = ConfigStore().get_profile(name)
    if profile is None:
        raise typer.BadParameter(f"Profile '{name}' not found")
    print(f"name={profile.name}")
    print(f"address={profile.address or '-'}")
    print(f"token={MASK_PLACEHOLDER if profile.token else '-'}")
    for key, value in profile.headers.items():
        print(f"header {key}: {value}")


@app.command("use")
@handle_cli_errors
def profile_use(name: str = typer.Argument(..., help="Profile name")) -> None:
    try:
        ConfigStore().set_default_profile(name)
    except KeyError:
        raise typer.BadParameter(f"Profile '{name}' not found") from None
    print(f"Default profile set to {name}")


@app.command("delete")
@handle_cli_errors
def profile_delete(name: str = typer.Argument(..., help="Profile name")) -> None:
    try:
        ConfigStore().delete_profile(name)
    except KeyError:
        raise typer.BadParameter(f"Profile '{name}' not found") from None
    print(f"[green]Deleted profile[/green] {name}")


__all__ = [
    "MASK_PLACEHOLDER",
    "app",
    "profile_delete",
    "profile_list",
    "profile_set",
    "profile_show",
    "profile_use",
]
