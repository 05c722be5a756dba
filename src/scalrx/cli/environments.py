from __future__ import annotations

import typer
from rich import print

from .. import workflows
from ..models.environment import EnvironmentListOptions
from .common import build_client, handle_cli_errors

app = typer.Typer(help="Environments")


@app.command("list")
@handle_cli_errors
def environments_list(
    ctx: typer.Context,
    account: str | None = typer.Option(None, "--account", help="Filter by account ID"),
    name: str | None = typer.Option(None, "--name", help="Filter by name"),
    page_size: int | None = typer.Option(None, "--page-size", min=1, help="Items per page"),
    all_pages: bool = typer.Option(False, "--all", help="Follow pagination to the last page"),
) -> None:
    """List environments."""

    client = build_client(ctx)
    options = EnvironmentListOptions(account=account, name=name, page_size=page_size)
    items = (
        list(client.environments.iter_all(options))
        if all_pages
        else client.environments.list(options).items
    )
    for env in items:
        print(f"[bold]{env.name}[/bold] id={env.id} status={env.status}")


@app.command("show")
@handle_cli_errors
def environments_show(
    ctx: typer.Context,
    environment_id: str = typer.Argument(..., help="Environment ID"),
) -> None:
    """Show an environment and when it was created."""

    env = workflows.show_environment(build_client(ctx), environment_id)
    print(f"[bold]{env.name}[/bold] id={env.id}")
    print(f"created-at={env.created_at.isoformat() if env.created_at else '-'}")


__all__ = ["app", "environments_list", "environments_show"]
