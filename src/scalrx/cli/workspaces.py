from __future__ import annotations

import typer
from rich import print

from .. import workflows
from ..models.workspace import (
    Workspace,
    WorkspaceCreateOptions,
    WorkspaceListOptions,
    WorkspaceRunScheduleOptions,
    WorkspaceUpdateOptions,
)
from .common import build_client, handle_cli_errors

app = typer.Typer(help="Terraform workspaces")


def _print_workspace(ws: Workspace) -> None:
    print(
        f"[bold]{ws.name}[/bold] id={ws.id} auto-apply={ws.auto_apply} "
        f"terraform-version={ws.terraform_version}"
    )


@app.command("list")
@handle_cli_errors
def workspaces_list(
    ctx: typer.Context,
    environment: str | None = typer.Option(None, "--environment", help="Filter by environment ID"),
    name: str | None = typer.Option(None, "--name", help="Filter by name"),
    all_pages: bool = typer.Option(False, "--all", help="Follow pagination to the last page"),
) -> None:
    client = build_client(ctx)
    options = WorkspaceListOptions(environment=environment, name=name)
    items = (
        list(client.workspaces.iter_all(options))
        if all_pages
        else client.workspaces.list(options).items
    )
    for ws in items:
        _print_workspace(ws)


@app.command("show")
@handle_cli_errors
def workspaces_show(
    ctx: typer.Context,
    workspace_id: str | None = typer.Argument(None, help="Workspace ID"),
    environment: str | None = typer.Option(
        None, "--environment", help="Look up by name inside this environment"
    ),
    name: str | None = typer.Option(None, "--name", help="Workspace name"),
) -> None:
    """Show a workspace by ID, or by ``--environment`` and ``--name``."""

    client = build_client(ctx)
    if workspace_id:
        ws = client.workspaces.read(workspace_id)
    elif environment and name:
        ws = client.workspaces.read_by_name(environment, name)
    else:
        raise typer.BadParameter("Pass a workspace ID or both --environment and --name.")
    _print_workspace(ws)


@app.command("create")
@handle_cli_errors
def workspaces_create(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name"),
    environment: str = typer.Option(..., "--environment", help="Environment ID"),
    auto_apply: bool | None = typer.Option(None, "--auto-apply/--no-auto-apply"),
    terraform_version: str | None = typer.Option(None, "--terraform-version"),
    working_directory: str | None = typer.Option(None, "--working-directory"),
) -> None:
    fields: dict[str, object] = {"name": name, "environment": environment}
    optional = {
        "auto_apply": auto_apply,
        "terraform_version": terraform_version,
        "working_directory": working_directory,
    }
    fields.update({key: value for key, value in optional.items() if value is not None})
    _print_workspace(build_client(ctx).workspaces.create(WorkspaceCreateOptions(**fields)))


@app.command("update")
@handle_cli_errors
def workspaces_update(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace ID"),
    name: str | None = typer.Option(None, "--name"),
    auto_apply: bool | None = typer.Option(None, "--auto-apply/--no-auto-apply"),
    terraform_version: str | None = typer.Option(None, "--terraform-version"),
    working_directory: str | None = typer.Option(None, "--working-directory"),
) -> None:
    """Update only the attributes passed on the command line."""

    candidates = {
        "name": name,
        "auto_apply": auto_apply,
        "terraform_version": terraform_version,
        "working_directory": working_directory,
    }
    fields = {key: value for key, value in candidates.items() if value is not None}
    ws = build_client(ctx).workspaces.update(workspace_id, WorkspaceUpdateOptions(**fields))
    _print_workspace(ws)


@app.command("schedule")
@handle_cli_errors
def workspaces_schedule(
    ctx: typer.Context,
    workspace_id: str = typer.Argument(..., help="Workspace ID"),
    apply_schedule: str | None = typer.Option(None, "--apply", help="Cron expression"),
    destroy_schedule: str | None = typer.Option(None, "--destroy", help="Cron expression"),
) -> None:
    """Set the apply and destroy schedules; omitted schedules are cleared."""

    ws = build_client(ctx).workspaces.set_schedule(
        workspace_id,
        WorkspaceRunScheduleOptions(
            apply_schedule=apply_schedule, destroy_schedule=destroy_schedule
        ),
    )
    print(f"apply-schedule={ws.apply_schedule} destroy-schedule={ws.destroy_schedule}")


@app.command("delete")
@handle_cli_errors
def workspaces_delete(
    ctx: typer.Context, workspace_id: str = typer.Argument(..., help="Workspace ID")
) -> None:
    build_client(ctx).workspaces.delete(workspace_id)
    print(f"[green]Deleted[/green] workspace {workspace_id}")


@app.command("example")
@handle_cli_errors
def workspaces_example(
    ctx: typer.Context,
    environment: str = typer.Option(..., "--environment", help="Environment ID"),
    name: str = typer.Option("example-ws", "--name"),
) -> None:
    """Create a workspace, then turn off auto-apply and pin Terraform 0.12.28."""

    ws = workflows.workspace_workflow(build_client(ctx), environment_id=environment, name=name)
    _print_workspace(ws)


__all__ = [
    "app",
    "workspaces_create",
    "workspaces_delete",
    "workspaces_example",
    "workspaces_list",
    "workspaces_schedule",
    "workspaces_show",
    "workspaces_update",
]
