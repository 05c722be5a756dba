from __future__ import annotations

import typer
from rich import print

from .. import workflows
from ..models.role import RoleListOptions
from .common import build_client, handle_cli_errors

app = typer.Typer(help="Roles")


@app.command("list")
@handle_cli_errors
def roles_list(
    ctx: typer.Context,
    account: str | None = typer.Option(None, "--account", help="Filter by account ID"),
) -> None:
    """List roles with their granted permissions."""

    page = build_client(ctx).roles.list(RoleListOptions(account=account, include="permissions"))
    for role in page.items:
        granted = ",".join(perm.id for perm in role.permissions) or "-"
        print(f"[bold]{role.name}[/bold] id={role.id} permissions={granted}")


@app.command("example")
@handle_cli_errors
def roles_example(
    ctx: typer.Context,
    account: str = typer.Option(..., "--account", help="Account ID"),
    name: str = typer.Option("example-role", "--name"),
    permissions: list[str] = typer.Option(["*:*"], "--permission", help="Initial permission"),
    new_name: str = typer.Option("scalrx-role", "--new-name"),
    new_permissions: list[str] = typer.Option(
        ["*:*", "global-scope:read"], "--new-permission", help="Permission after update"
    ),
) -> None:
    """Create a role, update its name and permissions, then delete it."""

    role = workflows.role_lifecycle(
        build_client(ctx),
        account_id=account,
        name=name,
        permissions=permissions,
        new_name=new_name,
        new_permissions=new_permissions,
    )
    print(f"[green]Role lifecycle completed[/green] id={role.id}")


__all__ = ["app", "roles_example", "roles_list"]
