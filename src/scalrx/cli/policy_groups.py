from __future__ import annotations

import typer
from rich import print

from .. import workflows
from ..models.policy_group import PolicyGroupListOptions
from .common import build_client, handle_cli_errors

app = typer.Typer(help="OPA policy groups")


@app.command("list")
@handle_cli_errors
def policy_groups_list(
    ctx: typer.Context,
    account: str | None = typer.Option(None, "--account", help="Filter by account ID"),
) -> None:
    page = build_client(ctx).policy_groups.list(PolicyGroupListOptions(account=account))
    for pg in page.items:
        print(f"[bold]{pg.name}[/bold] id={pg.id} status={pg.status}")


@app.command("show")
@handle_cli_errors
def policy_groups_show(
    ctx: typer.Context,
    policy_group_id: str = typer.Argument(..., help="Policy group ID"),
) -> None:
    """Show a policy group with its policies."""

    pg = build_client(ctx).policy_groups.read(policy_group_id)
    print(f"[bold]{pg.name}[/bold] id={pg.id} status={pg.status}")
    for policy in pg.policies:
        print(f"  {policy.name} enforcement={policy.enforcement_level}")


@app.command("example")
@handle_cli_errors
def policy_groups_example(
    ctx: typer.Context,
    account: str = typer.Option(..., "--account", help="Account ID"),
    vcs_provider: str = typer.Option(..., "--vcs-provider", help="VCS provider ID"),
    identifier: str = typer.Option(..., "--identifier", help="Repository, e.g. org/repo"),
    branch: str = typer.Option("dev", "--branch"),
    path: str = typer.Option("opa", "--path"),
    opa_version: str | None = typer.Option("0.29.4", "--opa-version"),
    new_name: str = typer.Option("scalrx-policy-group", "--new-name"),
    new_branch: str = typer.Option("main", "--new-branch"),
) -> None:
    """Create a policy group, point it at another branch, then delete it."""

    pg = workflows.policy_group_lifecycle(
        build_client(ctx),
        account_id=account,
        vcs_provider_id=vcs_provider,
        repo_identifier=identifier,
        branch=branch,
        path=path,
        opa_version=opa_version,
        new_name=new_name,
        new_branch=new_branch,
    )
    print(f"[green]Policy group lifecycle completed[/green] id={pg.id}")


__all__ = ["app", "policy_groups_example", "policy_groups_list", "policy_groups_show"]
