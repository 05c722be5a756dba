from __future__ import annotations

import typer
from rich import print

from .. import workflows
from ..models.team import Team, TeamCreateOptions, TeamUpdateOptions
from .common import build_client, handle_cli_errors

app = typer.Typer(help="Teams")


def _print_team(team: Team) -> None:
    members = ",".join(user.id for user in team.users) or "-"
    print(f"[bold]{team.name}[/bold] id={team.id} users={members}")


@app.command("list")
@handle_cli_errors
def teams_list(
    ctx: typer.Context,
    account: str = typer.Option(..., "--account", help="Account ID"),
) -> None:
    """List team names of an account."""

    for name in workflows.list_team_names(build_client(ctx), account):
        print(name)


@app.command("create")
@handle_cli_errors
def teams_create(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Team name"),
    account: str = typer.Option(..., "--account", help="Account ID"),
    description: str | None = typer.Option(None, "--description"),
    users: list[str] | None = typer.Option(None, "--user", help="Member user ID (repeatable)"),
) -> None:
    """Create a team."""

    fields: dict[str, object] = {"name": name, "account": account}
    if description is not None:
        fields["description"] = description
    if users:
        fields["users"] = users
    team = build_client(ctx).teams.create(TeamCreateOptions(**fields))
    _print_team(team)


@app.command("update")
@handle_cli_errors
def teams_update(
    ctx: typer.Context,
    team_id: str = typer.Argument(..., help="Team ID"),
    name: str | None = typer.Option(None, "--name"),
    description: str | None = typer.Option(None, "--description"),
    users: list[str] | None = typer.Option(
        None, "--user", help="Replace members with these user IDs (repeatable)"
    ),
) -> None:
    """Update only the attributes passed on the command line."""

    fields = {
        key: value
        for key, value in {"name": name, "description": description, "users": users}.items()
        if value
    }
    team = build_client(ctx).teams.update(team_id, TeamUpdateOptions(**fields))
    _print_team(team)


@app.command("delete")
@handle_cli_errors
def teams_delete(ctx: typer.Context, team_id: str = typer.Argument(..., help="Team ID")) -> None:
    build_client(ctx).teams.delete(team_id)
    print(f"[green]Deleted[/green] team {team_id}")


@app.command("example")
@handle_cli_errors
def teams_example(
    ctx: typer.Context,
    account: str = typer.Option(..., "--account", help="Account ID"),
    users: list[str] = typer.Option(..., "--user", help="Initial member user ID (repeatable)"),
    new_users: list[str] = typer.Option(..., "--new-user", help="Member user ID after update"),
) -> None:
    """List teams, create ``dev`` with members, then rename it and swap members."""

    team = workflows.team_workflow(
        build_client(ctx), account_id=account, user_ids=users, new_user_ids=new_users
    )
    _print_team(team)


__all__ = ["app", "teams_create", "teams_delete", "teams_example", "teams_list", "teams_update"]
