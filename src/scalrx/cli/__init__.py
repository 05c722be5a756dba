from __future__ import annotations

import typer

from . import (
    account_users,
    environments,
    policy_groups,
    profile,
    roles,
    teams,
    users,
    workspaces,
)
from .common import configure_logging

app = typer.Typer(help="scalrx CLI for the Scalr IaC platform", no_args_is_help=True)


def _register_sub_app(name: str, sub_app: typer.Typer) -> None:
    app.add_typer(sub_app, name=name)


_register_sub_app("account-users", account_users.app)
_register_sub_app("environments", environments.app)
_register_sub_app("policy-groups", policy_groups.app)
_register_sub_app("profile", profile.app)
_register_sub_app("roles", roles.app)
_register_sub_app("teams", teams.app)
_register_sub_app("users", users.app)
_register_sub_app("workspaces", workspaces.app)


@app.callback()
def main(
    ctx: typer.Context,
    profile_name: str | None = typer.Option(
        None, "--profile", envvar="SCALRX_PROFILE", help="Stored profile to connect with"
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging threshold"),
) -> None:
    """Initialize logging and shared Typer context state."""

    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["profile"] = profile_name


__all__ = [
    "account_users",
    "app",
    "environments",
    "policy_groups",
    "profile",
    "roles",
    "teams",
    "users",
    "workspaces",
]
