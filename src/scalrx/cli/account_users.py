"""Inspect which users belong to an account, and which accounts a user belongs to."""

from __future__ import annotations

import typer
from rich import print

from .. import workflows
from ..models.account_user import AccountUserListOptions
from .common import build_client, handle_cli_errors

app = typer.Typer(help="Account membership")


@app.command("list")
@handle_cli_errors
def account_users_list(
    ctx: typer.Context,
    account: str | None = typer.Option(None, "--account", help="Filter by account ID"),
    user: str | None = typer.Option(None, "--user", help="Filter by user ID"),
    include: str | None = typer.Option(None, "--include", help="Related resources to include"),
) -> None:
    """List account-user relations as ``<account> <user> <status>``."""

    client = build_client(ctx)
    page = client.account_users.list(
        AccountUserListOptions(account=account, user=user, include=include)
    )
    for rel in page.items:
        account_id = rel.account.id if rel.account else "-"
        user_id = rel.user.id if rel.user else "-"
        print(f"{account_id} {user_id} {rel.status}")


@app.command("active")
@handle_cli_errors
def account_users_active(
    ctx: typer.Context,
    account: str | None = typer.Option(None, "--account", help="Account ID"),
    user: str | None = typer.Option(None, "--user", help="User ID"),
) -> None:
    """Show active users of an account, or active accounts of a user."""

    if bool(account) == bool(user):
        raise typer.BadParameter("Pass exactly one of --account or --user.")
    client = build_client(ctx)
    if account:
        names = workflows.active_account_users(client, account)
    else:
        names = workflows.active_user_accounts(client, user or "")
    for name in names:
        print(name)


__all__ = ["app", "account_users_active", "account_users_list"]
