from __future__ import annotations

import typer
from rich import print

from .. import workflows
from ..models.user import UserListOptions
from .common import build_client, handle_cli_errors

app = typer.Typer(help="Users")


@app.command("list")
@handle_cli_errors
def users_list(
    ctx: typer.Context,
    email: str | None = typer.Option(None, "--email", help="Filter by email"),
    query: str | None = typer.Option(None, "--query", help="Free-text search"),
    page_size: int | None = typer.Option(None, "--page-size", min=1, help="Items per page"),
) -> None:
    """List one page of users."""

    page = build_client(ctx).users.list(
        UserListOptions(email=email, query=query, page_size=page_size)
    )
    for user in page.items:
        print(f"{user.id} {user.email or '-'} {user.status or '-'}")


@app.command("count")
@handle_cli_errors
def users_count(
    ctx: typer.Context,
    page_size: int = typer.Option(99, "--page-size", min=1, help="Page size of the counting request"),
) -> None:
    """Print the total number of users visible to the token."""

    total = workflows.count_users(build_client(ctx), page_size=page_size)
    print(f"Obtained {total} users")


__all__ = ["app", "users_count", "users_list"]
