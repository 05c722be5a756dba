"""Example workflows: short, linear sequences of calls that log what they did.

Every workflow stops at the first failing call. The failing step is logged
at CRITICAL and the original exception propagates to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from .client import ScalrClient
from .context import CallContext
from .errors import ScalrError
from .models.account_user import AccountUserListOptions
from .models.environment import Environment
from .models.policy_group import (
    PolicyGroup,
    PolicyGroupCreateOptions,
    PolicyGroupUpdateOptions,
    PolicyGroupVCSRepoOptions,
)
from .models.role import Role, RoleCreateOptions, RoleUpdateOptions
from .models.team import Team, TeamCreateOptions, TeamListOptions, TeamUpdateOptions
from .models.user import UserListOptions
from .models.workspace import Workspace, WorkspaceCreateOptions, WorkspaceUpdateOptions

logger = logging.getLogger(__name__)


@contextmanager
def step(name: str) -> Iterator[None]:
    """Log a fatal message naming ``name`` if the wrapped call fails."""

    try:
        yield
    except ScalrError as exc:
        logger.critical("%s failed: %s", name, exc)
        raise


def active_account_users(
    client: ScalrClient, account_id: str, *, ctx: CallContext | None = None
) -> list[str]:
    """Return usernames holding an active relation with ``account_id``."""

    with step(f"list users of account {account_id}"):
        page = client.account_users.list(
            AccountUserListOptions(account=account_id, include="user"), ctx=ctx
        )

    if not page.items:
        logger.info("No users found in account %s", account_id)
        return []
    active = [rel.user.username or rel.user.id for rel in page.items if rel.is_active and rel.user]
    if not active:
        logger.info("No active relations found for account %s", account_id)
    else:
        logger.info("Active users in account %s: %s", account_id, ", ".join(active))
    return active


def active_user_accounts(
    client: ScalrClient, user_id: str, *, ctx: CallContext | None = None
) -> list[str]:
    """Return names of accounts where ``user_id`` is active."""

    with step(f"list accounts of user {user_id}"):
        page = client.account_users.list(
            AccountUserListOptions(user=user_id, include="account"), ctx=ctx
        )

    if not page.items:
        logger.info("No accounts found for user %s", user_id)
        return []
    active = [
        rel.account.name or rel.account.id for rel in page.items if rel.is_active and rel.account
    ]
    if not active:
        logger.info("No active accounts found for user %s", user_id)
    else:
        logger.info("Active accounts for user %s: %s", user_id, ", ".join(active))
    return active


def show_environment(
    client: ScalrClient, environment_id: str, *, ctx: CallContext | None = None
) -> Environment:
    with step(f"read environment {environment_id}"):
        env = client.environments.read(environment_id, ctx=ctx)
    logger.info("Environment created at %s", env.created_at)
    return env


def policy_group_lifecycle(
    client: ScalrClient,
    *,
    account_id: str,
    vcs_provider_id: str,
    repo_identifier: str,
    name: str = "example-policy-group",
    opa_version: str | None = "0.29.4",
    branch: str = "dev",
    path: str = "opa",
    new_name: str = "scalrx-policy-group",
    new_branch: str = "main",
    ctx: CallContext | None = None,
) -> PolicyGroup:
    """Create a policy group, move it to another name and branch, then delete it."""

    create = PolicyGroupCreateOptions(
        name=name,
        account=account_id,
        vcs_provider=vcs_provider_id,
        vcs_repo=PolicyGroupVCSRepoOptions(identifier=repo_identifier, branch=branch, path=path),
        **({"opa_version": opa_version} if opa_version else {}),
    )
    with step("create policy group"):
        pg = client.policy_groups.create(create, ctx=ctx)
    logger.info("The policy group with name %s was created. ID: %s", pg.name, pg.id)

    update = PolicyGroupUpdateOptions(
        name=new_name,
        vcs_repo=PolicyGroupVCSRepoOptions(
            identifier=repo_identifier, branch=new_branch, path=path
        ),
    )
    with step(f"update policy group {pg.id}"):
        pg = client.policy_groups.update(pg.id, update, ctx=ctx)
    repo = pg.vcs_repo.model_dump(exclude_none=True) if pg.vcs_repo else {}
    logger.info("The policy group with id %s was updated. New repo config: %s", pg.id, repo)

    with step(f"delete policy group {pg.id}"):
        client.policy_groups.delete(pg.id, ctx=ctx)
    logger.info("The policy group with id %s was deleted.", pg.id)
    return pg


def role_lifecycle(
    client: ScalrClient,
    *,
    account_id: str,
    name: str = "example-role",
    description: str = "This role is created from scalrx",
    permissions: Sequence[str] = ("*:*",),
    new_name: str = "scalrx-role",
    new_permissions: Sequence[str] = ("*:*", "global-scope:read"),
    ctx: CallContext | None = None,
) -> Role:
    """Create a role, replace its name and permissions, then delete it."""

    with step("create role"):
        role = client.roles.create(
            RoleCreateOptions(
                name=name,
                description=description,
                account=account_id,
                permissions=list(permissions),
            ),
            ctx=ctx,
        )
    logger.info("The role with name %s was created. ID: %s", role.name, role.id)

    with step(f"update role {role.id}"):
        role = client.roles.update(
            role.id,
            RoleUpdateOptions(name=new_name, permissions=list(new_permissions)),
            ctx=ctx,
        )
    granted = [perm.id for perm in role.permissions]
    logger.info("The role with id %s was updated. New permissions: %s", role.id, granted)

    with step(f"delete role {role.id}"):
        client.roles.delete(role.id, ctx=ctx)
    logger.info("The role with id %s was deleted.", role.id)
    return role


def list_team_names(
    client: ScalrClient, account_id: str, *, ctx: CallContext | None = None
) -> list[str]:
    with step(f"list teams of account {account_id}"):
        page = client.teams.list(TeamListOptions(account=account_id), ctx=ctx)
    if page.total_count == 0:
        logger.info("No teams found in account %s", account_id)
        return []
    names = [team.name or team.id for team in page.items]
    logger.info("Teams in account %s: %s", account_id, ", ".join(names))
    return names


def team_workflow(
    client: ScalrClient,
    *,
    account_id: str,
    user_ids: Sequence[str],
    new_user_ids: Sequence[str],
    name: str = "dev",
    description: str = "Developers",
    new_name: str = "dev-new",
    ctx: CallContext | None = None,
) -> Team:
    """List the account's teams, create one with members, then rename it and swap members."""

    list_team_names(client, account_id, ctx=ctx)

    with step("create team"):
        team = client.teams.create(
            TeamCreateOptions(
                name=name,
                description=description,
                account=account_id,
                users=list(user_ids),
            ),
            ctx=ctx,
        )
    logger.info("The team with name %s was created. ID: %s", team.name, team.id)

    with step(f"update team {team.id}"):
        team = client.teams.update(
            team.id, TeamUpdateOptions(name=new_name, users=list(new_user_ids)), ctx=ctx
        )
    logger.info("The team with id %s was updated. Members: %s", team.id, [u.id for u in team.users])
    return team


def count_users(
    client: ScalrClient, *, page_size: int = 99, ctx: CallContext | None = None
) -> int:
    with step("list users"):
        page = client.users.list(UserListOptions(page_size=page_size), ctx=ctx)
    logger.info("Obtained %d users", page.total_count)
    return page.total_count


def workspace_workflow(
    client: ScalrClient,
    *,
    environment_id: str,
    name: str = "example-ws",
    auto_apply: bool = False,
    terraform_version: str = "0.12.28",
    working_directory: str = "my-app/infra",
    ctx: CallContext | None = None,
) -> Workspace:
    """Create a workspace in ``environment_id`` and then adjust its run settings."""

    with step("create workspace"):
        ws = client.workspaces.create(
            WorkspaceCreateOptions(name=name, environment=environment_id), ctx=ctx
        )
    logger.info("The workspace with name %s was created. ID: %s", ws.name, ws.id)

    with step(f"update workspace {ws.id}"):
        ws = client.workspaces.update(
            ws.id,
            WorkspaceUpdateOptions(
                auto_apply=auto_apply,
                terraform_version=terraform_version,
                working_directory=working_directory,
            ),
            ctx=ctx,
        )
    logger.info(
        "The workspace with id %s was updated. auto-apply=%s terraform-version=%s",
        ws.id,
        ws.auto_apply,
        ws.terraform_version,
    )
    return ws


__all__ = [
    "active_account_users",
    "active_user_accounts",
    "count_users",
    "list_team_names",
    "policy_group_lifecycle",
    "role_lifecycle",
    "show_environment",
    "step",
    "team_workflow",
    "workspace_workflow",
]
