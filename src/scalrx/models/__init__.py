"""Re-export typed models for the scalrx SDK."""

from __future__ import annotations

from .account import Account, AccountUpdateOptions
from .account_user import AccountUser, AccountUserListOptions, AccountUserStatus
from .common import Resource, ResourceRef, WriteOptions
from .environment import (
    Environment,
    EnvironmentCreateOptions,
    EnvironmentListOptions,
    EnvironmentUpdateOptions,
)
from .policy_group import (
    Policy,
    PolicyEnforcementLevel,
    PolicyGroup,
    PolicyGroupCreateOptions,
    PolicyGroupListOptions,
    PolicyGroupStatus,
    PolicyGroupUpdateOptions,
    PolicyGroupVCSRepo,
    PolicyGroupVCSRepoOptions,
)
from .role import Permission, Role, RoleCreateOptions, RoleListOptions, RoleUpdateOptions
from .team import Team, TeamCreateOptions, TeamListOptions, TeamUpdateOptions
from .user import User, UserListOptions
from .workspace import (
    Hooks,
    HooksOptions,
    Workspace,
    WorkspaceAutoQueueRuns,
    WorkspaceCreateOptions,
    WorkspaceExecutionMode,
    WorkspaceListOptions,
    WorkspaceRunScheduleOptions,
    WorkspaceUpdateOptions,
    WorkspaceVCSRepo,
    WorkspaceVCSRepoOptions,
)

__all__ = [
    "Account",
    "AccountUpdateOptions",
    "AccountUser",
    "AccountUserListOptions",
    "AccountUserStatus",
    "Resource",
    "ResourceRef",
    "WriteOptions",
    "Environment",
    "EnvironmentCreateOptions",
    "EnvironmentListOptions",
    "EnvironmentUpdateOptions",
    "Policy",
    "PolicyEnforcementLevel",
    "PolicyGroup",
    "PolicyGroupCreateOptions",
    "PolicyGroupListOptions",
    "PolicyGroupStatus",
    "PolicyGroupUpdateOptions",
    "PolicyGroupVCSRepo",
    "PolicyGroupVCSRepoOptions",
    "Permission",
    "Role",
    "RoleCreateOptions",
    "RoleListOptions",
    "RoleUpdateOptions",
    "Team",
    "TeamCreateOptions",
    "TeamListOptions",
    "TeamUpdateOptions",
    "User",
    "UserListOptions",
    "Hooks",
    "HooksOptions",
    "Workspace",
    "WorkspaceAutoQueueRuns",
    "WorkspaceCreateOptions",
    "WorkspaceExecutionMode",
    "WorkspaceListOptions",
    "WorkspaceRunScheduleOptions",
    "WorkspaceUpdateOptions",
    "WorkspaceVCSRepo",
    "WorkspaceVCSRepoOptions",
]
