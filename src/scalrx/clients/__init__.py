from .account_users import AccountUsersClient as AccountUsersClient
from .accounts import AccountsClient as AccountsClient
from .environments import EnvironmentsClient as EnvironmentsClient
from .policy_groups import PolicyGroupsClient as PolicyGroupsClient
from .roles import RolesClient as RolesClient
from .teams import TeamsClient as TeamsClient
from .users import UsersClient as UsersClient
from .workspaces import WorkspacesClient as WorkspacesClient

__all__ = [
    "AccountUsersClient",
    "AccountsClient",
    "EnvironmentsClient",
    "PolicyGroupsClient",
    "RolesClient",
    "TeamsClient",
    "UsersClient",
    "WorkspacesClient",
]
