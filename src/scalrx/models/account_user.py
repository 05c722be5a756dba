"""Typed models for account-user relations."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ..pagination import ListOptions
from .account import Account
from .common import Resource
from .team import Team
from .user import User


class AccountUserStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    PENDING = "Pending"


class AccountUser(Resource):
    """Membership of one user in one account."""

    status: str | None = None

    account: Account | None = None
    user: User | None = None
    teams: list[Team] = Field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.status == AccountUserStatus.ACTIVE.value


class AccountUserListOptions(ListOptions):
    """Filters for account-user relations.

    The service requires ``account`` or ``user``; that rule is enforced
    remotely.
    """

    account: str | None = Field(default=None, alias="filter[account]")
    user: str | None = Field(default=None, alias="filter[user]")
    query: str | None = None
    sort: str | None = None
    include: str | None = None


__all__ = ["AccountUser", "AccountUserListOptions", "AccountUserStatus"]
