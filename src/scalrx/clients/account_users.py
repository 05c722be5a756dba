"""Client for account-user relations."""

from __future__ import annotations

from ..models.account_user import AccountUser, AccountUserListOptions
from .base import ListableService


class AccountUsersClient(ListableService[AccountUser, AccountUserListOptions]):
    collection = "account-users"
    model = AccountUser
    noun = "account user"
    options_type = AccountUserListOptions


__all__ = ["AccountUsersClient"]
