"""Client for accounts."""

from __future__ import annotations

from ..context import CallContext
from ..models.account import Account, AccountUpdateOptions
from .base import ResourceService


class AccountsClient(ResourceService[Account]):
    collection = "accounts"
    model = Account
    noun = "account"

    def read(self, account_id: str, *, ctx: CallContext | None = None) -> Account:
        return self._read(account_id, ctx=ctx)

    def update(
        self, account_id: str, options: AccountUpdateOptions, *, ctx: CallContext | None = None
    ) -> Account:
        return self._update(account_id, options, ctx=ctx)


__all__ = ["AccountsClient"]
