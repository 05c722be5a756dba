"""Client for users."""

from __future__ import annotations

from ..context import CallContext
from ..models.user import User, UserListOptions
from .base import ListableService


class UsersClient(ListableService[User, UserListOptions]):
    """Read-only access to users; they are managed through identity providers."""

    collection = "users"
    model = User
    noun = "user"
    options_type = UserListOptions

    def read(self, user_id: str, *, ctx: CallContext | None = None) -> User:
        return self._read(user_id, ctx=ctx)


__all__ = ["UsersClient"]
