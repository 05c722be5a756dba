"""Client for roles."""

from __future__ import annotations

from ..context import CallContext
from ..models.role import Role, RoleCreateOptions, RoleListOptions, RoleUpdateOptions
from .base import ListableService


class RolesClient(ListableService[Role, RoleListOptions]):
    collection = "roles"
    model = Role
    noun = "role"
    options_type = RoleListOptions

    def create(self, options: RoleCreateOptions, *, ctx: CallContext | None = None) -> Role:
        return self._create(options, ctx=ctx)

    def read(self, role_id: str, *, ctx: CallContext | None = None) -> Role:
        return self._read(role_id, ctx=ctx)

    def update(
        self, role_id: str, options: RoleUpdateOptions, *, ctx: CallContext | None = None
    ) -> Role:
        return self._update(role_id, options, ctx=ctx)

    def delete(self, role_id: str, *, ctx: CallContext | None = None) -> None:
        self._delete(role_id, ctx=ctx)


__all__ = ["RolesClient"]
