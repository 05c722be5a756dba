"""Typed models for roles and permissions."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ..pagination import ListOptions
from .account import Account
from .common import Resource, WriteOptions


class Permission(Resource):
    """Permission identified by its name, e.g. ``workspaces:read``."""


class Role(Resource):
    name: str | None = None
    description: str | None = None
    is_system: bool | None = Field(default=None, alias="is-system")

    account: Account | None = None
    permissions: list[Permission] = Field(default_factory=list)


class RoleListOptions(ListOptions):
    account: str | None = Field(default=None, alias="filter[account]")
    name: str | None = Field(default=None, alias="filter[name]")
    role: str | None = Field(default=None, alias="filter[role]")
    query: str | None = None
    include: str | None = None


class RoleCreateOptions(WriteOptions):
    relationships: ClassVar[dict[str, str]] = {
        "account": "accounts",
        "permissions": "permissions",
    }

    name: str = Field(min_length=1)
    description: str | None = None

    account: str
    permissions: list[str] | None = None


class RoleUpdateOptions(WriteOptions):
    relationships: ClassVar[dict[str, str]] = {"permissions": "permissions"}

    name: str | None = None
    description: str | None = None

    permissions: list[str] | None = None


__all__ = [
    "Permission",
    "Role",
    "RoleCreateOptions",
    "RoleListOptions",
    "RoleUpdateOptions",
]
