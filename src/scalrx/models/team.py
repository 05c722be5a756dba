"""Typed models for teams."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ..pagination import ListOptions
from .account import Account
from .common import Resource, ResourceRef, WriteOptions
from .user import User


class Team(Resource):
    name: str | None = None
    description: str | None = None

    account: Account | None = None
    identity_provider: ResourceRef | None = Field(default=None, alias="identity-provider")
    users: list[User] = Field(default_factory=list)


class TeamListOptions(ListOptions):
    team: str | None = Field(default=None, alias="filter[team]")
    name: str | None = Field(default=None, alias="filter[name]")
    account: str | None = Field(default=None, alias="filter[account]")
    identity_provider: str | None = Field(default=None, alias="filter[identity-provider]")
    query: str | None = None
    sort: str | None = None
    include: str | None = None


class TeamCreateOptions(WriteOptions):
    relationships: ClassVar[dict[str, str]] = {
        "account": "accounts",
        "identity_provider": "identity-providers",
        "users": "users",
    }

    name: str
    description: str | None = None

    account: str | None = None
    identity_provider: str | None = Field(default=None, alias="identity-provider")
    users: list[str] | None = None


class TeamUpdateOptions(WriteOptions):
    relationships: ClassVar[dict[str, str]] = {"users": "users"}

    name: str | None = None
    description: str | None = None

    users: list[str] | None = None


__all__ = ["Team", "TeamCreateOptions", "TeamListOptions", "TeamUpdateOptions"]
