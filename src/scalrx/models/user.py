"""Typed models for users."""

from __future__ import annotations

from pydantic import Field

from ..pagination import ListOptions
from .common import Resource


class User(Resource):
    email: str | None = None
    username: str | None = None
    full_name: str | None = Field(default=None, alias="full-name")
    status: str | None = None


class UserListOptions(ListOptions):
    user: str | None = Field(default=None, alias="filter[user]")
    email: str | None = Field(default=None, alias="filter[email]")
    identity_provider: str | None = Field(default=None, alias="filter[identity-provider]")
    query: str | None = None
    sort: str | None = None
    include: str | None = None


__all__ = ["User", "UserListOptions"]
