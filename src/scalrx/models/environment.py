"""Typed models for environments."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from ..pagination import ListOptions
from .account import Account
from .common import Resource, ResourceRef, WriteOptions
from .user import User


class Environment(Resource):
    name: str | None = None
    status: str | None = None
    created_at: datetime | None = Field(default=None, alias="created-at")
    cost_estimation_enabled: bool | None = Field(default=None, alias="cost-estimation-enabled")

    account: Account | None = None
    created_by: User | None = Field(default=None, alias="created-by")
    policy_groups: list[ResourceRef] = Field(default_factory=list, alias="policy-groups")


class EnvironmentListOptions(ListOptions):
    environment: str | None = Field(default=None, alias="filter[environment]")
    name: str | None = Field(default=None, alias="filter[name]")
    account: str | None = Field(default=None, alias="filter[account]")
    query: str | None = None
    sort: str | None = None
    include: str | None = None


class EnvironmentCreateOptions(WriteOptions):
    relationships: ClassVar[dict[str, str]] = {
        "account": "accounts",
        "policy_groups": "policy-groups",
    }

    name: str
    cost_estimation_enabled: bool | None = Field(default=None, alias="cost-estimation-enabled")

    account: str
    policy_groups: list[str] | None = Field(default=None, alias="policy-groups")


class EnvironmentUpdateOptions(WriteOptions):
    relationships: ClassVar[dict[str, str]] = {"policy_groups": "policy-groups"}

    name: str | None = None
    cost_estimation_enabled: bool | None = Field(default=None, alias="cost-estimation-enabled")

    policy_groups: list[str] | None = Field(default=None, alias="policy-groups")


__all__ = [
    "Environment",
    "EnvironmentCreateOptions",
    "EnvironmentListOptions",
    "EnvironmentUpdateOptions",
]
