"""Typed models for OPA policy groups."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..pagination import ListOptions
from .account import Account
from .common import Resource, ResourceRef, WriteOptions
from .environment import Environment


class PolicyGroupStatus(str, Enum):
    FETCHING = "fetching"
    ACTIVE = "active"
    ERRORED = "errored"


class PolicyEnforcementLevel(str, Enum):
    HARD = "hard-mandatory"
    SOFT = "soft-mandatory"
    ADVISORY = "advisory"


class Policy(Resource):
    name: str | None = None
    enabled: bool | None = None
    enforcement_level: str | None = Field(default=None, alias="enforced-level")


class PolicyGroupVCSRepo(BaseModel):
    identifier: str | None = None
    branch: str | None = None
    path: str | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class PolicyGroup(Resource):
    name: str | None = None
    status: str | None = None
    error_message: str | None = Field(default=None, alias="error-message")
    opa_version: str | None = Field(default=None, alias="opa-version")
    vcs_repo: PolicyGroupVCSRepo | None = Field(default=None, alias="vcs-repo")

    account: Account | None = None
    vcs_provider: ResourceRef | None = Field(default=None, alias="vcs-provider")
    vcs_revision: ResourceRef | None = Field(default=None, alias="vcs-revision")
    policies: list[Policy] = Field(default_factory=list)
    environments: list[Environment] = Field(default_factory=list)


class PolicyGroupListOptions(ListOptions):
    account: str | None = Field(default=None, alias="filter[account]")
    environment: str | None = Field(default=None, alias="filter[environment]")
    name: str | None = Field(default=None, alias="filter[name]")
    policy_group: str | None = Field(default=None, alias="filter[policy-group]")
    query: str | None = None
    sort: str | None = None
    include: str | None = None


class PolicyGroupVCSRepoOptions(BaseModel):
    identifier: str
    branch: str | None = None
    path: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class PolicyGroupCreateOptions(WriteOptions):
    relationships: ClassVar[dict[str, str]] = {
        "account": "accounts",
        "vcs_provider": "vcs-providers",
    }

    name: str
    opa_version: str | None = Field(default=None, alias="opa-version")
    vcs_repo: PolicyGroupVCSRepoOptions = Field(alias="vcs-repo")

    account: str
    vcs_provider: str = Field(alias="vcs-provider")


class PolicyGroupUpdateOptions(WriteOptions):
    relationships: ClassVar[dict[str, str]] = {"vcs_provider": "vcs-providers"}

    name: str | None = None
    opa_version: str | None = Field(default=None, alias="opa-version")
    vcs_repo: PolicyGroupVCSRepoOptions | None = Field(default=None, alias="vcs-repo")

    vcs_provider: str | None = Field(default=None, alias="vcs-provider")


__all__ = [
    "Policy",
    "PolicyEnforcementLevel",
    "PolicyGroup",
    "PolicyGroupCreateOptions",
    "PolicyGroupListOptions",
    "PolicyGroupStatus",
    "PolicyGroupUpdateOptions",
    "PolicyGroupVCSRepo",
    "PolicyGroupVCSRepoOptions",
]
