"""Typed models for workspaces."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..pagination import ListOptions
from .common import Resource, ResourceRef, WriteOptions
from .environment import Environment
from .user import User


class WorkspaceExecutionMode(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


class WorkspaceAutoQueueRuns(str, Enum):
    SKIP_FIRST = "skip_first"
    ALWAYS = "always"
    NEVER = "never"


class WorkspaceVCSRepo(BaseModel):
    identifier: str | None = None
    branch: str | None = None
    path: str | None = None
    ingress_submodules: bool | None = Field(default=None, alias="ingress-submodules")
    trigger_prefixes: list[str] | None = Field(default=None, alias="trigger-prefixes")
    dry_runs_enabled: bool | None = Field(default=None, alias="dry-runs-enabled")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Hooks(BaseModel):
    pre_init: str | None = Field(default=None, alias="pre-init")
    pre_plan: str | None = Field(default=None, alias="pre-plan")
    post_plan: str | None = Field(default=None, alias="post-plan")
    pre_apply: str | None = Field(default=None, alias="pre-apply")
    post_apply: str | None = Field(default=None, alias="post-apply")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Workspace(Resource):
    """Terraform workspace living inside an environment."""

    name: str | None = None
    auto_apply: bool | None = Field(default=None, alias="auto-apply")
    force_latest_run: bool | None = Field(default=None, alias="force-latest-run")
    created_at: datetime | None = Field(default=None, alias="created-at")
    locked: bool | None = None
    execution_mode: str | None = Field(default=None, alias="execution-mode")
    terraform_version: str | None = Field(default=None, alias="terraform-version")
    working_directory: str | None = Field(default=None, alias="working-directory")
    vcs_repo: WorkspaceVCSRepo | None = Field(default=None, alias="vcs-repo")
    hooks: Hooks | None = None
    auto_queue_runs: str | None = Field(default=None, alias="auto-queue-runs")
    apply_schedule: str | None = Field(default=None, alias="apply-schedule")
    destroy_schedule: str | None = Field(default=None, alias="destroy-schedule")
    has_resources: bool | None = Field(default=None, alias="has-resources")
    run_operation_timeout: int | None = Field(default=None, alias="run-operation-timeout")
    var_files: list[str] | None = Field(default=None, alias="var-files")

    environment: Environment | None = None
    created_by: User | None = Field(default=None, alias="created-by")
    vcs_provider: ResourceRef | None = Field(default=None, alias="vcs-provider")
    agent_pool: ResourceRef | None = Field(default=None, alias="agent-pool")


class WorkspaceListOptions(ListOptions):
    workspace: str | None = Field(default=None, alias="filter[workspace]")
    environment: str | None = Field(default=None, alias="filter[environment]")
    agent_pool: str | None = Field(default=None, alias="filter[agent-pool]")
    name: str | None = Field(default=None, alias="filter[name]")
    tag: str | None = Field(default=None, alias="filter[tag]")
    query: str | None = None
    sort: str | None = None
    include: str | None = None


class WorkspaceVCSRepoOptions(BaseModel):
    identifier: str | None = None
    branch: str | None = None
    path: str | None = None
    ingress_submodules: bool | None = Field(default=None, alias="ingress-submodules")
    trigger_prefixes: list[str] | None = Field(default=None, alias="trigger-prefixes")
    dry_runs_enabled: bool | None = Field(default=None, alias="dry-runs-enabled")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class HooksOptions(BaseModel):
    pre_init: str | None = Field(default=None, alias="pre-init")
    pre_plan: str | None = Field(default=None, alias="pre-plan")
    post_plan: str | None = Field(default=None, alias="post-plan")
    pre_apply: str | None = Field(default=None, alias="pre-apply")
    post_apply: str | None = Field(default=None, alias="post-apply")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class _WorkspaceWriteOptions(WriteOptions):
    relationships: ClassVar[dict[str, str]] = {
        "environment": "environments",
        "vcs_provider": "vcs-providers",
        "agent_pool": "agent-pools",
    }

    auto_apply: bool | None = Field(default=None, alias="auto-apply")
    force_latest_run: bool | None = Field(default=None, alias="force-latest-run")
    execution_mode: WorkspaceExecutionMode | None = Field(default=None, alias="execution-mode")
    terraform_version: str | None = Field(default=None, alias="terraform-version")
    working_directory: str | None = Field(default=None, alias="working-directory")
    vcs_repo: WorkspaceVCSRepoOptions | None = Field(default=None, alias="vcs-repo")
    hooks: HooksOptions | None = None
    auto_queue_runs: WorkspaceAutoQueueRuns | None = Field(default=None, alias="auto-queue-runs")
    run_operation_timeout: int | None = Field(default=None, alias="run-operation-timeout")
    var_files: list[str] | None = Field(default=None, alias="var-files")

    vcs_provider: str | None = Field(default=None, alias="vcs-provider")
    agent_pool: str | None = Field(default=None, alias="agent-pool")


class WorkspaceCreateOptions(_WorkspaceWriteOptions):
    name: str
    environment: str


class WorkspaceUpdateOptions(_WorkspaceWriteOptions):
    relationships: ClassVar[dict[str, str]] = {
        "vcs_provider": "vcs-providers",
        "agent_pool": "agent-pools",
    }

    name: str | None = None
    file_triggers_enabled: bool | None = Field(default=None, alias="file-triggers-enabled")


class WorkspaceRunScheduleOptions(BaseModel):
    """Cron expressions for scheduled runs; ``None`` clears a schedule."""

    apply_schedule: str | None = Field(default=None, alias="apply-schedule")
    destroy_schedule: str | None = Field(default=None, alias="destroy-schedule")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


__all__ = [
    "Hooks",
    "HooksOptions",
    "Workspace",
    "WorkspaceAutoQueueRuns",
    "WorkspaceCreateOptions",
    "WorkspaceExecutionMode",
    "WorkspaceListOptions",
    "WorkspaceRunScheduleOptions",
    "WorkspaceUpdateOptions",
    "WorkspaceVCSRepo",
    "WorkspaceVCSRepoOptions",
]
