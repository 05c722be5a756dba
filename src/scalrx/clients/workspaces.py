"""Client for workspaces."""

from __future__ import annotations

from ..context import CallContext
from ..errors import NotFoundError, ValidationError
from ..jsonapi import load_one
from ..models.common import valid_string_id
from ..models.workspace import (
    Workspace,
    WorkspaceCreateOptions,
    WorkspaceListOptions,
    WorkspaceRunScheduleOptions,
    WorkspaceUpdateOptions,
)
from .base import ListableService

_READ_INCLUDE = "created-by"


class WorkspacesClient(ListableService[Workspace, WorkspaceListOptions]):
    collection = "workspaces"
    model = Workspace
    noun = "workspace"
    options_type = WorkspaceListOptions

    def create(
        self, options: WorkspaceCreateOptions, *, ctx: CallContext | None = None
    ) -> Workspace:
        if not valid_string_id(options.name):
            raise ValidationError.local("invalid value for name")
        return self._create(options, ctx=ctx)

    def read(self, workspace_id: str, *, ctx: CallContext | None = None) -> Workspace:
        return self._read(workspace_id, params={"include": _READ_INCLUDE}, ctx=ctx)

    def read_by_name(
        self, environment_id: str, name: str, *, ctx: CallContext | None = None
    ) -> Workspace:
        """Look a workspace up by its name inside an environment."""

        if not valid_string_id(environment_id):
            raise ValidationError.local("invalid value for environment")
        if not valid_string_id(name):
            raise ValidationError.local("invalid value for workspace")
        page = self.list(
            WorkspaceListOptions(environment=environment_id, name=name, include=_READ_INCLUDE),
            ctx=ctx,
        )
        if len(page.items) != 1:
            raise NotFoundError(
                None, f"workspace {name!r} not found in environment {environment_id}"
            )
        return page.items[0]

    def update(
        self,
        workspace_id: str,
        options: WorkspaceUpdateOptions,
        *,
        ctx: CallContext | None = None,
    ) -> Workspace:
        return self._update(workspace_id, options, ctx=ctx)

    def delete(self, workspace_id: str, *, ctx: CallContext | None = None) -> None:
        self._delete(workspace_id, ctx=ctx)

    def set_schedule(
        self,
        workspace_id: str,
        options: WorkspaceRunScheduleOptions,
        *,
        ctx: CallContext | None = None,
    ) -> Workspace:
        """Set or clear the apply/destroy run schedules."""

        path = self._member_path(workspace_id, "actions/set-schedule")
        resp = self.http.post(
            path,
            json=options.model_dump(by_alias=True),
            headers={"Content-Type": "application/json"},
            ctx=ctx,
        )
        return load_one(self._parse_response_dict(resp), Workspace)


__all__ = ["WorkspacesClient"]
