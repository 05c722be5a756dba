"""Client for environments."""

from __future__ import annotations

from ..context import CallContext
from ..models.environment import (
    Environment,
    EnvironmentCreateOptions,
    EnvironmentListOptions,
    EnvironmentUpdateOptions,
)
from .base import ListableService


class EnvironmentsClient(ListableService[Environment, EnvironmentListOptions]):
    collection = "environments"
    model = Environment
    noun = "environment"
    options_type = EnvironmentListOptions

    def create(
        self, options: EnvironmentCreateOptions, *, ctx: CallContext | None = None
    ) -> Environment:
        return self._create(options, ctx=ctx)

    def read(self, environment_id: str, *, ctx: CallContext | None = None) -> Environment:
        return self._read(environment_id, ctx=ctx)

    def update(
        self,
        environment_id: str,
        options: EnvironmentUpdateOptions,
        *,
        ctx: CallContext | None = None,
    ) -> Environment:
        return self._update(environment_id, options, ctx=ctx)

    def delete(self, environment_id: str, *, ctx: CallContext | None = None) -> None:
        self._delete(environment_id, ctx=ctx)


__all__ = ["EnvironmentsClient"]
