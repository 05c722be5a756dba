"""Client for teams."""

from __future__ import annotations

from ..context import CallContext
from ..models.team import Team, TeamCreateOptions, TeamListOptions, TeamUpdateOptions
from .base import ListableService


class TeamsClient(ListableService[Team, TeamListOptions]):
    collection = "teams"
    model = Team
    noun = "team"
    options_type = TeamListOptions

    def create(self, options: TeamCreateOptions, *, ctx: CallContext | None = None) -> Team:
        return self._create(options, ctx=ctx)

    def read(self, team_id: str, *, ctx: CallContext | None = None) -> Team:
        return self._read(team_id, ctx=ctx)

    def update(
        self, team_id: str, options: TeamUpdateOptions, *, ctx: CallContext | None = None
    ) -> Team:
        return self._update(team_id, options, ctx=ctx)

    def delete(self, team_id: str, *, ctx: CallContext | None = None) -> None:
        self._delete(team_id, ctx=ctx)


__all__ = ["TeamsClient"]
