"""Client for OPA policy groups."""

from __future__ import annotations

from ..context import CallContext
from ..models.policy_group import (
    PolicyGroup,
    PolicyGroupCreateOptions,
    PolicyGroupListOptions,
    PolicyGroupUpdateOptions,
)
from .base import ListableService


class PolicyGroupsClient(ListableService[PolicyGroup, PolicyGroupListOptions]):
    collection = "policy-groups"
    model = PolicyGroup
    noun = "policy group"
    options_type = PolicyGroupListOptions

    def create(
        self, options: PolicyGroupCreateOptions, *, ctx: CallContext | None = None
    ) -> PolicyGroup:
        return self._create(options, ctx=ctx)

    def read(self, policy_group_id: str, *, ctx: CallContext | None = None) -> PolicyGroup:
        """Read a policy group with its policies embedded."""

        return self._read(policy_group_id, params={"include": "policies"}, ctx=ctx)

    def update(
        self,
        policy_group_id: str,
        options: PolicyGroupUpdateOptions,
        *,
        ctx: CallContext | None = None,
    ) -> PolicyGroup:
        return self._update(policy_group_id, options, ctx=ctx)

    def delete(self, policy_group_id: str, *, ctx: CallContext | None = None) -> None:
        self._delete(policy_group_id, ctx=ctx)


__all__ = ["PolicyGroupsClient"]
