"""Entry point bundling every resource service behind one configured client."""

from __future__ import annotations

import logging
from types import TracebackType

from .clients import (
    AccountsClient,
    AccountUsersClient,
    EnvironmentsClient,
    PolicyGroupsClient,
    RolesClient,
    TeamsClient,
    UsersClient,
    WorkspacesClient,
)
from .config import ClientConfig, build_base_url, resolve_config
from .http_client import HttpClient

logger = logging.getLogger(__name__)


class ScalrClient:
    """Client for the Scalr IaC platform API.

    Blank fields of ``config`` fall back to :func:`scalrx.config.default_config`,
    so ``ScalrClient()`` picks up ``SCALR_ADDRESS`` and ``SCALR_TOKEN``.

    Raises:
        ConfigurationError: when the token is missing or the address is malformed.

    Examples:
        >>> with ScalrClient(ClientConfig(address="https://acme.scalr.io", token="t")) as client:
        ...     page = client.users.list()
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = resolve_config(config)
        self.base_url = build_base_url(self.config)
        token = self.config.token
        self.http = HttpClient(
            self.base_url,
            token_getter=lambda: token,
            default_headers=self.config.headers,
            timeout=self.config.timeout,
        )
        logger.debug("Configured client for %s", self.base_url)

        self.accounts = AccountsClient(self.http)
        self.account_users = AccountUsersClient(self.http)
        self.environments = EnvironmentsClient(self.http)
        self.policy_groups = PolicyGroupsClient(self.http)
        self.roles = RolesClient(self.http)
        self.teams = TeamsClient(self.http)
        self.users = UsersClient(self.http)
        self.workspaces = WorkspacesClient(self.http)

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self.http.close()

    def __enter__(self) -> ScalrClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["ScalrClient"]
