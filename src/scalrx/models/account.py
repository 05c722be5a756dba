"""Typed models for accounts."""

from __future__ import annotations

import ipaddress
from typing import ClassVar

from pydantic import Field, field_validator

from .common import Resource, WriteOptions


class Account(Resource):
    """Top-level tenant that owns environments, teams and policy groups."""

    name: str | None = None
    allowed_ips: list[str] | None = Field(default=None, alias="allowed-ips")


def _is_ipv4_network(value: str) -> bool:
    try:
        network = ipaddress.ip_network(value, strict=False)
    except ValueError:
        return False
    return network.version == 4


class AccountUpdateOptions(WriteOptions):
    """Replace the account IP allowlist."""

    relationships: ClassVar[dict[str, str]] = {}

    allowed_ips: list[str] | None = Field(default=None, alias="allowed-ips")

    @field_validator("allowed_ips")
    @classmethod
    def _check_networks(cls, value: list[str] | None) -> list[str] | None:
        for network in value or []:
            if not _is_ipv4_network(network):
                raise ValueError(f"invalid value for ip allowlist entry: {network}")
        return value


__all__ = ["Account", "AccountUpdateOptions"]
