from __future__ import annotations

import pydantic
import pytest

from scalrx.models import AccountUpdateOptions


def test_read_and_update_allowlist(client, fake_scalr) -> None:
    fake_scalr.seed("accounts", "acc-1", {"name": "acme", "allowed-ips": ["0.0.0.0/0"]})

    assert client.accounts.read("acc-1").allowed_ips == ["0.0.0.0/0"]

    account = client.accounts.update(
        "acc-1", AccountUpdateOptions(allowed_ips=["10.0.0.0/8", "192.168.1.10"])
    )

    assert fake_scalr.bodies("PATCH")[-1] == {
        "data": {
            "type": "accounts",
            "attributes": {"allowed-ips": ["10.0.0.0/8", "192.168.1.10"]},
        }
    }
    assert account.name == "acme"
    assert account.allowed_ips == ["10.0.0.0/8", "192.168.1.10"]


@pytest.mark.parametrize("entry", ["10.0.0.0/33", "not-an-ip", "2001:db8::/32"])
def test_allowlist_entries_must_be_ipv4(entry: str) -> None:
    with pytest.raises(pydantic.ValidationError, match="invalid value for ip allowlist entry"):
        AccountUpdateOptions(allowed_ips=[entry])
