from __future__ import annotations

import os
import stat

import pytest

from scalrx import ClientConfig, ConfigurationError, ScalrClient, default_config
from scalrx.config import ConfigStore, Profile, build_base_url, resolve_config


def test_default_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCALR_ADDRESS", "https://acme.scalr.io")
    monkeypatch.setenv("SCALR_TOKEN", "env-token")

    cfg = default_config()

    assert cfg.address == "https://acme.scalr.io"
    assert cfg.token == "env-token"
    assert cfg.base_path == "/api/iacp/v3/"
    assert cfg.headers["Prefer"] == "profile=preview"
    assert cfg.headers["User-Agent"] == "scalrx"


def test_default_config_returns_fresh_values() -> None:
    first = default_config()
    first.headers["X-Extra"] = "1"

    assert "X-Extra" not in default_config().headers


def test_resolve_config_lets_user_headers_win() -> None:
    cfg = resolve_config(ClientConfig(token="t", headers={"prefer": "profile=internal"}))

    assert cfg.address == "https://scalr.io"
    assert cfg.headers == {"User-Agent": "scalrx", "prefer": "profile=internal"}


def test_build_base_url_appends_default_base_path() -> None:
    cfg = resolve_config(ClientConfig(address="https://acme.scalr.io", token="t"))

    assert build_base_url(cfg) == "https://acme.scalr.io/api/iacp/v3/"


def test_build_base_url_keeps_explicit_path() -> None:
    cfg = resolve_config(ClientConfig(address="http://localhost:8080/custom", token="t"))

    assert build_base_url(cfg) == "http://localhost:8080/custom/"


def test_missing_token_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="missing API token"):
        ScalrClient(ClientConfig(address="https://acme.scalr.io"))


@pytest.mark.parametrize(
    "address",
    ["acme.scalr.io", "ftp://acme.scalr.io", "https://", "https://acme.scalr.io:abc", "https://:443"],
)
def test_malformed_address_is_configuration_error(address: str) -> None:
    with pytest.raises(ConfigurationError, match="invalid address"):
        ScalrClient(ClientConfig(address=address, token="t"))


def test_client_exposes_every_service() -> None:
    with ScalrClient(ClientConfig(address="https://acme.scalr.io", token="t")) as client:
        assert client.base_url == "https://acme.scalr.io/api/iacp/v3/"
        for name in (
            "accounts",
            "account_users",
            "environments",
            "policy_groups",
            "roles",
            "teams",
            "users",
            "workspaces",
        ):
            assert hasattr(client, name)


def test_store_round_trips_profiles(tmp_path) -> None:
    store = ConfigStore(tmp_path / "config.json")

    store.add_or_update_profile(
        Profile(name="prod", address="https://acme.scalr.io", token="secret", headers={"Prefer": "x"})
    )
    store.add_or_update_profile(Profile(name="dev", token="dev-token"))

    cfg = store.load()
    assert cfg.default_profile == "prod"
    assert sorted(cfg.profiles) == ["dev", "prod"]
    assert cfg.profiles["prod"].headers == {"Prefer": "x"}
    assert store.get_profile().name == "prod"
    assert store.get_profile("dev").to_client_config().token == "dev-token"


def test_store_switches_and_deletes_default(tmp_path) -> None:
    store = ConfigStore(tmp_path / "config.json")
    store.add_or_update_profile(Profile(name="a"))
    store.add_or_update_profile(Profile(name="b"))

    assert store.set_default_profile("b").default_profile == "b"
    assert store.delete_profile("b").default_profile is None
    with pytest.raises(KeyError):
        store.delete_profile("missing")
    with pytest.raises(KeyError):
        store.set_default_profile("missing")


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions only")
def test_store_file_is_private(tmp_path) -> None:
    path = tmp_path / "config.json"
    ConfigStore(path).add_or_update_profile(Profile(name="a", token="secret"))

    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_store_defaults_to_configured_path(isolated_config) -> None:
    store = ConfigStore()
    store.add_or_update_profile(Profile(name="a"))

    assert isolated_config.exists()
