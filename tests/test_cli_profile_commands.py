from __future__ import annotations

import pytest
from typer.testing import CliRunner

from scalrx.cli import app
from scalrx.cli.profile import MASK_PLACEHOLDER
from scalrx.config import ConfigStore

runner = CliRunner()


@pytest.fixture
def store(isolated_config) -> ConfigStore:
    return ConfigStore(isolated_config)


def test_profile_set_and_list(store) -> None:
    first = runner.invoke(
        app,
        ["profile", "set", "prod", "--address", "https://acme.scalr.io", "--token", "secret"],
    )
    second = runner.invoke(app, ["profile", "set", "dev", "--token", "dev-token", "--default"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    cfg = store.load()
    assert cfg.default_profile == "dev"
    assert cfg.profiles["prod"].address == "https://acme.scalr.io"

    result = runner.invoke(app, ["profile", "list"])
    lines = [line.strip() for line in result.output.splitlines() if line.strip()]
    assert lines == ["* dev", "prod"]


def test_profile_set_keeps_unspecified_values(store) -> None:
    runner.invoke(app, ["profile", "set", "prod", "--address", "https://acme.scalr.io", "--token", "t1"])

    result = runner.invoke(app, ["profile", "set", "prod", "--header", "Prefer: profile=internal"])

    assert result.exit_code == 0, result.output
    profile = store.get_profile("prod")
    assert profile.address == "https://acme.scalr.io"
    assert profile.token == "t1"
    assert profile.headers == {"Prefer": "profile=internal"}


def test_profile_set_rejects_malformed_header(store) -> None:
    result = runner.invoke(app, ["profile", "set", "prod", "--header", "no-colon"])

    assert result.exit_code == 2
    assert store.load().profiles == {}


def test_profile_show_masks_token(store) -> None:
    runner.invoke(app, ["profile", "set", "prod", "--token", "very-secret-token"])

    result = runner.invoke(app, ["profile", "show", "prod"])

    assert result.exit_code == 0
    assert MASK_PLACEHOLDER in result.output
    assert "very-secret-token" not in result.output


def test_profile_use_and_delete(store) -> None:
    runner.invoke(app, ["profile", "set", "a", "--token", "x"])
    runner.invoke(app, ["profile", "set", "b", "--token", "y"])

    assert runner.invoke(app, ["profile", "use", "b"]).exit_code == 0
    assert store.load().default_profile == "b"
    assert runner.invoke(app, ["profile", "delete", "b"]).exit_code == 0
    assert store.load().default_profile is None
    assert runner.invoke(app, ["profile", "use", "missing"]).exit_code == 2


def test_commands_use_default_profile_credentials(store, fake_scalr) -> None:
    runner.invoke(
        app,
        [
            "profile",
            "set",
            "acme",
            "--address",
            "https://acme.scalr.io",
            "--token",
            "test-token",
            "--header",
            "Prefer: profile=internal",
        ],
    )

    result = runner.invoke(app, ["users", "count"])

    assert result.exit_code == 0, result.output
    request = fake_scalr.requests[-1]
    assert request.headers["Authorization"] == "Bearer test-token"
    assert request.headers["Prefer"] == "profile=internal"


def test_environment_token_beats_profile_token(store, fake_scalr, monkeypatch) -> None:
    runner.invoke(
        app, ["profile", "set", "acme", "--address", "https://acme.scalr.io", "--token", "stale"]
    )
    monkeypatch.setenv("SCALR_TOKEN", "test-token")

    result = runner.invoke(app, ["--profile", "acme", "users", "list"])

    assert result.exit_code == 0, result.output
    assert fake_scalr.requests[-1].headers["Authorization"] == "Bearer test-token"


def test_unknown_profile_is_bad_parameter(store) -> None:
    result = runner.invoke(app, ["--profile", "ghost", "users", "list"])

    assert result.exit_code == 2
