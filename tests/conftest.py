from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
import respx
from rich.logging import RichHandler
from typer.testing import CliRunner

# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from fake_scalr import TOKEN, FakeScalr  # noqa: E402

from scalrx import ClientConfig, ScalrClient  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep every test away from the real ``~/.scalrx`` profile store."""

    path = tmp_path / "scalrx" / "config.json"
    monkeypatch.setattr("scalrx.config.CONFIG_PATH", str(path))
    monkeypatch.delenv("SCALR_TOKEN", raising=False)
    monkeypatch.delenv("SCALR_ADDRESS", raising=False)
    monkeypatch.delenv("SCALRX_PROFILE", raising=False)
    return path


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop the handler installed by the CLI root callback."""

    yield
    package_logger = logging.getLogger("scalrx")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as respx_mgr:
        yield respx_mgr


@pytest.fixture
def client():
    with ScalrClient(ClientConfig(address="https://acme.scalr.io", token=TOKEN)) as scalr:
        yield scalr


@pytest.fixture
def fake_scalr(respx_mock) -> FakeScalr:
    fake = FakeScalr()
    fake.install(respx_mock)
    return fake


@pytest.fixture
def cli_runner(monkeypatch):
    """Provide a CLI runner pointed at the fake service with a dummy token."""

    monkeypatch.setenv("SCALR_TOKEN", TOKEN)
    monkeypatch.setenv("SCALR_ADDRESS", "https://acme.scalr.io")
    return CliRunner()

