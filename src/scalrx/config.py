from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ADDRESS = "https://scalr.io"
DEFAULT_BASE_PATH = "/api/iacp/v3/"
DEFAULT_TIMEOUT = 60.0
USER_AGENT = "scalrx"

SCALRX_DIR = os.path.expanduser(os.getenv("SCALRX_HOME", "~/.scalrx"))
CONFIG_PATH = os.path.join(SCALRX_DIR, "config.json")


@dataclass
class ClientConfig:
    """Connection settings handed to :class:`scalrx.client.ScalrClient`.

    Attributes:
        address: Base URL of the service, e.g. ``https://example.scalr.io``.
        base_path: API root appended when ``address`` carries no path.
        token: Bearer credential.
        headers: Extra static headers such as ``Prefer: profile=internal``.
        timeout: Per-request timeout in seconds.
    """

    address: str = ""
    base_path: str = ""
    token: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None


def default_config() -> ClientConfig:
    """Return a fresh config populated from ``SCALR_ADDRESS`` and ``SCALR_TOKEN``."""

    return ClientConfig(
        address=os.getenv("SCALR_ADDRESS") or DEFAULT_ADDRESS,
        base_path=DEFAULT_BASE_PATH,
        token=os.getenv("SCALR_TOKEN", ""),
        headers={"User-Agent": USER_AGENT, "Prefer": "profile=preview"},
        timeout=DEFAULT_TIMEOUT,
    )


def resolve_config(config: ClientConfig | None) -> ClientConfig:
    """Fill the blanks of ``config`` from :func:`default_config`.

    Headers are merged case-insensitively with user values winning.
    """

    resolved = default_config()
    if config is None:
        return resolved
    headers = {k.lower(): (k, v) for k, v in resolved.headers.items()}
    for key, value in config.headers.items():
        headers[key.lower()] = (key, value)
    return ClientConfig(
        address=config.address or resolved.address,
        base_path=config.base_path or resolved.base_path,
        token=config.token or resolved.token,
        headers=dict(headers.values()),
        timeout=config.timeout if config.timeout is not None else resolved.timeout,
    )


def build_base_url(config: ClientConfig) -> str:
    """Validate ``config`` and return the API root URL, always ending in ``/``."""

    parts = urlsplit(config.address)
    try:
        parts.port
    except ValueError:
        raise ConfigurationError(f"invalid address: {config.address!r}") from None
    if parts.scheme not in {"http", "https"} or not parts.hostname:
        raise ConfigurationError(f"invalid address: {config.address!r}")
    path = parts.path or config.base_path or DEFAULT_BASE_PATH
    if not path.endswith("/"):
        path += "/"
    if not config.token:
        raise ConfigurationError("missing API token")
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))


def _secure_path(path: Path) -> None:
    if not path.exists():
        return

    try:
        if os.name == "nt":
            os.chmod(path, stat.S_IREAD | stat.S_IWRITE)
        else:
            mode = stat.S_IMODE(path.stat().st_mode)
            if mode & (stat.S_IRWXG | stat.S_IRWXO):
                logger.warning("Adjusted permissions for %s to 0o600", path)
            path.chmod(0o600)
    except PermissionError as exc:
        logger.warning("Unable to enforce secure permissions for %s: %s", path, exc)


@dataclass
class Profile:
    name: str
    address: str | None = None
    token: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            address=self.address or "",
            token=self.token or "",
            headers=dict(self.headers),
        )


@dataclass
class ConfigData:
    default_profile: str | None = None
    profiles: dict[str, Profile] = field(default_factory=dict)


class ConfigStore:
    """JSON file holding named connection profiles."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path else Path(CONFIG_PATH)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {"default": None, "profiles": {}}
        _secure_path(self.path)
        with self.path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        with tmp.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)
        tmp.replace(self.path)
        _secure_path(self.path)

    def load(self) -> ConfigData:
        raw = self._read()
        known = {"address", "token", "headers"}
        profiles = {
            name: Profile(name=name, **{k: v for k, v in data.items() if k in known})
            for name, data in raw.get("profiles", {}).items()
        }
        return ConfigData(default_profile=raw.get("default"), profiles=profiles)

    def save(self, cfg: ConfigData) -> None:
        self._write(
            {
                "default": cfg.default_profile,
                "profiles": {name: asdict(p) for name, p in cfg.profiles.items()},
            }
        )

    def add_or_update_profile(self, profile: Profile, *, set_default: bool = False) -> ConfigData:
        """Persist ``profile`` and optionally set it as default."""

        cfg = self.load()
        cfg.profiles[profile.name] = profile
        if set_default or not cfg.default_profile:
            cfg.default_profile = profile.name
        self.save(cfg)
        return cfg

    def delete_profile(self, name: str) -> ConfigData:
        cfg = self.load()
        if name not in cfg.profiles:
            raise KeyError(f"Profile '{name}' not found")
        del cfg.profiles[name]
        if cfg.default_profile == name:
            cfg.default_profile = None
        self.save(cfg)
        return cfg

    def set_default_profile(self, name: str) -> ConfigData:
        """Mark the profile ``name`` as the default profile."""

        cfg = self.load()
        if name not in cfg.profiles:
            raise KeyError(f"Profile '{name}' not found")
        cfg.default_profile = name
        self.save(cfg)
        return cfg

    def get_profile(self, name: str | None = None) -> Profile | None:
        """Return the profile ``name``, or the default profile when omitted."""

        cfg = self.load()
        key = name or cfg.default_profile
        if not key:
            return None
        return cfg.profiles.get(key)


__all__ = [
    "CONFIG_PATH",
    "ClientConfig",
    "ConfigData",
    "ConfigStore",
    "DEFAULT_ADDRESS",
    "DEFAULT_BASE_PATH",
    "Profile",
    "build_base_url",
    "default_config",
    "resolve_config",
]
