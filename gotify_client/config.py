"""Client configuration from the environment or a YAML file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import aiohttp
import yaml

from .client import AppClient, ClientClient, UnauthenticatedClient
from .errors import ConfigError

ENV_PREFIX = "GOTIFY_"


def _parse_timeout(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as err:
        raise ConfigError(f"Invalid timeout: {value!r}") from err
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {timeout}")
    return timeout


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if missing or empty."""
    if not path.exists():
        return {}
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return data


@dataclass(frozen=True)
class GotifyConfig:
    """Connection settings for one Gotify server.

    Attributes:
        url: Base URL of the server.
        app_token: Application token, used to create messages.
        client_token: Client token, used to manage the server.
        timeout: Optional total timeout per request in seconds.
    """

    url: str
    app_token: str | None = None
    client_token: str | None = None
    timeout: float | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GotifyConfig:
        url = data.get("url")
        if not url:
            raise ConfigError("Gotify server url is not configured")
        return cls(
            url=str(url),
            app_token=data.get("app_token") or None,
            client_token=data.get("client_token") or None,
            timeout=_parse_timeout(data.get("timeout")),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GotifyConfig:
        """Read GOTIFY_URL, GOTIFY_APP_TOKEN, GOTIFY_CLIENT_TOKEN, GOTIFY_TIMEOUT."""
        env = os.environ if environ is None else environ
        return cls.from_mapping(
            {
                key: env.get(f"{ENV_PREFIX}{key.upper()}")
                for key in ("url", "app_token", "client_token", "timeout")
            }
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> GotifyConfig:
        """Load settings from a YAML mapping with the same keys as the dataclass."""
        return cls.from_mapping(_load_yaml(Path(path)))

    def unauthenticated_client(
        self, *, session: aiohttp.ClientSession | None = None
    ) -> UnauthenticatedClient:
        return UnauthenticatedClient(self.url, session=session, timeout=self.timeout)

    def app_client(self, *, session: aiohttp.ClientSession | None = None) -> AppClient:
        if self.app_token is None:
            raise ConfigError("Gotify app token is not configured")
        return AppClient(
            self.url, self.app_token, session=session, timeout=self.timeout
        )

    def client_client(
        self, *, session: aiohttp.ClientSession | None = None
    ) -> ClientClient:
        if self.client_token is None:
            raise ConfigError("Gotify client token is not configured")
        return ClientClient(
            self.url, self.client_token, session=session, timeout=self.timeout
        )
