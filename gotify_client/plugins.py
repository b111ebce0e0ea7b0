"""List or configure server plugins."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml

from .base import AuthenticatedClient
from .models import PluginConf

YAML_CONTENT_TYPE = "application/x-yaml"


def _plugin_list(data: list[dict]) -> list[PluginConf]:
    return [PluginConf.from_dict(item) for item in data]


class PluginsMixin(AuthenticatedClient):
    """Plugin management."""

    async def get_plugins(self) -> list[PluginConf]:
        """Return all plugins."""
        return await self._request("GET", "plugin").send_and_read_json(_plugin_list)

    async def get_plugin_config(self, id: int) -> str:
        """Get the YAML configuration of a Configurer plugin."""
        return await self._request(
            "GET", "plugin", id, "config"
        ).send_and_read_string()

    async def update_plugin_config(
        self, id: int, config: str | Mapping[str, Any]
    ) -> None:
        """Update the YAML configuration of a Configurer plugin.

        A mapping is dumped to YAML before sending.
        """
        if not isinstance(config, str):
            config = yaml.safe_dump(dict(config), sort_keys=False)
        await (
            self._request("POST", "plugin", id, "config")
            .with_string_body(config, content_type=YAML_CONTENT_TYPE)
            .send()
        )

    async def disable_plugin(self, id: int) -> None:
        """Disable a plugin."""
        await self._request("POST", "plugin", id, "disable").send()

    async def enable_plugin(self, id: int) -> None:
        """Enable a plugin."""
        await self._request("POST", "plugin", id, "enable").send()

    async def get_plugin_display(self, id: int) -> str:
        """Get display info of a Displayer plugin."""
        return await self._request(
            "GET", "plugin", id, "display"
        ).send_and_read_string()
