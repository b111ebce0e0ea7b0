"""Gotify clients, one class per authentication scope.

| Class                   | Token             | Operations                         |
| ----------------------- | ----------------- | ---------------------------------- |
| ``UnauthenticatedClient`` | none            | health, version                    |
| ``AppClient``           | application token | health, version, create messages   |
| ``ClientClient``        | client token      | health, version, manage the server |

Operations outside a scope do not exist on that class, so a wrong call is
rejected by type checkers and fails with ``AttributeError`` before any
network activity.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from .app import MessageBuilder
from .applications import ApplicationsMixin
from .base import AuthenticatedClient, BaseClient
from .clients import ClientsMixin
from .messages import MessagesMixin
from .plugins import PluginsMixin
from .urls import to_websocket_url, url_append
from .users import UsersMixin
from .ws_client import MessageStream

_LOGGER = logging.getLogger(__name__)

AuthenticatedT = TypeVar("AuthenticatedT", bound=AuthenticatedClient)


class UnauthenticatedClient(BaseClient):
    """A client without a token. Can be authenticated later on."""

    def authenticate(
        self, client_type: type[AuthenticatedT], access_token: str
    ) -> AuthenticatedT:
        """Create an authenticated client for the same server.

        The new client shares this client's base URL and HTTP session and
        takes over closing a session this client created.

        Example:
            app = client.authenticate(AppClient, "AGo8b9paHo5wPkI")
        """
        if not (
            isinstance(client_type, type)
            and issubclass(client_type, AuthenticatedClient)
        ):
            raise TypeError(f"Cannot authenticate as {client_type!r}")
        authenticated = client_type(
            self.base_url,
            access_token,
            session=self._session,
            timeout=self._timeout,
        )
        if self._session is not None:
            authenticated._owns_session = self._owns_session
            self._owns_session = False
        _LOGGER.debug("Authenticated %s as %s", self.base_url, client_type.__name__)
        return authenticated


class AppClient(AuthenticatedClient):
    """A client authenticated with an application token to create messages."""

    def create_message(self, message: str) -> MessageBuilder:
        """Create a message.

        Example:
            await client.create_message("Hello").with_title("Hi").with_priority(7)
        """
        return MessageBuilder(self, message)


class ClientClient(
    ApplicationsMixin,
    ClientsMixin,
    MessagesMixin,
    PluginsMixin,
    UsersMixin,
):
    """A client authenticated with a client token to manage the server."""

    async def stream_messages(
        self, *, ping_interval: float | None = 20
    ) -> MessageStream:
        """Open a WebSocket stream of newly created messages.

        Raises:
            WebsocketConnectError: If the upgrade fails.
        """
        stream = MessageStream(
            to_websocket_url(url_append(self.base_url, "stream")),
            self._headers(),
            ping_interval=ping_interval,
        )
        await stream.connect()
        return stream
