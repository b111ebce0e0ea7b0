"""Error types for Gotify client interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import ServerError


class GotifyClientError(Exception):
    """Base error for Gotify client failures."""


class InitError(GotifyClientError):
    """Client could not be created or authenticated."""


class InvalidUrlError(InitError):
    """Server URL could not be parsed."""


class InvalidAccessTokenError(InitError):
    """Access token cannot be sent as a header value."""


class HttpSetupError(InitError):
    """HTTP session cannot be used."""


class ConfigError(InitError):
    """Client configuration is missing or invalid."""


class TransportError(GotifyClientError):
    """HTTP request failed before a usable response was read."""


class RequestTimeout(TransportError):
    """Timeout while communicating with the server."""


class ResponseDecodeError(TransportError):
    """Response body does not have the expected shape."""


class ApiError(GotifyClientError):
    """Error reported by the Gotify API."""

    def __init__(self, status: int, server_error: ServerError) -> None:
        super().__init__(str(server_error))
        self.status = status
        self.server_error = server_error

    @property
    def error(self) -> str:
        return self.server_error.error

    @property
    def error_code(self) -> int:
        return self.server_error.error_code

    @property
    def error_description(self) -> str:
        return self.server_error.error_description


class WebsocketConnectError(GotifyClientError):
    """WebSocket connection could not be established."""


class WebsocketHttpError(WebsocketConnectError):
    """Initial HTTP request of the handshake failed."""


class WebsocketResponseError(WebsocketConnectError):
    """Server did not return a valid upgradable response."""

    def __init__(
        self,
        message: str,
        response: Any = None,
        server_error: ServerError | None = None,
    ) -> None:
        super().__init__(message)
        self.response = response
        self.server_error = server_error


class WebsocketUpgradeError(WebsocketConnectError):
    """Connection upgrade negotiation failed."""


class WebsocketProtocolError(WebsocketConnectError):
    """WebSocket protocol error during connect."""


class WebsocketError(GotifyClientError):
    """Error delivered as an item of an open message stream."""


class WebsocketTransportError(WebsocketError):
    """WebSocket transport or protocol failure while streaming."""


class WebsocketDecodeError(WebsocketError):
    """Text frame could not be decoded into a message."""

    def __init__(self, message: str, payload: str) -> None:
        super().__init__(message)
        self.payload = payload
