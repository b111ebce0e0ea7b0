"""Async client for the Gotify push notification server.

Example:
    >>> import asyncio
    >>> from gotify_client import AppClient, ClientClient
    >>>
    >>> async def main():
    ...     async with AppClient("http://localhost:8080", "app-token") as app:
    ...         await app.create_message("Hello World").with_title("Hi")
    ...
    ...     async with ClientClient("http://localhost:8080", "client-token") as client:
    ...         async with await client.stream_messages() as stream:
    ...             async for item in stream:
    ...                 print(item.unwrap().message)
    >>>
    >>> asyncio.run(main())
"""

__version__ = "0.1.0"

from .app import MessageBuilder
from .applications import ApplicationBuilder, ApplicationUpdateBuilder
from .base import AUTH_HEADER, AuthenticatedClient, BaseClient
from .builder import Endpoint, EndpointBuilder, Field
from .client import AppClient, ClientClient, UnauthenticatedClient
from .clients import ClientBuilder, ClientUpdateBuilder
from .config import GotifyConfig
from .errors import (
    ApiError,
    ConfigError,
    GotifyClientError,
    HttpSetupError,
    InitError,
    InvalidAccessTokenError,
    InvalidUrlError,
    RequestTimeout,
    ResponseDecodeError,
    TransportError,
    WebsocketConnectError,
    WebsocketDecodeError,
    WebsocketError,
    WebsocketHttpError,
    WebsocketProtocolError,
    WebsocketResponseError,
    WebsocketTransportError,
    WebsocketUpgradeError,
)
from .messages import GetApplicationMessagesBuilder, GetMessagesBuilder
from .request import RequestBuilder, ResponseShape
from .users import CreateUserBuilder, UpdateCurrentUserBuilder, UpdateUserBuilder
from .ws import connect_websocket
from .ws_client import MessageStream, StreamItem, StreamState

__all__ = [
    "AUTH_HEADER",
    "ApiError",
    "AppClient",
    "ApplicationBuilder",
    "ApplicationUpdateBuilder",
    "AuthenticatedClient",
    "BaseClient",
    "ClientBuilder",
    "ClientClient",
    "ClientUpdateBuilder",
    "ConfigError",
    "CreateUserBuilder",
    "Endpoint",
    "EndpointBuilder",
    "Field",
    "GetApplicationMessagesBuilder",
    "GetMessagesBuilder",
    "GotifyClientError",
    "GotifyConfig",
    "HttpSetupError",
    "InitError",
    "InvalidAccessTokenError",
    "InvalidUrlError",
    "MessageBuilder",
    "MessageStream",
    "RequestBuilder",
    "RequestTimeout",
    "ResponseDecodeError",
    "ResponseShape",
    "StreamItem",
    "StreamState",
    "TransportError",
    "UnauthenticatedClient",
    "UpdateCurrentUserBuilder",
    "UpdateUserBuilder",
    "WebsocketConnectError",
    "WebsocketDecodeError",
    "WebsocketError",
    "WebsocketHttpError",
    "WebsocketProtocolError",
    "WebsocketResponseError",
    "WebsocketTransportError",
    "WebsocketUpgradeError",
    "__version__",
    "connect_websocket",
]
