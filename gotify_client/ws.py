"""WebSocket handshake for the Gotify message stream."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import (
    InvalidHandshake,
    InvalidStatus,
    InvalidURI,
    WebSocketException,
)
from websockets.utils import accept_key
from yarl import URL

from .errors import (
    WebsocketHttpError,
    WebsocketProtocolError,
    WebsocketResponseError,
    WebsocketUpgradeError,
)
from .models import ServerError

_LOGGER = logging.getLogger(__name__)

SWITCHING_PROTOCOLS = 101


def _server_error_from_body(body: bytes | None) -> ServerError | None:
    if not body:
        return None
    try:
        return ServerError.from_dict(json.loads(body))
    except (ValueError, KeyError, TypeError):
        return None


def verify_handshake(connection: ClientConnection) -> None:
    """Check the server's answer to the upgrade request.

    The response must be ``101 Switching Protocols`` and carry a
    ``Sec-WebSocket-Accept`` value derived from the request's
    ``Sec-WebSocket-Key``.

    Raises:
        WebsocketResponseError: If the status is not 101.
        WebsocketUpgradeError: If the accept key does not match.
    """
    request: Any = connection.request
    response: Any = connection.response
    if response is None or request is None:
        raise WebsocketResponseError("No handshake response received", response)
    if response.status_code != SWITCHING_PROTOCOLS:
        raise WebsocketResponseError(
            f"Server answered upgrade with status {response.status_code}",
            response,
            _server_error_from_body(getattr(response, "body", None)),
        )
    request_key = request.headers.get("Sec-WebSocket-Key")
    received = response.headers.get("Sec-WebSocket-Accept")
    if request_key is None or received != accept_key(request_key):
        raise WebsocketUpgradeError(
            "Sec-WebSocket-Accept does not match the handshake key"
        )


async def connect_websocket(
    url: URL,
    headers: Mapping[str, str],
    *,
    ping_interval: float | None = 20,
) -> ClientConnection:
    """Open the WebSocket connection and validate the upgrade.

    The websockets library sends a fresh random ``Sec-WebSocket-Key``,
    version 13 and a ``permessage-deflate; client_max_window_bits`` offer.
    No open timeout is applied; callers wrap the call with their own deadline.

    Args:
        url: ws:// or wss:// URL of the stream endpoint
        headers: Extra request headers, e.g. the access token
        ping_interval: Interval for keepalive pings
    """
    try:
        connection = await connect(
            str(url),
            additional_headers=dict(headers),
            compression="deflate",
            open_timeout=None,
            ping_interval=ping_interval,
            close_timeout=5,
            max_size=None,
        )
    except InvalidStatus as err:
        raise WebsocketResponseError(
            f"Server rejected WebSocket upgrade with status "
            f"{err.response.status_code}",
            err.response,
            _server_error_from_body(err.response.body),
        ) from err
    except InvalidURI as err:
        raise WebsocketHttpError(f"Invalid WebSocket URL {url}") from err
    except InvalidHandshake as err:
        raise WebsocketUpgradeError("WebSocket upgrade negotiation failed") from err
    except WebSocketException as err:
        raise WebsocketProtocolError("WebSocket protocol error") from err
    except OSError as err:
        raise WebsocketHttpError("WebSocket connection failed") from err

    try:
        verify_handshake(connection)
    except (WebsocketResponseError, WebsocketUpgradeError):
        await connection.close()
        raise
    _LOGGER.debug("WebSocket upgrade to %s accepted", url.path)
    return connection
