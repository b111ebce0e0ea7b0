"""Live message stream over the Gotify WebSocket endpoint."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Self

from websockets.asyncio.client import ClientConnection
from websockets.exceptions import ConnectionClosedOK, WebSocketException
from yarl import URL

from .errors import (
    WebsocketConnectError,
    WebsocketDecodeError,
    WebsocketError,
    WebsocketTransportError,
)
from .models import Message
from .ws import connect_websocket

_LOGGER = logging.getLogger(__name__)


class StreamState(Enum):
    """Lifecycle of a message stream."""

    IDLE = "idle"
    HANDSHAKE_SENT = "handshake_sent"
    UPGRADED = "upgraded"
    STREAMING = "streaming"
    CLOSED = "closed"
    ERRORED = "errored"


@dataclass(frozen=True)
class StreamItem:
    """One item of a message stream: a message or an in-band error."""

    message: Message | None = None
    error: WebsocketError | None = None

    def __post_init__(self) -> None:
        if (self.message is None) == (self.error is None):
            raise ValueError("StreamItem needs exactly one of message or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Message:
        """Return the message or raise the carried error."""
        if self.error is not None:
            raise self.error
        if self.message is None:
            raise ValueError("StreamItem carries no message")
        return self.message


class MessageStream:
    """Async iterator over messages pushed by the server.

    Usage:
        async with await client.stream_messages() as stream:
            async for item in stream:
                print(item.unwrap().message)

    Items are delivered in the order the server sent them. A text frame that
    is not a valid message yields an error item and the stream continues.
    Binary, ping and pong frames are skipped. A transport failure yields one
    error item and ends the stream. The stream cannot be restarted.
    """

    def __init__(
        self,
        url: URL,
        headers: Mapping[str, str],
        *,
        ping_interval: float | None = 20,
    ) -> None:
        self.url = url
        self._headers = dict(headers)
        self._ping_interval = ping_interval
        self._ws: ClientConnection | None = None
        self.state = StreamState.IDLE

    async def connect(self) -> None:
        """Perform the WebSocket upgrade.

        Raises:
            WebsocketConnectError: If the connection cannot be established.
        """
        if self.state is not StreamState.IDLE:
            raise RuntimeError(f"Message stream is {self.state.value}")
        self.state = StreamState.HANDSHAKE_SENT
        try:
            self._ws = await connect_websocket(
                self.url,
                self._headers,
                ping_interval=self._ping_interval,
            )
        except WebsocketConnectError:
            self.state = StreamState.ERRORED
            raise
        self.state = StreamState.UPGRADED
        _LOGGER.info("Message stream connected to %s", self.url.with_query(None))

    async def close(self) -> None:
        """Close the WebSocket connection."""
        if self._ws is not None:
            await self._ws.close()
        if self.state is not StreamState.ERRORED:
            self.state = StreamState.CLOSED

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> StreamItem:
        if self._ws is None or self.state in (StreamState.CLOSED, StreamState.ERRORED):
            raise StopAsyncIteration
        self.state = StreamState.STREAMING

        while True:
            try:
                frame = await self._ws.recv()
            except ConnectionClosedOK:
                _LOGGER.info("Message stream closed by server")
                self.state = StreamState.CLOSED
                raise StopAsyncIteration from None
            except WebSocketException as err:
                _LOGGER.warning("Message stream failed: %s", err)
                self.state = StreamState.ERRORED
                error = WebsocketTransportError(f"WebSocket error: {err}")
                error.__cause__ = err
                return StreamItem(error=error)

            if isinstance(frame, bytes):
                _LOGGER.debug("Skipping binary frame of %d bytes", len(frame))
                continue
            return self._decode(frame)

    @staticmethod
    def _decode(frame: str) -> StreamItem:
        try:
            return StreamItem(message=Message.from_dict(json.loads(frame)))
        except (ValueError, KeyError, TypeError) as err:
            _LOGGER.warning("Failed to decode stream message: %s", err)
            error = WebsocketDecodeError("Failed to deserialize message", frame)
            error.__cause__ = err
            return StreamItem(error=error)
