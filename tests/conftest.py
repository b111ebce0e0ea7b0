"""Pytest configuration and fixtures for gotify_client tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from websockets.utils import accept_key

GOTIFY_URL = "http://gotify.local:8080"
APP_TOKEN = "AGo8b9paHo5wPkI"
CLIENT_TOKEN = "C4er8DTiNk08mtt"
HANDSHAKE_KEY = "dGhlIHNhbXBsZSBub25jZQ=="

MESSAGE_DATA: dict[str, Any] = {
    "id": 25,
    "appid": 5,
    "message": "Hello World",
    "title": "Hi",
    "priority": 7,
    "extras": {"foo": "bar"},
    "date": "2018-02-27T19:36:10.5045044+01:00",
}


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    session = MagicMock(spec=aiohttp.ClientSession)
    session.closed = False
    return session


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    text_data: str | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        text_data: Data to return from text() call

    Returns:
        Configured AsyncMock response usable as an async context manager
    """
    response = AsyncMock()
    response.status = status

    if json_data is not None:
        response.json.return_value = json_data
    if text_data is not None:
        response.text.return_value = text_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response


def message_data(**overrides: Any) -> dict[str, Any]:
    """Return a server message payload with selected fields replaced."""
    return {**MESSAGE_DATA, **overrides}


def create_mock_connection(
    frames: list[Any] | None = None,
    *,
    status_code: int = 101,
    accept: str | None = None,
) -> AsyncMock:
    """Create a mock websockets ClientConnection.

    Args:
        frames: Values (or exceptions) returned by successive recv() calls
        status_code: Status of the handshake response
        accept: Sec-WebSocket-Accept header; derived from the key by default
    """
    connection = AsyncMock()
    connection.recv.side_effect = list(frames or [])
    connection.request = MagicMock(headers={"Sec-WebSocket-Key": HANDSHAKE_KEY})
    connection.response = MagicMock(
        status_code=status_code,
        headers={
            "Sec-WebSocket-Accept": (
                accept if accept is not None else accept_key(HANDSHAKE_KEY)
            )
        },
        body=b"",
    )
    return connection
