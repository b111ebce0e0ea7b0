"""Tests for client construction and capability scoping."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from gotify_client import (
    AppClient,
    ClientClient,
    UnauthenticatedClient,
)
from gotify_client.base import AUTH_HEADER
from gotify_client.errors import (
    HttpSetupError,
    InitError,
    InvalidAccessTokenError,
    InvalidUrlError,
)

from .conftest import APP_TOKEN, CLIENT_TOKEN, GOTIFY_URL, create_mock_response

MANAGEMENT_OPERATIONS = [
    "get_applications",
    "create_application",
    "update_application",
    "delete_application",
    "upload_application_image",
    "delete_application_image",
    "get_clients",
    "create_client",
    "update_client",
    "delete_client",
    "get_application_messages",
    "delete_application_messages",
    "get_messages",
    "delete_messages",
    "delete_message",
    "get_current_user",
    "update_current_user",
    "get_users",
    "create_user",
    "get_user",
    "update_user",
    "delete_user",
    "get_plugins",
    "get_plugin_config",
    "update_plugin_config",
    "disable_plugin",
    "enable_plugin",
    "get_plugin_display",
    "stream_messages",
]


class TestConstruction:
    @pytest.mark.parametrize(
        "url", ["not a url", "gotify.local", "ftp://gotify.local", "http://"]
    )
    def test_invalid_url(self, url: str) -> None:
        with pytest.raises(InvalidUrlError):
            UnauthenticatedClient(url)

    def test_invalid_url_is_init_error(self) -> None:
        with pytest.raises(InitError):
            AppClient("gotify.local", APP_TOKEN)

    @pytest.mark.parametrize("token", ["abc\r\nX-Injected: 1", "abc\x00", "abc\x7f"])
    def test_invalid_token(self, token: str) -> None:
        with pytest.raises(InvalidAccessTokenError):
            AppClient(GOTIFY_URL, token)

    def test_closed_session_rejected(self, mock_session: MagicMock) -> None:
        mock_session.closed = True
        with pytest.raises(HttpSetupError):
            ClientClient(GOTIFY_URL, CLIENT_TOKEN, session=mock_session)

    def test_no_network_on_construction(self, mock_session: MagicMock) -> None:
        ClientClient(GOTIFY_URL, CLIENT_TOKEN, session=mock_session)
        assert mock_session.method_calls == []

    def test_repr_hides_token(self) -> None:
        client = ClientClient(GOTIFY_URL, CLIENT_TOKEN)
        assert CLIENT_TOKEN not in repr(client)
        assert "gotify.local" in repr(client)


class TestCapabilities:
    @pytest.mark.parametrize("operation", MANAGEMENT_OPERATIONS)
    def test_management_operations_only_on_client_client(self, operation: str) -> None:
        assert hasattr(ClientClient, operation)
        assert not hasattr(AppClient, operation)
        assert not hasattr(UnauthenticatedClient, operation)

    def test_create_message_only_on_app_client(self) -> None:
        assert hasattr(AppClient, "create_message")
        assert not hasattr(ClientClient, "create_message")
        assert not hasattr(UnauthenticatedClient, "create_message")

    @pytest.mark.parametrize("operation", ["health", "version"])
    def test_status_operations_on_every_client(self, operation: str) -> None:
        for client_type in (UnauthenticatedClient, AppClient, ClientClient):
            assert hasattr(client_type, operation)

    def test_unauthenticated_client_cannot_manage(
        self, mock_session: MagicMock
    ) -> None:
        client = UnauthenticatedClient(GOTIFY_URL, session=mock_session)
        with pytest.raises(AttributeError):
            client.get_applications()  # type: ignore[attr-defined]
        mock_session.request.assert_not_called()

    def test_app_client_cannot_manage(self, mock_session: MagicMock) -> None:
        client = AppClient(GOTIFY_URL, APP_TOKEN, session=mock_session)
        with pytest.raises(AttributeError):
            client.delete_user(1)  # type: ignore[attr-defined]
        mock_session.request.assert_not_called()


class TestAuthenticate:
    def test_authenticate_as_app(self, mock_session: MagicMock) -> None:
        client = UnauthenticatedClient(GOTIFY_URL, session=mock_session, timeout=3)

        app = client.authenticate(AppClient, APP_TOKEN)

        assert isinstance(app, AppClient)
        assert app.base_url == client.base_url
        assert app._session is mock_session
        assert app._timeout == 3
        assert app._headers() == {AUTH_HEADER: APP_TOKEN}

    def test_authenticate_as_client(self) -> None:
        client = UnauthenticatedClient(GOTIFY_URL)

        managed = client.authenticate(ClientClient, CLIENT_TOKEN)

        assert isinstance(managed, ClientClient)
        assert managed._headers() == {AUTH_HEADER: CLIENT_TOKEN}

    def test_authenticate_invalid_token(self) -> None:
        client = UnauthenticatedClient(GOTIFY_URL)
        with pytest.raises(InvalidAccessTokenError):
            client.authenticate(AppClient, "bad\ntoken")

    def test_authenticate_rejects_unauthenticated_type(self) -> None:
        client = UnauthenticatedClient(GOTIFY_URL)
        with pytest.raises(TypeError):
            client.authenticate(UnauthenticatedClient, APP_TOKEN)  # type: ignore[type-var]

    async def test_authenticate_takes_over_owned_session(self) -> None:
        session = MagicMock()
        session.closed = False
        session.close = AsyncMock()
        with patch("gotify_client.base.aiohttp.ClientSession", return_value=session):
            client = UnauthenticatedClient(GOTIFY_URL)
            client._get_session()
            app = client.authenticate(AppClient, APP_TOKEN)

        await client.close()
        session.close.assert_not_called()

        await app.close()
        session.close.assert_called_once()


class TestSession:
    async def test_shared_session_not_closed(self, mock_session: MagicMock) -> None:
        async with AppClient(GOTIFY_URL, APP_TOKEN, session=mock_session):
            pass
        mock_session.close.assert_not_called()

    async def test_owned_session_closed(self) -> None:
        session = MagicMock()
        session.close = AsyncMock()
        with patch(
            "gotify_client.base.aiohttp.ClientSession", return_value=session
        ) as session_cls:
            async with ClientClient(GOTIFY_URL, CLIENT_TOKEN) as client:
                client._get_session()
                client._get_session()

        session_cls.assert_called_once()
        session.close.assert_called_once()

    async def test_close_without_session(self) -> None:
        await UnauthenticatedClient(GOTIFY_URL).close()


class TestStatusEndpoints:
    async def test_health(self, mock_session: MagicMock) -> None:
        mock_session.request.return_value = create_mock_response(
            status=200, json_data={"health": "green", "database": "green"}
        )
        client = UnauthenticatedClient(GOTIFY_URL, session=mock_session)

        health = await client.health()

        assert health.health == "green"
        assert health.database == "green"
        call_args = mock_session.request.call_args
        assert str(call_args.args[1]) == f"{GOTIFY_URL}/health"
        assert call_args.kwargs["headers"] == {}

    async def test_version_with_token(self, mock_session: MagicMock) -> None:
        mock_session.request.return_value = create_mock_response(
            status=200,
            json_data={"version": "2.4.0", "commit": "abc", "buildDate": "2023"},
        )
        client = AppClient(GOTIFY_URL, APP_TOKEN, session=mock_session)

        info = await client.version()

        assert info.version == "2.4.0"
        call_args = mock_session.request.call_args
        assert str(call_args.args[1]) == f"{GOTIFY_URL}/version"
        assert call_args.kwargs["headers"] == {AUTH_HEADER: APP_TOKEN}
