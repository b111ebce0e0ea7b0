"""Client core shared by every authentication scope."""

from __future__ import annotations

import logging
from typing import Self

import aiohttp
from yarl import URL

from .errors import HttpSetupError, InvalidAccessTokenError, InvalidUrlError
from .models import Health, VersionInfo
from .request import RequestBuilder
from .urls import url_append

_LOGGER = logging.getLogger(__name__)

AUTH_HEADER = "X-Gotify-Key"


def parse_server_url(server_url: str | URL) -> URL:
    """Parse and validate the base URL of a Gotify server."""
    try:
        url = server_url if isinstance(server_url, URL) else URL(server_url)
    except (TypeError, ValueError) as err:
        raise InvalidUrlError(f"Could not parse server URL {server_url!r}") from err
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidUrlError(f"Server URL must be an absolute http(s) URL: {url}")
    return url


def validate_access_token(access_token: str) -> str:
    """Ensure the token can be sent as an HTTP header value."""
    if not isinstance(access_token, str):
        raise InvalidAccessTokenError("Access token must be a string")
    for char in access_token:
        code = ord(char)
        if (code < 32 and char != "\t") or code == 127:
            raise InvalidAccessTokenError(
                "Access token contains characters not allowed in a header value"
            )
    return access_token


class BaseClient:
    """A client for one Gotify server.

    No network activity happens on construction. When no session is passed,
    the client creates its own ``aiohttp.ClientSession`` on first use and
    closes it in :meth:`close`. A caller-supplied session is shared and left
    open.
    """

    def __init__(
        self,
        server_url: str | URL,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = parse_server_url(server_url)
        if session is not None and session.closed:
            raise HttpSetupError("HTTP session is already closed")
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.base_url)!r})"

    def _headers(self) -> dict[str, str]:
        return {}

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            _LOGGER.debug("Creating HTTP session for %s", self.base_url)
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=None)
            )
            self._owns_session = True
        return self._session

    def _request(self, method: str, *segments: str | int) -> RequestBuilder:
        return RequestBuilder(
            self._get_session(),
            method,
            url_append(self.base_url, *segments),
            headers=self._headers(),
            timeout=self._timeout,
        )

    async def health(self) -> Health:
        """Get health information."""
        return await self._request("GET", "health").send_and_read_json(
            Health.from_dict
        )

    async def version(self) -> VersionInfo:
        """Get version information."""
        return await self._request("GET", "version").send_and_read_json(
            VersionInfo.from_dict
        )


class AuthenticatedClient(BaseClient):
    """A client holding an access token, sent as ``X-Gotify-Key``."""

    def __init__(
        self,
        server_url: str | URL,
        access_token: str,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(server_url, session=session, timeout=timeout)
        self._access_token = validate_access_token(access_token)

    def _headers(self) -> dict[str, str]:
        return {AUTH_HEADER: self._access_token}
