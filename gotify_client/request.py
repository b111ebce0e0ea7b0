"""Generic request pipeline shared by every Gotify endpoint."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar

import aiohttp
from yarl import URL

from .errors import ApiError, RequestTimeout, ResponseDecodeError, TransportError
from .models import ServerError

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class ResponseShape(Enum):
    """Expected shape of a successful response body."""

    EMPTY = "empty"
    TEXT = "text"
    JSON = "json"


def _is_success(status: int) -> bool:
    return 200 <= status < 300


class RequestBuilder:
    """One outgoing HTTP request and the rules for reading its response.

    The status code alone selects how the body is read: a 2xx body is decoded
    into the declared shape, any other body is decoded as a ``ServerError``
    and raised as ``ApiError``.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        method: str,
        url: URL,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self._session = session
        self.method = method
        self.url = url
        self.headers: dict[str, str] = dict(headers or {})
        self._timeout = timeout
        self._kwargs: dict[str, Any] = {}

    def with_query(self, params: Mapping[str, Any]) -> RequestBuilder:
        """Attach query string parameters."""
        self._kwargs["params"] = {key: str(value) for key, value in params.items()}
        return self

    def with_json_body(self, body: Any) -> RequestBuilder:
        """Attach a JSON-encoded body."""
        self._kwargs["json"] = body
        return self

    def with_string_body(
        self, body: str, *, content_type: str = "text/plain"
    ) -> RequestBuilder:
        """Attach a raw text body."""
        self._kwargs["data"] = body
        self.headers["Content-Type"] = content_type
        return self

    def with_file(self, file_name: str, file_content: bytes) -> RequestBuilder:
        """Attach a multipart body with a single ``file`` part."""
        form = aiohttp.FormData()
        form.add_field(
            "file",
            file_content,
            filename=file_name,
            content_type="application/octet-stream",
        )
        self._kwargs["data"] = form
        return self

    async def send(self) -> None:
        """Send the request, expecting no response body."""
        await self.dispatch(ResponseShape.EMPTY)

    async def send_and_read_string(self) -> str:
        """Send the request and return the response body as text."""
        result: str = await self.dispatch(ResponseShape.TEXT)
        return result

    async def send_and_read_json(self, decode: Callable[[Any], T]) -> T:
        """Send the request and decode the JSON response body."""
        result: T = await self.dispatch(ResponseShape.JSON, decode)
        return result

    async def dispatch(
        self,
        shape: ResponseShape,
        decode: Callable[[Any], Any] | None = None,
    ) -> Any:
        """Send the request and read the response according to ``shape``.

        Raises:
            ApiError: If the server returned a non-success status.
            ResponseDecodeError: If a body does not have the expected shape.
            RequestTimeout: If the request timed out.
            TransportError: If the request failed.
        """
        kwargs = dict(self._kwargs)
        if self._timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self._timeout)

        _LOGGER.debug("%s %s", self.method, self.url)
        try:
            async with self._session.request(
                self.method,
                self.url,
                headers=self.headers,
                **kwargs,
            ) as resp:
                if not _is_success(resp.status):
                    raise await self._read_error(resp)
                return await self._read_success(resp, shape, decode)
        except TimeoutError as err:
            raise RequestTimeout(f"{self.method} {self.url.path} timed out") from err
        except aiohttp.ClientError as err:
            raise TransportError(f"{self.method} {self.url.path} failed") from err

    async def _read_success(
        self,
        resp: aiohttp.ClientResponse,
        shape: ResponseShape,
        decode: Callable[[Any], Any] | None,
    ) -> Any:
        if shape is ResponseShape.EMPTY:
            return None
        try:
            if shape is ResponseShape.TEXT:
                return await resp.text()
            data = await resp.json(content_type=None)
            return decode(data) if decode is not None else data
        except (ValueError, KeyError, TypeError) as err:
            raise ResponseDecodeError(
                f"Failed to decode response of {self.method} {self.url.path}"
            ) from err

    async def _read_error(self, resp: aiohttp.ClientResponse) -> ApiError:
        try:
            server_error = ServerError.from_dict(await resp.json(content_type=None))
        except (ValueError, KeyError, TypeError) as err:
            raise ResponseDecodeError(
                f"Failed to decode error response ({resp.status}) of "
                f"{self.method} {self.url.path}"
            ) from err
        _LOGGER.debug(
            "%s %s returned %s: %s",
            self.method,
            self.url.path,
            resp.status,
            server_error,
        )
        return ApiError(resp.status, server_error)
