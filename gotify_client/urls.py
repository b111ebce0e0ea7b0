"""URL helpers for Gotify endpoints."""

from __future__ import annotations

from yarl import URL

_WS_SCHEMES = {"http": "ws", "https": "wss"}


def url_append(base: URL, *segments: str | int) -> URL:
    """Append path segments to a base URL.

    A single trailing slash on the base path is ignored, so servers mounted
    under a prefix work with or without it.
    """
    path = base.path
    if path.endswith("/"):
        path = path[:-1]
    url = base.with_path("/".join([path, *(str(segment) for segment in segments)]))
    if base.query_string:
        url = url.with_query(base.query_string)
    return url


def to_websocket_url(url: URL) -> URL:
    """Return the ws:// or wss:// counterpart of an http(s) URL."""
    return url.with_scheme(_WS_SCHEMES.get(url.scheme, url.scheme))
