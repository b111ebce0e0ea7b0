"""JSON models returned by Gotify's API.

Every model is an immutable snapshot of one server response. ``from_dict``
accepts the server's camelCase payload and ``to_dict`` produces it again,
leaving out optional fields that are absent.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

# The server sends up to nanosecond precision.
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


def _parse_datetime(value: str) -> datetime:
    """Parse an RFC 3339 timestamp as sent by the server."""
    return datetime.fromisoformat(_EXTRA_FRACTION.sub(r"\1", value))


def _parse_optional_datetime(value: str | None) -> datetime | None:
    if value is None:
        return None
    return _parse_datetime(value)


def _format_datetime(value: datetime) -> str:
    return value.isoformat()


def _without_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class Application:
    """An application allowed to send messages."""

    id: int
    name: str
    description: str
    token: str
    image: str
    internal: bool
    default_priority: int | None = None
    last_used: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Application:
        return cls(
            id=int(data["id"]),
            name=data["name"],
            description=data["description"],
            token=data["token"],
            image=data["image"],
            internal=bool(data["internal"]),
            default_priority=data.get("defaultPriority"),
            last_used=_parse_optional_datetime(data.get("lastUsed")),
        )

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "id": self.id,
                "name": self.name,
                "description": self.description,
                "token": self.token,
                "image": self.image,
                "internal": self.internal,
                "defaultPriority": self.default_priority,
                "lastUsed": (
                    _format_datetime(self.last_used) if self.last_used else None
                ),
            }
        )


@dataclass(frozen=True)
class Client:
    """A client registration allowed to manage the server."""

    id: int
    name: str
    token: str
    last_used: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Client:
        return cls(
            id=int(data["id"]),
            name=data["name"],
            token=data["token"],
            last_used=_parse_optional_datetime(data.get("lastUsed")),
        )

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "id": self.id,
                "name": self.name,
                "token": self.token,
                "lastUsed": (
                    _format_datetime(self.last_used) if self.last_used else None
                ),
            }
        )


@dataclass(frozen=True)
class ServerError:
    """Error body returned by the server on every non-success response."""

    error: str
    error_code: int
    error_description: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServerError:
        return cls(
            error=data["error"],
            error_code=int(data["errorCode"]),
            error_description=data["errorDescription"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error,
            "errorCode": self.error_code,
            "errorDescription": self.error_description,
        }

    def __str__(self) -> str:
        return f"{self.error_code} {self.error}: {self.error_description}"


@dataclass(frozen=True)
class Health:
    """Server and database health."""

    health: str
    database: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Health:
        return cls(health=data["health"], database=data["database"])

    def to_dict(self) -> dict[str, Any]:
        return {"health": self.health, "database": self.database}


@dataclass(frozen=True)
class Message:
    """A message sent by an application."""

    id: int
    appid: int
    message: str
    priority: int
    date: datetime
    title: str | None = None
    extras: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        return cls(
            id=int(data["id"]),
            appid=int(data["appid"]),
            message=data["message"],
            priority=int(data["priority"]),
            date=_parse_datetime(data["date"]),
            title=data.get("title"),
            extras=data.get("extras"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "id": self.id,
                "appid": self.appid,
                "message": self.message,
                "priority": self.priority,
                "date": _format_datetime(self.date),
                "title": self.title,
                "extras": self.extras,
            }
        )


@dataclass(frozen=True)
class Paging:
    """Paging metadata of a message listing."""

    limit: int
    since: int
    size: int
    next: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Paging:
        return cls(
            limit=int(data["limit"]),
            since=int(data["since"]),
            size=int(data["size"]),
            next=data.get("next"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "limit": self.limit,
                "since": self.since,
                "size": self.size,
                "next": self.next,
            }
        )


@dataclass(frozen=True)
class PagedMessages:
    """A page of messages plus paging metadata."""

    messages: tuple[Message, ...]
    paging: Paging

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PagedMessages:
        return cls(
            messages=tuple(Message.from_dict(m) for m in data["messages"]),
            paging=Paging.from_dict(data["paging"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "messages": [m.to_dict() for m in self.messages],
            "paging": self.paging.to_dict(),
        }


@dataclass(frozen=True)
class PluginConf:
    """Configuration and metadata of a server plugin."""

    id: int
    name: str
    token: str
    module_path: str
    enabled: bool
    capabilities: tuple[str, ...]
    author: str | None = None
    license: str | None = None
    website: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PluginConf:
        return cls(
            id=int(data["id"]),
            name=data["name"],
            token=data["token"],
            module_path=data["modulePath"],
            enabled=bool(data["enabled"]),
            capabilities=tuple(data["capabilities"]),
            author=data.get("author"),
            license=data.get("license"),
            website=data.get("website"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "id": self.id,
                "name": self.name,
                "token": self.token,
                "modulePath": self.module_path,
                "enabled": self.enabled,
                "capabilities": list(self.capabilities),
                "author": self.author,
                "license": self.license,
                "website": self.website,
            }
        )


@dataclass(frozen=True)
class User:
    """A user account."""

    id: int
    name: str
    admin: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(id=int(data["id"]), name=data["name"], admin=bool(data["admin"]))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "admin": self.admin}


@dataclass(frozen=True)
class VersionInfo:
    """Server version information."""

    version: str
    commit: str
    build_date: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VersionInfo:
        return cls(
            version=data["version"],
            commit=data["commit"],
            build_date=data["buildDate"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "commit": self.commit,
            "buildDate": self.build_date,
        }
