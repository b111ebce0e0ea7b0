"""Message creation with an application token."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .builder import Endpoint, EndpointBuilder, Field
from .models import Message
from .request import ResponseShape

if TYPE_CHECKING:
    from .client import AppClient


class MessageBuilder(EndpointBuilder[Message]):
    """Create a message. Optional: title, extras, priority."""

    endpoint = Endpoint(
        method="POST",
        path=("message",),
        shape=ResponseShape.JSON,
        decode=Message.from_dict,
        required=(Field("message"),),
        optional=(Field("title"), Field("extras"), Field("priority")),
    )

    def __init__(self, client: AppClient, message: str) -> None:
        super().__init__(client, message=message)

    def with_title(self, title: str) -> MessageBuilder:
        return self._set("title", title)

    def with_extras(self, extras: dict[str, Any]) -> MessageBuilder:
        return self._set("extras", dict(extras))

    def with_priority(self, priority: int) -> MessageBuilder:
        if not 0 <= priority <= 255:
            raise ValueError(f"priority must be between 0 and 255, got {priority}")
        return self._set("priority", priority)
