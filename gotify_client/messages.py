"""List or delete messages."""

from __future__ import annotations

from .base import AuthenticatedClient
from .builder import Endpoint, EndpointBuilder, Field
from .models import PagedMessages
from .request import ResponseShape


class GetApplicationMessagesBuilder(EndpointBuilder[PagedMessages]):
    """List messages of one application. Optional: limit, since."""

    endpoint = Endpoint(
        method="GET",
        path=lambda values: ("application", values["id"], "message"),
        shape=ResponseShape.JSON,
        decode=PagedMessages.from_dict,
        required=(Field("id", serialize=False),),
        optional=(Field("limit"), Field("since")),
    )

    def __init__(self, client: MessagesMixin, id: int) -> None:
        super().__init__(client, id=id)

    def with_limit(self, limit: int) -> GetApplicationMessagesBuilder:
        return self._set("limit", limit)

    def with_since(self, since: int) -> GetApplicationMessagesBuilder:
        return self._set("since", since)


class GetMessagesBuilder(EndpointBuilder[PagedMessages]):
    """List all messages. Optional: limit, since."""

    endpoint = Endpoint(
        method="GET",
        path=("message",),
        shape=ResponseShape.JSON,
        decode=PagedMessages.from_dict,
        optional=(Field("limit"), Field("since")),
    )

    def __init__(self, client: MessagesMixin) -> None:
        super().__init__(client)

    def with_limit(self, limit: int) -> GetMessagesBuilder:
        return self._set("limit", limit)

    def with_since(self, since: int) -> GetMessagesBuilder:
        return self._set("since", since)


class MessagesMixin(AuthenticatedClient):
    """Message listing and deletion."""

    def get_application_messages(self, id: int) -> GetApplicationMessagesBuilder:
        """Return messages from a specific application."""
        return GetApplicationMessagesBuilder(self, id)

    async def delete_application_messages(self, id: int) -> None:
        """Delete all messages from a specific application."""
        await self._request("DELETE", "application", id, "message").send()

    def get_messages(self) -> GetMessagesBuilder:
        """Return all messages."""
        return GetMessagesBuilder(self)

    async def delete_messages(self) -> None:
        """Delete all messages."""
        await self._request("DELETE", "message").send()

    async def delete_message(self, id: int) -> None:
        """Delete a message with an id."""
        await self._request("DELETE", "message", id).send()
