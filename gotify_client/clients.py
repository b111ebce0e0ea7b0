"""List, create, update or delete client registrations."""

from __future__ import annotations

from .base import AuthenticatedClient
from .builder import Endpoint, EndpointBuilder, Field
from .models import Client
from .request import ResponseShape


def _client_list(data: list[dict]) -> list[Client]:
    return [Client.from_dict(item) for item in data]


class ClientBuilder(EndpointBuilder[Client]):
    endpoint = Endpoint(
        method="POST",
        path=("client",),
        shape=ResponseShape.JSON,
        decode=Client.from_dict,
        required=(Field("name"),),
    )

    def __init__(self, client: ClientsMixin, name: str) -> None:
        super().__init__(client, name=name)


class ClientUpdateBuilder(EndpointBuilder[Client]):
    endpoint = Endpoint(
        method="PUT",
        path=lambda values: ("client", values["id"]),
        shape=ResponseShape.JSON,
        decode=Client.from_dict,
        required=(Field("id", serialize=False), Field("name")),
    )

    def __init__(self, client: ClientsMixin, id: int, name: str) -> None:
        super().__init__(client, id=id, name=name)


class ClientsMixin(AuthenticatedClient):
    """Client registration management."""

    async def get_clients(self) -> list[Client]:
        """Return all clients."""
        return await self._request("GET", "client").send_and_read_json(_client_list)

    def create_client(self, name: str) -> ClientBuilder:
        """Create a client."""
        return ClientBuilder(self, name)

    def update_client(self, id: int, name: str) -> ClientUpdateBuilder:
        """Update a client."""
        return ClientUpdateBuilder(self, id, name)

    async def delete_client(self, id: int) -> None:
        """Delete a client."""
        await self._request("DELETE", "client", id).send()
