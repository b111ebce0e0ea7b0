"""List, create, update or delete users."""

from __future__ import annotations

from .base import AuthenticatedClient
from .builder import Endpoint, EndpointBuilder, Field
from .models import User
from .request import ResponseShape


def _user_list(data: list[dict]) -> list[User]:
    return [User.from_dict(item) for item in data]


class UpdateCurrentUserBuilder(EndpointBuilder[None]):
    endpoint = Endpoint(
        method="POST",
        path=("current", "user", "password"),
        shape=ResponseShape.EMPTY,
        required=(Field("pass"),),
    )

    def __init__(self, client: UsersMixin, password: str) -> None:
        super().__init__(client, **{"pass": password})


class CreateUserBuilder(EndpointBuilder[User]):
    endpoint = Endpoint(
        method="POST",
        path=("user",),
        shape=ResponseShape.JSON,
        decode=User.from_dict,
        required=(Field("admin"), Field("name"), Field("pass")),
    )

    def __init__(
        self, client: UsersMixin, admin: bool, name: str, password: str
    ) -> None:
        super().__init__(client, admin=admin, name=name, **{"pass": password})


class UpdateUserBuilder(EndpointBuilder[User]):
    """Update a user. Optional: password."""

    endpoint = Endpoint(
        method="POST",
        path=lambda values: ("user", values["id"]),
        shape=ResponseShape.JSON,
        decode=User.from_dict,
        required=(Field("id", serialize=False), Field("admin"), Field("name")),
        optional=(Field("pass"),),
    )

    def __init__(self, client: UsersMixin, id: int, admin: bool, name: str) -> None:
        super().__init__(client, id=id, admin=admin, name=name)

    def with_password(self, password: str) -> UpdateUserBuilder:
        return self._set("pass", password)


class UsersMixin(AuthenticatedClient):
    """User management."""

    async def get_current_user(self) -> User:
        """Return the current user."""
        return await self._request("GET", "current", "user").send_and_read_json(
            User.from_dict
        )

    def update_current_user(self, password: str) -> UpdateCurrentUserBuilder:
        """Update the password of the current user."""
        return UpdateCurrentUserBuilder(self, password)

    async def get_users(self) -> list[User]:
        """Return all users."""
        return await self._request("GET", "user").send_and_read_json(_user_list)

    def create_user(self, admin: bool, name: str, password: str) -> CreateUserBuilder:
        """Create a user."""
        return CreateUserBuilder(self, admin, name, password)

    async def get_user(self, id: int) -> User:
        """Get a user."""
        return await self._request("GET", "user", id).send_and_read_json(
            User.from_dict
        )

    def update_user(self, id: int, admin: bool, name: str) -> UpdateUserBuilder:
        """Update a user."""
        return UpdateUserBuilder(self, id, admin, name)

    async def delete_user(self, id: int) -> None:
        """Delete a user."""
        await self._request("DELETE", "user", id).send()
