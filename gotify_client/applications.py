"""Create, read, update and delete applications or their images."""

from __future__ import annotations

from .base import AuthenticatedClient
from .builder import Endpoint, EndpointBuilder, Field
from .models import Application
from .request import ResponseShape


def _application_list(data: list[dict]) -> list[Application]:
    return [Application.from_dict(item) for item in data]


class ApplicationBuilder(EndpointBuilder[Application]):
    """Create an application. Optional: default_priority, description."""

    endpoint = Endpoint(
        method="POST",
        path=("application",),
        shape=ResponseShape.JSON,
        decode=Application.from_dict,
        required=(Field("name"),),
        optional=(Field("default_priority"), Field("description")),
    )

    def __init__(self, client: ApplicationsMixin, name: str) -> None:
        super().__init__(client, name=name)

    def with_default_priority(self, default_priority: int) -> ApplicationBuilder:
        return self._set("default_priority", default_priority)

    def with_description(self, description: str) -> ApplicationBuilder:
        return self._set("description", description)


class ApplicationUpdateBuilder(EndpointBuilder[Application]):
    """Update an application. Optional: default_priority, description."""

    endpoint = Endpoint(
        method="PUT",
        path=lambda values: ("application", values["id"]),
        shape=ResponseShape.JSON,
        decode=Application.from_dict,
        required=(Field("id", serialize=False), Field("name")),
        optional=(Field("default_priority"), Field("description")),
    )

    def __init__(self, client: ApplicationsMixin, id: int, name: str) -> None:
        super().__init__(client, id=id, name=name)

    def with_default_priority(self, default_priority: int) -> ApplicationUpdateBuilder:
        return self._set("default_priority", default_priority)

    def with_description(self, description: str) -> ApplicationUpdateBuilder:
        return self._set("description", description)


class ApplicationsMixin(AuthenticatedClient):
    """Application management."""

    async def get_applications(self) -> list[Application]:
        """Return all applications."""
        return await self._request("GET", "application").send_and_read_json(
            _application_list
        )

    def create_application(self, name: str) -> ApplicationBuilder:
        """Create an application."""
        return ApplicationBuilder(self, name)

    def update_application(self, id: int, name: str) -> ApplicationUpdateBuilder:
        """Update an application."""
        return ApplicationUpdateBuilder(self, id, name)

    async def delete_application(self, id: int) -> None:
        """Delete an application."""
        await self._request("DELETE", "application", id).send()

    async def upload_application_image(
        self, id: int, image_name: str, image_content: bytes
    ) -> Application:
        """Upload an image for an application."""
        return await (
            self._request("POST", "application", id, "image")
            .with_file(image_name, image_content)
            .send_and_read_json(Application.from_dict)
        )

    async def delete_application_image(self, id: int) -> None:
        """Delete the image of an application."""
        await self._request("DELETE", "application", id, "image").send()
