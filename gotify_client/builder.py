"""Declarative endpoint builders.

An endpoint is described once by an :class:`Endpoint` row (method, path,
response shape, required and optional fields). :class:`EndpointBuilder`
subclasses add one fluent ``with_*`` setter per optional field and share a
single dispatch routine. A builder is sent either with ``await builder`` or
``await builder.send()``; a builder that is never awaited sends nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar

from .request import ResponseShape

if TYPE_CHECKING:
    from .base import BaseClient

ResultT = TypeVar("ResultT")

PathTemplate = Sequence[str] | Callable[[Mapping[str, Any]], Sequence[str | int]]


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass(frozen=True)
class Field:
    """A builder field.

    Attributes:
        name: Python-side field name, also the ``with_<name>`` setter suffix.
        key: Wire name. Defaults to the camelCase form of ``name``.
        serialize: False for path-only fields that never reach the payload.
    """

    name: str
    key: str | None = None
    serialize: bool = True

    @property
    def wire_name(self) -> str:
        return self.key or _camel_case(self.name)


@dataclass(frozen=True)
class Endpoint:
    """Table row describing one builder-backed endpoint."""

    method: str
    path: PathTemplate
    shape: ResponseShape
    decode: Callable[[Any], Any] | None = None
    required: tuple[Field, ...] = ()
    optional: tuple[Field, ...] = ()

    def segments(self, values: Mapping[str, Any]) -> Sequence[str | int]:
        if callable(self.path):
            return self.path(values)
        return self.path

    def payload(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Serialize required and set optional fields, skipping path-only ones."""
        payload: dict[str, Any] = {}
        for field in (*self.required, *self.optional):
            if not field.serialize:
                continue
            value = values.get(field.name)
            if value is None:
                continue
            payload[field.wire_name] = value
        return payload


class EndpointBuilder(Generic[ResultT]):
    """Accumulates fields for one pending request. Single use."""

    endpoint: ClassVar[Endpoint]

    def __init__(self, client: BaseClient, **required: Any) -> None:
        expected = {field.name for field in self.endpoint.required}
        if set(required) != expected:
            raise TypeError(
                f"{type(self).__name__} requires fields {sorted(expected)}, "
                f"got {sorted(required)}"
            )
        self._client = client
        self._values: dict[str, Any] = dict(required)
        self._sent = False

    def _set(self, name: str, value: Any) -> Self:
        if self._sent:
            raise RuntimeError(f"{type(self).__name__} has already been sent")
        self._values[name] = value
        return self

    def get(self, name: str) -> Any:
        """Return the current value of a field, or None when unset."""
        return self._values.get(name)

    async def send(self) -> ResultT:
        """Serialize the fields, dispatch the request and decode the response."""
        if self._sent:
            raise RuntimeError(f"{type(self).__name__} has already been sent")
        self._sent = True

        endpoint = self.endpoint
        request = self._client._request(
            endpoint.method, *endpoint.segments(self._values)
        )
        payload = endpoint.payload(self._values)
        if endpoint.method == "GET":
            request.with_query(payload)
        else:
            request.with_json_body(payload)
        result: ResultT = await request.dispatch(endpoint.shape, endpoint.decode)
        return result

    def __await__(self) -> Generator[Any, None, ResultT]:
        return self.send().__await__()
