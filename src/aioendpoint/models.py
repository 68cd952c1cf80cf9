from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, NoReturn, Protocol, TypeVar

from .errors import NetworkError
from .types import Header, HTTPMethod, QueryItem

T = TypeVar("T")


class Endpoint(Protocol):
    """
    Everything needed to build one HTTP request.

    Any object exposing these attributes can be passed to a Service; it is
    only ever read, never executed. ``scheme`` and ``host`` must be non-empty
    and ``path`` should be empty or start with ``/`` for the request to be
    built. ``headers`` are ``(value, field)`` pairs applied in order.
    """

    @property
    def scheme(self) -> str:
        ...

    @property
    def host(self) -> str:
        ...

    @property
    def method(self) -> HTTPMethod:
        ...

    @property
    def path(self) -> str:
        ...

    @property
    def headers(self) -> Sequence[Header]:
        ...

    @property
    def query_items(self) -> Sequence[QueryItem]:
        ...

    @property
    def http_body(self) -> bytes | None:
        ...


@dataclass(frozen=True)
class StaticEndpoint:
    scheme: str
    host: str
    method: HTTPMethod = HTTPMethod.get
    path: str = ""
    headers: Sequence[Header] = field(default_factory=tuple)
    query_items: Sequence[QueryItem] = field(default_factory=tuple)
    http_body: bytes | None = None


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: NetworkError

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Success[T] | Failure
