from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class Request:
    method: Literal["GET"] | Literal["POST"] | Literal["PUT"] | Literal["DELETE"]
    url: str
    headers: dict[str, str] | None
    body: bytes | None


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes | None


@dataclass
class RequestFailed(Exception):
    inner: Exception


class ConnectionFailed(RequestFailed):
    """
    Raised by a transport that can tell the peer was unreachable, as
    opposed to any other failure while making the request.
    """


# Anything other than a Response is treated as a non-HTTP reply.
HttpImplementation = Callable[[Request], Awaitable[Response | None]]
