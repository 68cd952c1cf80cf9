from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar
from urllib.parse import quote

import httpx

from .config import ServiceConfig
from .decoders import Decoder, JSONDecoder
from .errors import (
    DecodingError,
    InvalidServerResponse,
    InvalidServerResponseWithStatusCode,
    MissingData,
    NetworkConnectionError,
    Underlying,
    WrongURLFormat,
)
from .http.httpx import default_transport
from .http.types import (
    ConnectionFailed,
    HttpImplementation,
    Request,
    RequestFailed,
    Response,
)
from .models import Endpoint, Failure, Result, Success
from .types import QueryItem

T = TypeVar("T")

Completion = Callable[[Result[T]], None]

logger = logging.getLogger(__name__)


def _encode_query(items: Sequence[QueryItem]) -> bytes:
    pairs = []
    for name, value in items:
        if value is None:
            pairs.append(quote(name, safe=""))
        else:
            pairs.append(f"{quote(name, safe='')}={quote(value, safe='')}")
    return "&".join(pairs).encode("ascii")


def build_request(endpoint: Endpoint) -> Request:
    """
    Assemble the URL, method, headers and body described by ``endpoint``.

    Raises WrongURLFormat if the pieces do not form an absolute URL. Headers
    are applied in order; a later header replaces any earlier one with the
    same (case-insensitive) field name.
    """
    if not endpoint.scheme or not endpoint.host:
        raise WrongURLFormat()
    try:
        url = httpx.URL(
            scheme=endpoint.scheme,
            host=endpoint.host,
            path=endpoint.path,
            query=_encode_query(endpoint.query_items) or None,
        )
    except httpx.InvalidURL:
        raise WrongURLFormat() from None
    # A valid hostname never needs percent escapes.
    if "%" in url.raw_host.decode("ascii"):
        raise WrongURLFormat()

    headers: dict[str, str] = {}
    for value, name in endpoint.headers:
        for existing in [key for key in headers if key.lower() == name.lower()]:
            del headers[existing]
        headers[name] = value

    return Request(
        method=endpoint.method.value,
        url=str(url),
        headers=headers,
        body=endpoint.http_body,
    )


class ServiceProtocol(Protocol):
    def request(
        self, endpoint: Endpoint, target: type[T], completion: Completion[T]
    ) -> asyncio.Task[None]:
        ...

    async def fetch(self, endpoint: Endpoint, target: type[T]) -> Result[T]:
        ...


class Service:
    """
    Builds requests from endpoints, runs them on ``transport`` and decodes
    2xx bodies with ``decoder``.

    Every call produces exactly one Result; no exception other than
    cancellation escapes. The instance keeps no per-call state, so one
    service can serve any number of concurrent calls.
    """

    def __init__(
        self,
        transport: HttpImplementation | None = None,
        decoder: Decoder | None = None,
        config: ServiceConfig | None = None,
    ) -> None:
        self.config = ServiceConfig.from_env() if config is None else config
        self.transport = (
            default_transport(self.config.timeout) if transport is None else transport
        )
        self.decoder = JSONDecoder() if decoder is None else decoder
        # Strong references to in-flight callback tasks, see asyncio.create_task.
        self._tasks: set[asyncio.Task[None]] = set()

    def request(
        self, endpoint: Endpoint, target: type[T], completion: Completion[T]
    ) -> asyncio.Task[None]:
        """
        Start the request and return immediately. ``completion`` is called
        exactly once with the Result. Must be called from a running event loop.
        """
        task = asyncio.get_running_loop().create_task(
            self._perform(endpoint, target, completion)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def fetch(self, endpoint: Endpoint, target: type[T]) -> Result[T]:
        future: asyncio.Future[Result[T]] = asyncio.get_running_loop().create_future()

        def resolve(result: Result[T]) -> None:
            if not future.done():
                future.set_result(result)

        task = self.request(endpoint, target, resolve)
        try:
            return await future
        except asyncio.CancelledError:
            task.cancel()
            raise

    async def _perform(
        self, endpoint: Endpoint, target: type[T], completion: Completion[T]
    ) -> None:
        result = await self._execute(endpoint, target)
        if self.config.debug and isinstance(result, Failure):
            logger.debug("Request for %r failed: %r", endpoint, result.error)
        completion(result)

    async def _execute(self, endpoint: Endpoint, target: type[T]) -> Result[T]:
        try:
            request = build_request(endpoint)
        except WrongURLFormat as exc:
            return Failure(exc)
        except Exception as exc:
            return Failure(Underlying(exc))

        try:
            response = await self.transport(request)
        except ConnectionFailed as exc:
            return Failure(NetworkConnectionError(exc.inner))
        except RequestFailed as exc:
            return Failure(Underlying(exc.inner))
        except Exception as exc:
            return Failure(Underlying(exc))

        if not isinstance(response, Response):
            return Failure(InvalidServerResponse())
        if response.body is None:
            return Failure(MissingData())
        if not 200 <= response.status <= 299:
            return Failure(InvalidServerResponseWithStatusCode(response.status))
        if not response.body:
            return Failure(MissingData())
        try:
            return Success(self.decoder.decode(response.body, target))
        except Exception as exc:
            return Failure(DecodingError(exc))
