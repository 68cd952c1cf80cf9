from httpx import AsyncClient, HTTPError

from ..types import Seconds
from .types import HttpImplementation, Request, RequestFailed, Response


async def _send(client: AsyncClient, request: Request) -> Response:
    try:
        response = await client.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            content=request.body,
        )
        return Response(response.status_code, await response.aread())
    except HTTPError as exc:
        raise RequestFailed(exc)


def wrap(client: AsyncClient) -> HttpImplementation:
    """
    Use a caller-owned client. The caller is responsible for closing it.
    """

    async def make_request(request: Request) -> Response:
        return await _send(client, request)

    return make_request


def default_transport(timeout: Seconds = 10.0) -> HttpImplementation:
    """
    Open a fresh client for every request, so there is nothing to close.
    """

    async def make_request(request: Request) -> Response:
        async with AsyncClient(timeout=timeout) as client:
            return await _send(client, request)

    return make_request
