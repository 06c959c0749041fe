import logging
from dataclasses import dataclass

import httpx

from tryfetch.models import FetchResponse

from .types import Request, RequestFailed, Response

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPX:
    client: httpx.AsyncClient

    async def __call__(self, request: Request) -> Response:
        try:
            response = await self.client.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                content=request.body,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.debug("%s %s failed: %s", request.method, request.url, exc)
            raise RequestFailed(exc)
        return FetchResponse(
            status=response.status_code,
            headers=response.headers,
            body=response.content,
            url=str(response.url),
        )


async def default_fetch(request: Request) -> Response:
    """
    Sends a single request through a throwaway ``httpx.AsyncClient`` with
    no timeout.
    """
    async with httpx.AsyncClient(timeout=None) as client:
        return await HTTPX(client)(request)
