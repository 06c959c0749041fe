from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from .errors import HttpError, NetworkError, PostProcessingError
from .http.httpx import default_fetch
from .http.types import Fetch, Request, Response
from .models import ProcessedResponse, content_type
from .readers import has_content, is_json, is_text, read_json, read_text
from .types import Outcome, RequestOptions

log = logging.getLogger(__name__)

Target = str | Request


def build_request(target: Target, options: RequestOptions | None = None) -> Request:
    if not isinstance(target, Request):
        target = Request(method="GET", url=target)
    options = options or {}
    return replace(
        target,
        method=options.get("method", target.method).upper(),
        headers=options.get("headers", target.headers),
        body=options.get("body", target.body),
    )


async def process_response(resp: Response) -> Outcome[ProcessedResponse]:
    json: Any = None
    text: str | None = None
    read_error: Exception | None = None

    if has_content(resp):
        kind = content_type(resp.headers)
        if is_json(kind):
            log.debug("Reading body of %r as JSON", resp)
            json, read_error = await read_json(resp)
        elif is_text(kind):
            log.debug("Reading body of %r as text", resp)
            text, read_error = await read_text(resp)
        else:
            log.debug("Leaving %r body of %r unread", kind, resp)

    if not resp.ok:
        log.debug("%r classified as http error", resp)
        return None, HttpError(resp=resp, json=json, text=text)

    if read_error is not None:
        log.debug("%r classified as post-processing error", resp)
        return None, PostProcessingError(error=read_error, resp=resp)

    log.debug("%r classified as success", resp)
    return ProcessedResponse(resp=resp, json=json, text=text), None


@dataclass(frozen=True)
class Client:
    fetch: Fetch = default_fetch

    async def request(
        self, target: Target, options: RequestOptions | None = None
    ) -> Outcome[ProcessedResponse]:
        """
        Sends one request and returns ``(ProcessedResponse, None)`` or
        ``(None, RequestError)``. Never raises for transport, status or
        decode failures.
        """
        try:
            resp = await self.fetch(build_request(target, options))
        except Exception:
            log.debug("Request to %r failed", target, exc_info=True)
            return None, NetworkError()
        return await process_response(resp)

    async def get(
        self, target: Target, options: RequestOptions | None = None
    ) -> Outcome[ProcessedResponse]:
        return await self.request(target, {**(options or {}), "method": "GET"})


async def request(
    target: Target,
    options: RequestOptions | None = None,
    *,
    fetch: Fetch | None = None,
) -> Outcome[ProcessedResponse]:
    return await Client(fetch or default_fetch).request(target, options)


async def get(
    target: Target,
    options: RequestOptions | None = None,
    *,
    fetch: Fetch | None = None,
) -> Outcome[ProcessedResponse]:
    return await Client(fetch or default_fetch).get(target, options)
