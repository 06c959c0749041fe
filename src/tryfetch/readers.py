"""
Body decoders. Each one awaits a single reader of the response and returns
``(value, None)`` or ``(None, error)``; none of them raise.
"""

import logging
from typing import Any

from .http.types import Response
from .models import Blob, content_type
from .types import ReadResult

log = logging.getLogger(__name__)


def is_json(content_type: str) -> bool:
    return content_type.startswith("application/json")


def is_text(content_type: str) -> bool:
    return content_type.startswith("text/") or content_type.startswith(
        "application/xml"
    )


def has_content(resp: Response) -> bool:
    # A missing or malformed content-length counts as an empty body.
    length = (resp.headers.get("content-length") or "").strip()
    return length.isascii() and length.isdigit() and int(length) > 0


async def read_json(resp: Response) -> ReadResult[Any]:
    try:
        content = await resp.json()
    except Exception as exc:
        log.debug("Could not read body of %r as JSON", resp, exc_info=True)
        return None, exc
    return content, None


async def read_text(resp: Response) -> ReadResult[str]:
    try:
        content = await resp.text()
    except Exception as exc:
        log.debug("Could not read body of %r as text", resp, exc_info=True)
        return None, exc
    return content, None


async def read_blob(resp: Response) -> ReadResult[Blob]:
    try:
        content = await resp.blob()
    except Exception as exc:
        log.debug("Could not read body of %r as blob", resp, exc_info=True)
        return None, exc
    return content, None


async def read_body(resp: Response) -> ReadResult[Any]:
    """
    Picks a decoder by content type alone: JSON, then text, with blob as the
    fallback for everything else. Content-length is not consulted.
    """
    kind = content_type(resp.headers)
    if is_json(kind):
        return await read_json(resp)
    if is_text(kind):
        return await read_text(resp)
    return await read_blob(resp)
