from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from .errors import BodyAlreadyUsed
from .http.types import HeaderLookup, Response
from .types import OK_STATUS_RANGE

DEFAULT_CHARSET = "utf-8"


def content_type(headers: HeaderLookup) -> str:
    return (headers.get("content-type") or "").lower()


def charset(content_type_value: str) -> str:
    _, *params = content_type_value.split(";")
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"')
    return DEFAULT_CHARSET


@dataclass(frozen=True)
class Blob:
    data: bytes
    type: str = ""

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(eq=False)
class FetchResponse:
    """
    Response with a fully buffered body that can be read exactly once,
    through one of ``json``, ``text`` or ``blob``.
    """

    status: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: bytes = b""
    url: str = ""
    body_used: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers)

    @property
    def ok(self) -> bool:
        return self.status in OK_STATUS_RANGE

    def _consume(self) -> bytes:
        if self.body_used:
            raise BodyAlreadyUsed()
        self.body_used = True
        return self.body

    async def text(self) -> str:
        return self._consume().decode(charset(content_type(self.headers)))

    async def json(self) -> Any:
        return json.loads(await self.text())

    async def blob(self) -> Blob:
        return Blob(data=self._consume(), type=content_type(self.headers))

    def __repr__(self) -> str:
        return f"<FetchResponse [{self.status}] {self.url}>"


@dataclass(frozen=True)
class ProcessedResponse:
    resp: Response
    json: Any | None = None
    text: str | None = None
