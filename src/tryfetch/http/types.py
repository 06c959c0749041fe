from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from tryfetch.models import Blob


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: Mapping[str, str] | None = None
    body: bytes | None = None


class HeaderLookup(Protocol):
    def get(self, name: str, default: str | None = None) -> str | None: ...


class Response(Protocol):
    """
    What a transport hands back. The three readers consume the body and
    may only be awaited once per response.
    """

    @property
    def status(self) -> int: ...

    @property
    def ok(self) -> bool: ...

    @property
    def headers(self) -> HeaderLookup: ...

    async def json(self) -> Any: ...

    async def text(self) -> str: ...

    async def blob(self) -> Blob: ...


@dataclass
class RequestFailed(Exception):
    inner: Exception


Fetch = Callable[[Request], Awaitable[Response]]
