"""
Failures a request can end in. These are returned in the error slot of an
outcome, not raised.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from .http.types import Response


@dataclass(frozen=True)
class NetworkError:
    """
    The request wasn't able to reach the server, for example because the
    host is offline or the connection was reset.
    """

    type: Literal["network"] = field(default="network", init=False)


@dataclass(frozen=True)
class HttpError:
    """
    The server answered with a status outside of [200, 400). Whatever body
    was decoded is kept for diagnostics.
    """

    resp: Response
    json: Any | None = None
    text: str | None = None
    type: Literal["http"] = field(default="http", init=False)


@dataclass(frozen=True)
class PostProcessingError:
    """
    The server answered with a successful status but the body could not be
    decoded as its content type promised.
    """

    error: Exception
    resp: Response
    type: Literal["post"] = field(default="post", init=False)


class BodyAlreadyUsed(TypeError):
    def __init__(self) -> None:
        super().__init__("Body has already been consumed")
