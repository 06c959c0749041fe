from typing import TypedDict, TypeVar

from .errors import HttpError, NetworkError, PostProcessingError

T = TypeVar("T")

Method = str
HeadersDict = dict[str, str]

RequestError = NetworkError | HttpError | PostProcessingError

# (value, error): exactly one slot is not None
Outcome = tuple[T | None, RequestError | None]
ReadResult = tuple[T | None, Exception | None]


class RequestOptions(TypedDict, total=False):
    method: Method
    headers: HeadersDict
    body: bytes


OK_STATUS_RANGE = range(200, 400)
