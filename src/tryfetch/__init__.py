import logging

from .client import Client, get, request
from .errors import BodyAlreadyUsed, HttpError, NetworkError, PostProcessingError
from .http.types import Fetch, Request, RequestFailed, Response
from .models import Blob, FetchResponse, ProcessedResponse
from .readers import read_blob, read_body, read_json, read_text
from .types import Outcome, RequestError, RequestOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Blob",
    "BodyAlreadyUsed",
    "Client",
    "Fetch",
    "FetchResponse",
    "HttpError",
    "NetworkError",
    "Outcome",
    "PostProcessingError",
    "ProcessedResponse",
    "Request",
    "RequestError",
    "RequestFailed",
    "RequestOptions",
    "Response",
    "get",
    "read_blob",
    "read_body",
    "read_json",
    "read_text",
    "request",
]
