import json
from typing import Any

import pytest

from tryfetch.errors import BodyAlreadyUsed
from tryfetch.models import Blob, FetchResponse
from tryfetch.readers import (
    has_content,
    is_json,
    is_text,
    read_blob,
    read_body,
    read_json,
    read_text,
)


def response(content_type: str | None, body: bytes, status: int = 200) -> FetchResponse:
    headers = {"content-length": str(len(body))}
    if content_type is not None:
        headers["content-type"] = content_type
    return FetchResponse(status, headers=headers, body=body)


@pytest.mark.parametrize(
    "content_type,json_,text",
    [
        ("application/json", True, False),
        ("application/json; charset=utf-8", True, False),
        ("application/jsonp", True, False),
        ("application/ld+json", False, False),
        ("text/plain", False, True),
        ("text/html; charset=utf-8", False, True),
        ("application/xml", False, True),
        ("application/xhtml+xml", False, False),
        ("image/png", False, False),
        ("", False, False),
    ],
)
def test_content_type_predicates(content_type: str, json_: bool, text: bool) -> None:
    assert is_json(content_type) is json_
    assert is_text(content_type) is text


@pytest.mark.parametrize(
    "content_length,expected",
    [
        (None, False),
        ("", False),
        ("0", False),
        ("00", False),
        ("12", True),
        (" 7 ", True),
        ("-1", False),
        ("1.5", False),
        ("abc", False),
        ("١", False),
    ],
)
def test_has_content(content_length: str | None, expected: bool) -> None:
    headers = {} if content_length is None else {"Content-Length": content_length}
    assert has_content(FetchResponse(200, headers=headers)) is expected


class TestReaders:
    """Decoders return (value, error) pairs and never raise."""

    @pytest.mark.asyncio
    async def test_read_json(self) -> None:
        """Test a JSON body is parsed."""
        value, error = await read_json(response("application/json", b'{"a":1}'))
        assert value == {"a": 1}
        assert error is None

    @pytest.mark.asyncio
    async def test_read_json_malformed(self) -> None:
        """Test malformed JSON comes back as the error slot."""
        value, error = await read_json(response("application/json", b"not valid json"))
        assert value is None
        assert isinstance(error, json.JSONDecodeError)

    @pytest.mark.asyncio
    async def test_read_text(self) -> None:
        """Test a text body is decoded."""
        value, error = await read_text(response("text/plain", b"not found"))
        assert value == "not found"
        assert error is None

    @pytest.mark.asyncio
    async def test_read_text_bad_encoding(self) -> None:
        """Test invalid UTF-8 comes back as the error slot."""
        value, error = await read_text(response("text/plain", b"\xc3\x28"))
        assert value is None
        assert isinstance(error, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_read_text_unknown_charset(self) -> None:
        """Test an unknown charset comes back as the error slot."""
        value, error = await read_text(response("text/plain; charset=klingon", b"x"))
        assert value is None
        assert isinstance(error, LookupError)

    @pytest.mark.asyncio
    async def test_read_blob(self) -> None:
        """Test a binary body is read as a Blob."""
        value, error = await read_blob(response("application/octet-stream", b"\x00\x01"))
        assert value == Blob(data=b"\x00\x01", type="application/octet-stream")
        assert error is None

    @pytest.mark.asyncio
    async def test_read_blob_failure(self) -> None:
        """Test an exception from the reader is returned, not raised."""

        class Broken(FetchResponse):
            async def blob(self) -> Blob:
                raise OSError("connection reset while reading body")

        value, error = await read_blob(Broken(200))
        assert value is None
        assert isinstance(error, OSError)

    @pytest.mark.parametrize("reader", [read_json, read_text, read_blob])
    @pytest.mark.asyncio
    async def test_second_read_is_an_error(self, reader: Any) -> None:
        """Test reading a consumed body returns BodyAlreadyUsed."""
        resp = response("application/json", b"[]")
        await reader(resp)
        value, error = await reader(resp)
        assert value is None
        assert isinstance(error, BodyAlreadyUsed)


class TestReadBody:
    """read_body picks a decoder from the content type only."""

    @pytest.mark.asyncio
    async def test_json(self) -> None:
        """Test JSON content types are parsed."""
        assert await read_body(response("application/json", b"[1]")) == ([1], None)

    @pytest.mark.asyncio
    async def test_text(self) -> None:
        """Test XML content types are decoded as text."""
        assert await read_body(response("application/xml", b"<a/>")) == ("<a/>", None)

    @pytest.mark.asyncio
    async def test_blob_fallback(self) -> None:
        """Test other content types fall back to a Blob."""
        value, error = await read_body(response("image/gif", b"GIF89a"))
        assert value == Blob(data=b"GIF89a", type="image/gif")
        assert error is None

    @pytest.mark.asyncio
    async def test_ignores_content_length(self) -> None:
        """Test a missing content-length does not stop decoding."""
        resp = FetchResponse(200, headers={"content-type": "text/plain"}, body=b"hi")
        assert await read_body(resp) == ("hi", None)

    @pytest.mark.asyncio
    async def test_missing_content_type_reads_blob(self) -> None:
        """Test a missing content type falls back to a Blob."""
        value, error = await read_body(FetchResponse(200))
        assert value == Blob(data=b"", type="")
        assert error is None
