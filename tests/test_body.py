"""Tests for lizard.http.body: Content-Type driven body decoding."""

import json

import pytest

from lizard.http.body import decode_body
from lizard.http.forms import UploadFile
from lizard.http.request import Request


def _post(body: bytes, content_type: str | None = None) -> Request:
    headers = {"Content-Type": content_type} if content_type else None
    return Request.build("POST", "/", headers=headers, body=body)


class TestDecodeBody:
    @pytest.mark.asyncio
    async def test_json(self) -> None:
        assert await decode_body(_post(b'{"a": 1}', "application/json")) == {"a": 1}

    @pytest.mark.asyncio
    async def test_json_with_charset(self) -> None:
        request = _post(b"[1]", "application/json; charset=utf-8")
        assert await decode_body(request) == [1]

    @pytest.mark.asyncio
    async def test_empty_json_is_none(self) -> None:
        assert await decode_body(_post(b"", "application/json")) is None

    @pytest.mark.asyncio
    async def test_malformed_json_raises(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            await decode_body(_post(b"{", "application/json"))

    @pytest.mark.asyncio
    async def test_urlencoded(self) -> None:
        request = _post(b"a=1&b=2", "application/x-www-form-urlencoded")
        assert await decode_body(request) == {"a": "1", "b": "2"}

    @pytest.mark.asyncio
    async def test_multipart_file(self) -> None:
        body = (
            b"--xyz\r\n"
            b'Content-Disposition: form-data; name="f"; filename="n.txt"\r\n'
            b"Content-Type: text/plain\r\n"
            b"\r\n"
            b"data\r\n"
            b"--xyz--\r\n"
        )
        decoded = await decode_body(_post(body, "multipart/form-data; boundary=xyz"))
        assert isinstance(decoded["f"], UploadFile)
        assert decoded["f"].filename == "n.txt"

    @pytest.mark.asyncio
    async def test_no_content_type(self) -> None:
        assert await decode_body(_post(b"raw")) is None

    @pytest.mark.asyncio
    async def test_other_content_type_leaves_body_readable(self) -> None:
        request = _post(b"plain words", "text/plain")
        assert await decode_body(request) is None
        assert await request.text() == "plain words"
