"""Tests for lizard.http.request."""

import pytest

from lizard.http.request import Request


def _receive_chunks(*chunks: bytes):
    queue = list(chunks)

    async def receive():
        body = queue.pop(0)
        return {"type": "http.request", "body": body, "more_body": bool(queue)}

    return receive


class TestFromAsgi:
    def test_url_from_raw_path_and_query(self) -> None:
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/files/a b",
            "raw_path": b"/files/a%20b",
            "query_string": b"x=1",
            "headers": [(b"host", b"example.com")],
            "client": ("10.0.0.1", 5555),
        }
        request = Request.from_asgi(scope, _receive_chunks(b""))
        assert request.method == "GET"
        assert request.url == "/files/a%20b?x=1"
        assert request.headers["Host"] == "example.com"
        assert request.client_ip == "10.0.0.1"

    def test_url_without_raw_path_is_quoted(self) -> None:
        scope = {"type": "http", "method": "GET", "path": "/a b", "headers": []}
        request = Request.from_asgi(scope, _receive_chunks(b""))
        assert request.url == "/a%20b"
        assert request.client_ip is None


class TestBody:
    @pytest.mark.asyncio
    async def test_chunks_joined_and_cached(self) -> None:
        request = Request(method="POST", url="/", _receive=_receive_chunks(b"ab", b"cd"))
        assert await request.body() == b"abcd"
        assert await request.body() == b"abcd"

    @pytest.mark.asyncio
    async def test_json_and_text(self) -> None:
        request = Request.build("POST", "/", body=b'{"k": "v"}')
        assert await request.json() == {"k": "v"}
        assert await request.text() == '{"k": "v"}'

    @pytest.mark.asyncio
    async def test_form_cached(self) -> None:
        request = Request.build(
            "POST", "/", headers={"content-type": "application/x-www-form-urlencoded"}, body=b"a=1"
        )
        form = await request.form()
        assert form["a"] == "1"
        assert await request.form() is form

    def test_build_uppercases_method(self) -> None:
        assert Request.build("patch", "/").method == "PATCH"

    def test_content_type(self) -> None:
        request = Request.build("GET", "/", headers={"Content-Type": "text/plain"})
        assert request.content_type == "text/plain"
