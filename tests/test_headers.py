"""Tests for lizard.http.headers."""

from lizard.http.headers import Headers, MutableHeaders


class TestHeaders:
    def test_case_insensitive_get(self) -> None:
        headers = Headers(((b"content-type", b"text/html"),))
        assert headers["Content-Type"] == "text/html"
        assert headers.get("CONTENT-TYPE") == "text/html"

    def test_missing_returns_default(self) -> None:
        assert Headers().get("x-missing") is None
        assert Headers().get("x-missing", "d") == "d"

    def test_contains(self) -> None:
        headers = Headers.from_dict({"Authorization": "Bearer t"})
        assert "authorization" in headers
        assert "cookie" not in headers
        assert 42 not in headers

    def test_get_list(self) -> None:
        headers = Headers(((b"accept", b"a"), (b"Accept", b"b")))
        assert headers.get_list("accept") == ["a", "b"]
        assert headers["accept"] == "a"

    def test_iter_deduplicates(self) -> None:
        headers = Headers(((b"x-a", b"1"), (b"x-a", b"2"), (b"x-b", b"3")))
        assert list(headers) == ["x-a", "x-b"]
        assert len(headers) == 2

    def test_raw(self) -> None:
        raw = ((b"host", b"example.com"),)
        assert Headers(raw).raw == raw


class TestMutableHeaders:
    def test_set_replaces_case_insensitively(self) -> None:
        headers = MutableHeaders()
        headers["Content-Type"] = "text/plain"
        headers["content-type"] = "application/json"
        assert len(headers) == 1
        assert headers["CONTENT-TYPE"] == "application/json"

    def test_keeps_last_spelling(self) -> None:
        headers = MutableHeaders()
        headers["x-id"] = "1"
        headers["X-Id"] = "2"
        assert headers.to_tuple() == (("X-Id", "2"),)

    def test_delete(self) -> None:
        headers = MutableHeaders({"X-A": "1"})
        del headers["x-a"]
        assert "X-A" not in headers

    def test_copy_is_independent(self) -> None:
        original = MutableHeaders({"X-A": "1"})
        copy = MutableHeaders(original)
        copy["X-B"] = "2"
        assert "X-B" not in original
