"""Tests for lizard.http.query: URL splitting and query string parsing."""

import pytest

from lizard.http.query import parse_query, parse_url


class TestParseUrl:
    def test_absolute_url(self) -> None:
        assert parse_url("http://example.com/path?name=value") == ("/path", "name=value")

    def test_no_query_string(self) -> None:
        assert parse_url("http://example.com/path") == ("/path", "")

    def test_no_path(self) -> None:
        assert parse_url("http://example.com") == ("/", "")

    def test_no_scheme(self) -> None:
        assert parse_url("example.com/path?name=value") == ("/path", "name=value")

    def test_origin_relative(self) -> None:
        assert parse_url("/users/1?page=2") == ("/users/1", "page=2")

    def test_fragment_dropped(self) -> None:
        assert parse_url("/a#top") == ("/a", "")
        assert parse_url("http://example.com/a?x=1#top") == ("/a", "x=1")

    def test_path_stays_encoded(self) -> None:
        assert parse_url("/files/a%20b") == ("/files/a%20b", "")


class TestParseQuery:
    def test_simple(self) -> None:
        assert parse_query("name=value&key=123") == {"name": "value", "key": "123"}

    def test_empty(self) -> None:
        assert parse_query("") == {}

    def test_url_encoded(self) -> None:
        assert parse_query("name=hello%20world&key=123") == {"name": "hello world", "key": "123"}

    def test_special_characters(self) -> None:
        result = parse_query("name=hello%20world&key=123&%24special=%40%23%24")
        assert result == {"name": "hello world", "key": "123", "$special": "@#$"}

    def test_leading_question_mark(self) -> None:
        assert parse_query("?a=1") == {"a": "1"}

    def test_key_without_value(self) -> None:
        assert parse_query("flag") == {"flag": ""}

    def test_value_containing_equals(self) -> None:
        assert parse_query("expr=a=b") == {"expr": "a=b"}

    def test_repeated_key_keeps_last(self) -> None:
        assert parse_query("a=1&a=2") == {"a": "2"}

    @pytest.mark.parametrize("qs", ["&", "&&a=1&", "a=1&&"])
    def test_empty_pairs_skipped(self, qs: str) -> None:
        assert parse_query(qs) == ({"a": "1"} if "a" in qs else {})

    def test_plus_is_not_a_space(self) -> None:
        assert parse_query("q=a+b") == {"q": "a+b"}
