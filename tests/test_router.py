"""Tests for lizard.routing.router: registration order and lookup."""

import logging

import pytest

from lizard.errors import InvalidPatternError
from lizard.routing.router import Router


def _handler(event):
    return "ok"


def _other(event):
    return "other"


class TestRouterAdd:
    def test_add_returns_route(self) -> None:
        router = Router()
        route = router.add("get", "/users/:id", _handler)
        assert route.method == "GET"
        assert route.path == "/users/:id"
        assert route.handler is _handler

    def test_routes_in_registration_order(self) -> None:
        router = Router()
        router.add("GET", "/a", _handler)
        router.add("POST", "/b", _handler)
        assert [r.path for r in router.routes] == ["/a", "/b"]

    def test_routes_is_a_copy(self) -> None:
        router = Router()
        router.add("GET", "/a", _handler)
        router.routes.clear()
        assert len(router.routes) == 1

    def test_invalid_pattern_propagates(self) -> None:
        router = Router()
        with pytest.raises(InvalidPatternError):
            router.add("GET", "/users/:", _handler)
        assert router.routes == []

    def test_add_after_compile_raises(self) -> None:
        router = Router()
        router.compile()
        with pytest.raises(RuntimeError, match="after compilation"):
            router.add("GET", "/", _handler)

    def test_registration_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        router = Router()
        with caplog.at_level(logging.DEBUG, logger="lizard.routing"):
            router.add("GET", "/users", _handler)
        assert "Registered GET /users" in caplog.text


class TestRouterLookup:
    def test_match_with_params_and_empty_query(self) -> None:
        router = Router()
        router.add("GET", "/users/:id", _handler)
        match = router.lookup("GET", "http://example.com/users/123")
        assert match is not None
        assert match.params == {"id": "123"}
        assert match.query == {}

    def test_method_mismatch_returns_none(self) -> None:
        router = Router()
        router.add("GET", "/users/:id", _handler)
        assert router.lookup("POST", "http://example.com/users/123") is None

    def test_query_parsed_on_match(self) -> None:
        router = Router()
        router.add("GET", "/users/:id", _handler)
        match = router.lookup("GET", "http://example.com/users/123?name=value")
        assert match is not None
        assert match.query == {"name": "value"}

    def test_relative_url(self) -> None:
        router = Router()
        router.add("GET", "/users/:id", _handler)
        match = router.lookup("GET", "/users/7?x=1")
        assert match is not None
        assert match.params == {"id": "7"}

    def test_method_compared_case_insensitively(self) -> None:
        router = Router()
        router.add("GET", "/", _handler)
        assert router.lookup("get", "/") is not None

    def test_no_route(self) -> None:
        assert Router().lookup("GET", "/") is None

    def test_first_registered_wins(self) -> None:
        router = Router()
        router.add("GET", "/home/:id", _handler)
        router.add("GET", "/home/profile", _other)
        match = router.lookup("GET", "/home/profile")
        assert match is not None
        assert match.route.handler is _handler
        assert match.params == {"id": "profile"}

    def test_duplicate_pattern_earlier_wins(self) -> None:
        router = Router()
        router.add("GET", "/home/:id", _handler)
        router.add("GET", "/home/:id", _other)
        match = router.lookup("GET", "/home/1")
        assert match is not None
        assert match.route.handler is _handler

    def test_same_path_different_methods(self) -> None:
        router = Router()
        router.add("PUT", "/user/:id", _handler)
        router.add("DELETE", "/user/:id", _other)
        match = router.lookup("DELETE", "/user/3")
        assert match is not None
        assert match.route.handler is _other

    def test_route_middleware_kept(self) -> None:
        async def mw(event, next):
            return await next()

        router = Router()
        router.add("GET", "/", _handler, [mw])
        match = router.lookup("GET", "/")
        assert match is not None
        assert match.route.middleware == (mw,)
