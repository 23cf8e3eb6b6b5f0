"""Immutable transport-level HTTP request.

Frozen metadata with async body access. This is what the transport
hands to ``App.fetch()``; handlers see it through ``RequestEvent``.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Awaitable, Callable, MutableMapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from lizard._internal.asgi import Receive, Scope
from lizard.http.headers import Headers

if TYPE_CHECKING:
    from lizard.http.forms import FormData


async def _empty_receive() -> MutableMapping[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``url`` is the request target as received: the raw, still
    percent-encoded path plus the query string. Body is read
    asynchronously via ``.body()``, ``.json()``, ``.text()``, ``.form()``.
    """

    method: str
    url: str
    headers: Headers = field(default_factory=Headers)
    client: tuple[str, int] | None = None

    # Private: ASGI receive callable for body streaming
    _receive: Callable[[], Awaitable[MutableMapping[str, Any]]] = field(
        default=_empty_receive, repr=False, compare=False
    )

    # Private: mutable cache for body and parsed form data
    # (dict contents are mutable even though the field reference is frozen)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -- Computed properties --

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def client_ip(self) -> str | None:
        """Peer address reported by the transport."""
        return self.client[0] if self.client else None

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def json(self) -> Any:
        """Parse the body as JSON."""
        import json as json_module

        raw = await self.body()
        return json_module.loads(raw)

    async def text(self) -> str:
        """Read the body as text (UTF-8)."""
        raw = await self.body()
        return raw.decode("utf-8")

    async def form(self) -> FormData:
        """Parse the body as form data (URL-encoded or multipart).

        Result is cached.

        Raises:
            ValueError: If Content-Type is not a form encoding.
        """
        if "_form" in self._cache:
            return self._cache["_form"]

        from lizard.http.forms import parse_form_data

        ct = self.content_type or "application/x-www-form-urlencoded"
        raw = await self.body()
        result = parse_form_data(raw, ct)
        self._cache["_form"] = result
        return result

    # -- Factories --

    @classmethod
    def build(
        cls,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes = b"",
    ) -> Request:
        """Create a Request from plain values (tests, non-ASGI transports)."""

        async def receive() -> MutableMapping[str, Any]:
            return {"type": "http.request", "body": body, "more_body": False}

        return cls(
            method=method.upper(),
            url=url,
            headers=Headers.from_dict(headers or {}),
            _receive=receive,
        )

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Create a Request from an ASGI scope and receive callable.

        ``raw_path`` is preferred over ``path`` so that percent-decoding of
        path parameters happens exactly once, in the route matcher.
        """
        raw_path = scope.get("raw_path")
        url = raw_path.decode("latin-1") if raw_path else quote(scope["path"])
        query_string = scope.get("query_string", b"")
        if query_string:
            url = f"{url}?{query_string.decode('latin-1')}"
        client = scope.get("client")
        return cls(
            method=scope["method"],
            url=url,
            headers=Headers(tuple(scope.get("headers", ()))),
            client=tuple(client) if client else None,
            _receive=receive,
        )
