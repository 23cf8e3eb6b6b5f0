"""Per-request event passed through middleware and handler.

Created by ``App.fetch()`` for every matched request and discarded once
the response is produced. The event itself is frozen; what it carries
by reference is not:

- ``locals`` — a fresh dict for this request only. Middleware put
  things here for the handler (``event.locals["user"] = user``).
- ``response`` — this request's own ``ResponseBuilder``.
- ``config`` — the app-wide ``ConfigStore``, shared and read-only.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from lizard.http.headers import Headers
from lizard.http.request import Request
from lizard.http.response import ResponseBuilder


@dataclass(frozen=True, slots=True)
class RequestEvent:
    """Everything a middleware or handler gets to see about one request."""

    method: str
    url: str
    path: str
    params: dict[str, str]
    query: dict[str, str]
    request: Request
    config: Mapping[str, Any]
    locals: dict[str, Any] = field(default_factory=dict)
    response: ResponseBuilder = field(default_factory=ResponseBuilder)
    body: Any = None

    @property
    def headers(self) -> Headers:
        """Request headers (case-insensitive)."""
        return self.request.headers

    @property
    def client_ip(self) -> str | None:
        """Peer address reported by the transport, if any."""
        return self.request.client_ip
