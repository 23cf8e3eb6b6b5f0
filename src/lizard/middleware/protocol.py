"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(event: RequestEvent, next: Next) -> Response: ...

No base class required. The framework checks the shape, not the lineage.

``next`` takes no arguments: it runs the rest of the chain (later
middleware, then the handler) against the same event and returns the
finalized ``Response``.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from lizard.event import RequestEvent
from lizard.http.response import Response

# The rest of the chain, bound to the current event
type Next = Callable[[], Awaitable[Response]]


class Middleware(Protocol):
    """Protocol for lizard middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(event: RequestEvent, next: Next) -> Response:
            start = time.monotonic()
            response = await next()
            elapsed = time.monotonic() - start
            return response.with_header("X-Time", f"{elapsed:.3f}")

        # Class middleware
        class RequireToken:
            async def __call__(self, event: RequestEvent, next: Next) -> Response:
                if "authorization" not in event.headers:
                    return event.response.status(401).text("Unauthorized")
                return await next()
    """

    async def __call__(self, event: RequestEvent, next: Next) -> Response: ...
